"""Async HTTP client for the tracker REST API."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from tracker_client.config import Settings, get_settings
from tracker_client.errors import (
    TrackerDecodeError,
    TrackerStatusError,
    TrackerTransportError,
)
from tracker_client.logging import get_logger
from tracker_client.models import (
    ProjectCreate,
    ProjectDTO,
    ProjectUpdate,
    TaskCreate,
    TaskDTO,
    TaskUpdate,
)

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class TrackerAPIClient:
    """HTTP client for the projects and tasks endpoints.

    Every response is decoded into typed records; transport failures,
    non-2xx statuses and undecodable bodies surface as TrackerAPIError
    subclasses.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.base_url = settings.api_url.rstrip("/")
        if self.base_url.endswith("/api"):
            raise RuntimeError("TRACKER_API_URL must not include /api")
        self.timeout = settings.request_timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> TrackerAPIClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                follow_redirects=True,
                timeout=self.timeout,
            )
        return self._client

    def _api_path(self, path: str) -> str:
        cleaned = path.lstrip("/")
        if cleaned.startswith("api/"):
            raise ValueError("API path should not include /api prefix")
        return f"/api/{cleaned}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()
        api_path = self._api_path(path)
        try:
            resp = await client.request(method, api_path, **kwargs)
        except httpx.TransportError as e:
            logger.warning("api_transport_error", method=method, path=api_path, error=str(e))
            raise TrackerTransportError(
                f"{method} {api_path} failed: {e}", method=method, path=api_path
            ) from e

        if not resp.is_success:
            logger.warning(
                "api_status_error", method=method, path=api_path, status_code=resp.status_code
            )
            raise TrackerStatusError(
                f"{method} {api_path} returned {resp.status_code}",
                method=method,
                path=api_path,
                status_code=resp.status_code,
            )
        return resp

    def _json(self, resp: httpx.Response) -> Any:
        method = resp.request.method
        path = resp.request.url.path
        if not resp.content:
            raise TrackerDecodeError(
                f"{method} {path} returned an empty body", method=method, path=path
            )
        try:
            return resp.json()
        except ValueError as e:
            raise TrackerDecodeError(
                f"{method} {path} returned invalid JSON", method=method, path=path
            ) from e

    def _decode(self, resp: httpx.Response, model: type[ModelT]) -> ModelT:
        data = self._json(resp)
        method = resp.request.method
        path = resp.request.url.path
        if not isinstance(data, dict):
            raise TrackerDecodeError(
                f"{method} {path} returned {type(data).__name__}, expected an object",
                method=method,
                path=path,
            )
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise TrackerDecodeError(
                f"{method} {path} returned an invalid {model.__name__}",
                method=method,
                path=path,
                errors=e.errors(include_url=False),
            ) from e

    def _decode_list(self, resp: httpx.Response, model: type[ModelT]) -> list[ModelT]:
        data = self._json(resp)
        method = resp.request.method
        path = resp.request.url.path
        if not isinstance(data, list):
            raise TrackerDecodeError(
                f"{method} {path} returned {type(data).__name__}, expected a list",
                method=method,
                path=path,
            )
        try:
            return [model.model_validate(item) for item in data]
        except ValidationError as e:
            raise TrackerDecodeError(
                f"{method} {path} returned an invalid {model.__name__}",
                method=method,
                path=path,
                errors=e.errors(include_url=False),
            ) from e

    def _decode_optional(self, resp: httpx.Response, model: type[ModelT]) -> ModelT | None:
        # Mutations may answer 2xx with an empty body (e.g. 204).
        if not resp.content:
            return None
        return self._decode(resp, model)

    # Projects

    async def list_projects(self) -> list[ProjectDTO]:
        resp = await self._request("GET", "projects")
        return self._decode_list(resp, ProjectDTO)

    async def get_project(self, project_id: str) -> ProjectDTO:
        resp = await self._request("GET", f"projects/{project_id}")
        return self._decode(resp, ProjectDTO)

    async def create_project(self, payload: ProjectCreate) -> ProjectDTO | None:
        resp = await self._request("POST", "projects", json=payload.model_dump(mode="json"))
        return self._decode_optional(resp, ProjectDTO)

    async def update_project(self, project_id: str, update: ProjectUpdate) -> ProjectDTO | None:
        resp = await self._request("PUT", f"projects/{project_id}", json=update.to_payload())
        return self._decode_optional(resp, ProjectDTO)

    async def delete_project(self, project_id: str) -> None:
        await self._request("DELETE", f"projects/{project_id}")

    # Tasks

    async def list_project_tasks(self, project_id: str) -> list[TaskDTO]:
        """Tasks of one project; a 404 means the project has none."""
        try:
            resp = await self._request("GET", f"tasks/project/{project_id}")
        except TrackerStatusError as e:
            if e.status_code == httpx.codes.NOT_FOUND:
                return []
            raise
        if not resp.content or self._json(resp) is None:
            return []
        return self._decode_list(resp, TaskDTO)

    async def get_task(self, task_id: str) -> TaskDTO:
        resp = await self._request("GET", f"tasks/{task_id}")
        return self._decode(resp, TaskDTO)

    async def create_task(self, payload: TaskCreate) -> TaskDTO | None:
        resp = await self._request("POST", "tasks", json=payload.model_dump(mode="json"))
        return self._decode_optional(resp, TaskDTO)

    async def update_task(self, task_id: str, update: TaskUpdate) -> TaskDTO | None:
        resp = await self._request("PUT", f"tasks/{task_id}", json=update.model_dump(mode="json"))
        return self._decode_optional(resp, TaskDTO)

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"tasks/{task_id}")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def get_api_client(api_url: str | None = None) -> TrackerAPIClient:
    """Build a client from settings, optionally overriding the base URL."""
    settings = get_settings()
    if api_url:
        settings = settings.model_copy(update={"api_url": api_url.rstrip("/")})
    return TrackerAPIClient(settings)
