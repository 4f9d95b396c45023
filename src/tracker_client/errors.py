"""Exception hierarchy for the tracker client.

Network-boundary failures fall into three buckets (transport, HTTP status,
undecodable payload). Action handlers wrap them into ActionError with the
message shown to the user.
"""

from typing import Any


class TrackerError(Exception):
    """Base class for all tracker client errors."""


class TrackerAPIError(TrackerError):
    """A request to the tracker backend failed."""

    def __init__(self, message: str, *, method: str, path: str) -> None:
        super().__init__(message)
        self.method = method
        self.path = path


class TrackerTransportError(TrackerAPIError):
    """Connection, read or timeout failure before a response arrived."""


class TrackerStatusError(TrackerAPIError):
    """Backend answered with a non-2xx status."""

    def __init__(self, message: str, *, method: str, path: str, status_code: int) -> None:
        super().__init__(message, method=method, path=path)
        self.status_code = status_code


class TrackerDecodeError(TrackerAPIError):
    """Response body was empty, not JSON, or not the expected record shape."""

    def __init__(
        self,
        message: str,
        *,
        method: str,
        path: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, method=method, path=path)
        self.errors = errors or []


class ActionError(TrackerError):
    """User-facing failure of a create/edit/delete action."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FieldRequiredError(ActionError):
    """A required text field was left blank."""

    def __init__(self, field: str) -> None:
        super().__init__("Please fill in all fields.")
        self.field = field
