"""Typed records for the tracker REST API.

Responses are validated here before anything else touches them; the API
client turns validation failures into TrackerDecodeError.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectStatus(str, Enum):
    DRAFT = "draft"
    IN_PROGRESS = "in progress"
    DONE = "done"


class TaskStatus(str, Enum):
    DRAFT = "draft"
    IN_PROGRESS = "in progress"
    DONE = "done"


def _coerce_id(value: object) -> object:
    # Backends hand out integer or string identifiers; keep them opaque.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class ProjectDTO(BaseModel):
    """Project response."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: str = Field(..., min_length=1)
    name: str
    status: ProjectStatus
    completion_progress: float = Field(default=0.0, ge=0, le=100)

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v: object) -> object:
        return _coerce_id(v)

    @field_validator("completion_progress", mode="before")
    @classmethod
    def default_missing_progress(cls, v: object) -> object:
        """Projects created without progress come back with null."""
        return 0.0 if v is None else v


class TaskDTO(BaseModel):
    """Task response."""

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)
    name: str
    status: TaskStatus
    weight: float = Field(..., ge=0)

    @field_validator("id", "project_id", mode="before")
    @classmethod
    def normalize_ids(cls, v: object) -> object:
        return _coerce_id(v)


class ProjectCreate(BaseModel):
    """Create project request. New projects always start as an empty draft."""

    name: str = Field(..., min_length=1)
    status: ProjectStatus = ProjectStatus.DRAFT
    completion_progress: float = 0


class ProjectUpdate(BaseModel):
    """Partial project update.

    Only fields that were explicitly set are sent, so progress and status
    can be pushed as two independent writes.
    """

    name: str | None = Field(default=None, min_length=1)
    status: ProjectStatus | None = None
    completion_progress: float | None = Field(default=None, ge=0, le=100)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)


class TaskCreate(BaseModel):
    """Create task request."""

    project_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    status: TaskStatus = TaskStatus.DRAFT
    weight: float = Field(..., gt=0)


class TaskUpdate(BaseModel):
    """Full-field task update."""

    name: str = Field(..., min_length=1)
    status: TaskStatus
    weight: float = Field(..., ge=0)
