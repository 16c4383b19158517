"""Task Schemas — Pydantic models for task payloads and responses.

Invariants:
    - TaskCreate/TaskUpdate accept every field as optional; required-field checks
      happen in the service so they map to 422 instead of the generic 400
    - Scalar descripcion/observacion values are coerced to str (123 -> "123",
      true -> "true", false -> "false")
    - Text fields are stripped and capped at 10_000 chars
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskCreate(BaseModel):
    """Task creation payload."""
    descripcion: str | None = Field(None, max_length=10_000)
    observacion: str | None = Field(None, max_length=10_000)
    is_finalizada: bool | None = None

    @field_validator("descripcion", "observacion", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("descripcion", "observacion")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v


class TaskUpdate(TaskCreate):
    """Task update payload: omitted or null fields keep their stored value."""


class TaskResponse(BaseModel):
    """Task response: public-facing task data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    descripcion: str
    observacion: str | None = None
    is_finalizada: bool
    registration_date: datetime


class TaskCreatedResponse(BaseModel):
    msg: str = "Task created"
    taskId: int


class MessageResponse(BaseModel):
    msg: str
