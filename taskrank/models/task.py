"""Task data model for taskrank."""

from datetime import datetime
from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskrank.models.time_utils import ensure_utc


class TaskPriority(str, Enum):
    """Task priority tier enumeration."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskStatus(str, Enum):
    """Task status enumeration."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


def _strip_title(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError("title must not be empty")
    return stripped


class Task(BaseModel):
    """Canonical Task model."""

    id: str = Field(..., description="Unique task identifier (UUID v4)")
    title: str = Field(..., description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    priority: TaskPriority = Field(..., description="Priority tier")
    due_date: datetime = Field(..., description="When the task is due")
    status: TaskStatus = Field(TaskStatus.PENDING, description="Task status")
    created_at: datetime = Field(..., description="Task creation timestamp")
    estimated_time: int = Field(..., ge=1, description="Estimated time in minutes")
    dependencies: List[str] = Field(
        default_factory=list,
        description="IDs of tasks this task depends on (stored, not enforced)",
    )

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        return _strip_title(value)

    @field_validator("due_date", "created_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class TaskCreate(BaseModel):
    """Draft submitted when adding a task (no id, no created_at).

    Optional fields left as None are filled from defaults by the task factory.
    """

    title: str = Field(..., description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    priority: Optional[TaskPriority] = Field(None, description="Priority tier (defaults to medium)")
    due_date: datetime = Field(..., description="When the task is due")
    status: Optional[TaskStatus] = Field(None, description="Initial status (defaults to pending)")
    estimated_time: Optional[int] = Field(None, ge=1, description="Estimated time in minutes (defaults to 60)")
    dependencies: Optional[List[str]] = Field(None, description="Dependent task IDs")

    model_config = ConfigDict(extra="forbid")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        return _strip_title(value)

    @field_validator("due_date")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class TaskUpdate(BaseModel):
    """Partial update. Only fields explicitly set by the caller are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    status: Optional[TaskStatus] = None
    estimated_time: Optional[int] = Field(None, ge=1)
    dependencies: Optional[List[str]] = None

    # id and created_at are immutable, so they are rejected here as unknown fields
    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict:
        """Fields the caller set, as a plain dict."""
        return self.model_dump(exclude_unset=True)


class TaskStats(BaseModel):
    """Aggregate counts over the task collection."""

    total: int = 0
    completed: int = 0
    pending: int = 0
    in_progress: int = 0
    overdue: int = 0
