"""Activity — a logged or scheduled touchpoint (call, email, meeting, ...)."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from crm_kernel.models.partial import PartialUpdate


class ActivityType(str, Enum):
    CALL = "call"
    EMAIL = "email"
    MEETING = "meeting"
    NOTE = "note"
    TASK = "task"


class ActivityCreate(BaseModel):
    """Insert payload for an activity. All three links are independently optional."""

    type: ActivityType
    title: str
    description: Optional[str] = None
    deal_id: Optional[str] = None
    contact_id: Optional[str] = None
    company_id: Optional[str] = None
    completed: bool = False
    due_date: Optional[datetime] = None


class ActivityUpdate(PartialUpdate):
    required_fields = frozenset({"type", "title", "completed"})

    type: Optional[ActivityType] = None
    title: Optional[str] = None
    description: Optional[str] = None
    deal_id: Optional[str] = None
    contact_id: Optional[str] = None
    company_id: Optional[str] = None
    completed: Optional[bool] = None
    due_date: Optional[datetime] = None


class Activity(ActivityCreate):
    """A stored activity record."""

    id: str
    created_at: datetime
