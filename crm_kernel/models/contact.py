"""Contact — a person the sales team talks to."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from crm_kernel.models.partial import PartialUpdate


class ContactCreate(BaseModel):
    """Insert payload for a contact."""

    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    title: Optional[str] = None
    company_id: Optional[str] = None        # A contact need not belong to a company
    linkedin: Optional[str] = None
    notes: Optional[str] = None


class ContactUpdate(PartialUpdate):
    required_fields = frozenset({"first_name", "last_name", "email"})

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    title: Optional[str] = None
    company_id: Optional[str] = None
    linkedin: Optional[str] = None
    notes: Optional[str] = None


class Contact(ContactCreate):
    """A stored contact record."""

    id: str
    created_at: datetime
