"""Company — an organization that contacts belong to and deals are sold into."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from crm_kernel.models.partial import PartialUpdate


class CompanySize(str, Enum):
    MICRO = "1-10"
    SMALL = "11-50"
    MEDIUM = "51-200"
    LARGE = "201-500"
    ENTERPRISE = "500+"


class CompanyCreate(BaseModel):
    """Insert payload for a company."""

    name: str
    website: Optional[str] = None
    industry: Optional[str] = None
    size: Optional[CompanySize] = None
    description: Optional[str] = None


class CompanyUpdate(PartialUpdate):
    """Partial update payload. Only explicitly set fields are merged."""

    required_fields = frozenset({"name"})

    name: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    size: Optional[CompanySize] = None
    description: Optional[str] = None


class Company(CompanyCreate):
    """A stored company record."""

    id: str
    created_at: datetime
