"""Read-time joined views. Computed on every read, never stored."""

from enum import Enum
from typing import Dict, Optional

from crm_kernel.models.activity import Activity
from crm_kernel.models.company import Company
from crm_kernel.models.contact import Contact
from crm_kernel.models.deal import Deal


class JoinPolicy(str, Enum):
    STRICT = "strict"   # Drop the source record if a required relation is missing
    LEFT = "left"       # Keep the source record, leave the relation as None


# A deal is meaningless without its company and contact; contacts and
# activities may stand alone.
RELATION_POLICIES: Dict[str, JoinPolicy] = {
    "deal": JoinPolicy.STRICT,
    "contact": JoinPolicy.LEFT,
    "activity": JoinPolicy.LEFT,
}


class DealWithRelations(Deal):
    company: Company
    contact: Contact


class ContactWithCompany(Contact):
    company: Optional[Company] = None


class ActivityWithRelations(Activity):
    deal: Optional[Deal] = None
    contact: Optional[Contact] = None
    company: Optional[Company] = None
