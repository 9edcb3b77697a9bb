"""Sample dataset: five companies, their key contacts, one deal each, and recent activity."""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import uuid4

from loguru import logger

from crm_kernel.models.activity import Activity, ActivityType
from crm_kernel.models.company import Company, CompanySize
from crm_kernel.models.contact import Contact
from crm_kernel.models.deal import Deal, DealStage

if TYPE_CHECKING:
    from crm_kernel.storage.crm_store import CRMStore


_COMPANIES = [
    ("TechCorp Inc.", "https://techcorp.com", "Technology", CompanySize.MEDIUM, "Leading tech solutions provider"),
    ("DataFlow Systems", "https://dataflow.com", "Software", CompanySize.SMALL, "Data analytics platform"),
    ("CloudStart Solutions", "https://cloudstart.com", "Cloud Services", CompanySize.LARGE, "Cloud infrastructure provider"),
    ("InnovateLabs", "https://innovatelabs.com", "R&D", CompanySize.MICRO, "Innovation and research lab"),
    ("GlobalTech Ltd.", "https://globaltech.com", "Technology", CompanySize.ENTERPRISE, "Global technology conglomerate"),
]

_CONTACTS = [
    ("Sarah", "Johnson", "sarah@techcorp.com", "+1-555-0101", "VP of Sales", "sarah-johnson", "Key decision maker"),
    ("Mike", "Chen", "mike@dataflow.com", "+1-555-0102", "CTO", "mike-chen", "Technical lead"),
    ("Emily", "Rodriguez", "emily@cloudstart.com", "+1-555-0103", "CEO", "emily-rodriguez", "Final approver"),
    ("David", "Park", "david@innovatelabs.com", "+1-555-0104", "Founder", "david-park", "Innovation focused"),
    ("Lisa", "Wilson", "lisa@globaltech.com", "+1-555-0105", "Director of Procurement", "lisa-wilson", "Budget holder"),
]

# title, value, stage, probability, age (days), expected close (days from now),
# actual close (days from now), notes
_DEALS = [
    ("Enterprise Software License", "125000.00", DealStage.NEGOTIATION, 85, 45, 14, None, "Large enterprise deal"),
    ("Analytics Platform Implementation", "89500.00", DealStage.PROPOSAL, 72, 30, 21, None, "Complex technical requirements"),
    ("Cloud Migration Services", "67200.00", DealStage.CLOSED_WON, 100, 40, -5, -10, "Successfully closed"),
    ("Innovation Consulting", "52800.00", DealStage.QUALIFIED, 45, 12, 35, None, "Good fit for services"),
    ("Global IT Infrastructure", "234000.00", DealStage.LEAD, 25, 3, 60, None, "Initial discussions"),
]

# type, title, description, completed, age in hours, due in hours
_ACTIVITIES = [
    (ActivityType.CALL, "Discovery Call", "Initial needs assessment call", True, 2, None),
    (ActivityType.EMAIL, "Proposal Follow-up", "Following up on sent proposal", True, 4, None),
    (ActivityType.MEETING, "Contract Signing", "Final contract signing meeting", True, 24, None),
    (ActivityType.CALL, "Technical Discussion", "Discussing technical requirements", False, 6, 24),
]


def _new_id() -> str:
    return str(uuid4())


def seed_sample_data(store: "CRMStore", now: Optional[datetime] = None) -> None:
    """
    Load the sample dataset into a store. Dates are relative to `now` so the
    pipeline looks current whenever the process starts.
    """
    now = now or datetime.utcnow()

    companies = [
        Company(
            id=_new_id(), name=name, website=website, industry=industry,
            size=size, description=description, created_at=now,
        )
        for name, website, industry, size, description in _COMPANIES
    ]

    contacts = [
        Contact(
            id=_new_id(), first_name=first, last_name=last, email=email,
            phone=phone, title=title, company_id=company.id,
            linkedin=f"https://linkedin.com/in/{handle}", notes=notes,
            created_at=now,
        )
        for (first, last, email, phone, title, handle, notes), company
        in zip(_CONTACTS, companies)
    ]

    deals = []
    for (title, value, stage, probability, age, expected, actual, notes), company, contact in zip(
        _DEALS, companies, contacts
    ):
        created = now - timedelta(days=age)
        deals.append(Deal(
            id=_new_id(),
            title=title,
            value=Decimal(value),
            stage=stage,
            probability=probability,
            expected_close_date=now + timedelta(days=expected),
            actual_close_date=now + timedelta(days=actual) if actual is not None else None,
            company_id=company.id,
            contact_id=contact.id,
            notes=notes,
            created_at=created,
            updated_at=created,
        ))

    activities = [
        Activity(
            id=_new_id(), type=activity_type, title=title, description=description,
            deal_id=deal.id, contact_id=deal.contact_id, company_id=deal.company_id,
            completed=completed,
            due_date=now + timedelta(hours=due) if due is not None else None,
            created_at=now - timedelta(hours=age),
        )
        for (activity_type, title, description, completed, age, due), deal
        in zip(_ACTIVITIES, deals)
    ]

    store.companies.load(companies)
    store.contacts.load(contacts)
    store.deals.load(deals)
    store.activities.load(activities)

    logger.info(
        f"Seeded sample data: {len(companies)} companies, {len(contacts)} contacts, "
        f"{len(deals)} deals, {len(activities)} activities"
    )
