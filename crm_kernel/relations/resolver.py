"""
Relation Resolver — attaches related records to raw entities at read time.

Behavioral Contract:
- Deals are strict-joined: a deal whose company or contact cannot be found
  is never exposed through this path
- Contacts and activities are left-joined: a missing relation is None
- Joined views are recomputed on every call and never stored
"""

from datetime import datetime
from typing import Dict, List, Optional

from loguru import logger

from crm_kernel.models.activity import Activity
from crm_kernel.models.contact import Contact
from crm_kernel.models.deal import Deal, DealStage
from crm_kernel.models.relations import (
    RELATION_POLICIES,
    ActivityWithRelations,
    ContactWithCompany,
    DealWithRelations,
    JoinPolicy,
)
from crm_kernel.storage.entity_store import (
    ActivityStore,
    CompanyStore,
    ContactStore,
    DealStore,
    EntityStore,
)


def _lookup(store: EntityStore, record_id: Optional[str]):
    """Resolve an optional foreign key; None when absent or dangling."""
    if record_id is None:
        return None
    return store.get(record_id)


def _keeps(kind: str, missing_relation: bool) -> bool:
    """Apply the join policy declared for an entity kind."""
    return not missing_relation or RELATION_POLICIES[kind] == JoinPolicy.LEFT


class RelationResolver:
    """Produces joined views over the four entity stores."""

    def __init__(
        self,
        companies: CompanyStore,
        contacts: ContactStore,
        deals: DealStore,
        activities: ActivityStore,
    ):
        self.companies = companies
        self.contacts = contacts
        self.deals = deals
        self.activities = activities

    # --- Deals ---

    def list_deals_with_relations(self) -> List[DealWithRelations]:
        """All deals whose company and contact both resolve."""
        joined = (self._join_deal(d) for d in self.deals.list())
        return [d for d in joined if d is not None]

    def get_deal_with_relations(self, deal_id: str) -> Optional[DealWithRelations]:
        """A single joined deal, or None if the deal or either relation is missing."""
        deal = self.deals.get(deal_id)
        if deal is None:
            return None
        return self._join_deal(deal)

    def list_deals_by_stage(self, stage: str) -> List[DealWithRelations]:
        return [d for d in self.list_deals_with_relations() if d.stage == stage]

    def list_deals_created_between(
        self, start: datetime, end: datetime
    ) -> List[DealWithRelations]:
        """Joined deals created within [start, end]."""
        return [
            d for d in self.list_deals_with_relations()
            if start <= d.created_at <= end
        ]

    def group_deals_by_stage(self) -> Dict[DealStage, List[DealWithRelations]]:
        """Pipeline board: every stage, in pipeline order, with its joined deals."""
        board: Dict[DealStage, List[DealWithRelations]] = {s: [] for s in DealStage}
        for deal in self.list_deals_with_relations():
            board[DealStage(deal.stage)].append(deal)
        return board

    def _join_deal(self, deal: Deal) -> Optional[DealWithRelations]:
        company = _lookup(self.companies, deal.company_id)
        contact = _lookup(self.contacts, deal.contact_id)
        if not _keeps("deal", company is None or contact is None):
            logger.debug(
                f"Dropping deal {deal.id}: company_found={company is not None}, "
                f"contact_found={contact is not None}"
            )
            return None
        return DealWithRelations(**dict(deal), company=company, contact=contact)

    # --- Contacts ---

    def list_contacts_with_company(self) -> List[ContactWithCompany]:
        joined = (self._join_contact(c) for c in self.contacts.list())
        return [c for c in joined if c is not None]

    def get_contact_with_company(self, contact_id: str) -> Optional[ContactWithCompany]:
        contact = self.contacts.get(contact_id)
        if contact is None:
            return None
        return self._join_contact(contact)

    def _join_contact(self, contact: Contact) -> Optional[ContactWithCompany]:
        company = _lookup(self.companies, contact.company_id)
        dangling = contact.company_id is not None and company is None
        if not _keeps("contact", dangling):
            return None
        return ContactWithCompany(**dict(contact), company=company)

    # --- Activities ---

    def list_activities_with_relations(self) -> List[ActivityWithRelations]:
        joined = (self._join_activity(a) for a in self.activities.list())
        return [a for a in joined if a is not None]

    def list_activities_by_deal(self, deal_id: str) -> List[ActivityWithRelations]:
        return [
            a for a in self.list_activities_with_relations()
            if a.deal_id == deal_id
        ]

    def list_activities_by_contact(self, contact_id: str) -> List[ActivityWithRelations]:
        return [
            a for a in self.list_activities_with_relations()
            if a.contact_id == contact_id
        ]

    def _join_activity(self, activity: Activity) -> Optional[ActivityWithRelations]:
        deal = _lookup(self.deals, activity.deal_id)
        contact = _lookup(self.contacts, activity.contact_id)
        company = _lookup(self.companies, activity.company_id)
        dangling = (
            (activity.deal_id is not None and deal is None)
            or (activity.contact_id is not None and contact is None)
            or (activity.company_id is not None and company is None)
        )
        if not _keeps("activity", dangling):
            return None
        return ActivityWithRelations(
            **dict(activity), deal=deal, contact=contact, company=company
        )
