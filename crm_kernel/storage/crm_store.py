"""
CRM Store — the process-wide handle on all CRM state.

Constructed once at startup and passed to whatever serves requests; tests
build their own isolated instances.
"""

from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from crm_kernel.analytics.aggregator import MetricsAggregator
from crm_kernel.config import CRMSettings, get_settings
from crm_kernel.logging_config import configure_logging
from crm_kernel.relations.resolver import RelationResolver
from crm_kernel.storage.entity_store import (
    ActivityStore,
    CompanyStore,
    ContactStore,
    DealStore,
)
from crm_kernel.storage.seed import seed_sample_data


class CRMStore:
    """
    Owns the four entity stores plus the resolver and aggregator built on them.
    All stores share one clock.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.companies = CompanyStore(clock=clock)
        self.contacts = ContactStore(clock=clock)
        self.deals = DealStore(clock=clock)
        self.activities = ActivityStore(clock=clock)

        self.relations = RelationResolver(
            companies=self.companies,
            contacts=self.contacts,
            deals=self.deals,
            activities=self.activities,
        )
        self.analytics = MetricsAggregator(self.deals)

    def counts(self) -> dict:
        """Record count per entity kind."""
        return {
            "companies": self.companies.count(),
            "contacts": self.contacts.count(),
            "deals": self.deals.count(),
            "activities": self.activities.count(),
        }


def create_store(settings: Optional[CRMSettings] = None) -> CRMStore:
    """Build a store for a running process: logging configured, sample data loaded if enabled."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    store = CRMStore()
    if settings.seed_sample_data:
        seed_sample_data(store)
    logger.info(f"CRM store ready: {store.counts()}")
    return store
