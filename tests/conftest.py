"""Shared fixtures: an isolated store per test with a controllable clock."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from crm_kernel.models import CompanyCreate, ContactCreate, DealCreate, DealStage
from crm_kernel.storage.crm_store import CRMStore


class ManualClock:
    """Returns a fixed time until advanced."""

    def __init__(self, start: datetime = datetime(2025, 1, 6, 9, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def store(clock):
    return CRMStore(clock=clock)


def make_company(store: CRMStore, name: str = "Acme Corp", **kwargs):
    return store.companies.create(CompanyCreate(name=name, **kwargs))


def make_contact(store: CRMStore, company_id=None, **kwargs):
    fields = {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@acme.test"}
    fields.update(kwargs)
    return store.contacts.create(ContactCreate(company_id=company_id, **fields))


def make_deal(
    store: CRMStore,
    company_id: str,
    contact_id: str,
    value: str = "1000.00",
    stage: DealStage = DealStage.LEAD,
    **kwargs,
):
    return store.deals.create(DealCreate(
        title=kwargs.pop("title", "Test deal"),
        value=Decimal(value),
        stage=stage,
        company_id=company_id,
        contact_id=contact_id,
        **kwargs,
    ))
