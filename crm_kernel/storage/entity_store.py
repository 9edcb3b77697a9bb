"""
Entity Stores — own every CRM record, one store per entity kind.

Behavioral Contract:
- create assigns a fresh identifier and creation timestamp and normalizes
  absent optional fields to None
- update merges only the supplied fields; it never creates (no upsert)
- delete is an unconditional removal with no cascade into other stores
- Not found is reported as None (get/update) or False (delete), never raised
"""

import threading
from datetime import datetime
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar, Union
from uuid import uuid4

from loguru import logger
from pydantic import BaseModel

from crm_kernel.models.activity import Activity, ActivityCreate, ActivityUpdate
from crm_kernel.models.company import Company, CompanyCreate, CompanyUpdate
from crm_kernel.models.contact import Contact, ContactCreate, ContactUpdate
from crm_kernel.models.deal import Deal, DealCreate, DealUpdate

RecordT = TypeVar("RecordT", bound=BaseModel)
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)

Clock = Callable[[], datetime]


def _create_id() -> str:
    """Generate a UUID4 string for entity identifiers."""
    return str(uuid4())


class EntityStore(Generic[RecordT, CreateT, UpdateT]):
    """
    In-memory store for a single entity kind.
    Every operation holds the store lock, so read-modify-write sequences
    stay atomic when the store is shared across threads.
    """

    kind: str = "entity"
    record_type: Type[RecordT]
    create_type: Type[CreateT]
    update_type: Type[UpdateT]

    def __init__(self, clock: Optional[Clock] = None):
        self._records: Dict[str, RecordT] = {}
        self._lock = threading.RLock()
        self._clock: Clock = clock or datetime.utcnow

    def list(self) -> List[RecordT]:
        """All records, in insertion order."""
        with self._lock:
            return list(self._records.values())

    def get(self, record_id: str) -> Optional[RecordT]:
        """Get a record by ID, or None if it does not exist."""
        with self._lock:
            return self._records.get(record_id)

    def create(self, payload: Union[CreateT, Mapping[str, Any]]) -> RecordT:
        """Materialize a payload (model or plain mapping) into a stored record."""
        if not isinstance(payload, BaseModel):
            payload = self.create_type(**payload)
        now = self._clock()
        record = self.record_type(
            id=_create_id(),
            **self._creation_stamps(now),
            **payload.model_dump(),
        )
        with self._lock:
            self._records[record.id] = record
        logger.debug(f"Created {self.kind} {record.id}")
        return record

    def update(
        self, record_id: str, payload: Union[UpdateT, Mapping[str, Any]]
    ) -> Optional[RecordT]:
        """
        Merge the explicitly supplied fields onto an existing record.
        Returns the updated record, or None if the ID is unknown.
        """
        if not isinstance(payload, BaseModel):
            payload = self.update_type(**payload)
        changes = payload.model_dump(exclude_unset=True)

        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                logger.debug(f"Update skipped, {self.kind} {record_id} not found")
                return None
            changes.update(self._update_stamps(self._clock()))
            updated = existing.model_copy(update=changes)
            self._records[record_id] = updated

        logger.debug(f"Updated {self.kind} {record_id}: fields={sorted(changes)}")
        return updated

    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns whether a record was actually removed."""
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed is None:
            return False
        logger.debug(f"Deleted {self.kind} {record_id}")
        return True

    def load(self, records: Iterable[RecordT]) -> None:
        """Bulk-insert fully materialized records, keeping their IDs and timestamps."""
        with self._lock:
            for record in records:
                self._records[record.id] = record

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def _creation_stamps(self, now: datetime) -> dict:
        return {"created_at": now}

    def _update_stamps(self, now: datetime) -> dict:
        return {}


class CompanyStore(EntityStore[Company, CompanyCreate, CompanyUpdate]):
    kind = "company"
    record_type = Company
    create_type = CompanyCreate
    update_type = CompanyUpdate


class ContactStore(EntityStore[Contact, ContactCreate, ContactUpdate]):
    kind = "contact"
    record_type = Contact
    create_type = ContactCreate
    update_type = ContactUpdate

    def list_by_company(self, company_id: str) -> List[Contact]:
        """Raw contacts belonging to a company."""
        return [c for c in self.list() if c.company_id == company_id]


class DealStore(EntityStore[Deal, DealCreate, DealUpdate]):
    """Deals additionally carry updated_at, refreshed on every successful update."""

    kind = "deal"
    record_type = Deal
    create_type = DealCreate
    update_type = DealUpdate

    def _creation_stamps(self, now: datetime) -> dict:
        return {"created_at": now, "updated_at": now}

    def _update_stamps(self, now: datetime) -> dict:
        return {"updated_at": now}


class ActivityStore(EntityStore[Activity, ActivityCreate, ActivityUpdate]):
    kind = "activity"
    record_type = Activity
    create_type = ActivityCreate
    update_type = ActivityUpdate
