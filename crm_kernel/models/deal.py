"""Deal — a sales opportunity moving through the pipeline."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from crm_kernel.models.partial import PartialUpdate


class DealStage(str, Enum):
    """Pipeline stages, in pipeline order."""

    LEAD = "lead"
    QUALIFIED = "qualified"
    PROPOSAL = "proposal"
    NEGOTIATION = "negotiation"
    CLOSED_WON = "closed_won"       # Terminal
    CLOSED_LOST = "closed_lost"     # Terminal


DEFAULT_PROBABILITY = 25


def is_closed_stage(stage: Union[DealStage, str]) -> bool:
    """Any stage whose name contains "closed" is out of the open pipeline."""
    name = stage.value if isinstance(stage, DealStage) else stage
    return "closed" in name


class DealCreate(BaseModel):
    """Insert payload for a deal."""

    title: str
    value: Decimal = Field(max_digits=12, decimal_places=2)
    stage: DealStage
    probability: int = Field(ge=0, le=100, default=DEFAULT_PROBABILITY)
    expected_close_date: Optional[datetime] = None
    actual_close_date: Optional[datetime] = None
    company_id: str
    contact_id: str
    notes: Optional[str] = None


class DealUpdate(PartialUpdate):
    required_fields = frozenset({
        "title", "value", "stage", "probability", "company_id", "contact_id",
    })

    title: Optional[str] = None
    value: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)
    stage: Optional[DealStage] = None
    probability: Optional[int] = Field(default=None, ge=0, le=100)
    expected_close_date: Optional[datetime] = None
    actual_close_date: Optional[datetime] = None
    company_id: Optional[str] = None
    contact_id: Optional[str] = None
    notes: Optional[str] = None


class Deal(DealCreate):
    """
    A stored deal record.

    Every deal belongs to exactly one company and one contact. The store does
    not enforce that the referenced records exist; the relation resolver hides
    deals whose references dangle.
    """

    id: str
    created_at: datetime
    updated_at: datetime
