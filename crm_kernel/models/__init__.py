"""CRM Kernel data models."""

from crm_kernel.models.activity import (
    Activity,
    ActivityCreate,
    ActivityType,
    ActivityUpdate,
)
from crm_kernel.models.company import (
    Company,
    CompanyCreate,
    CompanySize,
    CompanyUpdate,
)
from crm_kernel.models.contact import Contact, ContactCreate, ContactUpdate
from crm_kernel.models.deal import (
    DEFAULT_PROBABILITY,
    Deal,
    DealCreate,
    DealStage,
    DealUpdate,
    is_closed_stage,
)
from crm_kernel.models.metrics import PipelineForecast, PipelineMetrics
from crm_kernel.models.partial import PartialUpdate
from crm_kernel.models.relations import (
    RELATION_POLICIES,
    ActivityWithRelations,
    ContactWithCompany,
    DealWithRelations,
    JoinPolicy,
)

__all__ = [
    "DEFAULT_PROBABILITY",
    "RELATION_POLICIES",
    "Activity",
    "ActivityCreate",
    "ActivityType",
    "ActivityUpdate",
    "ActivityWithRelations",
    "Company",
    "CompanyCreate",
    "CompanySize",
    "CompanyUpdate",
    "Contact",
    "ContactCreate",
    "ContactUpdate",
    "ContactWithCompany",
    "Deal",
    "DealCreate",
    "DealStage",
    "DealUpdate",
    "DealWithRelations",
    "JoinPolicy",
    "PartialUpdate",
    "PipelineForecast",
    "PipelineMetrics",
    "is_closed_stage",
]
