"""Derived pipeline analytics."""

from decimal import Decimal
from typing import Dict

from pydantic import BaseModel


class PipelineMetrics(BaseModel):
    """Headline numbers for the dashboard."""

    pipeline_value: Decimal = Decimal("0")      # Sum over open deals
    conversion_rate: float = 0.0                # Percent of closed deals that were won
    avg_deal_size: Decimal = Decimal("0")       # Mean over all deals
    sales_velocity: float = 0.0                 # Mean days from creation to close, won deals


class PipelineForecast(BaseModel):
    """Probability-weighted view of the open pipeline."""

    weighted_pipeline_value: Decimal = Decimal("0")
    won_revenue: Decimal = Decimal("0")
    deals_by_stage: Dict[str, int] = {}
