"""
Metrics Aggregator — derived pipeline analytics over the deal store.

Recomputed from scratch on every call; nothing is cached or maintained
incrementally. Monetary sums use Decimal throughout.
"""

import math
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Optional

from crm_kernel.models.deal import Deal, DealStage, is_closed_stage
from crm_kernel.models.metrics import PipelineForecast, PipelineMetrics
from crm_kernel.storage.entity_store import DealStore

SECONDS_PER_DAY = 24 * 60 * 60


def _as_naive_utc(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; bring aware inputs onto the same footing."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def days_to_close(deal: Deal) -> int:
    """Whole days from creation to actual close, rounded up."""
    elapsed = _as_naive_utc(deal.actual_close_date) - _as_naive_utc(deal.created_at)
    return math.ceil(elapsed.total_seconds() / SECONDS_PER_DAY)


class MetricsAggregator:
    """Computes dashboard and forecast numbers by scanning the deal store."""

    def __init__(self, deals: DealStore):
        self.deals = deals

    def compute_metrics(self) -> PipelineMetrics:
        deals = self.deals.list()
        if not deals:
            return PipelineMetrics()

        open_deals = [d for d in deals if not is_closed_stage(d.stage)]
        closed_deals = [d for d in deals if is_closed_stage(d.stage)]
        won_deals = [d for d in deals if d.stage == DealStage.CLOSED_WON]

        pipeline_value = sum((d.value for d in open_deals), Decimal("0"))

        conversion_rate = 0.0
        if closed_deals:
            conversion_rate = len(won_deals) / len(closed_deals) * 100

        avg_deal_size = sum((d.value for d in deals), Decimal("0")) / len(deals)

        # Won deals without a recorded close date are left out of the average
        # entirely (numerator and denominator).
        close_times = [days_to_close(d) for d in won_deals if d.actual_close_date is not None]
        sales_velocity = sum(close_times) / len(close_times) if close_times else 0.0

        return PipelineMetrics(
            pipeline_value=pipeline_value,
            conversion_rate=conversion_rate,
            avg_deal_size=avg_deal_size,
            sales_velocity=sales_velocity,
        )

    def compute_forecast(self) -> PipelineForecast:
        deals = self.deals.list()
        open_deals = [d for d in deals if not is_closed_stage(d.stage)]

        weighted = sum(
            (d.value * d.probability / Decimal(100) for d in open_deals),
            Decimal("0"),
        )
        won_revenue = sum(
            (d.value for d in deals if d.stage == DealStage.CLOSED_WON),
            Decimal("0"),
        )

        return PipelineForecast(
            weighted_pipeline_value=weighted,
            won_revenue=won_revenue,
            deals_by_stage=self.count_deals_by_stage(deals),
        )

    def count_deals_by_stage(self, deals: Optional[List[Deal]] = None) -> Dict[str, int]:
        """Deal count per stage; every stage is present, in pipeline order."""
        if deals is None:
            deals = self.deals.list()
        counts = {stage.value: 0 for stage in DealStage}
        for deal in deals:
            counts[DealStage(deal.stage).value] += 1
        return counts
