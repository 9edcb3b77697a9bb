"""Tests for the Metrics Aggregator."""

from datetime import timedelta
from decimal import Decimal

import pytest

from conftest import make_company, make_contact, make_deal
from crm_kernel.models import DealStage, DealUpdate, PipelineMetrics, is_closed_stage


@pytest.fixture
def parties(store):
    company = make_company(store)
    contact = make_contact(store, company_id=company.id)
    return company.id, contact.id


class TestClosedStage:
    def test_closed_stages(self):
        assert is_closed_stage(DealStage.CLOSED_WON)
        assert is_closed_stage(DealStage.CLOSED_LOST)
        assert is_closed_stage("closed_lost")

    def test_open_stages(self):
        for stage in (DealStage.LEAD, DealStage.QUALIFIED, DealStage.PROPOSAL, DealStage.NEGOTIATION):
            assert not is_closed_stage(stage)


class TestComputeMetrics:
    def test_empty_store(self, store):
        metrics = store.analytics.compute_metrics()

        assert metrics == PipelineMetrics()
        assert metrics.pipeline_value == 0
        assert metrics.conversion_rate == 0
        assert metrics.avg_deal_size == 0
        assert metrics.sales_velocity == 0

    def test_three_deal_scenario(self, store, clock, parties):
        company_id, contact_id = parties
        make_deal(store, company_id, contact_id, value="100.00", stage=DealStage.LEAD)
        won = make_deal(store, company_id, contact_id, value="200.00", stage=DealStage.CLOSED_WON)
        store.deals.update(won.id, DealUpdate(actual_close_date=won.created_at + timedelta(days=10)))
        make_deal(store, company_id, contact_id, value="50.00", stage=DealStage.CLOSED_LOST)

        metrics = store.analytics.compute_metrics()

        assert metrics.pipeline_value == Decimal("100.00")
        assert metrics.conversion_rate == 50.0
        assert abs(metrics.avg_deal_size - Decimal("350") / 3) < Decimal("0.000001")
        assert metrics.sales_velocity == 10

    def test_pipeline_value_is_exact_decimal(self, store, parties):
        company_id, contact_id = parties
        for _ in range(10):
            make_deal(store, company_id, contact_id, value="0.10", stage=DealStage.PROPOSAL)

        assert store.analytics.compute_metrics().pipeline_value == Decimal("1.00")

    def test_no_closed_deals_means_zero_conversion(self, store, parties):
        company_id, contact_id = parties
        make_deal(store, company_id, contact_id, stage=DealStage.NEGOTIATION)

        assert store.analytics.compute_metrics().conversion_rate == 0

    def test_velocity_rounds_partial_days_up(self, store, parties):
        company_id, contact_id = parties
        won = make_deal(store, company_id, contact_id, stage=DealStage.CLOSED_WON)
        store.deals.update(
            won.id, DealUpdate(actual_close_date=won.created_at + timedelta(days=3, hours=1))
        )

        assert store.analytics.compute_metrics().sales_velocity == 4

    def test_won_deal_without_close_date_is_left_out_of_velocity(self, store, parties):
        company_id, contact_id = parties
        dated = make_deal(store, company_id, contact_id, stage=DealStage.CLOSED_WON)
        store.deals.update(
            dated.id, DealUpdate(actual_close_date=dated.created_at + timedelta(days=6))
        )
        make_deal(store, company_id, contact_id, stage=DealStage.CLOSED_WON)

        metrics = store.analytics.compute_metrics()

        assert metrics.sales_velocity == 6
        assert metrics.conversion_rate == 100.0

    def test_only_undated_won_deals_gives_zero_velocity(self, store, parties):
        company_id, contact_id = parties
        make_deal(store, company_id, contact_id, stage=DealStage.CLOSED_WON)

        assert store.analytics.compute_metrics().sales_velocity == 0

    def test_metrics_include_dangling_deals(self, store, parties):
        company_id, contact_id = parties
        make_deal(store, company_id, contact_id, value="500.00")
        store.companies.delete(company_id)

        assert store.analytics.compute_metrics().pipeline_value == Decimal("500.00")

    def test_recomputed_on_every_call(self, store, parties):
        company_id, contact_id = parties
        deal = make_deal(store, company_id, contact_id, value="300.00")
        assert store.analytics.compute_metrics().pipeline_value == Decimal("300.00")

        store.deals.update(deal.id, DealUpdate(stage=DealStage.CLOSED_LOST))

        metrics = store.analytics.compute_metrics()
        assert metrics.pipeline_value == 0
        assert metrics.conversion_rate == 0


class TestForecast:
    def test_weighted_pipeline_and_revenue(self, store, parties):
        company_id, contact_id = parties
        make_deal(store, company_id, contact_id, value="1000.00", stage=DealStage.PROPOSAL, probability=50)
        make_deal(store, company_id, contact_id, value="400.00", stage=DealStage.LEAD)
        make_deal(store, company_id, contact_id, value="250.00", stage=DealStage.CLOSED_WON, probability=100)
        make_deal(store, company_id, contact_id, value="999.00", stage=DealStage.CLOSED_LOST, probability=0)

        forecast = store.analytics.compute_forecast()

        assert forecast.weighted_pipeline_value == Decimal("600.00")
        assert forecast.won_revenue == Decimal("250.00")
        assert forecast.deals_by_stage == {
            "lead": 1,
            "qualified": 0,
            "proposal": 1,
            "negotiation": 0,
            "closed_won": 1,
            "closed_lost": 1,
        }

    def test_empty_forecast(self, store):
        forecast = store.analytics.compute_forecast()

        assert forecast.weighted_pipeline_value == 0
        assert forecast.won_revenue == 0
        assert set(forecast.deals_by_stage.values()) == {0}
