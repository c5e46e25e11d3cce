"""Tests for chart and table builders."""

import pandas as pd
from components.charts import (
    create_amortization_chart,
    create_prepayment_comparison_chart,
    create_rent_vs_buy_chart,
    create_scenario_comparison_chart,
    create_upfront_cost_chart,
    create_yearly_breakdown_chart,
)
from components.tables import format_currency_columns, upfront_cost_frame
from homeloan.amortization import (
    generate_amortization_schedule,
    schedule_to_frame,
    summary_to_frame,
    yearly_summary,
)
from homeloan.compare import LoanScenario, compare_loan_scenarios, comparison_to_frame
from homeloan.emi import LoanTerms
from homeloan.policy import Jurisdiction, PropertyReadiness
from homeloan.prepayment import compare_prepayment_strategies
from homeloan.rent_vs_buy import RentVsBuyInput, calculate_rent_vs_buy, snapshots_to_frame
from homeloan.upfront import UpfrontCostInput, calculate_upfront_costs

TERMS = LoanTerms(principal=800_000, annual_rate_percent=4.5, years=10)


def _costs(readiness=PropertyReadiness.READY):
    return calculate_upfront_costs(UpfrontCostInput(
        property_price=1_000_000,
        loan_amount=800_000,
        jurisdiction=Jurisdiction.DUBAI,
        agent_commission_percent=2,
        include_vat=True,
        readiness=readiness,
    ), 200_000)


class TestCharts:

    def test_amortization_chart(self):
        fig = create_amortization_chart(schedule_to_frame(generate_amortization_schedule(TERMS)))

        assert len(fig.data) == 3
        assert len(fig.data[0].x) == 120

    def test_yearly_breakdown_chart(self):
        fig = create_yearly_breakdown_chart(summary_to_frame(yearly_summary(TERMS)))

        assert len(fig.data) == 2
        assert fig.layout.barmode == 'stack'

    def test_upfront_cost_chart_skips_zero_items(self):
        fig = create_upfront_cost_chart(_costs())
        labels = list(fig.data[0].labels)

        assert 'Oqood Fee' not in labels
        assert 'Transfer Fee' in labels
        assert sum(fig.data[0].values) == 79_620

    def test_prepayment_chart(self):
        fig = create_prepayment_comparison_chart(compare_prepayment_strategies(TERMS))
        assert len(fig.data) == 2

    def test_rent_vs_buy_chart_marks_break_even(self):
        result = calculate_rent_vs_buy(RentVsBuyInput(
            property_price=1_000_000,
            down_payment_percent=20,
            annual_rate_percent=4,
            loan_tenure_years=25,
            monthly_rent=6_000,
            annual_rent_increase_percent=5,
            annual_property_appreciation_percent=0,
            annual_maintenance_cost=10_000,
            years_to_compare=10,
        ))
        fig = create_rent_vs_buy_chart(snapshots_to_frame(result), result.break_even_year)

        assert len(fig.data) == 3
        assert len(fig.layout.shapes) == 1

    def test_rent_vs_buy_chart_without_break_even(self):
        snapshots = pd.DataFrame({
            'year': [1, 2],
            'cumulative_rent': [10, 20],
            'net_buy_cost': [50, 60],
            'equity': [5, 6],
        })
        fig = create_rent_vs_buy_chart(snapshots, 0)

        assert len(fig.layout.shapes) == 0

    def test_scenario_chart(self):
        comparison = compare_loan_scenarios(1_000_000, 20, [
            LoanScenario("A", 4.0, 25),
            LoanScenario("B", 4.5, 20),
        ])
        fig = create_scenario_comparison_chart(comparison_to_frame(comparison))

        assert len(fig.data) == 2
        assert list(fig.data[0].x) == ["A", "B"]


class TestTables:

    def test_upfront_cost_frame(self):
        df = upfront_cost_frame(_costs())

        assert df['Item'].iloc[-2:].tolist() == ['Total Fees', 'Total Upfront Cash']
        assert df['Amount'].iloc[-1] == 279_620
        assert 'Oqood (Off-plan) Fee' not in df['Item'].tolist()

    def test_upfront_cost_frame_off_plan(self):
        items = upfront_cost_frame(_costs(PropertyReadiness.OFF_PLAN))['Item'].tolist()

        assert 'Oqood (Off-plan) Fee' in items
        assert 'DLD / Transfer Fee' not in items

    def test_format_currency_columns(self):
        df = pd.DataFrame({'year': [1], 'amount': [1234567.4], 'missing': [None]})
        out = format_currency_columns(df, ['amount', 'missing', 'absent'])

        assert out['amount'].iloc[0] == 'AED 1,234,567'
        assert out['missing'].iloc[0] == '-'
        assert out['year'].iloc[0] == 1
        assert df['amount'].iloc[0] == 1234567.4
