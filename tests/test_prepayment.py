"""Tests for prepayment calculations."""

import pytest
from homeloan.emi import LoanTerms, precise_emi, round_currency
from homeloan.prepayment import (
    PrepaymentInput,
    calculate_prepayment_savings,
    compare_prepayment_strategies,
    find_extra_for_target_tenure,
)

LOAN = LoanTerms(principal=1_000_000, annual_rate_percent=5, years=25)


class TestCalculatePrepaymentSavings:
    """Tests for the month-by-month prepayment simulation."""

    def test_no_prepayment_is_noop(self):
        result = calculate_prepayment_savings(PrepaymentInput(LOAN))

        assert result.new_tenure_months == result.original_tenure_months == 300
        assert result.new_total_interest == result.original_total_interest
        assert result.new_total_payment == result.original_total_payment
        assert result.interest_saved == 0
        assert result.months_saved == 0
        assert result.new_effective_monthly_payment == result.original_emi

    def test_original_totals_use_precise_emi(self):
        result = calculate_prepayment_savings(PrepaymentInput(LOAN))
        emi = precise_emi(1_000_000, 5, 25)

        assert result.original_total_payment == round_currency(emi * 300)
        assert result.original_total_interest == result.original_total_payment - 1_000_000

    def test_extra_monthly_payment(self):
        result = calculate_prepayment_savings(PrepaymentInput(LOAN, extra_monthly_payment=2_000))

        assert result.new_tenure_months < 300
        assert result.months_saved == 300 - result.new_tenure_months
        assert result.interest_saved > 0
        assert result.new_total_interest < result.original_total_interest

    def test_extra_payment_monotonicity(self):
        """More extra each month never lengthens the loan or saves less."""
        results = [
            calculate_prepayment_savings(PrepaymentInput(LOAN, extra_monthly_payment=extra))
            for extra in [0, 250, 500, 1_000, 2_000, 5_000, 20_000]
        ]

        for prev, curr in zip(results, results[1:]):
            assert curr.new_tenure_months <= prev.new_tenure_months
            assert curr.interest_saved >= prev.interest_saved

    def test_lump_sum(self):
        result = calculate_prepayment_savings(PrepaymentInput(
            LOAN, lump_sum_amount=200_000, lump_sum_after_month=24,
        ))

        assert result.new_tenure_months < 300
        assert result.interest_saved > 0

    def test_earlier_lump_sum_saves_more(self):
        early = calculate_prepayment_savings(PrepaymentInput(LOAN, lump_sum_amount=100_000, lump_sum_after_month=6))
        late = calculate_prepayment_savings(PrepaymentInput(LOAN, lump_sum_amount=100_000, lump_sum_after_month=120))

        assert early.interest_saved > late.interest_saved

    def test_lump_sum_larger_than_balance_settles_loan(self):
        terms = LoanTerms(principal=100_000, annual_rate_percent=5, years=10)
        result = calculate_prepayment_savings(PrepaymentInput(
            terms, lump_sum_amount=1_000_000, lump_sum_after_month=12,
        ))

        assert result.new_tenure_months == 12
        assert result.months_saved == 108

    def test_lump_sum_after_payoff_month_is_ignored(self):
        base = calculate_prepayment_savings(PrepaymentInput(LOAN, extra_monthly_payment=5_000))
        with_late_lump = calculate_prepayment_savings(PrepaymentInput(
            LOAN, extra_monthly_payment=5_000, lump_sum_amount=50_000, lump_sum_after_month=299,
        ))

        assert with_late_lump == base

    def test_combined_beats_either_alone(self):
        extra_only = calculate_prepayment_savings(PrepaymentInput(LOAN, extra_monthly_payment=1_000))
        lump_only = calculate_prepayment_savings(PrepaymentInput(LOAN, lump_sum_amount=100_000))
        combined = calculate_prepayment_savings(PrepaymentInput(
            LOAN, extra_monthly_payment=1_000, lump_sum_amount=100_000,
        ))

        assert combined.interest_saved > extra_only.interest_saved
        assert combined.interest_saved > lump_only.interest_saved

    def test_zero_rate(self):
        terms = LoanTerms(principal=120_000, annual_rate_percent=0, years=10)
        result = calculate_prepayment_savings(PrepaymentInput(terms, extra_monthly_payment=1_000))

        assert result.new_tenure_months == 60
        assert result.new_total_interest == 0
        assert result.interest_saved == 0
        assert result.new_total_payment == 120_000
        assert result.new_effective_monthly_payment == 2_000

    @pytest.mark.parametrize("terms", [
        LoanTerms(0, 5, 25),
        LoanTerms(500_000, -1, 25),
        LoanTerms(500_000, 5, 0),
    ])
    def test_degenerate(self, terms):
        result = calculate_prepayment_savings(PrepaymentInput(terms, extra_monthly_payment=1_000))

        assert result.original_tenure_months == 0
        assert result.new_tenure_months == 0
        assert result.interest_saved == 0
        assert result.new_effective_monthly_payment == 0


class TestFindExtraForTargetTenure:

    def test_reaches_target(self):
        extra = find_extra_for_target_tenure(LOAN, 180)
        result = calculate_prepayment_savings(PrepaymentInput(LOAN, extra_monthly_payment=extra))

        assert extra > 0
        assert result.new_tenure_months <= 180

    def test_target_already_met(self):
        assert find_extra_for_target_tenure(LOAN, 300) == 0.0
        assert find_extra_for_target_tenure(LOAN, 400) == 0.0

    def test_impossible_target(self):
        assert find_extra_for_target_tenure(LOAN, 0) is None
        assert find_extra_for_target_tenure(LoanTerms(0, 5, 25), 120) is None


class TestComparePrepaymentStrategies:

    def test_strategy_rows(self):
        df = compare_prepayment_strategies(LOAN)

        assert len(df) == 6
        assert df.iloc[0]['strategy'] == 'Original Schedule'
        assert df.iloc[0]['interest_saved'] == 0
        assert df.iloc[0]['tenure_months'] == 300

    def test_larger_extra_saves_more(self):
        df = compare_prepayment_strategies(LOAN, extra_amounts=[500, 1_000, 2_000])
        saved = df[df['strategy'].str.startswith('+')]['interest_saved'].tolist()

        assert saved == sorted(saved)

    def test_extra_emi_per_year_in_whole_cents(self):
        df = compare_prepayment_strategies(LOAN)
        row = df[df['strategy'] == '1 Extra EMI/Year'].iloc[0]
        emi = precise_emi(1_000_000, 5, 25)

        assert row['extra_monthly'] == round_currency(emi / 12 * 100) / 100
        assert abs(row['extra_monthly'] - emi / 12) <= 0.005
        assert row['months_saved'] > 0

    def test_includes_lump_sum(self):
        df = compare_prepayment_strategies(LOAN, lump_sum=150_000, lump_sum_after_month=36)

        assert len(df) == 7
        assert df['strategy'].str.contains('lump sum').any()
