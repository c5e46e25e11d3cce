"""Tests for core EMI calculations."""

import pytest
from homeloan.emi import LoanTerms, calculate_emi, precise_emi, round_currency


class TestCalculateEMI:
    """Tests for the rounded public EMI."""

    def test_reference_value(self):
        """AED 1M at 5% over 25 years."""
        result = calculate_emi(LoanTerms(principal=1_000_000, annual_rate_percent=5, years=25))

        # Expected: ~AED 5,845/month, ~AED 753,500 interest
        assert abs(result.monthly_installment - 5845) <= 1
        assert abs(result.total_interest - 753_500) < 1_000
        assert result.principal == 1_000_000

    def test_totals_use_rounded_installment(self):
        """Total payment is the rounded installment times the months."""
        terms = LoanTerms(principal=850_000, annual_rate_percent=4.25, years=20)
        result = calculate_emi(terms)

        assert result.total_payment == result.monthly_installment * 240
        assert result.total_interest == result.total_payment - 850_000

    def test_zero_rate(self):
        """Test edge case of 0% interest."""
        result = calculate_emi(LoanTerms(principal=120_000, annual_rate_percent=0, years=10))

        assert result.monthly_installment == 1000
        assert result.total_payment == 120_000
        assert result.total_interest == 0

    @pytest.mark.parametrize("principal, rate, years", [
        (0, 5, 25),
        (-100_000, 5, 25),
        (500_000, 5, 0),
        (500_000, 5, -3),
        (500_000, -1, 25),
    ])
    def test_degenerate_inputs_return_zero(self, principal, rate, years):
        result = calculate_emi(LoanTerms(principal, rate, years))

        assert result.monthly_installment == 0
        assert result.total_payment == 0
        assert result.total_interest == 0
        assert result.principal == 0

    def test_shorter_tenure_pays_less_interest(self):
        """Test that a 15-year loan has higher EMI but less total interest."""
        long_loan = calculate_emi(LoanTerms(1_000_000, 4.5, 25))
        short_loan = calculate_emi(LoanTerms(1_000_000, 4.5, 15))

        assert short_loan.monthly_installment > long_loan.monthly_installment
        assert short_loan.total_interest < long_loan.total_interest


class TestPreciseEMI:
    """Tests for the unrounded EMI used internally."""

    def test_matches_rounded(self):
        emi = precise_emi(1_000_000, 5, 25)
        result = calculate_emi(LoanTerms(1_000_000, 5, 25))

        assert round_currency(emi) == result.monthly_installment
        assert emi != result.monthly_installment

    def test_zero_rate_is_division(self):
        assert precise_emi(100_000, 0, 5) == pytest.approx(100_000 / 60)

    def test_degenerate_is_zero(self):
        assert precise_emi(0, 5, 25) == 0.0
        assert precise_emi(100_000, -0.5, 25) == 0.0
        assert precise_emi(100_000, 5, 0) == 0.0


class TestLoanTerms:

    def test_derived_values(self):
        terms = LoanTerms(principal=500_000, annual_rate_percent=6, years=20)

        assert terms.months == 240
        assert terms.monthly_rate == pytest.approx(0.005)
        assert not terms.is_degenerate

    def test_degenerate_flag(self):
        assert LoanTerms(0, 5, 25).is_degenerate
        assert LoanTerms(100, -1, 25).is_degenerate


class TestRoundCurrency:

    @pytest.mark.parametrize("value, expected", [
        (2.5, 3),
        (2.4999, 2),
        (5845.9, 5846),
        (-2.5, -2),
        (-2.6, -3),
        (0.0, 0),
    ])
    def test_halves_round_up(self, value, expected):
        assert round_currency(value) == expected
