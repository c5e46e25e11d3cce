"""Tests for loan scenario comparison."""

from homeloan.compare import LoanScenario, compare_loan_scenarios, comparison_to_frame
from homeloan.emi import LoanTerms, calculate_emi

SCENARIOS = [
    LoanScenario(name="25y @ 4%", annual_rate_percent=4.0, years=25),
    LoanScenario(name="15y @ 4%", annual_rate_percent=4.0, years=15),
    LoanScenario(name="25y @ 5%", annual_rate_percent=5.0, years=25),
]


class TestCompareLoanScenarios:

    def test_loan_amount(self):
        comparison = compare_loan_scenarios(1_500_000, 20, SCENARIOS)
        assert comparison.loan_amount == 1_200_000

    def test_outcomes_match_emi(self):
        comparison = compare_loan_scenarios(1_500_000, 20, SCENARIOS)

        for scenario, outcome in zip(SCENARIOS, comparison.outcomes):
            emi = calculate_emi(LoanTerms(1_200_000, scenario.annual_rate_percent, scenario.years))
            assert outcome.emi == emi.monthly_installment
            assert outcome.total_payment == emi.total_payment
            assert outcome.total_interest == emi.total_interest

    def test_best_indices(self):
        comparison = compare_loan_scenarios(1_500_000, 20, SCENARIOS)

        # Longest tenure at the lowest rate has the smallest EMI
        assert comparison.best_emi_index == 0
        # Shorter tenure pays the least overall
        assert comparison.best_total_index == 1
        assert comparison.best_interest_index == 1

    def test_ties_go_to_first(self):
        twins = [LoanScenario("A", 4.5, 20), LoanScenario("B", 4.5, 20)]
        comparison = compare_loan_scenarios(1_000_000, 25, twins)

        assert comparison.best_emi_index == 0
        assert comparison.best_total_index == 0

    def test_interest_percent(self):
        comparison = compare_loan_scenarios(1_000_000, 0, [LoanScenario("flat", 0, 10)])

        assert comparison.outcomes[0].interest_percent == 0
        assert comparison.outcomes[0].emi == round(1_000_000 / 120)

    def test_no_scenarios(self):
        comparison = compare_loan_scenarios(1_500_000, 20, [])

        assert comparison.outcomes == []
        assert comparison.best_emi_index is None
        assert comparison.best_total_index is None
        assert comparison.best_interest_index is None

    def test_full_down_payment(self):
        comparison = compare_loan_scenarios(1_000_000, 100, SCENARIOS)

        assert comparison.loan_amount == 0
        assert all(o.emi == 0 and o.interest_percent == 0 for o in comparison.outcomes)


class TestComparisonFrame:

    def test_frame(self):
        df = comparison_to_frame(compare_loan_scenarios(1_500_000, 20, SCENARIOS))

        assert len(df) == 3
        assert df['scenario'].tolist() == ["25y @ 4%", "15y @ 4%", "25y @ 5%"]
        assert df['emi'].is_unique
