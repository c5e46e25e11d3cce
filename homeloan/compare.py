"""Side-by-side comparison of loan offers on the same property."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .emi import LoanTerms, calculate_emi, round_currency

MAX_SCENARIOS = 5


@dataclass(frozen=True)
class LoanScenario:
    """A rate and tenure offered by a bank."""

    name: str
    annual_rate_percent: float
    years: int


@dataclass(frozen=True)
class ScenarioOutcome:
    name: str
    annual_rate_percent: float
    years: int
    emi: int
    total_payment: int
    total_interest: int
    interest_percent: int  # total interest as whole percent of the loan


@dataclass(frozen=True)
class ScenarioComparison:
    loan_amount: int
    outcomes: List[ScenarioOutcome]
    best_emi_index: Optional[int]
    best_total_index: Optional[int]
    best_interest_index: Optional[int]


def _argmin(values: Sequence[int]) -> Optional[int]:
    if len(values) == 0:
        return None
    return int(np.argmin(np.asarray(values)))


def compare_loan_scenarios(
    property_price: float,
    down_payment_percent: float,
    scenarios: Sequence[LoanScenario],
) -> ScenarioComparison:
    """Compute EMI and totals for each scenario and pick the cheapest.

    Ties go to the earliest scenario.
    """
    down_payment = round_currency(property_price * down_payment_percent / 100)
    loan_amount = max(0, round_currency(property_price) - down_payment)

    outcomes = []
    for scenario in scenarios:
        emi = calculate_emi(LoanTerms(loan_amount, scenario.annual_rate_percent, scenario.years))
        outcomes.append(ScenarioOutcome(
            name=scenario.name,
            annual_rate_percent=scenario.annual_rate_percent,
            years=scenario.years,
            emi=emi.monthly_installment,
            total_payment=emi.total_payment,
            total_interest=emi.total_interest,
            interest_percent=round_currency(emi.total_interest / loan_amount * 100) if loan_amount > 0 else 0,
        ))

    return ScenarioComparison(
        loan_amount=loan_amount,
        outcomes=outcomes,
        best_emi_index=_argmin([o.emi for o in outcomes]),
        best_total_index=_argmin([o.total_payment for o in outcomes]),
        best_interest_index=_argmin([o.total_interest for o in outcomes]),
    )


def comparison_to_frame(comparison: ScenarioComparison) -> pd.DataFrame:
    columns = ['scenario', 'rate', 'years', 'emi', 'total_payment', 'total_interest', 'interest_percent']
    rows = [
        [o.name, o.annual_rate_percent, o.years, o.emi, o.total_payment, o.total_interest, o.interest_percent]
        for o in comparison.outcomes
    ]
    return pd.DataFrame(rows, columns=columns)
