"""Month-by-month and year-by-year amortization schedules."""

import logging
import math
from dataclasses import asdict, dataclass
from typing import List

import pandas as pd

from .emi import LoanTerms, precise_emi, round_currency

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = [
    'month',
    'year',
    'opening_balance',
    'emi',
    'principal_portion',
    'interest_portion',
    'closing_balance',
    'cumulative_interest',
    'cumulative_principal',
]


@dataclass(frozen=True)
class AmortizationEntry:
    """One monthly row of a schedule, rounded to whole currency units."""

    month: int
    year: int
    opening_balance: int
    emi: int
    principal_portion: int
    interest_portion: int
    closing_balance: int
    cumulative_interest: int
    cumulative_principal: int


@dataclass(frozen=True)
class YearlySummary:
    year: int
    total_principal: int
    total_interest: int
    total_payment: int
    closing_balance: int  # balance at the end of the year


def generate_amortization_schedule(terms: LoanTerms) -> List[AmortizationEntry]:
    """Generate full amortization schedule.

    The precise (unrounded) EMI drives every month; only the stored fields are
    rounded. The final month pays off whatever balance is left, so the last
    closing balance is exactly zero regardless of floating-point drift.
    """
    if terms.is_degenerate:
        logger.debug("Degenerate loan terms %s, empty schedule", terms)
        return []

    emi = precise_emi(terms.principal, terms.annual_rate_percent, terms.years)
    if emi <= 0:
        return []

    r = terms.monthly_rate
    months = terms.months
    schedule = []
    balance = float(terms.principal)
    cumulative_interest = 0.0
    cumulative_principal = 0.0

    for month in range(1, months + 1):
        interest = 0.0 if terms.annual_rate_percent == 0 else balance * r
        principal_paid = emi - interest

        # Final payment clears the balance
        if month == months:
            principal_paid = balance

        closing = max(0.0, balance - principal_paid)
        cumulative_interest += interest
        cumulative_principal += principal_paid

        schedule.append(AmortizationEntry(
            month=month,
            year=math.ceil(month / 12),
            opening_balance=round_currency(balance),
            emi=round_currency(emi),
            principal_portion=round_currency(principal_paid),
            interest_portion=round_currency(interest),
            closing_balance=round_currency(closing),
            cumulative_interest=round_currency(cumulative_interest),
            cumulative_principal=round_currency(cumulative_principal),
        ))

        balance = closing

    return schedule


def schedule_to_frame(schedule: List[AmortizationEntry]) -> pd.DataFrame:
    """Convert schedule rows to a DataFrame (one column per entry field)."""
    if not schedule:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)
    return pd.DataFrame([asdict(entry) for entry in schedule], columns=SCHEDULE_COLUMNS)


def summarize_by_year(schedule: List[AmortizationEntry]) -> List[YearlySummary]:
    """Fold monthly rows into per-year totals, keeping the last balance seen."""
    if not schedule:
        return []

    yearly = schedule_to_frame(schedule).groupby('year', sort=True).agg(
        total_principal=('principal_portion', 'sum'),
        total_interest=('interest_portion', 'sum'),
        total_payment=('emi', 'sum'),
        closing_balance=('closing_balance', 'last'),
    ).reset_index()

    return [
        YearlySummary(
            year=int(row.year),
            total_principal=int(row.total_principal),
            total_interest=int(row.total_interest),
            total_payment=int(row.total_payment),
            closing_balance=int(row.closing_balance),
        )
        for row in yearly.itertuples(index=False)
    ]


def yearly_summary(terms: LoanTerms) -> List[YearlySummary]:
    """Summarize the amortization schedule by year."""
    return summarize_by_year(generate_amortization_schedule(terms))


def summary_to_frame(summary: List[YearlySummary]) -> pd.DataFrame:
    columns = ['year', 'total_principal', 'total_interest', 'total_payment', 'closing_balance']
    return pd.DataFrame([asdict(row) for row in summary], columns=columns)
