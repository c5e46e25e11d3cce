"""Early settlement and extra payment calculations."""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from .emi import LoanTerms, precise_emi, round_currency

logger = logging.getLogger(__name__)

DEFAULT_LUMP_SUM_MONTH = 12
DEFAULT_EXTRA_AMOUNTS = (500, 1000, 2000, 5000)


@dataclass(frozen=True)
class PrepaymentInput:
    """A loan plus an optional one-time and/or recurring extra payment."""

    terms: LoanTerms
    lump_sum_amount: float = 0.0
    lump_sum_after_month: int = DEFAULT_LUMP_SUM_MONTH  # month the lump sum is paid
    extra_monthly_payment: float = 0.0


@dataclass(frozen=True)
class PrepaymentResult:
    original_tenure_months: int
    new_tenure_months: int
    months_saved: int
    original_total_interest: int
    new_total_interest: int
    interest_saved: int
    original_total_payment: int
    new_total_payment: int
    original_emi: int
    new_effective_monthly_payment: int


ZERO_PREPAYMENT = PrepaymentResult(
    original_tenure_months=0, new_tenure_months=0, months_saved=0,
    original_total_interest=0, new_total_interest=0, interest_saved=0,
    original_total_payment=0, new_total_payment=0,
    original_emi=0, new_effective_monthly_payment=0,
)


def calculate_prepayment_savings(prepayment: PrepaymentInput) -> PrepaymentResult:
    """Simulate payoff with extra payments and compare to the original schedule.

    Each month interest accrues on the balance, the original EMI is paid, then
    any extra monthly amount and, on the designated month only, the lump sum.
    Extra amounts are capped so the balance never goes negative. The loop stops
    at payoff or after twice the original number of months.

    Most UAE banks charge an early settlement fee on the amount prepaid; the
    savings reported here are gross of that fee.
    """
    terms = prepayment.terms
    emi = precise_emi(terms.principal, terms.annual_rate_percent, terms.years)
    if terms.is_degenerate or emi <= 0:
        logger.debug("Degenerate loan terms %s, zero prepayment result", terms)
        return ZERO_PREPAYMENT

    original_months = terms.months
    original_total_payment = round_currency(emi * original_months)
    original_total_interest = round_currency(original_total_payment - terms.principal)

    lump_sum = max(0.0, prepayment.lump_sum_amount)
    extra = max(0.0, prepayment.extra_monthly_payment)

    if lump_sum <= 0 and extra <= 0:
        return PrepaymentResult(
            original_tenure_months=original_months,
            new_tenure_months=original_months,
            months_saved=0,
            original_total_interest=original_total_interest,
            new_total_interest=original_total_interest,
            interest_saved=0,
            original_total_payment=original_total_payment,
            new_total_payment=original_total_payment,
            original_emi=round_currency(emi),
            new_effective_monthly_payment=round_currency(emi),
        )

    r = 0.0 if terms.annual_rate_percent == 0 else terms.monthly_rate
    balance = float(terms.principal)
    total_interest = 0.0
    total_paid = 0.0
    month = 0
    max_months = original_months * 2  # Safety limit

    while balance > 0.01 and month < max_months:
        month += 1

        interest = balance * r
        total_interest += interest

        payment = min(emi, balance + interest)
        principal_paid = payment - interest

        if extra > 0:
            extra_principal = min(extra, balance - principal_paid)
            if extra_principal > 0:
                principal_paid += extra_principal
                payment += extra_principal

        if lump_sum > 0 and month == prepayment.lump_sum_after_month:
            lump_principal = min(lump_sum, balance - principal_paid)
            if lump_principal > 0:
                principal_paid += lump_principal
                payment += lump_principal

        balance = max(0.0, balance - principal_paid)
        total_paid += payment

    new_total_interest = round_currency(total_interest)
    new_total_payment = round_currency(total_paid)

    return PrepaymentResult(
        original_tenure_months=original_months,
        new_tenure_months=month,
        months_saved=max(0, original_months - month),
        original_total_interest=original_total_interest,
        new_total_interest=new_total_interest,
        interest_saved=max(0, original_total_interest - new_total_interest),
        original_total_payment=original_total_payment,
        new_total_payment=new_total_payment,
        original_emi=round_currency(emi),
        new_effective_monthly_payment=round_currency(new_total_payment / month) if month > 0 else 0,
    )


def find_extra_for_target_tenure(terms: LoanTerms, target_months: int) -> Optional[float]:
    """Find the extra monthly payment needed to pay off in target months.

    Returns None if target is not achievable (non-positive or degenerate loan).
    """
    if terms.is_degenerate or target_months <= 0:
        return None

    if target_months >= terms.months:
        return 0.0

    # Binary search for the right extra payment
    low = 0.0
    high = float(terms.principal)  # paying it all in month one always works

    while high - low > 0.5:
        mid = (low + high) / 2
        result = calculate_prepayment_savings(PrepaymentInput(terms, extra_monthly_payment=mid))

        if result.new_tenure_months > target_months:
            low = mid
        else:
            high = mid

    return float(math.ceil(high))


def compare_prepayment_strategies(
    terms: LoanTerms,
    extra_amounts: Sequence[float] = DEFAULT_EXTRA_AMOUNTS,
    lump_sum: float = 0.0,
    lump_sum_after_month: int = DEFAULT_LUMP_SUM_MONTH,
) -> pd.DataFrame:
    """Compare common prepayment strategies against the original schedule."""
    strategies = []

    def add(name: str, extra: float, lump: float) -> None:
        result = calculate_prepayment_savings(PrepaymentInput(
            terms,
            lump_sum_amount=lump,
            lump_sum_after_month=lump_sum_after_month,
            extra_monthly_payment=extra,
        ))
        strategies.append({
            'strategy': name,
            'extra_monthly': extra,
            'lump_sum': lump,
            'tenure_months': result.new_tenure_months,
            'total_interest': result.new_total_interest,
            'interest_saved': result.interest_saved,
            'months_saved': result.months_saved,
        })

    # Baseline
    add('Original Schedule', 0.0, 0.0)

    for extra in extra_amounts:
        add(f'+AED {extra:,.0f}/month', float(extra), 0.0)

    if lump_sum > 0:
        add(f'AED {lump_sum:,.0f} lump sum in month {lump_sum_after_month}', 0.0, lump_sum)

    # One extra EMI per year, spread monthly
    emi = precise_emi(terms.principal, terms.annual_rate_percent, terms.years)
    add('1 Extra EMI/Year', round_currency(emi / 12 * 100) / 100, 0.0)

    return pd.DataFrame(strategies)
