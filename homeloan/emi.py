"""Core installment (EMI) calculations."""

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoanTerms:
    """Represents a fixed-rate amortizing loan."""

    principal: float
    annual_rate_percent: float  # as percent, e.g., 4.5 for 4.5%
    years: int

    @property
    def months(self) -> int:
        return self.years * 12

    @property
    def monthly_rate(self) -> float:
        return monthly_rate(self.annual_rate_percent)

    @property
    def is_degenerate(self) -> bool:
        return is_degenerate(self.principal, self.annual_rate_percent, self.years)


@dataclass(frozen=True)
class EMIResult:
    monthly_installment: int
    total_payment: int
    total_interest: int
    principal: float


ZERO_EMI = EMIResult(monthly_installment=0, total_payment=0, total_interest=0, principal=0)


def round_currency(value: float) -> int:
    """Round to the nearest whole currency unit, halves rounding up."""
    return int(math.floor(value + 0.5))


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate to a monthly decimal rate."""
    return annual_rate_percent / 12 / 100


def is_degenerate(principal: float, annual_rate_percent: float, years: int) -> bool:
    """True when the loan cannot be amortized and results should be zero."""
    return principal <= 0 or years <= 0 or annual_rate_percent < 0


def precise_emi(principal: float, annual_rate_percent: float, years: int) -> float:
    """Unrounded monthly installment, used when chaining calculations.

    EMI = P * r * (1+r)^n / ((1+r)^n - 1)
    """
    if is_degenerate(principal, annual_rate_percent, years):
        return 0.0

    n = years * 12
    if annual_rate_percent == 0:
        return principal / n

    r = monthly_rate(annual_rate_percent)
    compound = (1 + r) ** n
    return principal * r * compound / (compound - 1)


def calculate_emi(terms: LoanTerms) -> EMIResult:
    """Calculate the rounded monthly installment and life-of-loan totals.

    Totals are derived from the rounded installment so that
    ``total_payment == monthly_installment * months``. A zero rate is simple
    division with no interest at all.
    """
    if terms.is_degenerate:
        logger.debug("Degenerate loan terms %s, returning zero EMI", terms)
        return ZERO_EMI

    emi = precise_emi(terms.principal, terms.annual_rate_percent, terms.years)
    installment = round_currency(emi)

    if terms.annual_rate_percent == 0:
        return EMIResult(
            monthly_installment=installment,
            total_payment=round_currency(terms.principal),
            total_interest=0,
            principal=terms.principal,
        )

    total_payment = installment * terms.months
    return EMIResult(
        monthly_installment=installment,
        total_payment=total_payment,
        total_interest=round_currency(total_payment - terms.principal),
        principal=terms.principal,
    )
