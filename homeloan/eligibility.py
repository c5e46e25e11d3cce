"""Debt-burden eligibility, loan sizing and down-payment policy."""

import logging
from dataclasses import dataclass
from typing import Optional

from .emi import LoanTerms, calculate_emi, is_degenerate, monthly_rate, round_currency
from .policy import (
    CREDIT_CARD_OBLIGATION_RATE,
    DBR_LIMIT_PERCENT,
    DBR_MESSAGES,
    DBR_MISSING_SALARY_MESSAGE,
    DOWN_PAYMENT_PRICE_THRESHOLD,
    DOWN_PAYMENT_TIERS,
    TYPICAL_ANNUAL_RATE_PERCENT,
    TYPICAL_TENURE_YEARS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBRInput:
    monthly_salary: float
    existing_emis: float
    new_emi: float
    credit_card_limits: Optional[float] = None  # total limits across all cards


@dataclass(frozen=True)
class DBRResult:
    dbr_percent: float
    within_guideline: bool
    message: str
    available_emi: int  # monthly EMI room left under the DBR ceiling


@dataclass(frozen=True)
class EligibilityResult:
    eligible: bool
    ratio: int  # liabilities as whole percent of salary
    message: str
    max_loan_amount: int


@dataclass(frozen=True)
class AffordabilityResult:
    """Largest loan and property a salary supports under the DBR ceiling."""

    max_emi: float
    max_loan: int
    max_property: int
    dbr_percent: int
    verified_emi: int
    total_payment: int
    total_interest: int


ZERO_AFFORDABILITY = AffordabilityResult(
    max_emi=0, max_loan=0, max_property=0, dbr_percent=0,
    verified_emi=0, total_payment=0, total_interest=0,
)


def _dbr_message(dbr_percent: float) -> str:
    for upper, message in DBR_MESSAGES:
        if dbr_percent <= upper:
            return message
    return DBR_MESSAGES[-1][1]


def calculate_dbr(dbr_input: DBRInput) -> DBRResult:
    """Calculate Debt Burden Ratio per UAE Central Bank guidelines.

    DBR = (existing EMIs + 5% of card limits + new EMI) / salary * 100

    Banks treat 5% of the total credit card limit as a standing monthly
    obligation whether or not the cards carry a balance.
    """
    salary = dbr_input.monthly_salary
    if salary <= 0:
        logger.debug("Non-positive salary %s, DBR not computed", salary)
        return DBRResult(
            dbr_percent=0.0,
            within_guideline=False,
            message=DBR_MISSING_SALARY_MESSAGE,
            available_emi=0,
        )

    card_obligation = (dbr_input.credit_card_limits or 0.0) * CREDIT_CARD_OBLIGATION_RATE
    existing_obligations = dbr_input.existing_emis + card_obligation
    total_obligations = existing_obligations + dbr_input.new_emi

    dbr_percent = round_currency(total_obligations / salary * 10000) / 100
    max_obligations = salary * DBR_LIMIT_PERCENT / 100
    available = max(0.0, max_obligations - existing_obligations)

    return DBRResult(
        dbr_percent=dbr_percent,
        within_guideline=dbr_percent <= DBR_LIMIT_PERCENT,
        message=_dbr_message(dbr_percent),
        available_emi=round_currency(available),
    )


def reverse_emi_to_loan(max_emi: float, annual_rate_percent: float, years: int) -> int:
    """Reverse-calculate the loan amount a given monthly installment repays.

    Loan = EMI * ((1+r)^n - 1) / (r * (1+r)^n)
    """
    if is_degenerate(max_emi, annual_rate_percent, years):
        return 0

    n = years * 12
    if annual_rate_percent == 0:
        return round_currency(max_emi * n)

    r = monthly_rate(annual_rate_percent)
    compound = (1 + r) ** n
    return round_currency(max_emi * (compound - 1) / (r * compound))


def min_down_payment_percent(is_resident: bool, is_first_time_buyer: bool, property_price: float) -> float:
    """Minimum down payment percentage under Central Bank LTV caps."""
    tier = DOWN_PAYMENT_TIERS[(bool(is_resident), bool(is_first_time_buyer))]
    if property_price <= DOWN_PAYMENT_PRICE_THRESHOLD:
        return tier.up_to_threshold
    return tier.above_threshold


def down_payment_percent(property_price: float, down_payment: float) -> float:
    if property_price <= 0:
        return 0.0
    return round_currency(down_payment / property_price * 100 * 100) / 100


def loan_to_value(property_price: float, down_payment: float) -> float:
    """Loan-to-value ratio as a percent with 2-decimal precision."""
    if property_price <= 0:
        return 0.0
    return round_currency((property_price - down_payment) / property_price * 100 * 100) / 100


def check_eligibility(
    monthly_salary: float,
    total_liabilities: float,
    annual_rate_percent: float = TYPICAL_ANNUAL_RATE_PERCENT,
    years: int = TYPICAL_TENURE_YEARS,
) -> EligibilityResult:
    """Quick eligibility check: liabilities must stay under half the salary.

    The maximum loan is sized from the remaining EMI capacity at a typical
    market rate and tenure.
    """
    if monthly_salary <= 0:
        return EligibilityResult(
            eligible=False,
            ratio=0,
            message="Monthly salary must be greater than 0.",
            max_loan_amount=0,
        )

    ratio = total_liabilities / monthly_salary
    eligible = ratio * 100 < DBR_LIMIT_PERCENT
    capacity = max(0.0, monthly_salary * DBR_LIMIT_PERCENT / 100 - total_liabilities)
    max_loan = reverse_emi_to_loan(capacity, annual_rate_percent, years) if eligible else 0

    return EligibilityResult(
        eligible=eligible,
        ratio=round_currency(ratio * 100),
        message=(
            "You are eligible for a mortgage!"
            if eligible
            else "Your liabilities are too high. Reduce debt to qualify."
        ),
        max_loan_amount=max_loan,
    )


def calculate_affordability(
    monthly_salary: float,
    existing_emis: float,
    annual_rate_percent: float,
    years: int,
    down_payment_percent: float,
) -> AffordabilityResult:
    """Calculate maximum affordable loan and property price.

    Max EMI is whatever fits under the DBR ceiling after existing EMIs; the
    loan is sized by reversing the annuity formula and then verified with a
    forward EMI calculation.
    """
    if monthly_salary <= 0:
        return ZERO_AFFORDABILITY

    max_emi = max(0.0, monthly_salary * DBR_LIMIT_PERCENT / 100 - existing_emis)
    if max_emi <= 0:
        return AffordabilityResult(
            max_emi=0,
            max_loan=0,
            max_property=0,
            dbr_percent=round_currency(existing_emis / monthly_salary * 100),
            verified_emi=0,
            total_payment=0,
            total_interest=0,
        )

    max_loan = reverse_emi_to_loan(max_emi, annual_rate_percent, years)
    if down_payment_percent < 100:
        max_property = round_currency(max_loan / (1 - down_payment_percent / 100))
    else:
        max_property = 0

    verified = calculate_emi(LoanTerms(max_loan, annual_rate_percent, years))

    return AffordabilityResult(
        max_emi=max_emi,
        max_loan=max_loan,
        max_property=max_property,
        dbr_percent=round_currency((existing_emis + max_emi) / monthly_salary * 100),
        verified_emi=verified.monthly_installment,
        total_payment=verified.total_payment,
        total_interest=verified.total_interest,
    )
