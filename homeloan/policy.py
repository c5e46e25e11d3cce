"""Policy tables for UAE mortgage fees, debt-burden limits and down payments.

Calculators read every percentage, floor and tier from this module so that a
new jurisdiction or a changed Central Bank rule is a data edit, not a code
change.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Jurisdiction(Enum):
    """Emirate in which the property transfer is registered."""
    DUBAI = "dubai"
    ABU_DHABI = "abu_dhabi"
    SHARJAH = "sharjah"
    OTHER = "other"


class PropertyReadiness(Enum):
    READY = "ready"
    OFF_PLAN = "off_plan"  # under construction


@dataclass(frozen=True)
class JurisdictionFees:
    """One-time government and conveyancing fees for a jurisdiction."""

    transfer_fee_rate: float  # fraction of property price
    mortgage_registration_rate: float  # fraction of loan amount
    mortgage_registration_surcharge: float = 0.0  # flat, added to registration
    admin_fee: float = 0.0  # flat land-department admin/knowledge fee
    trustee_fee_bands: Tuple[Tuple[float, float], ...] = ()  # (max price, fee), ascending
    off_plan_registration: bool = False  # Oqood replaces transfer fee for off-plan


FEE_SCHEDULES: Dict[Jurisdiction, JurisdictionFees] = {
    Jurisdiction.DUBAI: JurisdictionFees(
        transfer_fee_rate=0.04,
        mortgage_registration_rate=0.0025,
        mortgage_registration_surcharge=290,
        admin_fee=580,
        trustee_fee_bands=((500_000, 2_000), (float("inf"), 4_000)),
        off_plan_registration=True,
    ),
    Jurisdiction.ABU_DHABI: JurisdictionFees(
        transfer_fee_rate=0.02,
        mortgage_registration_rate=0.001,
    ),
    Jurisdiction.SHARJAH: JurisdictionFees(
        transfer_fee_rate=0.04,
        mortgage_registration_rate=0.0025,
    ),
    Jurisdiction.OTHER: JurisdictionFees(
        transfer_fee_rate=0.04,
        mortgage_registration_rate=0.0025,
    ),
}

# Bank-side charges
BANK_PROCESSING_RATE = 0.01  # of loan amount
BANK_PROCESSING_FLOOR = 5_000
DEFAULT_VALUATION_FEE = 3_000
DEFAULT_AGENT_COMMISSION_PERCENT = 2.0

# VAT on taxable services (processing, valuation, commission, trustee)
VAT_RATE = 0.05

# Debt burden ratio (UAE Central Bank)
DBR_LIMIT_PERCENT = 50.0
CREDIT_CARD_OBLIGATION_RATE = 0.05  # of total card limits, treated as monthly obligation

# Advisory tiers checked in order: (upper bound %, message)
DBR_MESSAGES: Tuple[Tuple[float, str], ...] = (
    (40.0, "Excellent - well within UAE Central Bank guideline (<=50%)"),
    (50.0, "Within guideline but near limit - banks may apply conditions"),
    (60.0, "Above guideline - most banks will decline without adjustments"),
    (float("inf"), "Significantly above guideline - reduce liabilities before applying"),
)
DBR_MISSING_SALARY_MESSAGE = "Enter salary to check DBR"

# Defaults used by the simple eligibility check
TYPICAL_ANNUAL_RATE_PERCENT = 4.5
TYPICAL_TENURE_YEARS = 25


@dataclass(frozen=True)
class DownPaymentTier:
    """Minimum down payment (% of price) below and above the price threshold."""

    up_to_threshold: float
    above_threshold: float


DOWN_PAYMENT_PRICE_THRESHOLD = 5_000_000  # inclusive

# Keyed by (is_resident, is_first_time_buyer); first-time status is ignored for non-residents
DOWN_PAYMENT_TIERS: Dict[Tuple[bool, bool], DownPaymentTier] = {
    (False, True): DownPaymentTier(40.0, 50.0),
    (False, False): DownPaymentTier(40.0, 50.0),
    (True, True): DownPaymentTier(20.0, 30.0),
    (True, False): DownPaymentTier(25.0, 35.0),
}


def fee_schedule(jurisdiction: Jurisdiction) -> JurisdictionFees:
    """Look up the fee schedule, falling back to the generic one."""
    return FEE_SCHEDULES.get(jurisdiction, FEE_SCHEDULES[Jurisdiction.OTHER])


def trustee_fee_for(fees: JurisdictionFees, property_price: float) -> float:
    """Flat trustee fee for the band the price falls in (0 without bands)."""
    for max_price, fee in fees.trustee_fee_bands:
        if property_price <= max_price:
            return fee
    return 0.0
