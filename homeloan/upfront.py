"""One-time transaction costs for a UAE property purchase with a mortgage."""

import logging
from dataclasses import dataclass
from typing import Optional

from .emi import round_currency
from .policy import (
    BANK_PROCESSING_FLOOR,
    BANK_PROCESSING_RATE,
    DEFAULT_VALUATION_FEE,
    VAT_RATE,
    Jurisdiction,
    PropertyReadiness,
    fee_schedule,
    trustee_fee_for,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpfrontCostInput:
    property_price: float
    loan_amount: float
    jurisdiction: Jurisdiction
    agent_commission_percent: float  # e.g., 2 for 2%
    include_vat: bool
    valuation_fee: Optional[float] = None  # None uses DEFAULT_VALUATION_FEE
    readiness: PropertyReadiness = PropertyReadiness.READY


@dataclass(frozen=True)
class UpfrontCostResult:
    dld_fee: int
    oqood_fee: int  # off-plan registration, replaces the transfer fee
    admin_fee: int
    mortgage_registration: int
    trustee_fee: int
    bank_processing_fee: int
    valuation_fee: int
    agent_commission: int
    vat: int
    total_fees: int
    total_upfront_cash: int  # down payment + total fees

    @property
    def line_items(self) -> dict:
        """Named fee components, excluding totals."""
        return {
            'dld_fee': self.dld_fee,
            'oqood_fee': self.oqood_fee,
            'admin_fee': self.admin_fee,
            'mortgage_registration': self.mortgage_registration,
            'trustee_fee': self.trustee_fee,
            'bank_processing_fee': self.bank_processing_fee,
            'valuation_fee': self.valuation_fee,
            'agent_commission': self.agent_commission,
            'vat': self.vat,
        }


ZERO_UPFRONT_COSTS = UpfrontCostResult(
    dld_fee=0, oqood_fee=0, admin_fee=0, mortgage_registration=0, trustee_fee=0,
    bank_processing_fee=0, valuation_fee=0, agent_commission=0, vat=0,
    total_fees=0, total_upfront_cash=0,
)


def calculate_upfront_costs(cost_input: UpfrontCostInput, down_payment: float) -> UpfrontCostResult:
    """Calculate the fee breakdown and cash needed at transfer.

    Args:
        cost_input: Property, loan and jurisdiction details
        down_payment: Cash paid towards the price, added to the fees

    Returns:
        UpfrontCostResult with every fee line item and the totals
    """
    price = cost_input.property_price
    if price <= 0:
        logger.debug("Non-positive property price %s, zero upfront costs", price)
        return ZERO_UPFRONT_COSTS

    loan = max(0.0, cost_input.loan_amount)
    fees = fee_schedule(cost_input.jurisdiction)

    # Transfer fee, or Oqood registration for off-plan where the jurisdiction has it
    off_plan = fees.off_plan_registration and cost_input.readiness == PropertyReadiness.OFF_PLAN
    transfer = round_currency(price * fees.transfer_fee_rate)
    dld_fee = 0 if off_plan else transfer
    oqood_fee = transfer if off_plan else 0

    admin_fee = round_currency(fees.admin_fee)
    mortgage_registration = (
        round_currency(loan * fees.mortgage_registration_rate)
        + round_currency(fees.mortgage_registration_surcharge)
    )
    trustee_fee = round_currency(trustee_fee_for(fees, price))

    bank_processing_fee = 0
    if loan > 0:
        bank_processing_fee = max(round_currency(loan * BANK_PROCESSING_RATE), BANK_PROCESSING_FLOOR)

    agent_commission = round_currency(price * cost_input.agent_commission_percent / 100)
    valuation_fee = round_currency(
        DEFAULT_VALUATION_FEE if cost_input.valuation_fee is None else cost_input.valuation_fee
    )

    vat = 0
    if cost_input.include_vat:
        vatable = bank_processing_fee + valuation_fee + agent_commission + trustee_fee
        vat = round_currency(vatable * VAT_RATE)

    total_fees = (
        dld_fee
        + oqood_fee
        + admin_fee
        + mortgage_registration
        + trustee_fee
        + bank_processing_fee
        + valuation_fee
        + agent_commission
        + vat
    )

    return UpfrontCostResult(
        dld_fee=dld_fee,
        oqood_fee=oqood_fee,
        admin_fee=admin_fee,
        mortgage_registration=mortgage_registration,
        trustee_fee=trustee_fee,
        bank_processing_fee=bank_processing_fee,
        valuation_fee=valuation_fee,
        agent_commission=agent_commission,
        vat=vat,
        total_fees=total_fees,
        total_upfront_cash=round_currency(down_payment + total_fees),
    )
