"""Multi-year rent versus buy comparison."""

import logging
from dataclasses import asdict, dataclass, field
from typing import List

import pandas as pd

from .emi import is_degenerate, monthly_rate, precise_emi, round_currency
from .policy import DEFAULT_AGENT_COMMISSION_PERCENT, Jurisdiction
from .upfront import UpfrontCostInput, calculate_upfront_costs

logger = logging.getLogger(__name__)

SNAPSHOT_COLUMNS = [
    'year',
    'cumulative_rent',
    'cumulative_buy_cost',
    'property_value',
    'equity',
    'net_buy_cost',
    'rent_advantage',
]


@dataclass(frozen=True)
class RentVsBuyInput:
    """Parameters for comparing renting against buying with a mortgage."""

    property_price: float
    down_payment_percent: float  # e.g., 20 for 20%
    annual_rate_percent: float
    loan_tenure_years: int
    monthly_rent: float
    annual_rent_increase_percent: float
    annual_property_appreciation_percent: float
    annual_maintenance_cost: float  # service charges and upkeep per year
    years_to_compare: int
    jurisdiction: Jurisdiction = Jurisdiction.DUBAI
    agent_commission_percent: float = DEFAULT_AGENT_COMMISSION_PERCENT
    include_vat: bool = True

    # Carried for callers that derive the down payment from policy; not used here
    is_resident: bool = True
    is_first_time_buyer: bool = True


@dataclass(frozen=True)
class RentVsBuyYearlySnapshot:
    year: int
    cumulative_rent: int
    cumulative_buy_cost: int  # upfront cash + EMIs + maintenance to date
    property_value: int
    equity: int  # property value - remaining loan
    net_buy_cost: int  # cumulative buy cost - equity
    rent_advantage: int  # positive = renting is cheaper


@dataclass(frozen=True)
class RentVsBuyResult:
    break_even_year: int  # 0 if buying never becomes cheaper within the horizon
    total_rent_cost: int
    total_buy_cost: int
    total_buy_cost_net: int
    final_property_value: int
    final_equity: int
    monthly_emi: int
    yearly_snapshots: List[RentVsBuyYearlySnapshot] = field(default_factory=list)


ZERO_RENT_VS_BUY = RentVsBuyResult(
    break_even_year=0, total_rent_cost=0, total_buy_cost=0, total_buy_cost_net=0,
    final_property_value=0, final_equity=0, monthly_emi=0,
)


def calculate_rent_vs_buy(comparison: RentVsBuyInput) -> RentVsBuyResult:
    """Compare cumulative rent to the net cost of owning, year by year.

    Buy side: upfront cash (down payment + fees), EMIs while the loan runs and
    annual maintenance, offset by equity in the appreciating property. Rent
    side: monthly rent escalating once a year. Break-even is the first year
    the net buy cost is no more than the rent paid so far.
    """
    price = comparison.property_price
    if price <= 0 or comparison.years_to_compare <= 0:
        logger.debug("Nothing to compare for price %s over %s years",
                     price, comparison.years_to_compare)
        return ZERO_RENT_VS_BUY

    down_payment = round_currency(price * comparison.down_payment_percent / 100)
    loan_amount = max(0, price - down_payment)
    tenure = comparison.loan_tenure_years

    # A cash purchase has no loan; any other loan must be amortizable
    if loan_amount > 0 and is_degenerate(loan_amount, comparison.annual_rate_percent, tenure):
        logger.debug("Degenerate loan of %s at %s%% over %s years, nothing to compare",
                     loan_amount, comparison.annual_rate_percent, tenure)
        return ZERO_RENT_VS_BUY

    emi = precise_emi(loan_amount, comparison.annual_rate_percent, tenure)
    monthly_emi = round_currency(emi)

    upfront = calculate_upfront_costs(
        UpfrontCostInput(
            property_price=price,
            loan_amount=loan_amount,
            jurisdiction=comparison.jurisdiction,
            agent_commission_percent=comparison.agent_commission_percent,
            include_vat=comparison.include_vat,
        ),
        down_payment,
    )

    r = 0.0 if comparison.annual_rate_percent == 0 else monthly_rate(comparison.annual_rate_percent)
    growth = 1 + comparison.annual_property_appreciation_percent / 100
    balance = float(loan_amount)

    snapshots = []
    cumulative_rent = 0.0
    cumulative_buy = float(upfront.total_upfront_cash)
    current_rent = comparison.monthly_rent
    break_even_year = 0

    for year in range(1, comparison.years_to_compare + 1):
        cumulative_rent += current_rent * 12

        within_tenure = year <= tenure
        year_emi = monthly_emi * 12 if within_tenure else 0
        cumulative_buy += year_emi + comparison.annual_maintenance_cost

        if within_tenure and balance > 0:
            for _ in range(12):
                if balance <= 0:
                    break
                interest = balance * r
                principal_paid = min(emi - interest, balance)
                balance = max(0.0, balance - principal_paid)

        property_value = round_currency(price * growth ** year)
        equity = property_value - round_currency(balance)
        net_buy_cost = cumulative_buy - equity
        rent_advantage = net_buy_cost - cumulative_rent

        snapshots.append(RentVsBuyYearlySnapshot(
            year=year,
            cumulative_rent=round_currency(cumulative_rent),
            cumulative_buy_cost=round_currency(cumulative_buy),
            property_value=property_value,
            equity=equity,
            net_buy_cost=round_currency(net_buy_cost),
            rent_advantage=round_currency(rent_advantage),
        ))

        if break_even_year == 0 and rent_advantage <= 0:
            break_even_year = year

        # Rent escalates at each renewal
        current_rent = round_currency(current_rent * (1 + comparison.annual_rent_increase_percent / 100))

    last = snapshots[-1]
    return RentVsBuyResult(
        break_even_year=break_even_year,
        total_rent_cost=last.cumulative_rent,
        total_buy_cost=last.cumulative_buy_cost,
        total_buy_cost_net=last.net_buy_cost,
        final_property_value=last.property_value,
        final_equity=last.equity,
        monthly_emi=monthly_emi,
        yearly_snapshots=snapshots,
    )


def snapshots_to_frame(result: RentVsBuyResult) -> pd.DataFrame:
    """Per-year snapshots as a DataFrame for charting."""
    return pd.DataFrame([asdict(s) for s in result.yearly_snapshots], columns=SNAPSHOT_COLUMNS)
