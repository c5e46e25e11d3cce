"""Streamlit input components for home-loan parameters."""

from typing import List, Optional

import streamlit as st

from homeloan.compare import MAX_SCENARIOS, LoanScenario
from homeloan.config import Settings
from homeloan.emi import LoanTerms
from homeloan.policy import Jurisdiction, PropertyReadiness

JURISDICTION_LABELS = {
    Jurisdiction.DUBAI: "Dubai",
    Jurisdiction.ABU_DHABI: "Abu Dhabi",
    Jurisdiction.SHARJAH: "Sharjah",
    Jurisdiction.OTHER: "Other Emirate",
}


def loan_input_form(settings: Settings, key_prefix: str = "loan") -> Optional[LoanTerms]:
    """Create input form for loan amount, rate and tenure.

    Returns LoanTerms or None if inputs are invalid.
    """
    col1, col2 = st.columns(2)

    with col1:
        principal = st.number_input(
            "Loan Amount (AED)",
            min_value=0.0,
            max_value=50_000_000.0,
            value=1_000_000.0,
            step=50_000.0,
            format="%.0f",
            key=f"{key_prefix}_principal",
        )

        annual_rate = st.number_input(
            "Interest Rate (%)",
            min_value=0.0,
            max_value=20.0,
            value=settings.default_annual_rate_percent,
            step=0.05,
            format="%.2f",
            key=f"{key_prefix}_rate",
            help="Annual interest rate as a percentage",
        )

    with col2:
        years = st.slider(
            "Tenure (years)",
            min_value=1,
            max_value=25,
            value=settings.default_tenure_years,
            key=f"{key_prefix}_years",
            help="UAE banks cap mortgage tenure at 25 years",
        )

    if principal > 0 and annual_rate >= 0:
        return LoanTerms(principal=principal, annual_rate_percent=annual_rate, years=int(years))
    return None


def jurisdiction_select(settings: Settings, key_prefix: str) -> Jurisdiction:
    options = list(JURISDICTION_LABELS)
    return st.selectbox(
        "Emirate",
        options=options,
        index=options.index(settings.default_jurisdiction),
        format_func=JURISDICTION_LABELS.get,
        key=f"{key_prefix}_jurisdiction",
    )


def readiness_select(key_prefix: str) -> PropertyReadiness:
    return st.radio(
        "Property Status",
        options=[PropertyReadiness.READY, PropertyReadiness.OFF_PLAN],
        format_func=lambda r: "Ready" if r == PropertyReadiness.READY else "Off-plan",
        horizontal=True,
        key=f"{key_prefix}_readiness",
    )


def prepayment_input(key_prefix: str = "prepay") -> tuple:
    """Create inputs for lump sum and recurring extra payments.

    Returns (lump_sum_amount, lump_sum_after_month, extra_monthly_payment).
    """
    st.subheader("Prepayments")

    extra_monthly = st.number_input(
        "Extra Monthly Payment (AED)",
        min_value=0.0,
        value=0.0,
        step=500.0,
        format="%.0f",
        key=f"{key_prefix}_extra",
    )

    lump_sum = st.number_input(
        "One-time Lump Sum (AED)",
        min_value=0.0,
        value=0.0,
        step=10_000.0,
        format="%.0f",
        key=f"{key_prefix}_lump",
    )

    lump_month = st.number_input(
        "Lump Sum Paid in Month",
        min_value=1,
        max_value=300,
        value=12,
        key=f"{key_prefix}_lump_month",
        disabled=lump_sum <= 0,
    )

    return lump_sum, int(lump_month), extra_monthly


def scenario_inputs(settings: Settings, key_prefix: str = "scenario") -> List[LoanScenario]:
    """Collect up to MAX_SCENARIOS rate/tenure offers."""
    count = st.number_input(
        "Number of Scenarios",
        min_value=1,
        max_value=MAX_SCENARIOS,
        value=3,
        key=f"{key_prefix}_count",
    )

    defaults = [(3.99, 25), (4.25, 20), (4.49, 15), (4.75, 25), (3.75, 10)]
    scenarios = []
    for i in range(int(count)):
        rate_default, years_default = defaults[i]
        col1, col2 = st.columns(2)
        with col1:
            rate = st.number_input(
                f"Scenario {i + 1} Rate (%)",
                min_value=0.0,
                max_value=20.0,
                value=rate_default,
                step=0.05,
                format="%.2f",
                key=f"{key_prefix}_{i}_rate",
            )
        with col2:
            years = st.slider(
                f"Scenario {i + 1} Tenure (years)",
                min_value=1,
                max_value=25,
                value=years_default,
                key=f"{key_prefix}_{i}_years",
            )
        scenarios.append(LoanScenario(name=f"Scenario {i + 1}", annual_rate_percent=rate, years=int(years)))

    return scenarios
