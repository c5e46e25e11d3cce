"""Home Loan Calculators - Streamlit Application."""

import logging

import streamlit as st

from components.charts import (
    create_amortization_chart,
    create_prepayment_comparison_chart,
    create_rent_vs_buy_chart,
    create_scenario_comparison_chart,
    create_upfront_cost_chart,
    create_yearly_breakdown_chart,
)
from components.inputs import (
    jurisdiction_select,
    loan_input_form,
    prepayment_input,
    readiness_select,
    scenario_inputs,
)
from components.tables import (
    display_amortization_table,
    display_prepayment_strategy_table,
    display_rent_vs_buy_table,
    display_scenario_table,
    display_upfront_costs,
)
from homeloan.amortization import (
    generate_amortization_schedule,
    schedule_to_frame,
    summarize_by_year,
    summary_to_frame,
)
from homeloan.compare import compare_loan_scenarios, comparison_to_frame
from homeloan.config import get_settings
from homeloan.eligibility import (
    DBRInput,
    calculate_affordability,
    calculate_dbr,
    check_eligibility,
    loan_to_value,
    min_down_payment_percent,
)
from homeloan.emi import LoanTerms, calculate_emi, round_currency
from homeloan.observability import setup_logging
from homeloan.policy import CREDIT_CARD_OBLIGATION_RATE, DOWN_PAYMENT_PRICE_THRESHOLD
from homeloan.prepayment import (
    PrepaymentInput,
    calculate_prepayment_savings,
    compare_prepayment_strategies,
    find_extra_for_target_tenure,
)
from homeloan.rent_vs_buy import RentVsBuyInput, calculate_rent_vs_buy, snapshots_to_frame
from homeloan.upfront import UpfrontCostInput, calculate_upfront_costs

settings = get_settings()
setup_logging(settings.log_level, settings.service_name)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Home Loan Calculators",
    page_icon="🏠",
    layout="wide",
    initial_sidebar_state="expanded",
)


def main():
    """Main application entry point."""
    st.title("🏠 Home Loan Calculators")
    st.markdown("*Estimates only. Banks set final rates, fees and eligibility.*")

    st.sidebar.title("Navigation")
    page = st.sidebar.radio(
        "Select Tool",
        options=[
            "EMI Calculator",
            "Affordability & DBR",
            "Upfront Costs",
            "Prepayment",
            "Rent vs Buy",
            "Compare Loans",
        ],
    )

    st.sidebar.divider()
    st.sidebar.markdown("### Quick Reference")
    with st.sidebar.expander("EMI"):
        st.markdown("""
        **Equated Monthly Installment.**

        The fixed monthly payment that repays the loan over its tenure. Early
        installments are mostly interest; later ones mostly principal.
        """)
    with st.sidebar.expander("DBR"):
        st.markdown("""
        **Debt Burden Ratio.**

        All monthly debt obligations divided by salary. The UAE Central Bank
        guideline is 50%. Banks count 5% of your total credit card limits as a
        monthly obligation, even with a zero balance.
        """)
    with st.sidebar.expander("LTV"):
        st.markdown("""
        **Loan-to-Value.**

        Residents buying a first home up to AED 5M can borrow up to 80%.
        Non-residents need at least 40% down.
        """)

    logger.info("Rendering page", extra={"page": page})

    if page == "EMI Calculator":
        emi_page()
    elif page == "Affordability & DBR":
        affordability_page()
    elif page == "Upfront Costs":
        upfront_costs_page()
    elif page == "Prepayment":
        prepayment_page()
    elif page == "Rent vs Buy":
        rent_vs_buy_page()
    elif page == "Compare Loans":
        compare_page()


def emi_page():
    """EMI calculator with amortization."""
    st.header("EMI Calculator")

    col1, col2 = st.columns([1, 2])

    with col1:
        st.subheader("Loan Parameters")
        terms = loan_input_form(settings)

        if terms:
            emi = calculate_emi(terms)
            st.divider()
            st.subheader("Summary")
            st.metric("Monthly EMI", f"AED {emi.monthly_installment:,.0f}")
            st.metric("Total Interest", f"AED {emi.total_interest:,.0f}")
            st.metric("Total Payment", f"AED {emi.total_payment:,.0f}")

    with col2:
        if terms:
            schedule = generate_amortization_schedule(terms)
            schedule_df = schedule_to_frame(schedule)
            yearly_df = summary_to_frame(summarize_by_year(schedule))

            tab1, tab2, tab3 = st.tabs(["Balance Chart", "Yearly Breakdown", "Amortization Table"])

            with tab1:
                st.plotly_chart(create_amortization_chart(schedule_df), use_container_width=True)

            with tab2:
                st.plotly_chart(create_yearly_breakdown_chart(yearly_df), use_container_width=True)

            with tab3:
                display_amortization_table(schedule_df, yearly_df)

            st.download_button(
                "Download Schedule (CSV)",
                schedule_df.to_csv(index=False),
                "amortization_schedule.csv",
                "text/csv",
            )


def affordability_page():
    """Maximum loan from salary, and DBR check for a specific EMI."""
    st.header("Affordability & DBR")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Your Finances")
        salary = st.number_input("Monthly Salary (AED)", min_value=0.0, value=25_000.0, step=1_000.0)
        existing = st.number_input("Existing EMIs (AED/month)", min_value=0.0, value=3_000.0, step=500.0)
        cards = st.number_input("Total Credit Card Limits (AED)", min_value=0.0, value=0.0, step=5_000.0)
        rate = st.number_input("Interest Rate (%)", min_value=0.0, max_value=20.0,
                               value=settings.default_annual_rate_percent, step=0.05)
        years = st.slider("Tenure (years)", 1, 25, settings.default_tenure_years)
        is_resident = st.checkbox("UAE Resident", value=True)
        first_time = st.checkbox("First-time Buyer", value=True)

    with col2:
        # Card limits count against capacity the same way existing EMIs do
        committed = existing + cards * CREDIT_CARD_OBLIGATION_RATE
        min_dp = min_down_payment_percent(is_resident, first_time, DOWN_PAYMENT_PRICE_THRESHOLD)
        afford = calculate_affordability(salary, committed, rate, years, min_dp)

        quick = check_eligibility(salary, committed)
        if quick.eligible:
            st.success(f"{quick.message} Liabilities are {quick.ratio}% of salary.")
        else:
            st.error(f"{quick.message} Liabilities are {quick.ratio}% of salary.")

        st.subheader("What You Can Afford")
        st.metric("Max Monthly EMI", f"AED {afford.max_emi:,.0f}")
        st.metric("Max Loan", f"AED {afford.max_loan:,.0f}")
        st.metric("Max Property Price", f"AED {afford.max_property:,.0f}",
                  help=f"Assuming the minimum {min_dp:.0f}% down payment")
        if afford.max_property > 0:
            required_dp = min_down_payment_percent(is_resident, first_time, afford.max_property)
            if required_dp > min_dp:
                st.warning(f"Above AED 5M the minimum down payment rises to {required_dp:.0f}%.")

        st.divider()
        st.subheader("DBR Check")
        new_emi = st.number_input("Proposed EMI (AED/month)", min_value=0.0,
                                  value=float(afford.verified_emi), step=500.0)
        dbr = calculate_dbr(DBRInput(salary, existing, new_emi, cards))
        st.metric("DBR", f"{dbr.dbr_percent:.2f}%")
        if dbr.within_guideline:
            st.success(dbr.message)
        else:
            st.error(dbr.message)


def upfront_costs_page():
    """Transfer, registration and bank fees due at purchase."""
    st.header("Upfront Costs")

    col1, col2 = st.columns([1, 2])

    with col1:
        price = st.number_input("Property Price (AED)", min_value=0.0, value=1_500_000.0, step=50_000.0)
        dp_percent = st.slider("Down Payment (%)", 0, 100, 20)
        jurisdiction = jurisdiction_select(settings, "costs")
        readiness = readiness_select("costs")
        commission = st.number_input("Agent Commission (%)", min_value=0.0, max_value=10.0,
                                     value=settings.default_agent_commission_percent, step=0.25)
        include_vat = st.checkbox("Include VAT", value=True)

    down_payment = round_currency(price * dp_percent / 100)
    costs = calculate_upfront_costs(
        UpfrontCostInput(
            property_price=price,
            loan_amount=max(0.0, price - down_payment),
            jurisdiction=jurisdiction,
            agent_commission_percent=commission,
            include_vat=include_vat,
            readiness=readiness,
        ),
        down_payment,
    )

    with col2:
        c1, c2, c3 = st.columns(3)
        c1.metric("Down Payment", f"AED {down_payment:,.0f}")
        c2.metric("Total Fees", f"AED {costs.total_fees:,.0f}")
        c3.metric("Cash Needed", f"AED {costs.total_upfront_cash:,.0f}")
        st.caption(f"LTV: {loan_to_value(price, down_payment):.2f}%")
        if costs.total_fees > 0:
            st.plotly_chart(create_upfront_cost_chart(costs), use_container_width=True)
        display_upfront_costs(costs)


def prepayment_page():
    """Lump sum and extra monthly payment savings."""
    st.header("Prepayment")

    col1, col2 = st.columns([1, 2])

    with col1:
        st.subheader("Loan Details")
        terms = loan_input_form(settings, key_prefix="prepay")
        if terms:
            st.divider()
            lump_sum, lump_month, extra = prepayment_input()

    with col2:
        if terms:
            tab1, tab2 = st.tabs(["Your Plan", "Compare Strategies"])

            with tab1:
                result = calculate_prepayment_savings(PrepaymentInput(
                    terms,
                    lump_sum_amount=lump_sum,
                    lump_sum_after_month=lump_month,
                    extra_monthly_payment=extra,
                ))
                col_a, col_b, col_c = st.columns(3)
                col_a.metric("Payoff Time", f"{result.new_tenure_months} months",
                             delta=f"-{result.months_saved} months")
                col_b.metric("Interest Saved", f"AED {result.interest_saved:,.0f}")
                col_c.metric("Effective Monthly", f"AED {result.new_effective_monthly_payment:,.0f}")
                st.caption("Most banks charge an early settlement fee on prepaid amounts; savings shown are gross.")

                target_years = st.slider("Target payoff (years)", 1, terms.years, max(1, terms.years // 2),
                                         key="prepay_target_years")
                needed = find_extra_for_target_tenure(terms, target_years * 12)
                if needed is not None:
                    st.info(f"Pay an extra AED {needed:,.0f}/month to finish in {target_years} years.")

            with tab2:
                strategies = compare_prepayment_strategies(
                    terms, lump_sum=lump_sum, lump_sum_after_month=lump_month,
                )
                st.plotly_chart(create_prepayment_comparison_chart(strategies), use_container_width=True)
                display_prepayment_strategy_table(strategies)


def rent_vs_buy_page():
    """Cumulative rent against the net cost of owning."""
    st.header("Rent vs Buy")

    col1, col2 = st.columns([1, 2])

    with col1:
        price = st.number_input("Property Price (AED)", min_value=0.0, value=1_500_000.0, step=50_000.0)
        dp_percent = st.slider("Down Payment (%)", 0, 100, 20)
        rate = st.number_input("Interest Rate (%)", min_value=0.0, max_value=20.0,
                               value=settings.default_annual_rate_percent, step=0.05)
        tenure = st.slider("Tenure (years)", 1, 25, settings.default_tenure_years)
        rent = st.number_input("Monthly Rent (AED)", min_value=0.0, value=7_500.0, step=500.0)
        rent_increase = st.number_input("Annual Rent Increase (%)", min_value=0.0, max_value=30.0, value=5.0)
        appreciation = st.number_input("Annual Appreciation (%)", min_value=-20.0, max_value=30.0, value=3.0)
        maintenance = st.number_input("Annual Maintenance (AED)", min_value=0.0, value=15_000.0, step=1_000.0)
        horizon = st.slider("Years to Compare", 1, 30, settings.default_years_to_compare)
        jurisdiction = jurisdiction_select(settings, "rvb")

    result = calculate_rent_vs_buy(RentVsBuyInput(
        property_price=price,
        down_payment_percent=dp_percent,
        annual_rate_percent=rate,
        loan_tenure_years=tenure,
        monthly_rent=rent,
        annual_rent_increase_percent=rent_increase,
        annual_property_appreciation_percent=appreciation,
        annual_maintenance_cost=maintenance,
        years_to_compare=horizon,
        jurisdiction=jurisdiction,
        agent_commission_percent=settings.default_agent_commission_percent,
    ))

    with col2:
        c1, c2, c3 = st.columns(3)
        c1.metric("Break-even", f"Year {result.break_even_year}" if result.break_even_year else "Not reached")
        c2.metric("Total Rent", f"AED {result.total_rent_cost:,.0f}")
        c3.metric("Net Buy Cost", f"AED {result.total_buy_cost_net:,.0f}")

        if result.yearly_snapshots:
            snapshots = snapshots_to_frame(result)
            st.plotly_chart(create_rent_vs_buy_chart(snapshots, result.break_even_year),
                            use_container_width=True)
            display_rent_vs_buy_table(snapshots)


def compare_page():
    """Compare bank offers on the same property."""
    st.header("Compare Loans")

    col1, col2 = st.columns([1, 2])

    with col1:
        price = st.number_input("Property Price (AED)", min_value=0.0, value=1_500_000.0, step=50_000.0)
        dp_percent = st.slider("Down Payment (%)", 0, 100, 20)
        st.divider()
        scenarios = scenario_inputs(settings)

    comparison = compare_loan_scenarios(price, dp_percent, scenarios)

    with col2:
        st.metric("Loan Amount", f"AED {comparison.loan_amount:,.0f}")
        frame = comparison_to_frame(comparison)
        if not frame.empty:
            st.plotly_chart(create_scenario_comparison_chart(frame), use_container_width=True)
            display_scenario_table(frame, comparison.best_total_index)


if __name__ == "__main__":
    main()
