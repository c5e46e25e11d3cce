"""Streamlit table display components."""


import pandas as pd
import streamlit as st

from homeloan.upfront import UpfrontCostResult


def _aed(x) -> str:
    return f"AED {x:,.0f}" if pd.notna(x) else "-"


def format_currency_columns(df: pd.DataFrame, columns: list) -> pd.DataFrame:
    """Return a copy with the given columns formatted as AED strings."""
    display_df = df.copy()
    for col in columns:
        if col in display_df.columns:
            display_df[col] = display_df[col].apply(_aed)
    return display_df


def upfront_cost_frame(costs: UpfrontCostResult) -> pd.DataFrame:
    """Fee line items as a two-column frame, skipping zero items."""
    labels = {
        'dld_fee': 'DLD / Transfer Fee',
        'oqood_fee': 'Oqood (Off-plan) Fee',
        'admin_fee': 'Admin Fee',
        'mortgage_registration': 'Mortgage Registration',
        'trustee_fee': 'Trustee Fee',
        'bank_processing_fee': 'Bank Processing Fee',
        'valuation_fee': 'Valuation Fee',
        'agent_commission': 'Agent Commission',
        'vat': 'VAT (5%)',
    }
    rows = [
        {'Item': labels[name], 'Amount': amount}
        for name, amount in costs.line_items.items()
        if amount > 0
    ]
    rows.append({'Item': 'Total Fees', 'Amount': costs.total_fees})
    rows.append({'Item': 'Total Upfront Cash', 'Amount': costs.total_upfront_cash})
    return pd.DataFrame(rows, columns=['Item', 'Amount'])


def display_amortization_table(
    schedule: pd.DataFrame,
    yearly: pd.DataFrame,
    title: str = "Amortization Schedule",
    max_rows: int = 60,
) -> None:
    """Display amortization schedule with a yearly/monthly toggle.

    Args:
        schedule: DataFrame with monthly amortization rows
        yearly: DataFrame with the per-year summary
        title: Table title
        max_rows: Maximum monthly rows to display at once
    """
    st.subheader(title)

    view_type = st.radio(
        "View",
        options=["Yearly Summary", "Monthly Detail"],
        horizontal=True,
        key=f"table_view_{title}",
    )

    if view_type == "Yearly Summary":
        display_df = format_currency_columns(
            yearly,
            ['total_principal', 'total_interest', 'total_payment', 'closing_balance'],
        ).rename(columns={
            'year': 'Year',
            'total_principal': 'Principal Paid',
            'total_interest': 'Interest Paid',
            'total_payment': 'Total Payments',
            'closing_balance': 'End Balance',
        })
        st.dataframe(display_df, use_container_width=True, hide_index=True)
        return

    total_rows = len(schedule)
    if total_rows > max_rows:
        start_month = st.slider(
            "Start from month",
            min_value=1,
            max_value=total_rows - max_rows + 1,
            value=1,
            key=f"month_slider_{title}",
        )
        display_slice = schedule.iloc[start_month - 1:start_month - 1 + max_rows]
    else:
        display_slice = schedule

    display_df = format_currency_columns(
        display_slice,
        ['opening_balance', 'emi', 'principal_portion', 'interest_portion',
         'closing_balance', 'cumulative_interest'],
    ).rename(columns={
        'month': 'Month',
        'opening_balance': 'Opening',
        'emi': 'EMI',
        'principal_portion': 'Principal',
        'interest_portion': 'Interest',
        'closing_balance': 'Closing',
        'cumulative_interest': 'Total Interest',
    })
    cols_to_show = ['Month', 'Opening', 'EMI', 'Principal', 'Interest', 'Closing', 'Total Interest']
    st.dataframe(display_df[cols_to_show], use_container_width=True, hide_index=True)


def display_upfront_costs(costs: UpfrontCostResult) -> None:
    """Display the fee breakdown table."""
    st.subheader("Fee Breakdown")
    st.dataframe(
        format_currency_columns(upfront_cost_frame(costs), ['Amount']),
        use_container_width=True,
        hide_index=True,
    )


def display_prepayment_strategy_table(strategies: pd.DataFrame) -> None:
    """Display prepayment strategy comparison table."""
    st.subheader("Prepayment Strategy Comparison")

    display_df = format_currency_columns(
        strategies, ['extra_monthly', 'lump_sum', 'total_interest', 'interest_saved'],
    ).rename(columns={
        'strategy': 'Strategy',
        'extra_monthly': 'Extra/Month',
        'lump_sum': 'Lump Sum',
        'tenure_months': 'Payoff (Months)',
        'total_interest': 'Total Interest',
        'interest_saved': 'Interest Saved',
        'months_saved': 'Months Saved',
    })
    display_df['Years Saved'] = (strategies['months_saved'] / 12).round(1)

    st.dataframe(display_df, use_container_width=True, hide_index=True)


def display_rent_vs_buy_table(snapshots: pd.DataFrame) -> None:
    st.subheader("Year by Year")
    display_df = format_currency_columns(
        snapshots,
        ['cumulative_rent', 'cumulative_buy_cost', 'property_value', 'equity',
         'net_buy_cost', 'rent_advantage'],
    ).rename(columns={
        'year': 'Year',
        'cumulative_rent': 'Rent Paid',
        'cumulative_buy_cost': 'Buy Spend',
        'property_value': 'Property Value',
        'equity': 'Equity',
        'net_buy_cost': 'Net Buy Cost',
        'rent_advantage': 'Rent Advantage',
    })
    st.dataframe(display_df, use_container_width=True, hide_index=True)


def display_scenario_table(comparison: pd.DataFrame, best_index: int | None = None) -> None:
    """Display loan scenarios, marking the lowest total cost."""
    st.subheader("Scenarios")

    display_df = format_currency_columns(comparison, ['emi', 'total_payment', 'total_interest'])
    display_df['rate'] = comparison['rate'].apply(lambda x: f"{x:.2f}%")
    display_df['interest_percent'] = comparison['interest_percent'].apply(lambda x: f"{x}%")
    display_df['best'] = ["★" if i == best_index else "" for i in range(len(display_df))]

    display_df = display_df.rename(columns={
        'scenario': 'Scenario',
        'rate': 'Rate',
        'years': 'Years',
        'emi': 'EMI',
        'total_payment': 'Total Payment',
        'total_interest': 'Total Interest',
        'interest_percent': 'Interest % of Loan',
        'best': 'Lowest Cost',
    })
    st.dataframe(display_df, use_container_width=True, hide_index=True)
