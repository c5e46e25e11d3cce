"""Plotly chart components for home-loan visualization."""

import plotly.graph_objects as go
import pandas as pd

from homeloan.upfront import UpfrontCostResult


def create_amortization_chart(schedule: pd.DataFrame) -> go.Figure:
    """Create interactive amortization chart showing balance, principal, and interest over time."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=schedule['month'],
        y=schedule['closing_balance'],
        name='Remaining Balance',
        line=dict(color='#1f77b4', width=2),
        hovertemplate='Month %{x}<br>Balance: AED %{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=schedule['month'],
        y=schedule['cumulative_principal'],
        name='Principal Paid',
        fill='tozeroy',
        line=dict(color='#2ca02c', width=1),
        fillcolor='rgba(44, 160, 44, 0.3)',
        hovertemplate='Month %{x}<br>Principal Paid: AED %{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=schedule['month'],
        y=schedule['cumulative_interest'],
        name='Interest Paid',
        line=dict(color='#d62728', width=2, dash='dash'),
        hovertemplate='Month %{x}<br>Interest Paid: AED %{y:,.0f}<extra></extra>',
    ))

    fig.update_layout(
        title='Loan Amortization Over Time',
        xaxis_title='Month',
        yaxis_title='Amount (AED)',
        hovermode='x unified',
        legend=dict(yanchor='top', y=0.99, xanchor='right', x=0.99),
        yaxis=dict(tickformat=',.0f'),
    )

    return fig


def create_yearly_breakdown_chart(yearly: pd.DataFrame) -> go.Figure:
    """Create stacked bar chart of principal vs interest paid each year."""
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=yearly['year'],
        y=yearly['total_principal'],
        name='Principal',
        marker_color='#2ca02c',
        hovertemplate='Year %{x}<br>Principal: AED %{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Bar(
        x=yearly['year'],
        y=yearly['total_interest'],
        name='Interest',
        marker_color='#d62728',
        hovertemplate='Year %{x}<br>Interest: AED %{y:,.0f}<extra></extra>',
    ))

    fig.update_layout(
        title='Yearly Payments: Principal vs Interest',
        xaxis_title='Year',
        yaxis_title='Amount (AED)',
        barmode='stack',
        hovermode='x unified',
        yaxis=dict(tickformat=',.0f'),
    )

    return fig


def create_upfront_cost_chart(costs: UpfrontCostResult) -> go.Figure:
    """Create donut chart of the non-zero upfront fee items."""
    labels = {
        'dld_fee': 'Transfer Fee',
        'oqood_fee': 'Oqood Fee',
        'admin_fee': 'Admin Fee',
        'mortgage_registration': 'Mortgage Registration',
        'trustee_fee': 'Trustee Fee',
        'bank_processing_fee': 'Bank Processing',
        'valuation_fee': 'Valuation',
        'agent_commission': 'Agent Commission',
        'vat': 'VAT',
    }
    items = {labels[k]: v for k, v in costs.line_items.items() if v > 0}

    fig = go.Figure(go.Pie(
        labels=list(items.keys()),
        values=list(items.values()),
        hole=0.45,
        hovertemplate='%{label}<br>AED %{value:,.0f} (%{percent})<extra></extra>',
    ))

    fig.update_layout(
        title=f'Upfront Fees: AED {costs.total_fees:,.0f}',
        showlegend=True,
    )

    return fig


def create_prepayment_comparison_chart(strategies: pd.DataFrame) -> go.Figure:
    """Compare interest saved and months saved across prepayment strategies."""
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=strategies['strategy'],
        y=strategies['interest_saved'],
        name='Interest Saved',
        marker_color='#2ca02c',
        hovertemplate='%{x}<br>Interest Saved: AED %{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=strategies['strategy'],
        y=strategies['months_saved'],
        name='Months Saved',
        yaxis='y2',
        mode='lines+markers',
        line=dict(color='#ff7f0e', width=2),
        hovertemplate='%{x}<br>Months Saved: %{y}<extra></extra>',
    ))

    fig.update_layout(
        title='Prepayment Strategies',
        xaxis_title='Strategy',
        yaxis=dict(title='Interest Saved (AED)', tickformat=',.0f'),
        yaxis2=dict(title='Months Saved', overlaying='y', side='right'),
        legend=dict(yanchor='top', y=0.99, xanchor='left', x=0.01),
    )

    return fig


def create_rent_vs_buy_chart(snapshots: pd.DataFrame, break_even_year: int = 0) -> go.Figure:
    """Create cumulative rent vs net buy cost chart with break-even marker."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=snapshots['year'],
        y=snapshots['cumulative_rent'],
        name='Cumulative Rent',
        line=dict(color='#d62728', width=2),
        hovertemplate='Year %{x}<br>Rent Paid: AED %{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=snapshots['year'],
        y=snapshots['net_buy_cost'],
        name='Net Cost of Buying',
        line=dict(color='#1f77b4', width=2),
        hovertemplate='Year %{x}<br>Net Buy Cost: AED %{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=snapshots['year'],
        y=snapshots['equity'],
        name='Equity',
        line=dict(color='#2ca02c', width=1, dash='dot'),
        hovertemplate='Year %{x}<br>Equity: AED %{y:,.0f}<extra></extra>',
    ))

    if break_even_year > 0:
        fig.add_vline(
            x=break_even_year,
            line_dash='dash',
            line_color='gray',
            annotation_text=f'Break-even: year {break_even_year}',
            annotation_position='top left',
        )

    fig.update_layout(
        title='Rent vs Buy Over Time',
        xaxis_title='Year',
        yaxis_title='Amount (AED)',
        hovermode='x unified',
        yaxis=dict(tickformat=',.0f'),
    )

    return fig


def create_scenario_comparison_chart(comparison: pd.DataFrame) -> go.Figure:
    """Grouped bars of monthly EMI and total interest per loan scenario."""
    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=comparison['scenario'],
        y=comparison['total_interest'],
        name='Total Interest',
        marker_color='#d62728',
        hovertemplate='%{x}<br>Total Interest: AED %{y:,.0f}<extra></extra>',
    ))

    fig.add_trace(go.Scatter(
        x=comparison['scenario'],
        y=comparison['emi'],
        name='Monthly EMI',
        yaxis='y2',
        mode='markers',
        marker=dict(size=12, color='#1f77b4'),
        hovertemplate='%{x}<br>EMI: AED %{y:,.0f}<extra></extra>',
    ))

    fig.update_layout(
        title='Loan Scenario Comparison',
        yaxis=dict(title='Total Interest (AED)', tickformat=',.0f'),
        yaxis2=dict(title='Monthly EMI (AED)', overlaying='y', side='right', tickformat=',.0f'),
    )

    return fig
