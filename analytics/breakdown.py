from dataclasses import replace
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from analytics.metrics import compute
from models import Inputs, Results
from presentation.formatting import fmt_currency, fmt_pct2

PANEL_COLUMNS = ["Panel", "Label", "Value", "Tone"]


def _plain(n: float) -> str:
    """Input echo: thousands separators, no trailing zeros."""
    return f"{n or 0.0:,.2f}".rstrip("0").rstrip(".")


def _tone(n: float) -> str:
    return "positive" if n >= 0 else "negative"


def inputs_panel(inputs: Inputs) -> pd.DataFrame:
    """Rows for the two input panels, in on-screen order."""
    rows = [
        ("Annual Expenses", "Rates", _plain(inputs.rates)),
        ("Annual Expenses", "Insurance", _plain(inputs.insurance)),
        ("Annual Expenses", "Maintenance", _plain(inputs.maintenance)),
        ("Annual Expenses", "Body Corporate", _plain(inputs.body_corp)),
        ("Annual Expenses", "Property Mgmt %", _plain(inputs.property_mgmt_percent)),
        ("Annual Expenses", "Rent Period", str(inputs.rent_period).title()),
        ("Purchase & Finance", "Purchase Price", _plain(inputs.purchase_price)),
        ("Purchase & Finance", "Market Value", _plain(inputs.market_value)),
        ("Purchase & Finance", "Deposit %", _plain(inputs.deposit_percent)),
        ("Purchase & Finance", "Interest Rate %", _plain(inputs.interest_rate)),
        ("Purchase & Finance", "Rent", _plain(inputs.rent)),
        ("Purchase & Finance", "Vacant Weeks (p.a.)", _plain(inputs.vacancy_weeks)),
    ]
    return pd.DataFrame(
        [(panel, label, value, "neutral") for panel, label, value in rows],
        columns=PANEL_COLUMNS,
    )


def results_panel(res: Results) -> pd.DataFrame:
    """
    Formatted rows for the Income and Performance Summary panels.

    Tone is 'positive'/'negative' for the cash-flow rows (rendered as pills)
    and 'neutral' otherwise. Undefined metrics carry the placeholder glyph.
    """
    rows = [
        ("Income", "Annual Rent", fmt_currency(res.annual_rent), "neutral"),
        ("Income", "Annual Expenses", fmt_currency(res.annual_expenses), "neutral"),
        ("Income", "Annual Debt Service", fmt_currency(res.annual_debt_service), "neutral"),
        ("Income", "Weekly Cash Flow", fmt_currency(res.weekly_cash_flow), _tone(res.weekly_cash_flow)),
        ("Income", "Annual Cash Flow", fmt_currency(res.cash_flow), _tone(res.cash_flow)),
        ("Performance Summary", "Below Market Value", fmt_pct2(res.below_market_percent), "neutral"),
        ("Performance Summary", "Equity at Purchase", fmt_currency(res.equity_at_purchase), "neutral"),
        ("Performance Summary", "Gross Yield", fmt_pct2(res.gross_yield), "neutral"),
        ("Performance Summary", "Net Yield", fmt_pct2(res.net_yield), "neutral"),
        ("Performance Summary", "Loan Amount", fmt_currency(res.loan_amount), "neutral"),
    ]
    return pd.DataFrame(rows, columns=PANEL_COLUMNS)


def outgoings_breakdown(inputs: Inputs, res: Results) -> pd.DataFrame:
    """Return DataFrame with categories and annual amounts for the donut chart."""
    data = {
        "Category": [
            "Rates",
            "Insurance",
            "Maintenance",
            "Body corporate",
            "Property management",
            "Debt service",
        ],
        "Amount": [
            inputs.rates or 0.0,
            inputs.insurance or 0.0,
            inputs.maintenance or 0.0,
            inputs.body_corp or 0.0,
            res.property_mgmt_cost,
            res.annual_debt_service,
        ],
    }
    return pd.DataFrame(data)


def rate_sensitivity_dataframe(
    inputs: Inputs, rates: Optional[Sequence[float]] = None
) -> pd.DataFrame:
    """
    Annual and weekly cash flow across a range of interest rates (percent),
    holding every other input fixed. Defaults to 0%..12% in 0.5% steps.
    """
    if rates is None:
        rates = np.arange(0.0, 12.5, 0.5)

    cash_flows = []
    weekly = []
    for r in rates:
        res_r = compute(replace(inputs, interest_rate=float(r)))
        cash_flows.append(res_r.cash_flow)
        weekly.append(res_r.weekly_cash_flow)

    return pd.DataFrame(
        {
            "Interest Rate (%)": np.asarray(rates, dtype=float),
            "Annual Cash Flow": cash_flows,
            "Weekly Cash Flow": weekly,
        }
    )
