from typing import Any, Mapping

from config import WEEKS_PER_YEAR
from finance.income import annual_expenses, annual_rent, property_mgmt_cost
from finance.lending import annual_debt_service, equity_at_purchase, loan_amount
from logging_utils import get_logger
from models import Inputs, Results

logger = get_logger(__name__)

NAN = float("nan")


def _pct_of(numerator: float, denominator: float) -> float:
    """numerator / denominator as a percentage, NaN unless the denominator is positive."""
    numerator = numerator or 0.0
    denominator = denominator or 0.0
    if denominator > 0:
        return numerator / denominator * 100.0
    return NAN


def gross_yield(rent_annual: float, purchase_price: float) -> float:
    return _pct_of(rent_annual, purchase_price)


def net_yield(rent_annual: float, expenses: float, purchase_price: float) -> float:
    return _pct_of((rent_annual or 0.0) - (expenses or 0.0), purchase_price)


def below_market_percent(market_value: float, purchase_price: float) -> float:
    return _pct_of((market_value or 0.0) - (purchase_price or 0.0), market_value)


def compute(inputs: Inputs) -> Results:
    """Pure year-one metrics for a single property. Never raises for bad numbers."""
    loan = loan_amount(inputs.purchase_price, inputs.deposit_percent)
    rent_annual = annual_rent(inputs.rent, inputs.rent_period, inputs.vacancy_weeks)
    mgmt = property_mgmt_cost(rent_annual, inputs.property_mgmt_percent)
    expenses = annual_expenses(
        inputs.rates, inputs.insurance, inputs.maintenance, inputs.body_corp, mgmt
    )
    debt = annual_debt_service(loan, inputs.interest_rate)
    cash_flow = rent_annual - expenses - debt

    results = Results(
        loan_amount=loan,
        annual_rent=rent_annual,
        property_mgmt_cost=mgmt,
        annual_expenses=expenses,
        annual_debt_service=debt,
        equity_at_purchase=equity_at_purchase(inputs.market_value, loan),
        gross_yield=gross_yield(rent_annual, inputs.purchase_price),
        net_yield=net_yield(rent_annual, expenses, inputs.purchase_price),
        cash_flow=cash_flow,
        weekly_cash_flow=cash_flow / WEEKS_PER_YEAR,
        below_market_percent=below_market_percent(
            inputs.market_value, inputs.purchase_price
        ),
    )
    logger.debug(
        "computed metrics loan=%.2f rent=%.2f cash_flow=%.2f",
        results.loan_amount,
        results.annual_rent,
        results.cash_flow,
    )
    return results


def compute_from_mapping(values: Mapping[str, Any]) -> Results:
    return compute(Inputs.from_mapping(values))
