import math
from dataclasses import astuple, replace

import pytest

from analytics.metrics import (
    below_market_percent,
    compute,
    compute_from_mapping,
    gross_yield,
    net_yield,
)
from models import Inputs

ZERO_INPUTS = Inputs(
    purchase_price=0.0,
    market_value=0.0,
    deposit_percent=0.0,
    interest_rate=0.0,
    rent=0.0,
    rent_period="weekly",
    vacancy_weeks=0.0,
    rates=0.0,
    insurance=0.0,
    maintenance=0.0,
    body_corp=0.0,
    property_mgmt_percent=0.0,
)


def _typical_inputs(**overrides) -> Inputs:
    base = Inputs(
        purchase_price=500_000.0,
        market_value=520_000.0,
        deposit_percent=20.0,
        interest_rate=7.0,
        rent=600.0,
        rent_period="weekly",
        vacancy_weeks=2.0,
        rates=2_500.0,
        insurance=1_200.0,
        maintenance=1_000.0,
        body_corp=0.0,
        property_mgmt_percent=8.0,
    )
    return replace(base, **overrides)


def test_typical_investment_scenario():
    """
    $500k purchase, $520k market value, 20% deposit at 7%, $600/wk rent with
    2 vacant weeks and $4,700 of fixed costs plus 8% management.
    """
    res = compute(_typical_inputs())

    assert res.loan_amount == pytest.approx(400_000.0)
    assert res.annual_rent == pytest.approx(30_000.0)
    assert res.property_mgmt_cost == pytest.approx(2_400.0)
    assert res.annual_expenses == pytest.approx(7_100.0)
    assert res.annual_debt_service == pytest.approx(28_000.0)
    assert res.cash_flow == pytest.approx(-5_100.0)
    assert res.weekly_cash_flow == pytest.approx(-98.0769, abs=1e-3)
    assert res.equity_at_purchase == pytest.approx(120_000.0)
    assert res.gross_yield == pytest.approx(6.0)
    assert round(res.net_yield, 2) == 4.58
    assert res.below_market_percent == pytest.approx(3.8462, abs=1e-3)
    assert not res.cash_flow_positive
    assert not res.weekly_cash_flow_positive


def test_all_zero_inputs_degrade_without_error():
    res = compute(ZERO_INPUTS)

    assert res.loan_amount == 0.0
    assert res.annual_rent == 0.0
    assert res.property_mgmt_cost == 0.0
    assert res.annual_expenses == 0.0
    assert res.annual_debt_service == 0.0
    assert res.equity_at_purchase == 0.0
    assert res.cash_flow == 0.0
    assert res.weekly_cash_flow == 0.0
    assert math.isnan(res.gross_yield)
    assert math.isnan(res.net_yield)
    assert math.isnan(res.below_market_percent)
    assert res.cash_flow_positive


@pytest.mark.parametrize(
    "deposit, clamped",
    [(-50.0, 0.0), (-0.01, 0.0), (0.0, 0.0), (35.0, 35.0), (100.0, 100.0), (140.0, 100.0)],
)
def test_deposit_percent_behaves_as_if_clamped(deposit, clamped):
    res = compute(_typical_inputs(deposit_percent=deposit))
    expected = compute(_typical_inputs(deposit_percent=clamped))
    assert res.loan_amount == expected.loan_amount
    assert res.loan_amount == pytest.approx(500_000.0 * (1 - clamped / 100.0))


@pytest.mark.parametrize(
    "weeks, clamped",
    [(-10.0, 0.0), (0.0, 0.0), (13.0, 13.0), (52.0, 52.0), (80.0, 52.0)],
)
def test_vacancy_weeks_behave_as_if_clamped(weeks, clamped):
    res = compute(_typical_inputs(vacancy_weeks=weeks))
    expected = compute(_typical_inputs(vacancy_weeks=clamped))
    assert res.annual_rent == expected.annual_rent
    assert res.annual_rent == pytest.approx(600.0 * 52 * (52 - clamped) / 52)


def test_full_vacancy_means_no_rent_and_no_management():
    res = compute(_typical_inputs(vacancy_weeks=52.0))
    assert res.annual_rent == 0.0
    assert res.property_mgmt_cost == 0.0
    assert res.annual_expenses == pytest.approx(4_700.0)


@pytest.mark.parametrize(
    "period, factor",
    [("weekly", 52), ("fortnightly", 26), ("monthly", 12), ("yearly", 1)],
)
def test_rent_period_factors(period, factor):
    res = compute(_typical_inputs(rent=1_000.0, rent_period=period, vacancy_weeks=0.0))
    assert res.annual_rent == pytest.approx(1_000.0 * factor)


def test_unknown_rent_period_counts_as_yearly():
    res = compute(_typical_inputs(rent=1_000.0, rent_period="quarterly", vacancy_weeks=0.0))
    assert res.annual_rent == pytest.approx(1_000.0)


def test_negative_interest_rate_means_no_debt_service():
    res = compute(_typical_inputs(interest_rate=-2.0))
    assert res.annual_debt_service == 0.0
    assert res.cash_flow == pytest.approx(30_000.0 - 7_100.0)


def test_full_deposit_means_no_loan_and_no_debt_service():
    res = compute(_typical_inputs(deposit_percent=100.0))
    assert res.loan_amount == 0.0
    assert res.annual_debt_service == 0.0
    assert res.equity_at_purchase == pytest.approx(520_000.0)


def test_negative_purchase_price_floors_loan_at_zero():
    res = compute(_typical_inputs(purchase_price=-100_000.0))
    assert res.loan_amount == 0.0
    assert res.annual_debt_service == 0.0
    assert math.isnan(res.gross_yield)
    assert math.isnan(res.net_yield)


def test_equity_is_floored_at_zero():
    res = compute(_typical_inputs(market_value=100_000.0))
    assert res.equity_at_purchase == 0.0
    # Bought above market value: discount is negative, not clamped
    assert res.below_market_percent == pytest.approx(-400.0)


def test_interest_rate_and_management_are_not_clamped():
    res = compute(_typical_inputs(interest_rate=150.0, property_mgmt_percent=120.0))
    assert res.annual_debt_service == pytest.approx(600_000.0)
    assert res.property_mgmt_cost == pytest.approx(36_000.0)


def test_market_value_zero_gives_nan_discount_only():
    res = compute(_typical_inputs(market_value=0.0))
    assert math.isnan(res.below_market_percent)
    assert res.gross_yield == pytest.approx(6.0)
    assert res.equity_at_purchase == 0.0


def test_compute_is_idempotent():
    inputs = _typical_inputs(market_value=0.0)
    first = compute(inputs)
    second = compute(inputs)
    # repr keeps NaN comparable
    assert repr(astuple(first)) == repr(astuple(second))


def test_compute_does_not_mutate_inputs():
    inputs = _typical_inputs()
    before = astuple(inputs)
    compute(inputs)
    assert astuple(inputs) == before


def test_ratio_helpers():
    assert gross_yield(30_000.0, 500_000.0) == pytest.approx(6.0)
    assert net_yield(30_000.0, 7_100.0, 500_000.0) == pytest.approx(4.58)
    assert below_market_percent(520_000.0, 500_000.0) == pytest.approx(3.846, abs=1e-3)
    assert math.isnan(gross_yield(30_000.0, 0.0))
    assert math.isnan(net_yield(30_000.0, 0.0, -1.0))
    assert math.isnan(below_market_percent(0.0, 500_000.0))


def test_compute_from_mapping_with_form_strings():
    res = compute_from_mapping(
        {
            "purchase_price": "500,000",
            "market_value": "520000",
            "deposit_percent": "20",
            "interest_rate": "7",
            "rent": "600",
            "rent_period": "Weekly",
            "vacancy_weeks": "2",
            "rates": "2500",
            "insurance": "1200",
            "maintenance": "1000",
            "body_corp": "",
            "property_mgmt_percent": "8",
        }
    )
    assert res.cash_flow == pytest.approx(-5_100.0)


def test_compute_from_empty_mapping_is_all_zero():
    res = compute_from_mapping({})
    assert res.loan_amount == 0.0
    assert res.annual_rent == 0.0
    assert res.cash_flow == 0.0
    assert math.isnan(res.gross_yield)


NUMERIC_FIELDS = [
    "purchase_price",
    "market_value",
    "deposit_percent",
    "interest_rate",
    "rent",
    "vacancy_weeks",
    "rates",
    "insurance",
    "maintenance",
    "body_corp",
    "property_mgmt_percent",
]


@pytest.mark.parametrize("field", NUMERIC_FIELDS)
def test_missing_field_on_inputs_counts_as_zero(field):
    """A None field goes straight into compute() and behaves like 0."""
    res = compute(_typical_inputs(**{field: None}))
    expected = compute(_typical_inputs(**{field: 0.0}))
    assert repr(astuple(res)) == repr(astuple(expected))


def test_all_fields_missing_on_inputs():
    res = compute(Inputs(**{field: None for field in NUMERIC_FIELDS}))
    assert res.loan_amount == 0.0
    assert res.annual_expenses == 0.0
    assert res.cash_flow == 0.0
    assert math.isnan(res.gross_yield)
    assert math.isnan(res.net_yield)
    assert math.isnan(res.below_market_percent)
