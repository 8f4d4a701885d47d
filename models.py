import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from config import DEFAULT_VALUES
from logging_utils import get_logger

logger = get_logger(__name__)


def _to_float(value: Any) -> float:
    """Coerce a form value to float; missing, blank, NaN or junk become 0.0."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return 0.0
    try:
        f = float(value)
    except (TypeError, ValueError):
        logger.debug("non-numeric input %r coerced to 0", value)
        return 0.0
    if math.isnan(f):
        return 0.0
    return f


@dataclass
class Inputs:
    purchase_price: float = DEFAULT_VALUES["purchase_price"]
    market_value: float = DEFAULT_VALUES["market_value"]
    deposit_percent: float = DEFAULT_VALUES["deposit_percent"]
    interest_rate: float = DEFAULT_VALUES["interest_rate"]
    rent: float = DEFAULT_VALUES["rent"]
    rent_period: str = DEFAULT_VALUES["rent_period"]  # weekly / fortnightly / monthly / yearly
    vacancy_weeks: float = DEFAULT_VALUES["vacancy_weeks"]
    rates: float = DEFAULT_VALUES["rates"]
    insurance: float = DEFAULT_VALUES["insurance"]
    maintenance: float = DEFAULT_VALUES["maintenance"]
    body_corp: float = DEFAULT_VALUES["body_corp"]
    property_mgmt_percent: float = DEFAULT_VALUES["property_mgmt_percent"]

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Inputs":
        """
        Build Inputs from loosely typed values (form fields, query params, JSON).

        Absent numeric fields are 0, not their UI defaults: the record describes
        exactly what the caller supplied. Unknown keys are ignored. Never raises.
        """
        kwargs = {}
        for f in fields(cls):
            raw = values.get(f.name)
            if f.name == "rent_period":
                period = str(raw).strip().lower() if raw is not None else ""
                kwargs[f.name] = period or DEFAULT_VALUES["rent_period"]
            else:
                kwargs[f.name] = _to_float(raw)
        return cls(**kwargs)


@dataclass(frozen=True)
class Results:
    loan_amount: float
    annual_rent: float
    property_mgmt_cost: float
    annual_expenses: float
    annual_debt_service: float
    equity_at_purchase: float
    gross_yield: float  # %, NaN when purchase price is 0
    net_yield: float  # %, NaN when purchase price is 0
    cash_flow: float  # annual
    weekly_cash_flow: float
    below_market_percent: float  # %, NaN when market value is 0

    @property
    def cash_flow_positive(self) -> bool:
        return self.cash_flow >= 0

    @property
    def weekly_cash_flow_positive(self) -> bool:
        return self.weekly_cash_flow >= 0
