from config import RENT_PERIOD_FACTORS, WEEKS_PER_YEAR
from finance.lending import clamp


def rent_period_factor(rent_period: str) -> int:
    """Payments per year for a rent period; unrecognised periods count as yearly."""
    return RENT_PERIOD_FACTORS.get(str(rent_period).lower(), 1)


def vacancy_factor(vacancy_weeks: float) -> float:
    """Occupied fraction of the year, with vacancy clamped to [0, 52] weeks."""
    occupied = clamp(WEEKS_PER_YEAR - (vacancy_weeks or 0.0), 0.0, WEEKS_PER_YEAR)
    return occupied / WEEKS_PER_YEAR


def annual_rent(rent: float, rent_period: str, vacancy_weeks: float) -> float:
    gross = (rent or 0.0) * rent_period_factor(rent_period)
    return gross * vacancy_factor(vacancy_weeks)


def property_mgmt_cost(rent_annual: float, property_mgmt_percent: float) -> float:
    return (rent_annual or 0.0) * (property_mgmt_percent or 0.0) / 100.0


def annual_expenses(
    rates: float,
    insurance: float,
    maintenance: float,
    body_corp: float,
    mgmt_cost: float,
) -> float:
    """Sum of annual outgoings; a missing term counts as 0."""
    return sum(term or 0.0 for term in (rates, insurance, maintenance, body_corp, mgmt_cost))
