import os

DEFAULT_VALUES = {
    "purchase_price": 0.0,
    "market_value": 0.0,
    "deposit_percent": 20.0,  # percentage
    "interest_rate": 7.0,  # percentage, simple annual
    "rent": 0.0,
    "rent_period": "weekly",
    "vacancy_weeks": 2.0,
    "rates": 0.0,  # annual
    "insurance": 0.0,  # annual
    "maintenance": 0.0,  # annual
    "body_corp": 0.0,  # annual
    "property_mgmt_percent": 8.0,  # percentage of annual rent
}

WEEKS_PER_YEAR = 52

RENT_PERIOD_FACTORS = {
    "weekly": 52,
    "fortnightly": 26,
    "monthly": 12,
    "yearly": 1,
}
RENT_PERIODS = list(RENT_PERIOD_FACTORS)

CURRENCY = {
    "symbol": "$",
    "code": "NZD",
}

# Shown wherever a metric is undefined (NaN)
PLACEHOLDER = "—"

SNAPSHOT = {
    "file_name": "property-wizard.jpg",
    "quality": 95,
    "dpi": 150,
}

LOG_LEVEL = os.getenv("PROPERTY_WIZARD_LOG_LEVEL", "INFO").upper()
