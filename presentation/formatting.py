import math
from typing import Optional

from config import CURRENCY, PLACEHOLDER


def _finite(n: Optional[float]) -> bool:
    return n is not None and math.isfinite(n)


def fmt_currency(n: Optional[float]) -> str:
    """Whole-dollar NZD, e.g. 120000 -> '$120,000', -98.08 -> '-$98'."""
    if not _finite(n):
        return PLACEHOLDER
    sign = "-" if n < 0 else ""
    return f"{sign}{CURRENCY['symbol']}{abs(n):,.0f}"


def fmt_pct2(n: Optional[float]) -> str:
    if not _finite(n):
        return PLACEHOLDER
    return f"{n:.2f}%"
