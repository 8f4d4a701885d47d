def clamp(value: float, low: float, high: float) -> float:
    return min(max(value or 0.0, low), high)


def loan_amount(purchase_price: float, deposit_percent: float) -> float:
    """Borrowed amount after the deposit; deposit % is clamped to [0, 100]."""
    deposit = clamp(deposit_percent, 0.0, 100.0) / 100.0
    return max(0.0, (purchase_price or 0.0) * (1 - deposit))


def annual_debt_service(loan: float, interest_rate: float) -> float:
    """
    Year-one interest on the loan at a simple annual rate (percent).

    Interest-only approximation: no compounding and no principal, so this is a
    cash-flow estimate rather than an amortization schedule.
    Zero when there is no loan or the rate is negative.
    """
    r = (interest_rate or 0.0) / 100.0
    if loan <= 0 or r < 0:
        return 0.0
    return loan * r


def equity_at_purchase(market_value: float, loan: float) -> float:
    return max(0.0, (market_value or 0.0) - loan)
