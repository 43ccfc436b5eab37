from __future__ import annotations

from decimal import Decimal

CURRENCY_SUFFIX = " ₫"

# Amounts with this many integer digits or more are not grouped; keeps round(..., 3)
# within the default 28-digit context precision
MAX_GROUPED_DIGITS = 24


def format_currency(value: Decimal | int) -> str:
    """
    Formats an amount in Vietnamese notation: '.' groups thousands, ',' separates
    decimals, at most three fraction digits, trailing zeros dropped.

        >>> format_currency(Decimal("25000000"))
        '25.000.000 ₫'

    Non-finite amounts and amounts with MAX_GROUPED_DIGITS or more integer
    digits are rendered as-is ("1E+40 ₫") so the output stays short.
    """
    amount = Decimal(value)
    if not amount.is_finite() or amount.adjusted() >= MAX_GROUPED_DIGITS:
        return str(amount) + CURRENCY_SUFFIX
    exponent = amount.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -3:
        amount = round(amount, 3)
    integral, _, fraction = f"{amount:,f}".partition(".")
    fraction = fraction.rstrip("0")
    text = integral.replace(",", ".")
    if fraction:
        text = f"{text},{fraction}"
    return text + CURRENCY_SUFFIX
