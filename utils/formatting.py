"""
Formatting utilities.
"""

from typing import Optional


CURRENCY_SYMBOLS = {
    "INR": "₹",
    "GBP": "£",
    "USD": "$",
    "EUR": "€",
}

LAKH = 100_000


def _group_indian(digits: str) -> str:
    """Group digits as 12,34,56,789: last three, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_currency(amount: int, currency: str = "INR", symbol: Optional[str] = None) -> str:
    """
    Format an integer amount as currency.

    INR uses Indian digit grouping (lakhs and crores), every other
    currency uses groups of three.

    Args:
        amount: The amount in whole units (e.g., rupees, not paise).
        currency: Currency code (default INR).
        symbol: Replaces the currency symbol, e.g. "Rs. " for fonts
            without a rupee glyph.

    Returns:
        Formatted currency string.
    """
    if symbol is None:
        symbol = CURRENCY_SYMBOLS.get(currency, currency + " ")
    sign = "-" if amount < 0 else ""
    whole = abs(int(amount))
    if currency == "INR":
        grouped = _group_indian(str(whole))
    else:
        grouped = f"{whole:,}"
    return f"{sign}{symbol}{grouped}"


def format_lakh(amount: float, decimals: int = 1, symbol: str = "₹") -> str:
    """
    Format an amount in lakhs for chart axes, e.g. ₹33.4L.

    Args:
        amount: The amount in rupees.
        decimals: Number of decimal places.
        symbol: Currency symbol prefix.

    Returns:
        Formatted string.
    """
    return f"{symbol}{amount / LAKH:.{decimals}f}L"


def format_percent(value: float, decimals: int = 1) -> str:
    """
    Format a number as a percentage.

    Args:
        value: The percentage value.
        decimals: Number of decimal places.

    Returns:
        Formatted percentage string.
    """
    return f"{value:.{decimals}f}%"
