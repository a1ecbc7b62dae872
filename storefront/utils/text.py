from __future__ import annotations


def fold_case(text: str) -> str:
    return text.lower()


def format_price(cents: int, symbol: str = "$") -> str:
    """Format integer cents as a currency string, e.g. 1999 -> "$19.99"."""
    sign = "-" if cents < 0 else ""
    whole, fraction = divmod(abs(cents), 100)
    return f"{symbol}{sign}{whole}.{fraction:02d}"
