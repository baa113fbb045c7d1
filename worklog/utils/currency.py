"""Currency display formatting."""
from typing import Optional

from worklog.config import settings


def format_currency(
    value: float,
    symbol: Optional[str] = None,
    decimal_separator: Optional[str] = None,
    thousands_separator: Optional[str] = None,
) -> str:
    """
    Format an amount with two decimals and the configured separators.

    Args:
        value: Amount to format
        symbol: Currency symbol (defaults to settings)
        decimal_separator: Decimal mark (defaults to settings)
        thousands_separator: Grouping mark (defaults to settings)

    Returns:
        Display string

    Examples:
        >>> format_currency(1234.5, "R$", ",", ".")
        'R$ 1.234,50'
        >>> format_currency(-10, "R$", ",", ".")
        '-R$ 10,00'
    """
    symbol = settings.currency_symbol if symbol is None else symbol
    decimal_separator = settings.decimal_separator if decimal_separator is None else decimal_separator
    thousands_separator = settings.thousands_separator if thousands_separator is None else thousands_separator

    amount = round(value, 2)
    sign = "-" if amount < 0 else ""

    # Placeholders avoid clobbering when the separators are swapped
    text = f"{abs(amount):,.2f}"
    text = text.replace(",", "\0").replace(".", "\1")
    text = text.replace("\0", thousands_separator).replace("\1", decimal_separator)

    return f"{sign}{symbol} {text}" if symbol else f"{sign}{text}"
