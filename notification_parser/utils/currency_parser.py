"""Parse and format currency amounts in notification formats."""
import re
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..config.settings import CURRENCY_SYMBOLS

logger = logging.getLogger(__name__)

# Currencies written without minor units
ZERO_DECIMAL_CURRENCIES = {"VND", "IDR"}


def parse_grouped_amount(amount_string: str) -> Optional[Decimal]:
    """
    Parse an amount written with '.' or ',' as thousands separators.

    Every separator is dropped and the digit run is read as an integer:
    - 50.000 -> 50000
    - 1,500,000 -> 1500000
    - 250000 -> 250000

    Args:
        amount_string: Matched digit run with separators

    Returns:
        Integer-valued Decimal or None if no digits were found
    """
    if not amount_string or not isinstance(amount_string, str):
        return None

    digits = re.sub(r'[.,\s]', '', amount_string.strip())
    if not digits.isdecimal():
        return None

    return Decimal(digits)


def parse_decimal_amount(amount_string: str) -> Optional[Decimal]:
    """
    Parse an amount where ',' groups thousands and '.' is the decimal point.

    Examples:
    - 15.99 -> 15.99
    - 1,234.50 -> 1234.50

    Args:
        amount_string: Matched amount

    Returns:
        Decimal amount or None if parsing fails
    """
    if not amount_string or not isinstance(amount_string, str):
        return None

    cleaned = amount_string.strip().replace(',', '')
    if not cleaned:
        return None

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        logger.debug(f"Could not parse decimal amount: {amount_string}")
        return None

    if not amount.is_finite():
        return None
    return amount


def format_currency(amount: Union[Decimal, float, int], currency: str = "VND") -> str:
    """
    Format amount as currency string.

    VND and IDR are shown without decimals and with '.' grouping,
    other currencies with ',' grouping and 2 decimal places.

    Args:
        amount: Numeric amount
        currency: Currency code (VND, IDR, USD)

    Returns:
        Formatted currency string
    """
    currency = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    value = abs(Decimal(str(amount)))
    sign = "-" if amount < 0 else ""

    if currency in ZERO_DECIMAL_CURRENCIES:
        grouped = f"{value:,.0f}".replace(",", ".")
        if currency == "VND":
            return f"{sign}{grouped} {symbol}"
        return f"{sign}{symbol} {grouped}"

    return f"{sign}{symbol}{value:,.2f}"
