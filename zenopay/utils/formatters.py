"""
Data formatting utilities for ZenoPay operations.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Union

from ..constants import LOCAL_PHONE_PREFIX, SENSITIVE_FIELDS, TANZANIA_COUNTRY_CODE


def normalize_phone_number(phone: str) -> str:
    """
    Rewrite a local phone number into international form.

    Args:
        phone: Phone number, e.g. 0712345678

    Returns:
        255712345678 for numbers with a leading 0, otherwise the input unchanged
    """
    if phone.startswith(LOCAL_PHONE_PREFIX):
        return TANZANIA_COUNTRY_CODE + phone[len(LOCAL_PHONE_PREFIX):]
    return phone


def format_amount(amount: Union[int, float, Decimal, str]) -> str:
    """
    Format amount to 2 decimal places for form-encoded requests.

    Args:
        amount: Amount to format

    Returns:
        Formatted amount string (e.g., "1000.00")
    """
    amount = Decimal(str(amount))
    return f"{amount:.2f}"


def json_amount(amount: Decimal) -> Union[int, float]:
    """Convert a Decimal amount into a JSON number."""
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


def parse_amount(amount: Any) -> Decimal:
    """
    Parse amount from a ZenoPay response.
    ZenoPay returns amounts as numbers or strings, sometimes not at all.

    Args:
        amount: Amount from API response

    Returns:
        Decimal amount
    """
    if amount is None or amount == '':
        return Decimal('0')
    try:
        return Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal('0')


def mask_sensitive(data: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of headers or payload with secrets replaced, for logging."""
    masked = dict(data)
    for key in masked:
        if key.lower() in SENSITIVE_FIELDS:
            masked[key] = '***'
    return masked
