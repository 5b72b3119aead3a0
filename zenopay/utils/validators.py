"""
Validation utilities for ZenoPay payment operations.
"""

import json
import re
from decimal import Decimal, InvalidOperation
from typing import Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator

from ..constants import VALID_PHONE_LENGTHS
from ..exceptions import InvalidAmountError, InvalidPhoneNumberError, ValidationError

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')

_url_validator = URLValidator(schemes=['http', 'https'])


def validate_required(value: Any, field: str) -> str:
    """Reject missing or blank strings."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required", field=field)
    return value


def validate_email(email: str, field: str = 'customer_email') -> str:
    """
    Validate email address.

    Raises:
        ValidationError: If email is missing or malformed
    """
    validate_required(email, field)
    if not isinstance(email, str):
        raise ValidationError(f"Email must be a string. Got: {email!r}", field=field)
    if not EMAIL_PATTERN.match(email):
        raise ValidationError(f"Invalid email format: {email}", field=field)
    return email


def validate_phone_number(phone: str, field: str = 'customer_phone') -> str:
    """
    Validate phone number length.
    Accepts local (0XXXXXXXXX) and international (255XXXXXXXXX) forms.

    Raises:
        InvalidPhoneNumberError: If phone number is missing or has the wrong length
    """
    if not phone:
        raise InvalidPhoneNumberError("Phone number is required", field=field)

    if not isinstance(phone, str):
        raise InvalidPhoneNumberError(
            f"Phone number must be a string. Got: {phone!r}", field=field
        )

    if len(phone) not in VALID_PHONE_LENGTHS:
        raise InvalidPhoneNumberError(
            f"Phone number must be 10 or 12 characters long. "
            f"Got: {phone} ({len(phone)} characters)",
            field=field
        )
    return phone


def validate_amount(amount: Any, field: str = 'amount') -> Decimal:
    """
    Validate payment amount.

    Returns:
        Validated amount as Decimal

    Raises:
        InvalidAmountError: If amount is not a number or not greater than zero,
            or has more than 2 decimal places
    """
    if isinstance(amount, bool):
        raise InvalidAmountError(f"Invalid amount format: {amount}", field=field)
    try:
        amount = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmountError(f"Invalid amount format: {amount}", field=field)

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError(
            f"Amount must be greater than zero. Got: {amount}", field=field
        )

    # Form requests send 2 decimal places
    if amount != amount.quantize(Decimal('0.01')):
        raise InvalidAmountError(
            f"Amount can have at most 2 decimal places. Got: {amount}", field=field
        )
    return amount


def validate_url(url: str, field: str = 'callback_url') -> str:
    """
    Validate that a URL is well formed.

    Raises:
        ValidationError: If URL is missing or malformed
    """
    validate_required(url, field)
    try:
        _url_validator(url)
    except DjangoValidationError:
        raise ValidationError(f"Invalid URL: {url}", field=field)
    return url


def validate_order_id(order_id: str, field: str = 'order_id') -> str:
    """
    Validate order ID.

    Raises:
        ValidationError: If order ID is empty
    """
    if not order_id or not str(order_id).strip():
        raise ValidationError("Order ID is required", field=field)
    return order_id


def validate_metadata(metadata: Any, field: str = 'metadata') -> Any:
    """Metadata is passed through as-is but must be JSON-serializable."""
    try:
        json.dumps(metadata)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Metadata must be JSON-serializable: {e}", field=field)
    return metadata


def validate_payment_request(request) -> Decimal:
    """
    Validate a PaymentRequest before it is sent.
    Rules are checked in order and the first violation is raised.

    Returns:
        The validated amount as Decimal

    Raises:
        ValidationError: For the first violated rule
    """
    validate_required(request.customer_name, 'customer_name')
    validate_email(request.customer_email)
    validate_phone_number(request.customer_phone)
    amount = validate_amount(request.amount)
    validate_url(request.callback_url)
    return amount
