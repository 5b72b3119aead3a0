"""
Utility modules for ZenoPay operations.
"""

from .http_client import HTTPClient, decode_json
from .validators import (
    validate_phone_number,
    validate_amount,
    validate_email,
    validate_url,
    validate_order_id,
    validate_payment_request,
)
from .formatters import (
    normalize_phone_number,
    format_amount,
    parse_amount,
)

__all__ = [
    'HTTPClient',
    'decode_json',
    'validate_phone_number',
    'validate_amount',
    'validate_email',
    'validate_url',
    'validate_order_id',
    'validate_payment_request',
    'normalize_phone_number',
    'format_amount',
    'parse_amount',
]
