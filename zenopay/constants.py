"""
Constants and enums for ZenoPay operations.
"""

from enum import Enum


class Endpoint(str, Enum):
    """Logical operation names understood by the endpoint resolver."""
    PUSH = "push"
    STATUS = "status"
    CASHIN = "cashin"
    CHECKOUT = "checkout"
    PAY = "pay"
    ORDER_STATUS = "order-status"


class API(str, Enum):
    """The two ZenoPay API surfaces."""
    FORM = "form"  # legacy form-encoded API
    JSON = "json"  # x-api-key authenticated JSON API


# Endpoint -> (API surface, path relative to that surface's base URL)
ENDPOINT_PATHS = {
    Endpoint.PUSH: (API.JSON, "mobile_money_tanzania"),
    Endpoint.STATUS: (API.JSON, "order-status"),
    Endpoint.CASHIN: (API.JSON, "walletcashin/process"),
    Endpoint.CHECKOUT: (API.JSON, "checkout"),
    Endpoint.PAY: (API.FORM, ""),
    Endpoint.ORDER_STATUS: (API.FORM, "order-status"),
}


class PaymentStatus(str, Enum):
    """Payment statuses reported by ZenoPay."""
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


class UtilityCode(str, Enum):
    """Wallet utility codes."""
    CASHIN = "CASHIN"


class Currency(str, Enum):
    """Supported currencies."""
    TZS = "TZS"


# Base URLs
FORM_API_BASE_URL = "https://api.zeno.africa"
JSON_API_BASE_URL = "https://zenoapi.com/api/payments"

# Authentication
API_KEY_HEADER = "x-api-key"

# Phone number settings
TANZANIA_COUNTRY_CODE = "255"
LOCAL_PHONE_PREFIX = "0"
VALID_PHONE_LENGTHS = (10, 12)  # 0XXXXXXXXX or 255XXXXXXXXX

# Default settings
DEFAULT_CURRENCY = Currency.TZS
DEFAULT_TIMEOUT = 30  # seconds

# Fields masked in logs
SENSITIVE_FIELDS = ("x-api-key", "api_key", "secret_key", "pin")
