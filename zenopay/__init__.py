"""
ZenoPay client for Django

Mobile money payments through ZenoPay: USSD push, hosted checkout,
wallet cash-in and order status checks.
"""

from .client import ZenoPay
from .config import ZenoPayConfig
from .constants import Endpoint, PaymentStatus
from .exceptions import (
    APIError, ConfigError, DecodeError, TransportError, UnknownEndpointError,
    ValidationError, ZenoPayException,
)
from .schemas import (
    CheckoutRequest, CheckoutResult, CheckStatusResult, PaymentRequest,
    PaymentResult, SendMoneyRequest, SendMoneyResult, StatusQuery,
    StatusResult, TransactionRecord, USSDPushRequest, USSDPushResult,
    WebhookEvent,
)

__version__ = "0.1.0"

__all__ = [
    'ZenoPay',
    'ZenoPayConfig',
    'Endpoint',
    'PaymentStatus',
    'ZenoPayException',
    'ValidationError',
    'ConfigError',
    'TransportError',
    'DecodeError',
    'APIError',
    'UnknownEndpointError',
    'PaymentRequest',
    'PaymentResult',
    'StatusQuery',
    'StatusResult',
    'USSDPushRequest',
    'USSDPushResult',
    'CheckStatusResult',
    'TransactionRecord',
    'SendMoneyRequest',
    'SendMoneyResult',
    'CheckoutRequest',
    'CheckoutResult',
    'WebhookEvent',
]
