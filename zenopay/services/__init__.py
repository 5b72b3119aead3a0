"""
Service modules for ZenoPay operations.
"""

from .auth_service import AuthService
from .payment_service import PaymentService
from .mobile_money_service import MobileMoneyService
from .payout_service import PayoutService
from .checkout_service import CheckoutService

__all__ = [
    'AuthService',
    'PaymentService',
    'MobileMoneyService',
    'PayoutService',
    'CheckoutService',
]
