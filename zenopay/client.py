"""
High-level ZenoPay client exposing every operation behind one object.
"""

import logging
from typing import Optional

from .config import ZenoPayConfig, config as default_config
from .schemas import (
    CheckoutRequest, CheckoutResult, CheckStatusResult, PaymentRequest,
    PaymentResult, SendMoneyRequest, SendMoneyResult, StatusResult,
    USSDPushRequest, USSDPushResult,
)
from .services import CheckoutService, MobileMoneyService, PaymentService, PayoutService
from .utils.http_client import HTTPClient

logger = logging.getLogger(__name__)


class ZenoPay:
    """
    ZenoPay API client.

    All services share one HTTP session. Use as a context manager, or call
    close() when done.

    Example:
        with ZenoPay(ZenoPayConfig(api_key="...")) as zenopay:
            result = zenopay.push_ussd(USSDPushRequest(...))
    """

    def __init__(self, config: Optional[ZenoPayConfig] = None, http_client: Optional[HTTPClient] = None):
        self.config = config or default_config
        self.http_client = http_client or HTTPClient(timeout=self.config.timeout)
        self.payments = PaymentService(self.config, self.http_client)
        self.mobile_money = MobileMoneyService(self.config, self.http_client)
        self.payouts = PayoutService(self.config, self.http_client)
        self.checkouts = CheckoutService(self.config, self.http_client)

    def pay(self, request: PaymentRequest) -> PaymentResult:
        return self.payments.pay(request)

    def check_payment_status(self, order_id: str) -> StatusResult:
        return self.payments.check_payment_status(order_id)

    def push_ussd(self, request: USSDPushRequest) -> USSDPushResult:
        return self.mobile_money.push_ussd(request)

    def check_status(self, order_id: str) -> CheckStatusResult:
        return self.mobile_money.check_status(order_id)

    def send_money(self, request: SendMoneyRequest) -> SendMoneyResult:
        return self.payouts.send_money(request)

    def checkout(self, request: CheckoutRequest) -> CheckoutResult:
        return self.checkouts.checkout(request)

    def close(self):
        """Close the underlying HTTP session."""
        logger.debug("Closing ZenoPay HTTP session")
        self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
