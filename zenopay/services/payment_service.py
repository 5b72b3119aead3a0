"""
Payment service for the ZenoPay form-encoded API.
Handles order creation and order status lookups.
"""

import logging
from typing import Optional, Union

from ..config import ZenoPayConfig, config as default_config
from ..constants import Endpoint
from ..exceptions import APIError, ZenoPayException
from ..schemas import PaymentRequest, PaymentResult, StatusQuery, StatusResult
from ..utils.formatters import format_amount, normalize_phone_number
from ..utils.http_client import HTTPClient, decode_json
from ..utils.validators import validate_order_id, validate_payment_request
from .auth_service import AuthService

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Service for form-encoded payment operations.
    """

    def __init__(self, config: Optional[ZenoPayConfig] = None, http_client: Optional[HTTPClient] = None):
        self.config = config or default_config
        self.http_client = http_client or HTTPClient(timeout=self.config.timeout)
        self.auth_service = AuthService(self.config)

    def pay(self, request: PaymentRequest) -> PaymentResult:
        """
        Create a payment order.

        Args:
            request: Customer details, amount and callback URL

        Returns:
            PaymentResult with the provider-assigned order_id

        Raises:
            ValidationError: If the request is invalid (nothing is sent)
            ConfigError: If credentials are missing
            TransportError: If the request fails
            DecodeError: If the response is not JSON
            APIError: If the provider returns no order_id
        """
        logger.info(f"Creating payment order for {request.customer_email}")

        try:
            amount = validate_payment_request(request)
        except ZenoPayException as e:
            logger.error(f"Validation failed: {str(e)}")
            raise

        phone = request.customer_phone
        if self.config.normalize_phone_numbers:
            phone = normalize_phone_number(phone)

        payload = {'create_order': '1'}
        payload.update(self.auth_service.get_form_credentials())
        payload.update({
            'amount': format_amount(amount),
            'buyer_name': request.customer_name,
            'webhook_url': request.callback_url,
            'buyer_email': request.customer_email,
            'buyer_phone': phone,
        })

        body = self.http_client.post_form(self.config.get_url(Endpoint.PAY), data=payload)
        response = PaymentResult.from_dict(decode_json(body))

        if not response.order_id:
            logger.warning(f"Payment order rejected: {response.message}")
            raise APIError(
                response.message or "Payment order was not created",
                response_data=response.raw
            )

        logger.info(f"Payment order created. Order: {response.order_id}")
        return response

    def check_payment_status(self, order_id: Union[str, StatusQuery]) -> StatusResult:
        """
        Look up the status of a payment order.

        Args:
            order_id: Order ID returned by pay(), or a StatusQuery

        Returns:
            StatusResult as reported by the provider

        Raises:
            ValidationError: If order_id is empty and strict checking is enabled
            TransportError: If the request fails
            DecodeError: If the response is not JSON
            APIError: If the response has no order_id and
                ZENOPAY_REQUIRE_ORDER_ID_ALL is enabled
        """
        if isinstance(order_id, StatusQuery):
            order_id = order_id.order_id
        logger.info(f"Checking payment status for order: {order_id}")

        if self.config.strict_order_id_check:
            try:
                validate_order_id(order_id)
            except ZenoPayException as e:
                logger.error(f"Validation failed: {str(e)}")
                raise

        payload = {
            'check_status': '1',
            'order_id': order_id,
        }

        body = self.http_client.post_form(self.config.get_url(Endpoint.ORDER_STATUS), data=payload)
        response = StatusResult.from_dict(decode_json(body))

        if self.config.require_order_id_all and not response.order_id:
            logger.warning(f"Status lookup returned no order: {response.message}")
            raise APIError(
                response.message or "Order not found",
                response_data=response.raw
            )

        logger.info(
            f"Payment status retrieved. "
            f"Order: {order_id}, Status: {response.payment_status}"
        )
        return response
