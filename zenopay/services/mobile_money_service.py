"""
Mobile money service for the ZenoPay JSON API.
Handles USSD push requests and order status checks.
"""

import logging
from typing import Optional, Union

from ..config import ZenoPayConfig, config as default_config
from ..constants import Endpoint
from ..exceptions import APIError, ZenoPayException
from ..schemas import CheckStatusResult, StatusQuery, USSDPushRequest, USSDPushResult
from ..utils.formatters import json_amount, normalize_phone_number
from ..utils.http_client import HTTPClient, decode_json
from ..utils.validators import validate_amount, validate_metadata, validate_order_id
from .auth_service import AuthService

logger = logging.getLogger(__name__)


class MobileMoneyService:
    """
    Service for USSD push payments.
    """

    def __init__(self, config: Optional[ZenoPayConfig] = None, http_client: Optional[HTTPClient] = None):
        self.config = config or default_config
        self.http_client = http_client or HTTPClient(timeout=self.config.timeout)
        self.auth_service = AuthService(self.config)

    def push_ussd(self, request: USSDPushRequest) -> USSDPushResult:
        """
        Send a USSD push prompt to the customer's phone.

        Args:
            request: Amount, order ID and customer details

        Returns:
            USSDPushResult as sent by the provider. Check ``ok`` or
            ``status`` to see whether the push was accepted.

        Raises:
            ValidationError: If amount or metadata is invalid
            ConfigError: If the API key is missing
            TransportError: If the request fails
            DecodeError: If the response is not JSON
            APIError: If the response has no order_id and
                ZENOPAY_REQUIRE_ORDER_ID_ALL is enabled
        """
        logger.info(f"Initiating USSD push for order: {request.order_id}")

        try:
            amount = validate_amount(request.amount)
            if request.metadata is not None:
                validate_metadata(request.metadata)
        except ZenoPayException as e:
            logger.error(f"Validation failed: {str(e)}")
            raise

        phone = request.customer_phone
        if self.config.normalize_phone_numbers:
            phone = normalize_phone_number(phone)

        payload = {
            'amount': json_amount(amount),
            'order_id': request.order_id,
            'buyer_name': request.customer_name,
            'buyer_phone': phone,
            'buyer_email': request.customer_email,
        }
        if request.webhook_url:
            payload['webhook_url'] = request.webhook_url
        if request.metadata is not None:
            payload['metadata'] = request.metadata

        headers = self.auth_service.get_auth_header()
        body = self.http_client.post_json(self.config.get_url(Endpoint.PUSH), data=payload, headers=headers)
        response = USSDPushResult.from_dict(decode_json(body))

        if self.config.require_order_id_all and not response.order_id:
            logger.warning(f"USSD push returned no order: {response.message}")
            raise APIError(
                response.message or "USSD push was not accepted",
                response_data=response.raw
            )

        logger.info(
            f"USSD push sent. Order: {request.order_id}, "
            f"Status: {response.status}, Result code: {response.result_code}"
        )
        return response

    def check_status(self, order_id: Union[str, StatusQuery]) -> CheckStatusResult:
        """
        Check the status of a USSD push order.

        Args:
            order_id: Order ID used in push_ussd(), or a StatusQuery

        Returns:
            CheckStatusResult with one TransactionRecord per transaction

        Raises:
            ValidationError: If order_id is empty and strict checking is enabled
            ConfigError: If the API key is missing
            TransportError: If the request fails
            DecodeError: If the response is not JSON
        """
        if isinstance(order_id, StatusQuery):
            order_id = order_id.order_id
        logger.info(f"Checking order status for order: {order_id}")

        if self.config.strict_order_id_check:
            try:
                validate_order_id(order_id)
            except ZenoPayException as e:
                logger.error(f"Validation failed: {str(e)}")
                raise

        headers = self.auth_service.get_auth_header()
        body = self.http_client.get(
            self.config.get_url(Endpoint.STATUS),
            params={'order_id': order_id},
            headers=headers
        )
        response = CheckStatusResult.from_dict(decode_json(body))

        logger.info(
            f"Order status retrieved. Order: {order_id}, "
            f"Result: {response.result}, Records: {len(response.records)}"
        )
        return response
