"""
Checkout service for ZenoPay hosted payment pages.
"""

import logging
from typing import Optional

from ..config import ZenoPayConfig, config as default_config
from ..constants import Endpoint
from ..exceptions import ZenoPayException
from ..schemas import CheckoutRequest, CheckoutResult
from ..utils.formatters import json_amount, normalize_phone_number
from ..utils.http_client import HTTPClient, decode_json
from ..utils.validators import validate_amount, validate_metadata
from .auth_service import AuthService

logger = logging.getLogger(__name__)


class CheckoutService:

    def __init__(self, config: Optional[ZenoPayConfig] = None, http_client: Optional[HTTPClient] = None):
        self.config = config or default_config
        self.http_client = http_client or HTTPClient(timeout=self.config.timeout)
        self.auth_service = AuthService(self.config)

    def checkout(self, request: CheckoutRequest) -> CheckoutResult:
        """
        Create a hosted checkout and get the payment link.

        The link is returned exactly as the provider sent it. A non-empty
        ``error`` on the result means the checkout was not created.

        Raises:
            ValidationError: If amount or metadata is invalid
            ConfigError: If the API key is missing
            TransportError: If the request fails
            DecodeError: If the response is not JSON
        """
        logger.info(f"Creating checkout for order: {request.order_id}")

        try:
            amount = validate_amount(request.amount)
            validate_metadata(request.metadata)
        except ZenoPayException as e:
            logger.error(f"Validation failed: {str(e)}")
            raise

        phone = request.customer_phone
        if self.config.normalize_phone_numbers:
            phone = normalize_phone_number(phone)

        payload = {
            'amount': json_amount(amount),
            'currency': request.currency or self.config.currency,
            'redirect_url': request.redirect_url,
            'buyer_name': request.customer_name,
            'buyer_phone': phone,
            'buyer_email': request.customer_email,
            'webhook_url': request.webhook_url,
            'metadata': request.metadata,
            'order_id': request.order_id,
        }

        headers = self.auth_service.get_auth_header()
        body = self.http_client.post_json(self.config.get_url(Endpoint.CHECKOUT), data=payload, headers=headers)
        response = CheckoutResult.from_dict(decode_json(body))

        if response.error:
            logger.warning(f"Checkout failed for order {request.order_id}: {response.error}")
        else:
            logger.info(f"Checkout created. Reference: {response.transaction_reference}")
        return response
