"""
Payout service for ZenoPay wallet cash-in.
Sends money from the merchant wallet to a mobile money number.
"""

import logging
from typing import Optional

from ..config import ZenoPayConfig, config as default_config
from ..constants import Endpoint
from ..exceptions import ValidationError, ZenoPayException
from ..schemas import SendMoneyRequest, SendMoneyResult
from ..utils.formatters import json_amount, normalize_phone_number
from ..utils.http_client import HTTPClient, decode_json
from ..utils.validators import validate_amount, validate_phone_number, validate_required
from .auth_service import AuthService

logger = logging.getLogger(__name__)


class PayoutService:
    """
    Service for wallet cash-in operations.
    """

    def __init__(self, config: Optional[ZenoPayConfig] = None, http_client: Optional[HTTPClient] = None):
        self.config = config or default_config
        self.http_client = http_client or HTTPClient(timeout=self.config.timeout)
        self.auth_service = AuthService(self.config)

    def send_money(self, request: SendMoneyRequest) -> SendMoneyResult:
        """
        Credit a recipient's mobile money wallet.

        Args:
            request: Transaction ID, recipient phone, amount and wallet PIN

        Returns:
            SendMoneyResult with amounts, new balance and the provider's
            nested response. Field errors reported by the provider end up
            in ``errors``.

        Raises:
            ValidationError: If the request is invalid
            ConfigError: If the API key is missing
            TransportError: If the request fails
            DecodeError: If the response is not JSON
        """
        logger.info(f"Sending money. Transaction: {request.transaction_id}")

        try:
            validate_required(request.transaction_id, 'transaction_id')
            validate_phone_number(request.phone_number, field='phone_number')
            amount = validate_amount(request.amount)
            if isinstance(request.pin, bool) or not isinstance(request.pin, int):
                raise ValidationError("PIN must be an integer", field='pin')
        except ZenoPayException as e:
            logger.error(f"Validation failed: {str(e)}")
            raise

        phone = request.phone_number
        if self.config.normalize_phone_numbers:
            phone = normalize_phone_number(phone)

        payload = {
            'transid': request.transaction_id,
            'utilitycode': request.utility_code,
            'utilityref': phone,
            'amount': json_amount(amount),
            'pin': request.pin,
        }

        headers = self.auth_service.get_auth_header()
        body = self.http_client.post_json(self.config.get_url(Endpoint.CASHIN), data=payload, headers=headers)
        response = SendMoneyResult.from_dict(decode_json(body))

        if response.errors:
            logger.warning(f"Cash-in rejected: {response.message} {response.errors}")
        else:
            logger.info(
                f"Cash-in processed. Transaction: {request.transaction_id}, "
                f"Status: {response.status}, New balance: {response.new_balance}"
            )
        return response
