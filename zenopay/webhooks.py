"""
Decoding and verification of ZenoPay webhook payloads.

ZenoPay calls the ``webhook_url`` of a USSD push with the order's final
status. This module only interprets that payload; serving the endpoint is
left to the host application.
"""

import hmac
import logging
from typing import Any, Dict, Mapping, Optional, Union

from .config import ZenoPayConfig, config as default_config
from .constants import API_KEY_HEADER
from .exceptions import ConfigError
from .schemas import WebhookEvent
from .utils.http_client import decode_json

logger = logging.getLogger(__name__)


def parse_webhook(body: Union[bytes, str, Dict[str, Any]]) -> WebhookEvent:
    """
    Decode a webhook body into a WebhookEvent.

    Args:
        body: Raw request body, or an already decoded JSON object

    Raises:
        DecodeError: If the body is not a JSON object
    """
    data = body if isinstance(body, dict) else decode_json(body)
    event = WebhookEvent.from_dict(data)
    logger.info(
        f"ZenoPay webhook received. Order: {event.order_id}, "
        f"Status: {event.payment_status}"
    )
    return event


def verify_webhook_api_key(headers: Mapping[str, str], config: Optional[ZenoPayConfig] = None) -> bool:
    """
    Check the x-api-key header of a webhook request against the configured key.

    Args:
        headers: Request headers
        config: Configuration holding the API key

    Returns:
        True if the header matches, False otherwise
    """
    config = config or default_config
    received = None
    for name, value in headers.items():
        if name.lower() == API_KEY_HEADER:
            received = value
            break

    if not received:
        logger.warning("ZenoPay webhook without x-api-key header")
        return False

    try:
        expected = config.api_key
    except ConfigError:
        logger.error("Cannot verify ZenoPay webhook: API key is not configured")
        raise

    return hmac.compare_digest(received.encode('utf-8'), expected.encode('utf-8'))
