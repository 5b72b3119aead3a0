"""
HTTP client for ZenoPay API communication.
"""

import json
import logging
from typing import Any, Dict, Optional

import requests

from ..constants import DEFAULT_TIMEOUT
from ..exceptions import DecodeError, TransportError
from .formatters import mask_sensitive

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'
JSON_CONTENT_TYPE = 'application/json'


class HTTPClient:
    """
    HTTP client wrapper for ZenoPay API requests.

    Every call is a single blocking round trip. The raw body is returned for
    any HTTP status; interpreting the payload is left to the caller.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: Optional[requests.Session] = None):
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
            session: Session to reuse (a new one is created if omitted)
        """
        self.timeout = timeout
        self.session = session or requests.Session()

    def _log_request(self, method: str, url: str, headers: Dict, data: Optional[Dict] = None):
        logger.info(f"ZenoPay API Request: {method} {url}")
        logger.debug(f"Headers: {mask_sensitive(headers)}")
        if data:
            logger.debug(f"Payload: {mask_sensitive(data)}")

    def _send(self, method: str, url: str, headers: Dict[str, str], **kwargs) -> bytes:
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                timeout=self.timeout,
                **kwargs
            )
            body = response.content
        except requests.RequestException as e:
            logger.error(f"ZenoPay API {method} {url} failed: {str(e)}")
            raise TransportError(f"Request to {url} failed: {str(e)}") from e

        logger.info(f"ZenoPay API Response: {response.status_code}")
        if response.status_code >= 400:
            logger.warning(
                f"ZenoPay API returned HTTP {response.status_code} for {method} {url}"
            )
        logger.debug(f"Response: {body[:1000]!r}")
        return body

    def post_form(
        self,
        url: str,
        data: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None
    ) -> bytes:
        """
        POST an application/x-www-form-urlencoded body.

        Returns:
            Raw response body

        Raises:
            TransportError: If the request cannot be sent or read
        """
        headers = dict(headers or {})
        headers.setdefault('Content-Type', FORM_CONTENT_TYPE)
        self._log_request('POST', url, headers, data)
        return self._send('POST', url, headers, data=data)

    def post_json(
        self,
        url: str,
        data: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None
    ) -> bytes:
        """
        POST a JSON body.

        Returns:
            Raw response body

        Raises:
            TransportError: If the request cannot be sent or read
        """
        headers = dict(headers or {})
        headers.setdefault('Content-Type', JSON_CONTENT_TYPE)
        self._log_request('POST', url, headers, data)
        return self._send('POST', url, headers, json=data)

    def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> bytes:
        """
        GET with query parameters.

        Returns:
            Raw response body

        Raises:
            TransportError: If the request cannot be sent or read
        """
        headers = dict(headers or {})
        self._log_request('GET', url, headers, params)
        return self._send('GET', url, headers, params=params)

    def close(self):
        """Close the session."""
        self.session.close()


def decode_json(body: bytes) -> Dict[str, Any]:
    """
    Decode a response body into a JSON object.

    Raises:
        DecodeError: If the body is not valid JSON or not a JSON object
    """
    try:
        data = json.loads(body)
    except (ValueError, TypeError) as e:
        logger.error(f"Failed to parse ZenoPay response: {str(e)}")
        raise DecodeError(
            f"Failed to parse API response: {str(e)}",
            response_data=body
        ) from e

    if not isinstance(data, dict):
        logger.error(f"Unexpected ZenoPay response shape: {type(data).__name__}")
        raise DecodeError(
            f"Expected a JSON object, got {type(data).__name__}",
            response_data=body
        )
    return data
