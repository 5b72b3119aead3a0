"""
Configuration management for the ZenoPay client.
"""

from django.conf import settings

from .constants import (
    API, DEFAULT_CURRENCY, DEFAULT_TIMEOUT, ENDPOINT_PATHS, Endpoint,
    FORM_API_BASE_URL, JSON_API_BASE_URL,
)
from .exceptions import ConfigError, UnknownEndpointError

FALSE_STRINGS = ('', '0', 'false', 'no', 'off')


class ZenoPayConfig:
    """
    Configuration manager for ZenoPay API settings.

    Every value comes from the matching constructor argument when one is
    given, otherwise from Django settings, otherwise from the default.
    Credentials are checked lazily so a config can always be built; reading
    a missing credential raises ConfigError.
    """

    def __init__(
        self,
        api_key=None,
        secret_key=None,
        account_id=None,
        base_url=None,
        api_base_url=None,
        timeout=None,
        normalize_phone_numbers=None,
        strict_order_id_check=None,
        require_order_id_all=None,
        currency=None,
    ):
        self._overrides = {
            'ZENOPAY_API_KEY': api_key,
            'ZENOPAY_SECRET_KEY': secret_key,
            'ZENOPAY_ACCOUNT_ID': account_id,
            'ZENOPAY_BASE_URL': base_url,
            'ZENOPAY_API_BASE_URL': api_base_url,
            'ZENOPAY_TIMEOUT': timeout,
            'ZENOPAY_NORMALIZE_PHONE_NUMBERS': normalize_phone_numbers,
            'ZENOPAY_STRICT_ORDER_ID_CHECK': strict_order_id_check,
            'ZENOPAY_REQUIRE_ORDER_ID_ALL': require_order_id_all,
            'ZENOPAY_CURRENCY': currency,
        }

    def _get(self, name, default=None):
        override = self._overrides.get(name)
        if override is not None:
            return override
        if not settings.configured:
            return default
        return getattr(settings, name, default)

    def _get_bool(self, name, default):
        value = self._get(name, default)
        # Settings read from the environment arrive as strings
        if isinstance(value, str):
            return value.strip().lower() not in FALSE_STRINGS
        return bool(value)

    def _require(self, name):
        value = self._get(name, '')
        if not value:
            raise ConfigError(
                f"{name} is not configured. "
                "Pass it to ZenoPayConfig or add it to your Django settings."
            )
        return value

    @property
    def api_key(self):
        """Get ZenoPay API key."""
        return self._require('ZENOPAY_API_KEY')

    @property
    def secret_key(self):
        """Get ZenoPay secret key (form API only)."""
        return self._require('ZENOPAY_SECRET_KEY')

    @property
    def account_id(self):
        """Get ZenoPay account ID (form API only)."""
        return self._require('ZENOPAY_ACCOUNT_ID')

    @property
    def base_url(self):
        """Base URL of the form-encoded API."""
        return self._get('ZENOPAY_BASE_URL', FORM_API_BASE_URL)

    @property
    def api_base_url(self):
        """Base URL of the JSON API."""
        return self._get('ZENOPAY_API_BASE_URL', JSON_API_BASE_URL)

    @property
    def timeout(self):
        return self._get('ZENOPAY_TIMEOUT', DEFAULT_TIMEOUT)

    @property
    def normalize_phone_numbers(self):
        return self._get_bool('ZENOPAY_NORMALIZE_PHONE_NUMBERS', True)

    @property
    def strict_order_id_check(self):
        return self._get_bool('ZENOPAY_STRICT_ORDER_ID_CHECK', True)

    @property
    def require_order_id_all(self):
        return self._get_bool('ZENOPAY_REQUIRE_ORDER_ID_ALL', False)

    @property
    def currency(self):
        """Get default checkout currency."""
        return self._get('ZENOPAY_CURRENCY', DEFAULT_CURRENCY.value)

    def get_url(self, endpoint):
        """
        Get full URL for an API endpoint.

        Args:
            endpoint: Endpoint member or its string value

        Returns:
            Full URL combining the right base URL and the endpoint path

        Raises:
            UnknownEndpointError: If endpoint is not a known operation name
        """
        try:
            endpoint = Endpoint(endpoint)
        except ValueError:
            raise UnknownEndpointError(
                f"Unknown endpoint: {endpoint!r}. "
                f"Expected one of: {', '.join(e.value for e in Endpoint)}",
                field='endpoint'
            )

        api, path = ENDPOINT_PATHS[endpoint]
        base = self.base_url if api is API.FORM else self.api_base_url
        base = base.rstrip('/')
        return f"{base}/{path}"


# Default instance used when no config is passed to a client
config = ZenoPayConfig()
