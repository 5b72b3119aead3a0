"""
Authentication helpers for the ZenoPay APIs.

The JSON API authenticates with an ``x-api-key`` header. The form API
expects the credentials as form fields merged into the request body.
"""

from typing import Dict, Optional

from ..config import ZenoPayConfig, config as default_config
from ..constants import API_KEY_HEADER


class AuthService:
    """
    Builds authentication headers and form credentials from configuration.
    """

    def __init__(self, config: Optional[ZenoPayConfig] = None):
        self.config = config or default_config

    def get_auth_header(self) -> Dict[str, str]:
        """
        Get authentication header for JSON API requests.

        Returns:
            Dictionary with the x-api-key header

        Raises:
            ConfigError: If the API key is not configured
        """
        return {API_KEY_HEADER: self.config.api_key}

    def get_form_credentials(self) -> Dict[str, str]:
        """
        Get credential fields for form API requests.

        Raises:
            ConfigError: If any of the credentials is not configured
        """
        return {
            'api_key': self.config.api_key,
            'account_id': self.config.account_id,
            'secret_key': self.config.secret_key,
        }
