"""
Custom exceptions for ZenoPay operations.
"""

ERROR_PREFIX = "zenopay error"


class ZenoPayException(Exception):
    """
    Base exception for all ZenoPay-related errors.

    ``message`` keeps the raw text (often the provider's own message) while
    ``str()`` renders it with the uniform ``zenopay error:`` tag.
    """

    def __init__(self, message, error_code=None, response_data=None):
        self.message = message
        self.error_code = error_code
        self.response_data = response_data
        super().__init__(self.message)

    def __str__(self):
        return f"{ERROR_PREFIX}: {self.message}"


class ValidationError(ZenoPayException):
    """Raised when input validation fails before a request is sent."""

    def __init__(self, message, field=None, **kwargs):
        self.field = field
        super().__init__(message, **kwargs)


class ConfigError(ZenoPayException):
    """Raised when a required credential or setting is missing."""
    pass


class TransportError(ZenoPayException):
    """Raised when the HTTP request cannot be built, sent or read."""
    pass


class DecodeError(ZenoPayException):
    """Raised when a response body is not the JSON object we expect."""
    pass


class APIError(ZenoPayException):
    """Raised when a well-formed response signals a business failure."""
    pass


class InvalidPhoneNumberError(ValidationError):
    """Raised when phone number format is invalid."""
    pass


class InvalidAmountError(ValidationError):
    """Raised when amount is invalid."""
    pass


class UnknownEndpointError(ValidationError):
    """Raised when an operation name does not map to a known endpoint."""
    pass
