"""
Custom exceptions for the TC identity verification client.

This module defines a hierarchy of domain-specific exceptions so callers
can tell bad input apart from an exchange that could not be completed.

Module Input:
    - Error conditions from validation, transport and response parsing
    - Optional error details as dictionaries

Module Output:
    - Structured exception objects with message and details
    - Consistent error interface for catch blocks
"""
from typing import Optional, Any


class TCKNError(Exception):
    """
    Base exception for all verification client errors.

    Attributes:
        message (str): Human-readable error description
        details (dict[str, Any]): Optional structured error details
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """
        Initialize exception with message and optional details.

        Args:
            message (str): Human-readable error description
            details (Optional[dict[str, Any]]): Additional structured error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(TCKNError):
    """
    Raised when configuration is invalid.

    Common scenarios:
        - Unknown log level name
        - Non-positive request timeout
        - Empty endpoint URL
    """
    pass


class InvalidInputError(TCKNError):
    """
    Raised when one of the four verification inputs fails validation.

    The request is never sent when this is raised. ``details["field"]``
    names the offending input.

    Common scenarios:
        - Identity number not exactly 11 digits
        - Blank first or last name
        - Birth year not exactly 4 digits
    """

    @property
    def field(self) -> Optional[str]:
        return self.details.get("field")


class VerificationIndeterminateError(TCKNError):
    """
    Raised when the service answer could not be obtained or understood.

    This is NOT a negative answer from the registry. The legacy boolean
    path folds it into ``False``; strict callers see it raised.
    """
    pass


class TransportError(VerificationIndeterminateError):
    """
    Raised when the HTTPS exchange fails.

    Common scenarios:
        - DNS or connection failures
        - TLS handshake errors
        - Timeouts
        - Non-success HTTP status codes
    """
    pass


class ResponseParseError(VerificationIndeterminateError):
    """
    Raised when the SOAP response cannot be interpreted.

    Common scenarios:
        - Body is not well-formed XML
        - No (or more than one) TCKimlikNoDogrulaResult element
        - Result text is not a boolean literal
    """
    pass
