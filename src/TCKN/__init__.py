"""
TC identity number verification client.

Checks an (identity number, first name, last name, birth year) tuple
against the NVI KPSPublic web service.

Exports:
    verify: Boolean verification (indeterminate exchanges report False)
    check: Verification returning a VerificationResult
    IdentityVerifier: Configurable client with injectable transport
    VerificationRequest: Validated, normalized input tuple
    VerificationResult / VerificationStatus: Outcome of one call
    InvalidInputError, VerificationIndeterminateError: Error types

Example:
    from TCKN import check

    result = check(12345678901, "Ali", "Veli", 1990)
    if result.indeterminate:
        print(f"Service unavailable: {result.cause}")
    elif result.valid:
        print("Identity confirmed")
"""

from .core.exceptions import (
    ConfigError,
    InvalidInputError,
    ResponseParseError,
    TCKNError,
    TransportError,
    VerificationIndeterminateError,
)
from .services.kps import (
    IdentityVerifier,
    RequestsTransport,
    VerificationRequest,
    VerificationResult,
    VerificationStatus,
    check,
    verify,
)

__all__ = [
    "IdentityVerifier",
    "RequestsTransport",
    "VerificationRequest",
    "VerificationResult",
    "VerificationStatus",
    "check",
    "verify",
    "TCKNError",
    "ConfigError",
    "InvalidInputError",
    "VerificationIndeterminateError",
    "TransportError",
    "ResponseParseError",
]

__version__ = "0.1.0"
