"""
TC identity number verification against the NVI KPSPublic service.

This module runs the whole verification transaction for one identity
tuple: validate and normalize inputs, render the SOAP envelope, POST it
once through the configured transport, and read the boolean answer from
the response.

Two entry points are provided:
- check(): returns a VerificationResult that keeps "registry said no"
  (NOT_VERIFIED) apart from "no usable answer" (INDETERMINATE)
- verify(): legacy boolean answer, where an indeterminate exchange is
  reported as False

Both raise InvalidInputError before any network I/O when an input is bad.

Usage:
    from TCKN import verify

    if verify(12345678901, "Ali", "Veli", 1990):
        print("Identity confirmed")
"""

from __future__ import annotations

from typing import Optional, Union

from ...core.exceptions import (
    InvalidInputError,
    ResponseParseError,
    TransportError,
    VerificationIndeterminateError,
)
from ...core.logging_config import get_logger
from ...core.settings import Settings, settings as default_settings
from .models import VerificationRequest, VerificationResult
from .soap import build_envelope, build_headers, parse_result
from .transport import RequestsTransport, Transport

logger = get_logger(__name__)


class IdentityVerifier:
    """
    Client for the KPSPublic TCKimlikNoDogrula operation.

    Holds configuration only (endpoint, transport, casing rules); no
    identity data is stored on the instance, so one verifier can serve any
    number of sequential or concurrent calls.

    Attributes:
        endpoint_url (str): SOAP endpoint to POST to
        transport (Transport): Callable performing the HTTPS exchange
        turkish_casing (bool): Use Turkish upper-casing for names
    """

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        transport: Optional[Transport] = None,
        turkish_casing: Optional[bool] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize verifier from explicit arguments or settings.

        Args:
            endpoint_url: Override for the service URL
            transport: Injected transport; defaults to RequestsTransport
                using the configured timeout
            turkish_casing: Override for settings.turkish_casing
            settings: Settings instance (default: package singleton)

        Raises:
            ConfigError: If the configured timeout or endpoint is invalid
        """
        cfg = settings or default_settings
        self.endpoint_url = endpoint_url or cfg.get_endpoint_url()
        self.transport = transport or RequestsTransport(timeout=cfg.get_timeout())
        self.turkish_casing = cfg.turkish_casing if turkish_casing is None else turkish_casing

    def build_request(
        self,
        identity_number: Union[int, str],
        first_name: Optional[str],
        last_name: Optional[str],
        birth_year: Union[int, str],
    ) -> VerificationRequest:
        """
        Validate raw inputs into a VerificationRequest.

        Raises:
            InvalidInputError: If any input fails validation
        """
        try:
            return VerificationRequest.build(
                identity_number,
                first_name,
                last_name,
                birth_year,
                turkish_casing=self.turkish_casing,
            )
        except InvalidInputError as e:
            logger.warning(f"Verification input rejected: {e.message}", extra={"field": e.field})
            raise

    def _exchange(self, request: VerificationRequest) -> bool:
        """
        Send one request and return the registry's answer.

        Raises:
            TransportError: If the exchange did not complete
            ResponseParseError: If the response could not be interpreted
        """
        body = build_envelope(request).encode("utf-8")
        headers = build_headers(body)

        logger.info(
            f"Verifying identity {request.masked_identity_number} "
            f"(birth year {request.birth_year})"
        )
        logger.debug(f"SOAP payload size: {len(body)} bytes")

        try:
            raw = self.transport(self.endpoint_url, body, headers)
        except TransportError:
            raise
        except Exception as e:
            raise TransportError(
                f"Transport failed: {str(e)}",
                details={"url": self.endpoint_url, "error_type": type(e).__name__}
            ) from e

        if raw is None:
            raise TransportError("No response from verification service")

        try:
            if isinstance(raw, (bytes, bytearray, memoryview)):
                text = bytes(raw).decode("utf-8-sig")
            else:
                text = str(raw)
        except UnicodeDecodeError as e:
            raise ResponseParseError(
                "Response body is not valid UTF-8",
                details={"error": str(e)}
            ) from e

        return parse_result(text)

    def check(
        self,
        identity_number: Union[int, str],
        first_name: Optional[str],
        last_name: Optional[str],
        birth_year: Union[int, str],
        strict: bool = False,
    ) -> VerificationResult:
        """
        Verify an identity tuple and report how the answer was reached.

        Args:
            identity_number: 11-digit TC identity number
            first_name: First name, trimmed and upper-cased before sending
            last_name: Last name, trimmed and upper-cased before sending
            birth_year: 4-digit birth year
            strict: Raise instead of returning an INDETERMINATE result

        Returns:
            VerificationResult: VERIFIED, NOT_VERIFIED or INDETERMINATE

        Raises:
            InvalidInputError: If an input is invalid (no request is sent)
            VerificationIndeterminateError: Only when strict is True and
                no usable answer was obtained
        """
        request = self.build_request(identity_number, first_name, last_name, birth_year)
        return self.check_request(request, strict=strict)

    def check_request(self, request: VerificationRequest, strict: bool = False) -> VerificationResult:
        """Run the exchange for an already validated request."""
        try:
            answer = self._exchange(request)
        except VerificationIndeterminateError as e:
            logger.warning(
                f"Verification indeterminate for {request.masked_identity_number}: {e.message}",
                exc_info=True,
                extra={"error_type": type(e).__name__}
            )
            if strict:
                raise
            return VerificationResult.failed(e.message)

        logger.info(
            f"Verification completed for {request.masked_identity_number}: "
            f"{'verified' if answer else 'not verified'}"
        )
        return VerificationResult.from_answer(answer)

    def verify(
        self,
        identity_number: Union[int, str],
        first_name: Optional[str],
        last_name: Optional[str],
        birth_year: Union[int, str],
    ) -> bool:
        """
        Legacy boolean verification.

        An unreachable service or unreadable response is reported as False,
        exactly like a negative registry answer. Use check() to tell the
        two apart.

        Raises:
            InvalidInputError: If an input is invalid (no request is sent)
        """
        return self.check(identity_number, first_name, last_name, birth_year).valid

    def is_valid(self, request: VerificationRequest) -> bool:
        """Legacy boolean verification for an already built request."""
        return self.check_request(request).valid


def check(
    identity_number: Union[int, str],
    first_name: Optional[str],
    last_name: Optional[str],
    birth_year: Union[int, str],
    strict: bool = False,
    transport: Optional[Transport] = None,
) -> VerificationResult:
    """Verify with a verifier built from default settings. See IdentityVerifier.check."""
    verifier = IdentityVerifier(transport=transport)
    return verifier.check(identity_number, first_name, last_name, birth_year, strict=strict)


def verify(
    identity_number: Union[int, str],
    first_name: Optional[str],
    last_name: Optional[str],
    birth_year: Union[int, str],
    transport: Optional[Transport] = None,
) -> bool:
    """Legacy boolean verification with default settings. See IdentityVerifier.verify."""
    verifier = IdentityVerifier(transport=transport)
    return verifier.verify(identity_number, first_name, last_name, birth_year)
