"""
HTTP transport for the KPSPublic SOAP exchange.

A transport is any callable taking ``(url, body, headers)`` and returning
the raw response bytes, raising TransportError when the exchange cannot
be completed. The verifier only depends on that shape, so tests can pass
a plain function instead of touching the network.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol

import requests

from ...core.exceptions import TransportError
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class Transport(Protocol):
    def __call__(self, url: str, body: bytes, headers: Mapping[str, str]) -> bytes:
        ...


class RequestsTransport:
    """
    Single-shot HTTPS POST using requests.

    A fresh Session is opened per call and closed on every exit path, so
    no connection outlives the exchange. No retries are attempted.

    Attributes:
        timeout (Optional[float]): Connect/read timeout in seconds, None
            to wait indefinitely
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def __call__(self, url: str, body: bytes, headers: Mapping[str, str]) -> bytes:
        """
        POST body to url and return the response content.

        Raises:
            TransportError: On connection, TLS, timeout or HTTP status errors
        """
        logger.debug("POST %s (%d bytes, timeout=%s)", url, len(body), self.timeout)

        try:
            with requests.Session() as session:
                response = session.post(
                    url,
                    data=body,
                    headers=dict(headers),
                    timeout=self.timeout,
                )
                response.raise_for_status()
                content = response.content
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise TransportError(
                f"Service returned HTTP {status_code}",
                details={"url": url, "status_code": status_code}
            ) from e
        except requests.RequestException as e:
            raise TransportError(
                f"Request to verification service failed: {str(e)}",
                details={"url": url, "error_type": type(e).__name__}
            ) from e

        logger.debug("Received %d bytes from %s", len(content), url)
        return content
