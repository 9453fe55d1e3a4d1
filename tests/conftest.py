"""Shared pytest configuration and fixtures.

Provides SOAP response samples, a recording fake transport, and the
--run-e2e switch guarding tests that call the live KPSPublic service.
"""

from typing import Callable, Dict, List, Mapping, Optional

import pytest


def soap_response(result: str) -> str:
    """KPSPublic-shaped response carrying the given result text."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<soap:Envelope xmlns:soap="http://www.w3.org/2003/05/soap-envelope"'
        ' xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"'
        ' xmlns:xsd="http://www.w3.org/2001/XMLSchema">'
        "<soap:Body>"
        '<TCKimlikNoDogrulaResponse xmlns="http://tckimlik.nvi.gov.tr/WS">'
        f"<TCKimlikNoDogrulaResult>{result}</TCKimlikNoDogrulaResult>"
        "</TCKimlikNoDogrulaResponse>"
        "</soap:Body>"
        "</soap:Envelope>"
    )


class FakeTransport:
    """Records every call and replies with a fixed body or raises."""

    def __init__(self, body: Optional[bytes] = None, error: Optional[Exception] = None):
        self.body = body
        self.error = error
        self.calls: List[Dict] = []

    def __call__(self, url: str, body: bytes, headers: Mapping[str, str]) -> bytes:
        self.calls.append({"url": url, "body": body, "headers": dict(headers)})
        if self.error is not None:
            raise self.error
        return self.body


# ===== Fixtures =====


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    """Factory for FakeTransport instances"""

    def _make(result: Optional[str] = None, body: Optional[bytes] = None, error: Optional[Exception] = None):
        if result is not None:
            body = soap_response(result).encode("utf-8")
        return FakeTransport(body=body, error=error)

    return _make


@pytest.fixture
def soap_body() -> Callable[[str], str]:
    """Builder for KPSPublic response documents"""
    return soap_response


@pytest.fixture
def true_transport(make_transport) -> FakeTransport:
    return make_transport(result="true")


@pytest.fixture
def false_transport(make_transport) -> FakeTransport:
    return make_transport(result="false")


# ===== Pytest Hooks =====


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e", action="store_true", default=False,
        help="Run tests that call the live KPSPublic service"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="live service test requires --run-e2e")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)
