"""
SOAP 1.2 envelope construction and response parsing for KPSPublic.

The service expects the TCKimlikNoDogrula operation wrapped in a SOAP 1.2
envelope and answers with a document carrying a single
TCKimlikNoDogrulaResult element whose text is "true" or "false".
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from xml.sax.saxutils import escape

from ...core.exceptions import ResponseParseError
from .models import VerificationRequest

SOAP12_NAMESPACE = "http://www.w3.org/2003/05/soap-envelope"
KPS_NAMESPACE = "http://tckimlik.nvi.gov.tr/WS"
OPERATION_NAME = "TCKimlikNoDogrula"
RESULT_ELEMENT = "TCKimlikNoDogrulaResult"

CONTENT_TYPE = "application/soap+xml; charset=utf-8"

ENVELOPE_TEMPLATE = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<soap12:Envelope'
    ' xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"'
    ' xmlns:xsd="http://www.w3.org/2001/XMLSchema"'
    f' xmlns:soap12="{SOAP12_NAMESPACE}">'
    "<soap12:Body>"
    f'<{OPERATION_NAME} xmlns="{KPS_NAMESPACE}">'
    "<TCKimlikNo>{identity_number}</TCKimlikNo>"
    "<Ad>{first_name}</Ad>"
    "<Soyad>{last_name}</Soyad>"
    "<DogumYili>{birth_year}</DogumYili>"
    f"</{OPERATION_NAME}>"
    "</soap12:Body>"
    "</soap12:Envelope>"
)

_BOOLEAN_LITERALS = {"true": True, "false": False}


def build_envelope(request: VerificationRequest) -> str:
    """
    Render the TCKimlikNoDogrula SOAP envelope for a request.

    Only the XML-reserved characters are escaped; values are otherwise
    sent exactly as normalized.

    Args:
        request: Validated verification request

    Returns:
        str: Complete SOAP 1.2 document
    """
    return ENVELOPE_TEMPLATE.format(
        identity_number=escape(request.identity_number),
        first_name=escape(request.first_name),
        last_name=escape(request.last_name),
        birth_year=escape(request.birth_year),
    )


def build_headers(body: bytes) -> dict[str, str]:
    return {
        "Content-Type": CONTENT_TYPE,
        "Content-Length": str(len(body)),
    }


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1].split(":")[-1]


def parse_boolean(text: str) -> bool:
    """
    Parse a boolean literal as the service writes it.

    Case-insensitive; surrounding whitespace is ignored.

    Raises:
        ResponseParseError: If text is not "true" or "false"
    """
    literal = (text or "").strip().lower()
    if literal not in _BOOLEAN_LITERALS:
        raise ResponseParseError(
            "Result is not a boolean literal",
            details={"value": text}
        )
    return _BOOLEAN_LITERALS[literal]


def parse_result(body: str) -> bool:
    """
    Extract the verification answer from a SOAP response body.

    Matches the result element purely by local name, ignoring namespaces
    and prefixes. Exactly one such element must exist.

    Args:
        body: Response body text

    Returns:
        bool: The registry's answer

    Raises:
        ResponseParseError: On malformed XML, a missing or duplicated
            result element, or a non-boolean value
    """
    text = (body or "").strip()
    if not text:
        raise ResponseParseError("Empty response body")

    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ResponseParseError(
            f"Malformed response document: {e}",
            details={"body_preview": text[:200]}
        )

    matches = [
        el for el in root.iter()
        if el is not root and _local_name(el.tag) == RESULT_ELEMENT
    ]
    if len(matches) != 1:
        raise ResponseParseError(
            f"Expected exactly one {RESULT_ELEMENT} element, found {len(matches)}",
            details={"match_count": len(matches)}
        )

    return parse_boolean(matches[0].text)
