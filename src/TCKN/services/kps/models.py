"""
Request and result models for KPSPublic identity verification.

VerificationRequest is an immutable value built once per call from the
raw inputs; building it is where validation happens, so an instance that
exists has already passed every check and may be sent.

Module Input:
    - Raw identity number, names and birth year from the caller

Module Output:
    - Validated, normalized VerificationRequest
    - VerificationResult describing the service answer
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from ...core.exceptions import InvalidInputError

IDENTITY_NUMBER_DIGITS = 11
BIRTH_YEAR_DIGITS = 4

# Turkish locale maps dotted/dotless i differently from the generic rules
_TURKISH_UPPER = str.maketrans({"i": "İ", "ı": "I"})


def normalize_name(value: Optional[str], turkish: bool = False) -> str:
    """
    Trim and upper-case a name.

    Idempotent: normalizing an already normalized name returns it unchanged.

    Args:
        value: Raw name, None is treated as empty
        turkish: Apply Turkish dotted/dotless i casing before upper-casing

    Returns:
        str: Normalized name (may be empty)

    Example:
        >>> normalize_name("  ali ")
        'ALI'
        >>> normalize_name("ali", turkish=True)
        'ALİ'
    """
    if value is None:
        return ""
    name = str(value).strip()
    if turkish:
        name = name.translate(_TURKISH_UPPER)
    return name.upper()


def _render_number(value: Union[int, str, None]) -> Optional[str]:
    """Decimal rendering of an unsigned integer input, or None if not one."""
    if value is None or isinstance(value, bool):
        return None
    text = str(value)
    if not (text.isascii() and text.isdigit()):
        return None
    # Leading zeros are dropped, as for an integer
    return str(int(text))


def _has_digit_count(value: Union[int, str, None], count: int) -> bool:
    text = _render_number(value)
    return text is not None and len(text) == count


class VerificationRequest(BaseModel):
    """
    One identity tuple, validated and normalized, ready for transmission.

    Attributes:
        identity_number (str): 11 decimal digits
        first_name (str): Trimmed, upper-cased first name
        last_name (str): Trimmed, upper-cased last name
        birth_year (str): 4 decimal digits
    """

    model_config = ConfigDict(frozen=True)

    identity_number: str
    first_name: str
    last_name: str
    birth_year: str

    @classmethod
    def build(
        cls,
        identity_number: Union[int, str],
        first_name: Optional[str],
        last_name: Optional[str],
        birth_year: Union[int, str],
        turkish_casing: bool = False,
    ) -> "VerificationRequest":
        """
        Validate and normalize raw inputs.

        Checks run in a fixed order and the first failure is raised.

        Raises:
            InvalidInputError: If any of the four inputs is invalid
        """
        first = normalize_name(first_name, turkish=turkish_casing)
        last = normalize_name(last_name, turkish=turkish_casing)

        if not _has_digit_count(identity_number, IDENTITY_NUMBER_DIGITS):
            raise InvalidInputError(
                "identity number must be 11 digits",
                details={"field": "identity_number"}
            )
        if not first:
            raise InvalidInputError(
                "first name required",
                details={"field": "first_name"}
            )
        if not last:
            raise InvalidInputError(
                "last name required",
                details={"field": "last_name"}
            )
        if not _has_digit_count(birth_year, BIRTH_YEAR_DIGITS):
            raise InvalidInputError(
                "birth year must be 4 digits",
                details={"field": "birth_year", "provided": str(birth_year)}
            )

        return cls(
            identity_number=_render_number(identity_number),
            first_name=first,
            last_name=last,
            birth_year=_render_number(birth_year),
        )

    @property
    def masked_identity_number(self) -> str:
        """Identity number with all but the last four digits hidden."""
        return "*" * (len(self.identity_number) - 4) + self.identity_number[-4:]


class VerificationStatus(str, Enum):
    """Outcome of one exchange with the registry."""

    VERIFIED = "verified"
    NOT_VERIFIED = "not_verified"
    INDETERMINATE = "indeterminate"


class VerificationResult(BaseModel):
    """
    Answer for one verification call.

    ``NOT_VERIFIED`` means the registry said no. ``INDETERMINATE`` means
    no answer could be obtained; ``cause`` says why.
    """

    model_config = ConfigDict(frozen=True)

    status: VerificationStatus
    cause: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.status is VerificationStatus.VERIFIED

    @property
    def indeterminate(self) -> bool:
        return self.status is VerificationStatus.INDETERMINATE

    @classmethod
    def from_answer(cls, answer: bool) -> "VerificationResult":
        status = VerificationStatus.VERIFIED if answer else VerificationStatus.NOT_VERIFIED
        return cls(status=status)

    @classmethod
    def failed(cls, cause: Any) -> "VerificationResult":
        return cls(status=VerificationStatus.INDETERMINATE, cause=str(cause))

    def __bool__(self) -> bool:
        return self.valid
