"""
Shared text parsing and formatting for the value types.

Grammars (whole-string matches, no surrounding whitespace):

    rational  -?digits( */ *-?digits)?
    complex   \\( *number( *, *number)? *\\)
    number    -?digits(.digits)?([eE][-+]?digits)?

The optional exponent lets every finite value written by format_double()
parse back.
"""

from __future__ import annotations

import re
from typing import Any

from ..core.errors import NullArgumentError, ScalarParseError
from ..core.logging import get_context_logger

logger = get_context_logger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_NUMBER = r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?"

RATIONAL_PATTERN = re.compile(r"(-?[0-9]+)(?: */ *(-?[0-9]+))?")
COMPLEX_PATTERN = re.compile(rf"\( *({_NUMBER})(?: *, *({_NUMBER}))? *\)")


def fits_int64(value: int) -> bool:
    """True if ``value`` is inside the signed 64-bit range."""
    return INT64_MIN <= value <= INT64_MAX


def format_double(value: float) -> str:
    """Shortest text that reads back as the same double."""
    return repr(float(value))


def format_rational(numerator: int, denominator: int) -> str:
    """``n`` for whole numbers, ``n/d`` otherwise."""
    if denominator == 1:
        return str(numerator)
    return f"{numerator}/{denominator}"


def format_complex(real: float, imaginary: float) -> str:
    """Always both components: ``(re, im)``."""
    return f"({format_double(real)}, {format_double(imaginary)})"


def _check_text(type_name: str, text: Any) -> str:
    if text is None:
        raise NullArgumentError(f"{type_name} parse")
    if not isinstance(text, str):
        logger.debug("Rejected non-string input", extra_data={"type": type_name, "input": repr(text)})
        raise ScalarParseError(type_name, text)
    return text


def parse_rational_parts(text: str) -> tuple[int, int]:
    """
    Split rational text into (numerator, denominator).

    The pair is returned as written; reduction and the zero-denominator
    check belong to the Rational constructor.

    Raises:
        ScalarParseError: If text does not match the grammar or a component
            does not fit in 64 bits
    """
    text = _check_text("rational", text)
    match = RATIONAL_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("Rejected rational text", extra_data={"input": text})
        raise ScalarParseError("rational", text)

    numerator = int(match.group(1))
    denominator = int(match.group(2)) if match.group(2) is not None else 1

    if not (fits_int64(numerator) and fits_int64(denominator)):
        logger.debug("Rational component exceeds 64 bits", extra_data={"input": text})
        raise ScalarParseError("rational", text)

    return numerator, denominator


def parse_complex_parts(text: str) -> tuple[float, float]:
    """
    Split complex text into (real, imaginary).

    A missing second component means a zero imaginary part.

    Raises:
        ScalarParseError: If text does not match the grammar
    """
    text = _check_text("complex", text)
    match = COMPLEX_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("Rejected complex text", extra_data={"input": text})
        raise ScalarParseError("complex", text)

    real = float(match.group(1))
    imaginary = float(match.group(2)) if match.group(2) is not None else 0.0
    return real, imaginary
