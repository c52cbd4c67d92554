"""
Binary form of the value types.

Rational is two signed 64-bit integers (numerator, denominator); Complex is
two doubles (real, imaginary). Both use native byte order with standard
sizes, the layout a host database stores in its column.
"""

from __future__ import annotations

import struct

from ..core.errors import NullArgumentError, ScalarParseError
from ..core.logging import get_context_logger
from .complex import Complex
from .rational import Rational

logger = get_context_logger(__name__)

RATIONAL_STRUCT = struct.Struct("=qq")
COMPLEX_STRUCT = struct.Struct("=dd")


def pack_rational(value: Rational) -> bytes:
    if value is None:
        raise NullArgumentError("pack_rational")
    return RATIONAL_STRUCT.pack(value.numerator, value.denominator)


def unpack_rational(raw: bytes) -> Rational:
    """
    Decode a rational, rejecting pairs that are not in canonical form.

    Raises:
        ScalarParseError: On a wrong-sized buffer or a non-canonical pair
        ZeroDenominatorError: If the stored denominator is zero
    """
    if raw is None:
        raise NullArgumentError("unpack_rational")
    if len(raw) != RATIONAL_STRUCT.size:
        logger.debug("Bad rational buffer size", extra_data={"size": len(raw)})
        raise ScalarParseError("rational", bytes(raw).hex())

    numerator, denominator = RATIONAL_STRUCT.unpack(raw)
    value = Rational(numerator, denominator)
    if (value.numerator, value.denominator) != (numerator, denominator):
        logger.debug(
            "Non-canonical rational buffer",
            extra_data={"numerator": numerator, "denominator": denominator},
        )
        raise ScalarParseError("rational", f"{numerator}/{denominator}")
    return value


def pack_complex(value: Complex) -> bytes:
    if value is None:
        raise NullArgumentError("pack_complex")
    return COMPLEX_STRUCT.pack(value.real, value.imaginary)


def unpack_complex(raw: bytes) -> Complex:
    """
    Decode a complex value.

    Raises:
        ScalarParseError: On a wrong-sized buffer
    """
    if raw is None:
        raise NullArgumentError("unpack_complex")
    if len(raw) != COMPLEX_STRUCT.size:
        logger.debug("Bad complex buffer size", extra_data={"size": len(raw)})
        raise ScalarParseError("complex", bytes(raw).hex())

    real, imaginary = COMPLEX_STRUCT.unpack(raw)
    return Complex(real, imaginary)
