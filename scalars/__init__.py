"""scalars - immutable numeric value types.

Namespace package containing:
- scalars.math: Rational and Complex value types, text and binary codecs
- scalars.core: configuration, logging and the error taxonomy
"""

__version__ = "0.1.0"

from .core.errors import (
    DivisionByZeroError,
    NullArgumentError,
    ScalarError,
    ScalarOverflowError,
    ScalarParseError,
    ZeroDenominatorError,
)
from .math import Complex, Rational, gcd

__all__ = [
    "Complex",
    "Rational",
    "gcd",
    "ScalarError",
    "ScalarParseError",
    "ZeroDenominatorError",
    "DivisionByZeroError",
    "ScalarOverflowError",
    "NullArgumentError",
]
