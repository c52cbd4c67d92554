"""
scalars.math - immutable numeric value types

- Rational: canonical numerator/denominator over 64-bit lanes
- Complex: (real, imaginary) pair of doubles
- Shared text grammar, binary codec and null-aware ordering helpers
"""

from .codec import pack_complex, pack_rational, unpack_complex, unpack_rational
from .complex import Complex
from .ordering import compare_nullable, fold_nullable
from .rational import Rational, canonicalize, gcd, rational_max, rational_min
from .value import ScalarValue

__all__ = [
    "ScalarValue",
    "Rational",
    "Complex",
    "gcd",
    "canonicalize",
    "rational_min",
    "rational_max",
    "compare_nullable",
    "fold_nullable",
    "pack_rational",
    "unpack_rational",
    "pack_complex",
    "unpack_complex",
]
