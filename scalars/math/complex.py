"""
Complex type.

An immutable (real, imaginary) pair of doubles. Two operations keep
long-standing non-mathematical behavior that stored data depends on:

- negate() flips the real part only
- abs() takes the absolute value of the real part only

magnitude() is the Euclidean length.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, ClassVar, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import DivisionByZeroError, ScalarOverflowError
from ..core.logging import get_context_logger
from .text import format_complex, parse_complex_parts
from .value import ScalarValue, require_operand

logger = get_context_logger(__name__, type="complex")

DEFAULT_EPSILON = 1e-10


def _as_float(value: Any, name: str, operation: str = "Complex") -> float:
    require_operand(value, operation)
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Complex {name} must be a real number, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError:
        logger.debug("Operand does not fit a double", extra_data={"operation": operation})
        raise ScalarOverflowError(operation, f"{type(value).__name__} {name}", "double") from None


class Complex(BaseModel, ScalarValue):
    """
    Complex number value.

    Equality is exact on both components; use equals_within() for a
    tolerance. ZERO, ONE and I are shared instances.
    """

    model_config = ConfigDict(frozen=True)

    type_name: ClassVar[str] = "complex"
    ZERO: ClassVar[Complex]
    ONE: ClassVar[Complex]
    I: ClassVar[Complex]

    real: float = Field(default=0.0, description="The real part")
    imaginary: float = Field(default=0.0, description="The imaginary part")

    def __init__(self, real: float = 0.0, imaginary: float = 0.0, **kwargs):
        """
        Initialize a Complex number.

        Args:
            real: Real part
            imaginary: Imaginary part (default 0)
        """
        super().__init__(
            real=_as_float(real, "real part"),
            imaginary=_as_float(imaginary, "imaginary part"),
            **kwargs
        )

    @classmethod
    def of(cls, *parts: float) -> Complex:
        """
        Factory: of() is ZERO, of(re) is (re, 0), of(re, im) is (re, im).
        """
        if not parts:
            return cls.ZERO
        if len(parts) > 2:
            raise TypeError(f"Complex.of takes at most 2 arguments ({len(parts)} given)")
        return cls(*parts)

    @classmethod
    def parse(cls, text: str) -> Complex:
        """
        Parse ``(re)`` or ``(re, im)``.

        Raises:
            ScalarParseError: If text does not match the grammar
        """
        real, imaginary = parse_complex_parts(text)
        return cls(real, imaginary)

    @classmethod
    def from_bytes(cls, raw: bytes) -> Complex:
        """Decode the two-double binary form."""
        from .codec import unpack_complex
        return unpack_complex(raw)

    def to_bytes(self) -> bytes:
        """Encode as two native-order doubles."""
        from .codec import pack_complex
        return pack_complex(self)

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> Complex:
        """Copy, rebuilding through the constructor when fields are updated."""
        if not update:
            return super().model_copy(deep=deep)
        values = {**self.model_dump(), **update}
        return type(self)(values.pop("real"), values.pop("imaginary"), **values)

    # Accessors

    def re(self) -> float:
        return self.real

    def im(self) -> float:
        return self.imaginary

    def to_python(self) -> complex:
        """Convert to Python complex."""
        return complex(self.real, self.imaginary)

    def __complex__(self) -> complex:
        return self.to_python()

    def __bool__(self) -> bool:
        return self.real != 0 or self.imaginary != 0

    # Text

    def to_string(self) -> str:
        return format_complex(self.real, self.imaginary)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imaginary!r})"

    # Equality

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Complex):
            return False
        return self.real == other.real and self.imaginary == other.imaginary

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def not_equals(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((self.real, self.imaginary))

    def equals_within(self, other: Optional[Complex], epsilon: float = DEFAULT_EPSILON) -> bool:
        """
        True if the magnitude of ``self - other`` is at most ``epsilon``.

        Args:
            other: Value to compare against (None is never equal)
            epsilon: Tolerance (default 1e-10)
        """
        if other is None or not isinstance(other, Complex):
            return False
        if self is other:
            return True
        return self.subtract(other).magnitude() <= epsilon

    # Derived scalars

    def conjugate(self) -> Complex:
        """(re, -im)"""
        return Complex(self.real, -self.imaginary)

    def abs(self) -> Complex:
        """(|re|, im). Not the modulus; see magnitude()."""
        return Complex(abs(self.real), self.imaginary)

    def __abs__(self) -> Complex:
        return self.abs()

    def magnitude(self) -> float:
        """Euclidean length, computed as sqrt(|Re(z * conj(z))|)."""
        return math.sqrt(abs(self.multiply(self.conjugate()).real))

    # Arithmetic

    def _accepts(self, other: Any) -> bool:
        return isinstance(other, (Complex, numbers.Real))

    def _lift(self, other: Any) -> Complex:
        if isinstance(other, Complex):
            return other
        return Complex(other)

    def _operand(self, other: Any, operation: str) -> Complex | float:
        require_operand(other, operation)
        if not self._accepts(other):
            raise TypeError(f"Cannot {operation} Complex and {type(other).__name__}")
        if isinstance(other, Complex):
            return other
        return _as_float(other, "scalar", operation)

    def _inverse(self, operation: str) -> Complex:
        det = self.real * self.real + self.imaginary * self.imaginary
        if det == 0:
            logger.debug("Complex inversion of zero", extra_data={"operation": operation})
            raise DivisionByZeroError(operation)
        return Complex(self.real / det, -self.imaginary / det)

    def negate(self) -> Complex:
        """(-re, im). The imaginary part is left unchanged."""
        return Complex(-self.real, self.imaginary)

    def invert(self) -> Complex:
        """
        1 / self.

        Raises:
            DivisionByZeroError: If re^2 + im^2 is exactly zero
        """
        return self._inverse("invert")

    def add(self, other: Complex | float) -> Complex:
        """Add a Complex, or a real scalar to the real part only."""
        q = self._operand(other, "add")
        if isinstance(q, Complex):
            return Complex(self.real + q.real, self.imaginary + q.imaginary)
        return Complex(self.real + q, self.imaginary)

    def subtract(self, other: Complex | float) -> Complex:
        """Subtract a Complex, or a real scalar from the real part only."""
        q = self._operand(other, "subtract")
        if isinstance(q, Complex):
            return Complex(self.real - q.real, self.imaginary - q.imaginary)
        return Complex(self.real - q, self.imaginary)

    def multiply(self, other: Complex | float) -> Complex:
        """(a + bi)(c + di) = (ac - bd) + (ad + bc)i; a scalar scales both parts."""
        q = self._operand(other, "multiply")
        if isinstance(q, Complex):
            return Complex(
                self.real * q.real - self.imaginary * q.imaginary,
                self.real * q.imaginary + self.imaginary * q.real,
            )
        return Complex(self.real * q, self.imaginary * q)

    def divide(self, other: Complex | float) -> Complex:
        """
        self * other.invert(); a scalar divides both parts.

        Raises:
            DivisionByZeroError: If other is zero
        """
        q = self._operand(other, "divide")
        if isinstance(q, Complex):
            return self.multiply(q._inverse("divide"))
        if q == 0:
            logger.debug("Complex division by zero scalar", extra_data={"dividend": str(self)})
            raise DivisionByZeroError("divide")
        return Complex(self.real / q, self.imaginary / q)


Complex.ZERO = Complex(0.0, 0.0)
Complex.ONE = Complex(1.0, 0.0)
Complex.I = Complex(0.0, 1.0)

ZERO = Complex.ZERO
ONE = Complex.ONE
I = Complex.I
