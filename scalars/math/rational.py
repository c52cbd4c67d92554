"""
Rational type.

Implements an immutable Rational over signed 64-bit lanes kept in
canonical form: positive denominator, numerator and denominator coprime.
Arithmetic runs on Python's unbounded integers and the reduced result is
narrowed back to 64 bits.
"""

from __future__ import annotations

import math
import operator
from typing import Any, ClassVar, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import (
    DivisionByZeroError,
    NullArgumentError,
    ScalarOverflowError,
    ZeroDenominatorError,
)
from ..core.logging import get_context_logger
from .ordering import NULL_POSITION, compare_floats, compare_nullable, fold_nullable, sign
from .text import INT64_MAX, INT64_MIN, fits_int64, format_rational, parse_rational_parts
from .value import ScalarValue, require_operand

logger = get_context_logger(__name__, type="rational")

# to_int() saturation limits
_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1
_INT_WIDTHS = (8, 16, 32, 64)


def gcd(p: int, q: int) -> int:
    """
    Greatest common divisor of two signed integers.

    The result is non-negative and ignores the signs of the inputs, so
    gcd(0, 0) == 0 and gcd(0, x) == |x|. Inputs are promoted to unbounded
    ints before taking absolute values, which keeps gcd(INT64_MIN, 0)
    at 2**63 rather than wrapping back to a negative value.
    """
    p, q = abs(int(p)), abs(int(q))
    while q:
        p, q = q, p % q
    return p


def _narrow(operation: str, num: int, den: int) -> tuple[int, int]:
    """Fit a reduced pair back into 64-bit lanes or raise ScalarOverflowError."""
    if fits_int64(num) and fits_int64(den):
        return num, den

    logger.debug(
        "Rational overflow",
        extra_data={"operation": operation, "numerator": num, "denominator": den},
    )
    raise ScalarOverflowError(operation, f"{num}/{den}")


def canonicalize(num: int, den: int, operation: str = "construct") -> tuple[int, int]:
    """
    Run the construction pipeline on a (possibly wide) pair.

    raw pair -> zero check -> sign-normalized -> gcd-reduced -> narrowed

    Raises:
        ZeroDenominatorError: If ``den`` is zero
        ScalarOverflowError: If the reduced pair does not fit in 64 bits
    """
    if den == 0:
        logger.debug("Zero denominator", extra_data={"operation": operation, "numerator": num})
        raise ZeroDenominatorError(num)
    if den < 0:
        num, den = -num, -den
    g = gcd(num, den)
    return _narrow(operation, num // g, den // g)


def _as_int(value: Any, name: str) -> int:
    require_operand(value, "Rational")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"Rational {name} must be an integer, got {type(value).__name__}"
        ) from None


class Rational(BaseModel, ScalarValue):
    """
    Rational represents a number as numerator/denominator.

    Every instance is canonical, so structural and numeric equality agree.

    Examples:
        >>> Rational(4, 2)       # 2
        >>> Rational(2, -3)      # -2/3
        >>> Rational.parse("1 / 3")
    """

    model_config = ConfigDict(frozen=True)

    type_name: ClassVar[str] = "rational"
    ZERO: ClassVar[Rational]
    ONE: ClassVar[Rational]

    numerator: int = Field(ge=INT64_MIN, le=INT64_MAX, description="The numerator, carries the sign")
    denominator: int = Field(gt=0, le=INT64_MAX, description="The denominator, always positive")

    def __init__(self, numerator: int, denominator: int = 1, **kwargs):
        """
        Create a Rational in canonical form.

        Args:
            numerator: Numerator
            denominator: Denominator (default 1)

        Raises:
            ZeroDenominatorError: If denominator is zero
            ScalarOverflowError: If the reduced value does not fit in 64 bits
            NullArgumentError: If either component is None
        """
        num, den = canonicalize(
            _as_int(numerator, "numerator"), _as_int(denominator, "denominator")
        )
        super().__init__(numerator=num, denominator=den, **kwargs)

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> Rational:
        """Factory alias for the constructor."""
        return cls(numerator, denominator)

    @classmethod
    def parse(cls, text: str) -> Rational:
        """
        Parse ``n`` or ``n/d`` (spaces allowed around the slash only).

        Raises:
            ScalarParseError: If text does not match the grammar
            ZeroDenominatorError: If the denominator is zero
        """
        num, den = parse_rational_parts(text)
        return cls(num, den)

    @classmethod
    def from_bytes(cls, raw: bytes) -> Rational:
        """Decode the two-int64 binary form."""
        from .codec import unpack_rational
        return unpack_rational(raw)

    def to_bytes(self) -> bytes:
        """Encode as two native-order int64 values."""
        from .codec import pack_rational
        return pack_rational(self)

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> Rational:
        """Copy, rebuilding through the constructor when fields are updated."""
        if not update:
            return super().model_copy(deep=deep)
        values = {**self.model_dump(), **update}
        return type(self)(values.pop("numerator"), values.pop("denominator"), **values)

    # Text

    def to_string(self) -> str:
        return format_rational(self.numerator, self.denominator)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"

    # Equality and ordering

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Rational):
            return False
        return self.numerator == other.numerator and self.denominator == other.denominator

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((self.numerator, self.denominator))

    def compare_to(self, other: Rational | int | float | None) -> int:
        """
        Three-way comparison returning -1, 0 or +1.

        Rationals and ints compare exactly. Floats compare against
        float(self), so rounding applies. None sorts high.
        """
        if other is None:
            return NULL_POSITION
        if isinstance(other, Rational):
            return sign(self.numerator * other.denominator - other.numerator * self.denominator)
        if isinstance(other, int):
            return sign(self.numerator - other * self.denominator)
        if isinstance(other, float):
            return compare_floats(self.to_float(), other)
        raise TypeError(f"Cannot compare Rational with {type(other).__name__}")

    def equals_double(self, other: float) -> bool:
        """Equality against a float, through float(self)."""
        return self.compare_to(float(require_operand(other, "equals_double"))) == 0

    @staticmethod
    def compare(p: Optional[Rational], q: Optional[Rational]) -> int:
        """Null-aware comparison: absent right gives +1, absent left gives -1."""
        return compare_nullable(p, q, Rational.compare_to)

    @staticmethod
    def min(p: Rational, q: Rational) -> Rational:
        """The smaller operand; ties return ``p``."""
        if p is None or q is None:
            raise NullArgumentError("min")
        return p if p.compare_to(q) <= 0 else q

    @staticmethod
    def max(p: Rational, q: Rational) -> Rational:
        """The larger operand; ties return ``p``."""
        if p is None or q is None:
            raise NullArgumentError("max")
        return p if p.compare_to(q) >= 0 else q

    def _orderable(self, other: Any) -> bool:
        return isinstance(other, (Rational, int, float)) or other is None

    def __lt__(self, other: Any) -> bool:
        """Less than."""
        if not self._orderable(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        """Less than or equal."""
        if not self._orderable(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        """Greater than."""
        if not self._orderable(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        """Greater than or equal."""
        if not self._orderable(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    # Numeric conversions

    def to_float(self) -> float:
        """n / d in double arithmetic."""
        return float(self.numerator) / float(self.denominator)

    def to_int(self, width: int = 64) -> int:
        """
        Narrow to a signed integer of ``width`` bits, through float first.

        The value is truncated toward zero. Widths 32 and 64 saturate at
        their limits; widths 8 and 16 saturate at 32 bits and then wrap.
        This is lossy for large magnitudes.
        """
        if width not in _INT_WIDTHS:
            raise ValueError(f"width must be one of {_INT_WIDTHS}, got {width}")

        truncated = math.trunc(self.to_float())
        if width == 64:
            return max(INT64_MIN, min(INT64_MAX, truncated))

        truncated = max(_INT32_MIN, min(_INT32_MAX, truncated))
        if width == 32:
            return truncated
        bits = (1 << width) - 1
        truncated &= bits
        if truncated >= 1 << (width - 1):
            truncated -= 1 << width
        return truncated

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int(64)

    def __bool__(self) -> bool:
        return self.numerator != 0

    # Arithmetic

    def _accepts(self, other: Any) -> bool:
        return isinstance(other, (Rational, int))

    def _lift(self, other: Any) -> Rational:
        if isinstance(other, Rational):
            return other
        return Rational(other)

    def _operand(self, other: Any, operation: str) -> Rational:
        require_operand(other, operation)
        if not self._accepts(other):
            raise TypeError(f"Cannot {operation} Rational and {type(other).__name__}")
        return self._lift(other)

    @staticmethod
    def _result(operation: str, num: int, den: int) -> Rational:
        num, den = canonicalize(num, den, operation)
        return Rational(num, den)

    def negate(self) -> Rational:
        """-n / d"""
        return self._result("negate", -self.numerator, self.denominator)

    def add(self, other: Rational | int) -> Rational:
        """a/b + c/d = (ad + cb)/(bd)"""
        q = self._operand(other, "add")
        return self._result(
            "add",
            self.numerator * q.denominator + q.numerator * self.denominator,
            self.denominator * q.denominator,
        )

    def subtract(self, other: Rational | int) -> Rational:
        """a/b - c/d = (ad - cb)/(bd)"""
        q = self._operand(other, "subtract")
        return self._result(
            "subtract",
            self.numerator * q.denominator - q.numerator * self.denominator,
            self.denominator * q.denominator,
        )

    def multiply(self, other: Rational | int) -> Rational:
        """(a/b)(c/d) = (ac)/(bd)"""
        q = self._operand(other, "multiply")
        return self._result(
            "multiply",
            self.numerator * q.numerator,
            self.denominator * q.denominator,
        )

    def divide(self, other: Rational | int) -> Rational:
        """
        (a/b) / (c/d) = (ad)/(bc)

        Raises:
            DivisionByZeroError: If other is zero
        """
        q = self._operand(other, "divide")
        if q.numerator == 0:
            logger.debug("Rational division by zero", extra_data={"dividend": str(self)})
            raise DivisionByZeroError("divide")
        return self._result(
            "divide",
            self.numerator * q.denominator,
            self.denominator * q.numerator,
        )

    def __abs__(self) -> Rational:
        """Absolute value: abs(self)."""
        return self._result("abs", abs(self.numerator), self.denominator)


Rational.ZERO = Rational(0)
Rational.ONE = Rational(1)


def rational_min(values: Iterable[Optional[Rational]]) -> Optional[Rational]:
    """Aggregate minimum, skipping None; None for no present values."""
    return fold_nullable(values, Rational.min)


def rational_max(values: Iterable[Optional[Rational]]) -> Optional[Rational]:
    """Aggregate maximum, skipping None; None for no present values."""
    return fold_nullable(values, Rational.max)
