"""
Base ScalarValue class for the immutable value types.

This module provides the shared surface of Rational and Complex:
- Named field operations (add, subtract, multiply, divide, negate)
- Python operator overloading delegating to those operations
- Null-operand checks shared by every operation
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from ..core.errors import NullArgumentError


def require_operand(value: Any, operation: str) -> Any:
    """Return ``value`` unchanged, raising NullArgumentError when it is None."""
    if value is None:
        raise NullArgumentError(operation)
    return value


class ScalarValue(ABC):
    """
    Base class for immutable scalar value objects.

    Subclasses must implement:
    - type_name: Class variable naming the type in messages
    - All abstract methods

    Note: Concrete subclasses inherit from both BaseModel and ScalarValue,
    e.g., `class Rational(BaseModel, ScalarValue):`. BaseModel comes first
    in the MRO, so __eq__, __hash__, __str__ and __repr__ must be defined
    on the concrete class itself.
    """

    type_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def parse(cls, text: str) -> ScalarValue:
        """Parse the canonical text form."""

    @abstractmethod
    def to_string(self) -> str:
        """Convert to the canonical text form."""

    @abstractmethod
    def _accepts(self, other: Any) -> bool:
        """True if ``other`` may appear as an arithmetic operand."""

    @abstractmethod
    def _lift(self, other: Any) -> ScalarValue:
        """Convert a plain Python operand to this value type."""

    @abstractmethod
    def negate(self) -> ScalarValue:
        pass

    @abstractmethod
    def add(self, other: Any) -> ScalarValue:
        pass

    @abstractmethod
    def subtract(self, other: Any) -> ScalarValue:
        pass

    @abstractmethod
    def multiply(self, other: Any) -> ScalarValue:
        pass

    @abstractmethod
    def divide(self, other: Any) -> ScalarValue:
        pass

    # Operator overloading (Python magic methods)

    def __add__(self, other: Any) -> ScalarValue:
        """Addition: self + other"""
        if other is None or self._accepts(other):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: Any) -> ScalarValue:
        """Right addition: other + self"""
        if self._accepts(other):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> ScalarValue:
        """Subtraction: self - other"""
        if other is None or self._accepts(other):
            return self.subtract(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> ScalarValue:
        """Right subtraction: other - self"""
        if self._accepts(other):
            return self._lift(other).subtract(self)
        return NotImplemented

    def __mul__(self, other: Any) -> ScalarValue:
        """Multiplication: self * other"""
        if other is None or self._accepts(other):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> ScalarValue:
        """Right multiplication: other * self"""
        if self._accepts(other):
            return self.multiply(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> ScalarValue:
        """Division: self / other"""
        if other is None or self._accepts(other):
            return self.divide(other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> ScalarValue:
        """Right division: other / self"""
        if self._accepts(other):
            return self._lift(other).divide(self)
        return NotImplemented

    def __neg__(self) -> ScalarValue:
        """Unary negation: -self"""
        return self.negate()

    def __pos__(self) -> ScalarValue:
        """Unary positive: +self"""
        return self
