"""
Library exceptions.

Every failure a value type can report is a ScalarError subclass that also
derives from the closest built-in exception, so callers may catch either.
"""

from typing import Any, Dict, Optional

from .logging import get_context_logger

logger = get_context_logger(__name__)


class ScalarError(Exception):
    """Base exception for value-type errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ScalarParseError(ScalarError, ValueError):
    """Raised when text does not match a value type's grammar"""

    def __init__(self, type_name: str, text: Any):
        super().__init__(
            message=f'Unable to parse {type_name} from string "{text}"',
            details={"type": type_name, "input": text}
        )


class ZeroDenominatorError(ScalarError, ValueError):
    """Raised when a rational is constructed with a zero denominator"""

    def __init__(self, numerator: int):
        super().__init__(
            message=f"denominator must be non-zero (numerator {numerator})",
            details={"numerator": numerator}
        )


class DivisionByZeroError(ScalarError, ZeroDivisionError):
    """Raised when an operation divides by an exact zero"""

    def __init__(self, operation: str):
        super().__init__(
            message=f"attempt to divide by zero in {operation}",
            details={"operation": operation}
        )


class ScalarOverflowError(ScalarError, OverflowError):
    """Raised when a value does not fit in its type's lanes"""

    def __init__(self, operation: str, value: str, target: str = "64-bit rational"):
        super().__init__(
            message=f"{operation} overflows {target}: {value}",
            details={"operation": operation, "value": value, "target": target}
        )


class NullArgumentError(ScalarError, TypeError):
    """Raised when an operand is missing"""

    def __init__(self, operation: str):
        super().__init__(
            message=f"{operation} requires a non-null operand",
            details={"operation": operation}
        )


def error_details(error: Exception, include_details: bool = True) -> Dict[str, Any]:
    """Build a JSON-ready error payload for host adapters."""
    error_data: Dict[str, Any] = {
        "error": {
            "type": error.__class__.__name__,
            "message": str(error),
        }
    }

    if isinstance(error, ScalarError) and include_details:
        error_data["error"]["details"] = error.details

    logger.debug(
        f"Error reported: {error}",
        extra_data={
            "error_type": error.__class__.__name__,
            **(error.details if isinstance(error, ScalarError) else {})
        }
    )

    return error_data
