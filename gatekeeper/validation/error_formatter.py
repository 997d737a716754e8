"""
Structural Error Formatting and Recovery Suggestions

Turns StructuralError lists into flat ``"<path>: <message>"`` strings and
derives a single recovery hint from the first reported error.
"""

from enum import Enum
from typing import List

from gatekeeper.utils.formatting import format_number
from gatekeeper.validation.report import StructuralError
from gatekeeper.validation.schema_validator import UNSUPPORTED_TYPE


GENERIC_SUGGESTION = "Check the schema documentation for correct format"


class ErrorCategory(Enum):
    """Categories used to pick a recovery suggestion."""
    TYPE_MISMATCH = "type_mismatch"
    TOO_SMALL = "too_small"
    TOO_LARGE = "too_large"
    OTHER = "other"


_TOO_SMALL_CODES = {"too_short", "string_too_short", "greater_than_equal", "greater_than"}
_TOO_LARGE_CODES = {"too_long", "string_too_long", "less_than_equal", "less_than"}


def categorize(error: StructuralError) -> ErrorCategory:
    """Map a structural error to its recovery category."""
    if error.expected is not None or error.code == UNSUPPORTED_TYPE:
        return ErrorCategory.TYPE_MISMATCH
    if error.code in _TOO_SMALL_CODES:
        return ErrorCategory.TOO_SMALL
    if error.code in _TOO_LARGE_CODES:
        return ErrorCategory.TOO_LARGE
    return ErrorCategory.OTHER


def format_errors(errors: List[StructuralError]) -> List[str]:
    """Format structural errors as ``"<path>: <message>"`` strings."""
    return [f"{error.path}: {error.message}" for error in errors]


def recovery_suggestion(errors: List[StructuralError]) -> str:
    """Derive one recovery suggestion from the first structural error.

    Args:
        errors: Structural errors in reporting order.

    Returns:
        A human-readable hint; the generic fallback if there is nothing
        more specific to say.
    """
    if not errors:
        return GENERIC_SUGGESTION

    first = errors[0]
    category = categorize(first)

    if category is ErrorCategory.TYPE_MISMATCH:
        return f"Expected {first.expected} but got {first.received} at {first.path}"
    if category is ErrorCategory.TOO_SMALL:
        return f"Value at {first.path} is too small. Minimum: {format_number(first.minimum)}"
    if category is ErrorCategory.TOO_LARGE:
        return f"Value at {first.path} is too large. Maximum: {format_number(first.maximum)}"
    return GENERIC_SUGGESTION
