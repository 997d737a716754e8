"""
Formatting helpers shared by the validation messages.
"""

from typing import Any, Sequence, Union


def format_number(value: Any) -> str:
    """Render a number without a trailing ``.0`` for whole values."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_path(loc: Sequence[Union[str, int]]) -> str:
    """Join a location tuple into a dotted path, ``root`` when empty."""
    if not loc:
        return "root"
    return ".".join(str(part) for part in loc)


def json_type_name(value: Any) -> str:
    """Name the JSON type of a Python value, as used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__
