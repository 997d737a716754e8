"""
Schema Validator

Wraps the Pydantic manifest and scene schemas for structural validation with
path-qualified error details. Returns StructuralError lists instead of
raising exceptions.

Before the schemas run, a pre-flight walk over the raw input rejects values
that are not JSON-like (datetimes, callables, sets, ...) and circular
references. The walk is iterative and visits every node once, so deeply
nested input neither recurses nor costs more than its size.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, TypeAdapter, ValidationError

from gatekeeper.schemas import SCENE_MODELS, SCENE_TYPES, GameManifest, Scene
from gatekeeper.utils.formatting import format_path, json_type_name
from gatekeeper.validation.report import StructuralError


CIRCULAR_REFERENCE = "circular_reference"
UNSUPPORTED_TYPE = "unsupported_type"

# The pre-flight walk stops collecting after this many problems.
MAX_SHAPE_ERRORS = 100

_JSON_SCALARS = (str, int, float, bool, type(None))

# Expected JSON type for each Pydantic type error.
_EXPECTED_TYPES = {
    "string_type": "string",
    "int_type": "integer",
    "float_type": "number",
    "bool_type": "boolean",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "list_type": "array",
    "missing": "value",
}

_MINIMUM_KEYS = ("min_length", "ge", "gt")
_MAXIMUM_KEYS = ("max_length", "le", "lt")

_SCENE_ADAPTER = TypeAdapter(Scene)


@dataclass
class StructuralOutcome:
    """Result of structural validation: a typed value or a list of errors."""
    value: Optional[BaseModel] = None
    errors: List[StructuralError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def _frame_path(frame: Optional[tuple]) -> str:
    """Build the dotted path of a (parent_frame, key) chain."""
    parts = []
    while frame is not None:
        frame, key = frame
        parts.append(key)
    parts.reverse()
    return format_path(parts)


def find_shape_errors(content: Any) -> List[StructuralError]:
    """Walk raw input and report non-JSON values and circular references.

    Shared (non-circular) references are allowed. A container is only
    reported as circular when it appears inside itself.

    Each stack entry links to its parent frame instead of carrying its full
    location, so the walk costs time and memory proportional to the number
    of nodes at any depth. Paths are only built for reported errors.

    Args:
        content: Untyped input as handed to the validator.

    Returns:
        List of StructuralError (empty if the input is JSON-like).
    """
    errors: List[StructuralError] = []
    on_path = set()
    # (leaving, value, frame): frame is (parent_frame, key), None at the root;
    # leaving entries pop a container off the current path
    stack: List[Tuple[bool, Any, Optional[tuple]]] = [(False, content, None)]

    while stack and len(errors) < MAX_SHAPE_ERRORS:
        leaving, value, frame = stack.pop()
        if leaving:
            on_path.discard(id(value))
            continue

        if isinstance(value, _JSON_SCALARS):
            continue

        if not isinstance(value, (dict, list, tuple)):
            type_name = type(value).__name__
            errors.append(StructuralError(
                path=_frame_path(frame),
                message=f"Unsupported value type: {type_name}",
                code=UNSUPPORTED_TYPE,
                expected="JSON value",
                received=type_name,
            ))
            continue

        if id(value) in on_path:
            errors.append(StructuralError(
                path=_frame_path(frame),
                message="Circular reference detected",
                code=CIRCULAR_REFERENCE,
            ))
            continue

        on_path.add(id(value))
        stack.append((True, value, frame))

        if isinstance(value, dict):
            for key, item in reversed(list(value.items())):
                if not isinstance(key, str):
                    errors.append(StructuralError(
                        path=_frame_path(frame),
                        message=f"Unsupported key type: {type(key).__name__}",
                        code=UNSUPPORTED_TYPE,
                        expected="string key",
                        received=type(key).__name__,
                    ))
                    continue
                stack.append((False, item, (frame, key)))
        else:
            for index in range(len(value) - 1, -1, -1):
                stack.append((False, value[index], (frame, index)))

    return errors


def _strip_union_tags(loc: tuple) -> tuple:
    """Drop the scene union member names Pydantic inserts into error paths.

    ``('scenes', 2, 'QuizScene', 'scene_id')`` becomes
    ``('scenes', 2, 'scene_id')``.
    """
    cleaned = []
    for index, part in enumerate(loc):
        if part in SCENE_TYPES and (index == 0 or isinstance(loc[index - 1], int)):
            continue
        cleaned.append(part)
    return tuple(cleaned)


def _pydantic_error_to_structural(err: dict) -> StructuralError:
    """Convert one Pydantic error dict to a StructuralError."""
    code = err["type"]
    ctx = err.get("ctx") or {}
    error = StructuralError(
        path=format_path(_strip_union_tags(tuple(err["loc"]))),
        message=err["msg"],
        code=code,
    )

    if code in _EXPECTED_TYPES:
        error.expected = _EXPECTED_TYPES[code]
        error.received = "nothing" if code == "missing" else json_type_name(err.get("input"))

    for key in _MINIMUM_KEYS:
        if key in ctx:
            error.minimum = ctx[key]
            break
    for key in _MAXIMUM_KEYS:
        if key in ctx:
            error.maximum = ctx[key]
            break

    return error


def _run_model(validate, content: Any) -> StructuralOutcome:
    shape_errors = find_shape_errors(content)
    if shape_errors:
        return StructuralOutcome(errors=shape_errors)

    try:
        value = validate(content)
    except ValidationError as e:
        return StructuralOutcome(errors=[
            _pydantic_error_to_structural(err)
            for err in e.errors(include_url=False)
        ])
    return StructuralOutcome(value=value)


def validate_structure(content: Any) -> StructuralOutcome:
    """Validate raw input against the GameManifest schema.

    Args:
        content: Untyped input (any JSON-like value, or anything else).

    Returns:
        StructuralOutcome holding a GameManifest or the violated constraints.
    """
    return _run_model(GameManifest.model_validate, content)


def validate_scene_structure(
    content: Any,
    scene_type: Optional[str] = None,
) -> StructuralOutcome:
    """Validate raw input against a single scene schema.

    Args:
        content: Untyped scene input.
        scene_type: 'DialogueScene' or 'QuizScene' to force the variant,
            or None to dispatch on the ``scene_type`` field.

    Returns:
        StructuralOutcome holding a DialogueScene/QuizScene or the errors.

    Raises:
        ValueError: If scene_type is not a known scene variant.
    """
    if scene_type is None:
        return _run_model(_SCENE_ADAPTER.validate_python, content)

    if scene_type not in SCENE_MODELS:
        raise ValueError(
            f"Unknown scene type: {scene_type}. "
            f"Valid types: {list(SCENE_TYPES)}"
        )
    if isinstance(content, dict):
        content = {**content, "scene_type": scene_type}
    return _run_model(SCENE_MODELS[scene_type].model_validate, content)
