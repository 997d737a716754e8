"""
Validation Result Data Models

Defines the StructuralError and ValidationResult dataclasses shared by the
validation module, plus the ErrorKind tag that tells structural, business
rule and unexpected failures apart.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional


class ErrorKind(str, Enum):
    """Stage of the validation pipeline that rejected the content."""
    STRUCTURAL = "structural"
    BUSINESS_RULE = "business_rule"
    UNKNOWN = "unknown"


@dataclass
class StructuralError:
    """A single violated shape, type, range or pattern constraint.

    Attributes:
        path: Dotted path to the offending value (``scenes.2.scene_id``)
        message: Human-readable description of the violation
        code: Machine-readable error type (e.g. ``string_type``, ``too_short``)
        expected: Expected JSON type, for type mismatches
        received: JSON type actually found, for type mismatches
        minimum: Lower bound that was violated, if any
        maximum: Upper bound that was violated, if any
    """
    path: str
    message: str
    code: str
    expected: Optional[str] = None
    received: Optional[str] = None
    minimum: Optional[Any] = None
    maximum: Optional[Any] = None


@dataclass
class ValidationResult:
    """Outcome of validating one piece of generated content.

    Attributes:
        success: Whether the content may be promoted
        errors: Structural or business rule errors (empty on success)
        warnings: Non-fatal quality observations (only on success)
        sanitized_content: Sanitized copy of the content, only on success
        suggestion: Recovery hint derived from the first structural error
        error_kind: Pipeline stage that rejected the content, None on success
        source: Optional label of the validated content, e.g. a file path
        timestamp: When validation was performed (UTC)
        duration_ms: How long validation took in milliseconds
    """
    success: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    sanitized_content: Optional[Any] = None
    suggestion: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    source: Optional[str] = None
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0

    def to_dict(self, include_content: bool = True) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {
            "success": self.success,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "error_kind": self.error_kind.value if self.error_kind else None,
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
        }
        if self.source:
            d["source"] = self.source
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if include_content:
            d["sanitized_content"] = self.sanitized_content
        return d

    def to_json(self, indent: int = 2, include_content: bool = True) -> str:
        """Serialize result to JSON string, keeping non-ASCII text readable."""
        return json.dumps(
            self.to_dict(include_content=include_content),
            indent=indent,
            ensure_ascii=False,
        )

    def format_human(self) -> str:
        """Format result for human-readable console output."""
        label = self.source or "content"
        if self.success and not self.warnings:
            lines = [f"✅ {label}: Valid"]
        elif self.success:
            lines = [f"✅ {label}: Valid (with warnings)"]
        else:
            kind = self.error_kind.value if self.error_kind else "unknown"
            lines = [f"❌ {label}: Failed ({kind})"]

        for error in self.errors:
            lines.append(f"  ❌ {error}")
        for warning in self.warnings:
            lines.append(f"  ⚠ {warning}")
        if self.suggestion:
            lines.append(f"      → {self.suggestion}")

        return "\n".join(lines)
