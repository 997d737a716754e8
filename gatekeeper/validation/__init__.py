"""
Validation Module for generated game content

Provides schema validation, business rules, sanitization, recovery
suggestions and statistics for game manifests and single scenes.
"""

from gatekeeper.validation.report import ErrorKind, StructuralError, ValidationResult
from gatekeeper.validation.stats import StatsSnapshot, ValidationStats
from gatekeeper.validation.engine import ContentValidator

__all__ = [
    "ErrorKind",
    "StructuralError",
    "ValidationResult",
    "StatsSnapshot",
    "ValidationStats",
    "ContentValidator",
]
