"""
Content Gatekeeper

Validation gate for machine-generated game manifests: structural schema
checks, business rules, markup sanitization, recovery suggestions and
validation statistics.
"""

from gatekeeper.config import ValidatorConfig
from gatekeeper.validation import ContentValidator, ErrorKind, ValidationResult

__all__ = [
    "ContentValidator",
    "ValidatorConfig",
    "ValidationResult",
    "ErrorKind",
]
