"""
Validation Context

Responsibilities:
- Validates domain selections for referential consistency
- Warns about weak skill or career-goal alignment with the chosen domain
- Validates individual fields and the one-shot assessment form

Owns: Validation result types, error codes, alignment thresholds
Never: Raises for bad user input, scores or ranks domains
"""

from pathfinder.contexts.validation.selection_validator import EDUCATION_LEVELS, SelectionValidator
from pathfinder.contexts.validation.validation_result import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

__all__ = [
    "EDUCATION_LEVELS",
    "SelectionValidator",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
