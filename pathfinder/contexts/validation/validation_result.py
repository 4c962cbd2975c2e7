"""
Validation result data structures.

Errors are hard failures with a stable code for programmatic handling;
warnings are advisory and never affect is_valid.
"""

from dataclasses import dataclass, field
from typing import Optional

from pathfinder.contexts.taxonomy.domain_data_structure import to_plain_data


@dataclass(frozen=True)
class ValidationError:
    """Hard validation failure (e.g. code="DOMAIN_NOT_FOUND")."""

    field: str
    message: str
    code: str


@dataclass(frozen=True)
class ValidationWarning:
    field: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """
    Outcome of a validation call.

    Attributes:
        errors: Hard failures in the order they were detected
        warnings: Advisory notes in the order they were detected
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_codes(self) -> list[str]:
        return [error.code for error in self.errors]

    def add_error(self, field_name: str, message: str, code: str) -> None:
        self.errors.append(ValidationError(field=field_name, message=message, code=code))

    def add_warning(self, field_name: str, message: str, suggestion: Optional[str] = None) -> None:
        self.warnings.append(ValidationWarning(field=field_name, message=message, suggestion=suggestion))

    def merge(self, other: "ValidationResult") -> None:
        """Append another result's errors and warnings to this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": to_plain_data(self.errors),
            "warnings": to_plain_data(self.warnings),
        }
