"""Custom exceptions for loading the career taxonomy catalog."""

from pathlib import Path
from typing import Optional


class TaxonomyLoadError(Exception):
    """
    Exception raised when the taxonomy catalog file cannot be read.

    Attributes:
        message: Error description
        path: Path of the catalog that failed to load
        original_error: The underlying I/O or YAML error
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path:
            parts.append(f"\nCatalog: {path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidTaxonomyError(ValueError):
    """
    Exception raised when the catalog is readable but structurally invalid.

    Raised for missing required fields, unknown enum values (experience level,
    demand, competitiveness), duplicate domain ids and duplicate subfield ids
    within one domain.

    Attributes:
        message: Error description
        location: Dotted path to the offending record (e.g., "domains[3].subfields[0]")
    """

    def __init__(self, message: str, location: Optional[str] = None):
        self.message = message
        self.location = location

        if location:
            super().__init__(f"{message} (at {location})")
        else:
            super().__init__(message)
