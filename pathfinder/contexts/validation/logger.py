"""
Validation context logger.

Provides logging interface for the validation context with automatic [validate] prefix.
All validation modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[validate]"


def _log_debug(message: str) -> None:
    """Log debug message with [validate] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_validation_result(subject: str, result) -> None:
    """Log a one-line summary of a ValidationResult."""
    status = "valid" if result.is_valid else f"invalid ({', '.join(result.error_codes)})"
    _log_debug(f"{subject}: {status}, {len(result.warnings)} warning(s)")
