"""
Taxonomy context logger.

Provides logging interface for the taxonomy context with automatic [taxonomy] prefix.
All taxonomy modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[taxonomy]"


def _log_warning(message: str) -> None:
    """Log warning message with [taxonomy] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [taxonomy] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_catalog_loaded(source, domain_count: int, issue_count: int) -> None:
    """Log summary of a freshly loaded catalog."""
    _log_debug(f"Loaded {domain_count} domains from {source}")
    if issue_count:
        _log_warning(f"Catalog has {issue_count} integrity issue(s); see integrity_issues()")


def log_integrity_issue(issue: str) -> None:
    _log_warning(f"  {issue}")
