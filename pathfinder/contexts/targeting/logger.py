"""
Targeting context logger.

Provides logging interface for the targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[target]"


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_search_complete(query, result_count: int, suggestion_count: int) -> None:
    query_label = f"'{query}'" if query else "<no query>"
    _log_debug(
        f"Search {query_label}: {result_count} result(s), {suggestion_count} suggestion(s)"
    )


def log_recommendations(domain_count: int, recommended_count: int) -> None:
    _log_debug(f"Scored {domain_count} domains, {recommended_count} above threshold")
