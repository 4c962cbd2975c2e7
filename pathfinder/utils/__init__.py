"""
Shared utilities for PATHFINDER.

Common functionality used across contexts:
- Case-insensitive text matching
- Logger setup
- Report table formatting
"""

from pathfinder.utils.text_processing import (
    contains_ci,
    dedupe_preserving_order,
    overlaps_ci,
)

__all__ = ["contains_ci", "dedupe_preserving_order", "overlaps_ci"]
