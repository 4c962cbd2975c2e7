"""
Intake Context

Responsibilities:
- Accepts search filters, selections and assessment forms from callers
- Normalizes payload keys (snake_case or camelCase) and unicode in free text
- Reduces mixed skill shapes (plain names or SkillRef records) to names

Owns: Input data structures and boundary normalization
Never: Looks anything up in the taxonomy or judges validity
"""

from pathfinder.contexts.intake.normalizer import (
    SkillRef,
    normalize_skills,
    normalize_terms,
    normalize_text,
)
from pathfinder.contexts.intake.search_filters import (
    DomainSearchFilters,
    SalaryFilter,
    WorkEnvironmentFilter,
)
from pathfinder.contexts.intake.selection import AssessmentForm, DomainSelection

__all__ = [
    # Normalization
    "SkillRef",
    "normalize_skills",
    "normalize_terms",
    "normalize_text",
    # Input structures
    "DomainSearchFilters",
    "SalaryFilter",
    "WorkEnvironmentFilter",
    "DomainSelection",
    "AssessmentForm",
]
