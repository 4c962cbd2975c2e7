"""
Taxonomy Context

Responsibilities:
- Loads the curated career catalog (YAML) into immutable records
- Provides id lookups for domains, subfields and career examples
- Lists job roles across the catalog
- Reports soft integrity issues (dangling related domains, duplicate levels)

Owns: Career data model, catalog loading
Never: Scores, ranks or validates user input
"""

from pathfinder.contexts.taxonomy.domain_data_structure import (
    EXPERIENCE_LEVELS,
    CareerDomain,
    CareerExample,
    ExperienceLevelInfo,
    IndustryTrends,
    InternshipOpportunity,
    SalaryRange,
    Subfield,
    WorkEnvironment,
)
from pathfinder.contexts.taxonomy.exceptions import InvalidTaxonomyError, TaxonomyLoadError
from pathfinder.contexts.taxonomy.taxonomy_store import TaxonomyStore

__all__ = [
    # Data model
    "EXPERIENCE_LEVELS",
    "CareerDomain",
    "CareerExample",
    "ExperienceLevelInfo",
    "IndustryTrends",
    "InternshipOpportunity",
    "SalaryRange",
    "Subfield",
    "WorkEnvironment",
    # Store
    "TaxonomyStore",
    # Errors
    "InvalidTaxonomyError",
    "TaxonomyLoadError",
]
