"""
Search filter data structure for the Intake context.

Every field is optional and a field left unset is simply not applied.
See DomainSearchEngine for the effect of each field on each entity type.
"""

from dataclasses import dataclass
from typing import Optional

from pathfinder.contexts.intake.normalizer import (
    normalize_skills,
    normalize_terms,
    normalize_text,
    pick,
)
from pathfinder.contexts.taxonomy.domain_data_structure import to_plain_data


@dataclass(frozen=True)
class SalaryFilter:
    """Salary bounds; a career passes only if its whole range fits inside."""

    min: Optional[float] = None
    max: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["SalaryFilter"]:
        if not data:
            return None
        return cls(min=data.get("min"), max=data.get("max"))


@dataclass(frozen=True)
class WorkEnvironmentFilter:
    """Requested work arrangements; a flag left False/None is not required."""

    remote: Optional[bool] = None
    hybrid: Optional[bool] = None
    onsite: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["WorkEnvironmentFilter"]:
        if not data:
            return None
        return cls(remote=data.get("remote"), hybrid=data.get("hybrid"), onsite=data.get("onsite"))


@dataclass(frozen=True)
class DomainSearchFilters:
    """
    Filter set for DomainSearchEngine.search().

    Attributes:
        query: Free-text substring query (case-insensitive)
        domain_ids: Allow-list applied to domains and subfields
        subfield_ids: Allow-list applied to subfields
        experience_levels: Allow-list applied to career examples
        salary_range: Bounds applied to career examples
        work_environment: Required arrangements applied to career examples
        skills: Accepted and echoed back; no entity filter uses it
        keywords: At least one must appear inside a domain keyword
    """

    query: Optional[str] = None
    domain_ids: Optional[tuple[str, ...]] = None
    subfield_ids: Optional[tuple[str, ...]] = None
    experience_levels: Optional[tuple[str, ...]] = None
    salary_range: Optional[SalaryFilter] = None
    work_environment: Optional[WorkEnvironmentFilter] = None
    skills: Optional[tuple[str, ...]] = None
    keywords: Optional[tuple[str, ...]] = None

    def __post_init__(self):
        # Accept lists from callers but store tuples so filters stay hashable
        for name in ("domain_ids", "subfield_ids", "experience_levels", "skills", "keywords"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "DomainSearchFilters":
        """
        Build filters from a request payload (snake_case or camelCase keys).

        Example:
            >>> DomainSearchFilters.from_dict({"query": " data ", "experienceLevels": ["entry"]})
            DomainSearchFilters(query='data', ..., experience_levels=('entry',), ...)
        """
        data = data or {}

        def optional_list(snake_key: str, camel_key: str, normalizer=normalize_terms):
            value = pick(data, snake_key, camel_key)
            if value is None:
                return None
            if isinstance(value, str):
                value = [value]
            return tuple(normalizer(value))

        query = pick(data, "query")
        query = normalize_text(str(query)) if query is not None else ""
        return cls(
            query=query or None,
            domain_ids=optional_list("domain_ids", "domainIds"),
            subfield_ids=optional_list("subfield_ids", "subfieldIds"),
            experience_levels=optional_list("experience_levels", "experienceLevels"),
            salary_range=SalaryFilter.from_dict(pick(data, "salary_range", "salaryRange")),
            work_environment=WorkEnvironmentFilter.from_dict(
                pick(data, "work_environment", "workEnvironment")
            ),
            skills=optional_list("skills", "skills", normalizer=normalize_skills),
            keywords=optional_list("keywords", "keywords"),
        )

    def to_dict(self) -> dict:
        return to_plain_data(self)
