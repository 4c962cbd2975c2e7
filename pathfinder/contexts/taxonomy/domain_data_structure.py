"""
Career taxonomy data structures for the Taxonomy context.

Provides immutable records for domains and everything they own (subfields,
career examples, internships, experience levels). Records are built from
plain dicts (the YAML catalog after OmegaConf conversion) through from_dict()
factories that validate required fields and enum values.

Record classes share one convention:
- Dataclasses with frozen=True for immutability
- Tuples instead of lists for every owned collection
"""

from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Optional

from pathfinder.contexts.taxonomy.exceptions import InvalidTaxonomyError
from pathfinder.utils.text_processing import dedupe_preserving_order

# =============================================================================
# ENUMERATED VALUES
# =============================================================================

EXPERIENCE_LEVELS = ("internship", "entry", "mid", "senior", "executive")
DEMAND_LEVELS = ("high", "medium", "low")
COMPETITIVENESS_LEVELS = ("high", "medium", "low")
SALARY_PERIODS = ("hourly", "monthly", "yearly")
TRAVEL_REQUIREMENTS = ("none", "minimal", "moderate", "frequent")


# =============================================================================
# PARSING HELPERS
# =============================================================================


def _require(data: dict, key: str, location: str) -> Any:
    """Fetch a required key, raising InvalidTaxonomyError if missing or blank."""
    if not isinstance(data, dict):
        raise InvalidTaxonomyError(f"Expected a mapping, got {type(data).__name__}", location)
    value = data.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidTaxonomyError(f"Missing required field '{key}'", location)
    return value


def _strings(data: dict, key: str) -> tuple[str, ...]:
    """Fetch an optional list of strings as a tuple."""
    values = data.get(key) or []
    return tuple(str(value) for value in values)


def _choice(value: str, allowed: tuple[str, ...], key: str, location: str) -> str:
    if value not in allowed:
        raise InvalidTaxonomyError(
            f"Invalid {key} '{value}'. Must be one of: {', '.join(allowed)}", location
        )
    return value


def _number(value: Any, key: str, location: str) -> float:
    """Accept ints and floats only (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidTaxonomyError(f"Field '{key}' must be a number, got {value!r}", location)
    return value


def _records(data: dict, key: str, record_cls, location: str) -> tuple:
    """Build a tuple of records from an optional list of dicts."""
    return tuple(
        record_cls.from_dict(item, location=f"{location}.{key}[{index}]")
        for index, item in enumerate(data.get(key) or [])
    )


def to_plain_data(obj: Any) -> Any:
    """
    Convert dataclasses and tuples into JSON-serializable dicts and lists.

    Unlike dataclasses.asdict(), tuples become lists so the output round-trips
    through json.dumps() and compares equal to freshly decoded JSON.

    Example:
        >>> to_plain_data(SalaryRange(min=1, max=2))
        {'min': 1, 'max': 2, 'currency': 'USD', 'period': 'yearly', 'location': None}
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_plain_data(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, (list, tuple)):
        return [to_plain_data(item) for item in obj]
    if isinstance(obj, dict):
        return {key: to_plain_data(value) for key, value in obj.items()}
    return obj


# =============================================================================
# VALUE OBJECTS
# =============================================================================


@dataclass(frozen=True)
class SalaryRange:
    """Salary or stipend band."""

    min: float
    max: float
    currency: str = "USD"
    period: str = "yearly"
    location: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict, location: str = "salary") -> "SalaryRange":
        low = _number(_require(data, "min", location), "min", location)
        high = _number(_require(data, "max", location), "max", location)
        if low > high:
            raise InvalidTaxonomyError(f"Salary min {low} exceeds max {high}", location)
        return cls(
            min=low,
            max=high,
            currency=data.get("currency", "USD"),
            period=_choice(data.get("period", "yearly"), SALARY_PERIODS, "period", location),
            location=data.get("location"),
        )


@dataclass(frozen=True)
class WorkEnvironment:
    """Where and how a career is performed."""

    remote: bool = False
    hybrid: bool = False
    onsite: bool = False
    team_size: str = ""
    work_style: tuple[str, ...] = ()
    travel_requirement: str = "none"

    @classmethod
    def from_dict(cls, data: Optional[dict], location: str = "work_environment") -> "WorkEnvironment":
        data = data or {}
        return cls(
            remote=bool(data.get("remote", False)),
            hybrid=bool(data.get("hybrid", False)),
            onsite=bool(data.get("onsite", False)),
            team_size=str(data.get("team_size", "")),
            work_style=_strings(data, "work_style"),
            travel_requirement=_choice(
                data.get("travel_requirement", "none"),
                TRAVEL_REQUIREMENTS,
                "travel_requirement",
                location,
            ),
        )


@dataclass(frozen=True)
class IndustryTrends:
    """Market outlook for a domain."""

    demand: str
    growth: float
    competitiveness: str
    emerging_roles: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict, location: str = "industry_trends") -> "IndustryTrends":
        return cls(
            demand=_choice(_require(data, "demand", location), DEMAND_LEVELS, "demand", location),
            growth=_number(data.get("growth", 0), "growth", location),
            competitiveness=_choice(
                data.get("competitiveness", "medium"),
                COMPETITIVENESS_LEVELS,
                "competitiveness",
                location,
            ),
            emerging_roles=_strings(data, "emerging_roles"),
        )


# =============================================================================
# OWNED RECORDS
# =============================================================================


@dataclass(frozen=True)
class Subfield:
    """Specialization within a domain (e.g., "Data Science & Analytics")."""

    id: str
    name: str
    description: str
    required_skills: tuple[str, ...]
    average_salary: SalaryRange
    job_roles: tuple[str, ...]
    keywords: tuple[str, ...]

    @classmethod
    def from_dict(cls, data: dict, location: str = "subfield") -> "Subfield":
        return cls(
            id=_require(data, "id", location),
            name=_require(data, "name", location),
            description=data.get("description", ""),
            required_skills=_strings(data, "required_skills"),
            average_salary=SalaryRange.from_dict(
                _require(data, "average_salary", location), f"{location}.average_salary"
            ),
            job_roles=_strings(data, "job_roles"),
            keywords=_strings(data, "keywords"),
        )


@dataclass(frozen=True)
class CareerExample:
    """Concrete job title with requirements, tied to one subfield."""

    id: str
    title: str
    description: str
    subfield_id: str
    experience_level: str
    salary_range: SalaryRange
    required_skills: tuple[str, ...]
    preferred_skills: tuple[str, ...]
    work_environment: WorkEnvironment
    career_path: tuple[str, ...]
    keywords: tuple[str, ...]

    @property
    def all_skills(self) -> tuple[str, ...]:
        """Required skills followed by preferred skills."""
        return self.required_skills + self.preferred_skills

    @classmethod
    def from_dict(cls, data: dict, location: str = "career_example") -> "CareerExample":
        return cls(
            id=_require(data, "id", location),
            title=_require(data, "title", location),
            description=data.get("description", ""),
            subfield_id=_require(data, "subfield_id", location),
            experience_level=_choice(
                _require(data, "experience_level", location),
                EXPERIENCE_LEVELS,
                "experience_level",
                location,
            ),
            salary_range=SalaryRange.from_dict(
                _require(data, "salary_range", location), f"{location}.salary_range"
            ),
            required_skills=_strings(data, "required_skills"),
            preferred_skills=_strings(data, "preferred_skills"),
            work_environment=WorkEnvironment.from_dict(
                data.get("work_environment"), f"{location}.work_environment"
            ),
            career_path=_strings(data, "career_path"),
            keywords=_strings(data, "keywords"),
        )


@dataclass(frozen=True)
class InternshipOpportunity:
    """Time-bounded entry-level engagement tied to one subfield."""

    id: str
    title: str
    description: str
    subfield_id: str
    duration: str
    stipend: Optional[SalaryRange]
    required_skills: tuple[str, ...]
    learning_outcomes: tuple[str, ...]
    typical_companies: tuple[str, ...]
    application_period: str
    keywords: tuple[str, ...]

    @classmethod
    def from_dict(cls, data: dict, location: str = "internship") -> "InternshipOpportunity":
        stipend = data.get("stipend")
        return cls(
            id=_require(data, "id", location),
            title=_require(data, "title", location),
            description=data.get("description", ""),
            subfield_id=_require(data, "subfield_id", location),
            duration=str(data.get("duration", "")),
            stipend=SalaryRange.from_dict(stipend, f"{location}.stipend") if stipend else None,
            required_skills=_strings(data, "required_skills"),
            learning_outcomes=_strings(data, "learning_outcomes"),
            typical_companies=_strings(data, "typical_companies"),
            application_period=str(data.get("application_period", "")),
            keywords=_strings(data, "keywords"),
        )


@dataclass(frozen=True)
class ExperienceLevelInfo:
    """What a given experience level looks like inside a domain."""

    level: str
    title: str
    description: str
    years_of_experience: str
    typical_roles: tuple[str, ...]
    salary_range: SalaryRange
    key_responsibilities: tuple[str, ...]
    required_skills: tuple[str, ...]
    career_progression: tuple[str, ...]

    @classmethod
    def from_dict(cls, data: dict, location: str = "experience_level") -> "ExperienceLevelInfo":
        return cls(
            level=_choice(_require(data, "level", location), EXPERIENCE_LEVELS, "level", location),
            title=_require(data, "title", location),
            description=data.get("description", ""),
            years_of_experience=str(data.get("years_of_experience", "")),
            typical_roles=_strings(data, "typical_roles"),
            salary_range=SalaryRange.from_dict(
                _require(data, "salary_range", location), f"{location}.salary_range"
            ),
            key_responsibilities=_strings(data, "key_responsibilities"),
            required_skills=_strings(data, "required_skills"),
            career_progression=_strings(data, "career_progression"),
        )


# =============================================================================
# DOMAIN
# =============================================================================


@dataclass(frozen=True)
class CareerDomain:
    """
    Top-level career category and everything it owns.

    The icon and color fields are display-only and passed through unmodified.
    Subfield ids are unique within a domain (enforced in from_dict); career,
    internship and experience-level entries are looked up first-match.
    """

    id: str
    name: str
    description: str
    icon: str
    color: str
    subfields: tuple[Subfield, ...]
    career_examples: tuple[CareerExample, ...]
    internship_opportunities: tuple[InternshipOpportunity, ...]
    experience_levels: tuple[ExperienceLevelInfo, ...]
    keywords: tuple[str, ...]
    industry_trends: IndustryTrends
    related_domains: tuple[str, ...]

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: dict, location: str = "domain") -> "CareerDomain":
        """
        Build a domain from a catalog record.

        Args:
            data: Domain mapping with snake_case keys (see career_domains.yaml)
            location: Dotted path used in error messages

        Returns:
            CareerDomain instance

        Raises:
            InvalidTaxonomyError: On missing fields, bad enum values or
                duplicate subfield ids
        """
        subfields = _records(data, "subfields", Subfield, location)
        seen = set()
        for subfield in subfields:
            if subfield.id in seen:
                raise InvalidTaxonomyError(f"Duplicate subfield id '{subfield.id}'", location)
            seen.add(subfield.id)

        return cls(
            id=_require(data, "id", location),
            name=_require(data, "name", location),
            description=data.get("description", ""),
            icon=data.get("icon", ""),
            color=data.get("color", ""),
            subfields=subfields,
            career_examples=_records(data, "career_examples", CareerExample, location),
            internship_opportunities=_records(
                data, "internship_opportunities", InternshipOpportunity, location
            ),
            experience_levels=_records(data, "experience_levels", ExperienceLevelInfo, location),
            keywords=_strings(data, "keywords"),
            industry_trends=IndustryTrends.from_dict(
                _require(data, "industry_trends", location), f"{location}.industry_trends"
            ),
            related_domains=_strings(data, "related_domains"),
        )

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def get_subfield(self, subfield_id: str) -> Optional[Subfield]:
        return next((s for s in self.subfields if s.id == subfield_id), None)

    def get_career_example(self, career_id: str) -> Optional[CareerExample]:
        return next((c for c in self.career_examples if c.id == career_id), None)

    def get_experience_level(self, level: str) -> Optional[ExperienceLevelInfo]:
        """First ExperienceLevelInfo entry for the level, if any."""
        return next((info for info in self.experience_levels if info.level == level), None)

    def has_careers_at(self, level: str) -> bool:
        """True when any career example is at the given experience level."""
        return any(career.experience_level == level for career in self.career_examples)

    def offers_level(self, level: str) -> bool:
        """True when a career example or an experience-level entry covers the level."""
        return self.has_careers_at(level) or self.get_experience_level(level) is not None

    def get_skills(self) -> list[str]:
        """
        All skills associated with the domain, deduplicated in discovery order.

        Subfield required skills first, then each career's required and
        preferred skills.
        """
        skills = [skill for subfield in self.subfields for skill in subfield.required_skills]
        skills.extend(skill for career in self.career_examples for skill in career.all_skills)
        return dedupe_preserving_order(skills)

    def to_dict(self) -> dict:
        return to_plain_data(self)
