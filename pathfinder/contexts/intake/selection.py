"""
User selection data structures for the Intake context.

DomainSelection and AssessmentForm carry whatever the user submitted, valid
or not. They never reject input on construction; deciding what is wrong
with a selection is the Validation context's job.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pathfinder.contexts.intake.normalizer import (
    normalize_skills,
    normalize_terms,
    normalize_text,
    pick,
)
from pathfinder.contexts.taxonomy.domain_data_structure import to_plain_data


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = normalize_text(str(value))
    return text or None


def _list_or_raw(value: Any, normalizer) -> Any:
    """Normalize list payloads; pass anything else through for the validator to flag."""
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(normalizer(value))
    return value


@dataclass(frozen=True)
class DomainSelection:
    """
    A user's concrete choice of domain, optional subfield/career, level,
    skills and goals.
    """

    domain_id: Optional[str]
    experience_level: Optional[str]
    selected_skills: tuple[str, ...] = ()
    career_goals: tuple[str, ...] = ()
    subfield_id: Optional[str] = None
    career_example_id: Optional[str] = None

    def __post_init__(self):
        for name in ("selected_skills", "career_goals"):
            value = getattr(self, name)
            if isinstance(value, list):
                object.__setattr__(self, name, tuple(value))

    @classmethod
    def from_dict(cls, data: dict) -> "DomainSelection":
        """
        Build a selection from a request payload (snake_case or camelCase keys).

        Skills may be plain strings, SkillRef instances or {"name": ...} dicts.
        """
        return cls(
            domain_id=_optional_text(pick(data, "domain_id", "domainId")),
            experience_level=_optional_text(pick(data, "experience_level", "experienceLevel")),
            selected_skills=_list_or_raw(
                pick(data, "selected_skills", "selectedSkills"), normalize_skills
            ),
            career_goals=_list_or_raw(pick(data, "career_goals", "careerGoals"), normalize_terms),
            subfield_id=_optional_text(pick(data, "subfield_id", "subfieldId")),
            career_example_id=_optional_text(pick(data, "career_example_id", "careerExampleId")),
        )

    def to_dict(self) -> dict:
        return to_plain_data(self)


@dataclass(frozen=True)
class AssessmentForm:
    """One-shot career assessment form submitted during onboarding."""

    full_name: Optional[str]
    age: Optional[int]
    education_level: Optional[str]
    domain: Optional[str]
    job_role: Optional[str]
    experience_level: Optional[str]
    skills: tuple[str, ...] = ()

    def __post_init__(self):
        if isinstance(self.skills, list):
            object.__setattr__(self, "skills", tuple(self.skills))

    @classmethod
    def from_dict(cls, data: dict) -> "AssessmentForm":
        age = pick(data, "age")
        try:
            age = int(age) if age not in (None, "") else None
        except (TypeError, ValueError):
            age = None

        return cls(
            full_name=pick(data, "full_name", "fullName"),
            age=age,
            education_level=_optional_text(pick(data, "education_level", "educationLevel")),
            domain=_optional_text(pick(data, "domain", "domainId")),
            job_role=pick(data, "job_role", "jobRole"),
            experience_level=_optional_text(pick(data, "experience_level", "experienceLevel")),
            skills=_list_or_raw(pick(data, "skills"), normalize_skills),
        )

    def to_dict(self) -> dict:
        return to_plain_data(self)
