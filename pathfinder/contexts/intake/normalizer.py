"""
Input normalizer for the Intake context.

Reduces the loosely-shaped input that arrives from UI/API collaborators to
the plain strings the engines operate on:
- Skills arrive either as plain names or as richer SkillRef records
  ({id, name, category, priority}); the engines only ever see names.
- Free text (queries, goals, skills) gets unicode cleanup so that pasted
  non-breaking spaces or smart quotes do not defeat substring matching.
- Payload keys may be snake_case (Python callers) or camelCase (JSON from
  the web client).
"""

import unicodedata
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    "\u200b": "",  # zero-width space
    "\ufeff": "",  # BOM
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    "\u2013": "-",  # en dash
}


@dataclass(frozen=True)
class SkillRef:
    """Structured skill reference as produced by profile/resume collaborators."""

    id: str
    name: str
    category: Optional[str] = None
    priority: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "SkillRef":
        return cls(
            id=str(data.get("id", data.get("name", ""))),
            name=str(data.get("name", "")),
            category=data.get("category"),
            priority=data.get("priority"),
        )


Skill = Union[str, SkillRef, dict]


def normalize_text(text: str) -> str:
    """
    Normalize unicode and surrounding whitespace of a user-supplied string.

    Example:
        >>> normalize_text("  Machine Learning ")
        'Machine Learning'
    """
    text = unicodedata.normalize("NFKC", text)
    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text.strip()


def skill_name(skill: Skill) -> str:
    """
    Extract the display name from any accepted skill shape.

    Raises:
        TypeError: If the value is not a string, SkillRef or mapping
    """
    if isinstance(skill, SkillRef):
        return skill.name
    if isinstance(skill, dict):
        return str(skill.get("name", ""))
    if isinstance(skill, str):
        return skill
    raise TypeError(f"Unsupported skill value: {skill!r}")


def normalize_skills(skills: Optional[Iterable[Skill]]) -> list[str]:
    """
    Reduce a mixed skill list to clean, non-empty names (order preserved).

    Duplicates are kept; whether duplicates matter is the validator's call.

    Example:
        >>> normalize_skills(["Python", SkillRef(id="sql", name="SQL"), {"name": " Git "}, ""])
        ['Python', 'SQL', 'Git']
    """
    if not skills:
        return []
    names = (normalize_text(skill_name(skill)) for skill in skills)
    return [name for name in names if name]


def normalize_terms(terms: Optional[Iterable[str]]) -> list[str]:
    """Normalize a list of free-text terms (interests, keywords, goals), dropping blanks."""
    if not terms:
        return []
    cleaned = (normalize_text(str(term)) for term in terms)
    return [term for term in cleaned if term]


def pick(data: dict, snake_key: str, camel_key: Optional[str] = None, default: Any = None) -> Any:
    """
    Read a payload field by its snake_case or camelCase name.

    Example:
        >>> pick({"domainIds": ["a"]}, "domain_ids", "domainIds")
        ['a']
    """
    if snake_key in data:
        return data[snake_key]
    if camel_key and camel_key in data:
        return data[camel_key]
    return default
