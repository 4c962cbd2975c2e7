"""
Selection validation against the career taxonomy.

Checks a user's domain selection (or one-shot assessment form) for
referential consistency and skill alignment. Nothing here raises for bad
input: every problem becomes a ValidationError (hard, with a stable code)
or a ValidationWarning (advisory).

Selection error codes:
    DOMAIN_REQUIRED, DOMAIN_NOT_FOUND, EXPERIENCE_LEVEL_REQUIRED,
    INVALID_EXPERIENCE_LEVEL, SKILLS_REQUIRED, INVALID_SKILLS_FORMAT,
    INVALID_CAREER_GOALS_FORMAT, SUBFIELD_NOT_FOUND, CAREER_EXAMPLE_NOT_FOUND

Field validator codes:
    DOMAIN_ID_REQUIRED, INVALID_DOMAIN_ID, SUBFIELD_ID_REQUIRED,
    INVALID_SUBFIELD_ID, EXPERIENCE_LEVEL_REQUIRED, INVALID_EXPERIENCE_LEVEL,
    INVALID_SKILLS_FORMAT, INVALID_CAREER_GOALS_FORMAT

Assessment form codes (plus the field validator codes above):
    FULL_NAME_REQUIRED, FULL_NAME_TOO_SHORT, INVALID_AGE,
    INVALID_EDUCATION_LEVEL, JOB_ROLE_REQUIRED
"""

from typing import Any, Optional

from pathfinder.contexts.intake.normalizer import skill_name
from pathfinder.contexts.intake.selection import AssessmentForm, DomainSelection
from pathfinder.contexts.taxonomy.domain_data_structure import EXPERIENCE_LEVELS, CareerDomain
from pathfinder.contexts.taxonomy.taxonomy_store import TaxonomyStore
from pathfinder.contexts.validation.logger import log_validation_result
from pathfinder.contexts.validation.validation_result import ValidationResult
from pathfinder.utils.text_processing import any_overlap_ci, contains_ci

EDUCATION_LEVELS = ("high-school", "associates", "bachelors", "masters", "phd", "other")

# Alignment below these fractions of selected skills triggers a warning
STRONG_MISALIGNMENT_THRESHOLD = 0.3
SOFT_MISALIGNMENT_THRESHOLD = 0.5

MAX_MISSING_SUBFIELD_SKILLS = 3
MAX_CAREER_GOAL_LENGTH = 200
MIN_FULL_NAME_LENGTH = 2
MIN_AGE = 16
MAX_AGE = 100
MIN_SUGGESTED_SKILLS = 2


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _or_empty(value: Any) -> Any:
    """Treat a missing collection as an empty one."""
    return () if value is None else value


def _as_list(value: Any) -> Optional[list]:
    """Return value as a list, or None if it is not a list/tuple."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def _skill_names(skills: Any) -> Optional[list[str]]:
    """Names of every entry (blanks kept), or None if the collection is malformed."""
    items = _as_list(skills)
    if items is None:
        return None
    try:
        return [skill_name(skill) for skill in items]
    except TypeError:
        return None


class SelectionValidator:
    """
    Validates selections and assessment forms against a TaxonomyStore.

    Example:
        >>> validator = SelectionValidator(TaxonomyStore.from_yaml())
        >>> result = validator.validate_selection(
        ...     DomainSelection(
        ...         domain_id="nonexistent-domain",
        ...         experience_level="entry",
        ...         selected_skills=("JavaScript",),
        ...     )
        ... )
        >>> result.is_valid, result.errors[0].code
        (False, 'DOMAIN_NOT_FOUND')
    """

    def __init__(self, store: TaxonomyStore):
        self.store = store

    # =========================================================================
    # SELECTION
    # =========================================================================

    def validate_selection(self, selection: DomainSelection) -> ValidationResult:
        """
        Validate a complete domain selection.

        Order of checks:
        1. Required fields (domain, experience level, skills)
        2. Domain resolution; stops here if the domain is missing or unknown
        3. Subfield and career example consistency
        4. Experience level availability in the domain
        5. Skill alignment with the domain (and the selected subfield)
        6. Career goals presence and alignment

        Args:
            selection: User's selection

        Returns:
            ValidationResult (is_valid is False when any error was found)
        """
        result = ValidationResult()

        # Missing lists count as empty; only non-list values are format errors
        skills = _skill_names(_or_empty(selection.selected_skills))
        goals = _as_list(_or_empty(selection.career_goals))
        level_is_valid = self._check_required_fields(selection, skills, goals, result)

        if _is_blank(selection.domain_id):
            log_validation_result("selection", result)
            return result

        domain = self.store.get_domain(selection.domain_id)
        if domain is None:
            result.add_error("domain_id", "Selected domain does not exist", "DOMAIN_NOT_FOUND")
            log_validation_result("selection", result)
            return result

        self._check_consistency(domain, selection, result)

        if level_is_valid:
            self._check_experience_level(domain, selection.experience_level, result)

        named_skills = [name.strip() for name in skills or [] if name.strip()]
        if named_skills:
            self._check_skill_alignment(domain, selection.subfield_id, named_skills, result)

        if goals is not None:
            self._check_career_goals(domain, goals, result)

        log_validation_result(f"selection of '{domain.id}'", result)
        return result

    def _check_required_fields(
        self,
        selection: DomainSelection,
        skills: Optional[list[str]],
        goals: Optional[list],
        result: ValidationResult,
    ) -> bool:
        """Record missing/malformed required fields; returns whether the level is usable."""
        if _is_blank(selection.domain_id):
            result.add_error("domain_id", "Domain selection is required", "DOMAIN_REQUIRED")

        level_result = self.validate_experience_level(selection.experience_level)
        result.merge(level_result)

        if skills is None:
            result.add_error(
                "selected_skills", "Skills must be provided as a list", "INVALID_SKILLS_FORMAT"
            )
        elif not any(name.strip() for name in skills):
            result.add_error(
                "selected_skills", "At least one skill must be selected", "SKILLS_REQUIRED"
            )

        if goals is None:
            result.add_error(
                "career_goals", "Career goals must be provided as a list", "INVALID_CAREER_GOALS_FORMAT"
            )

        return level_result.is_valid

    def _check_consistency(
        self, domain: CareerDomain, selection: DomainSelection, result: ValidationResult
    ) -> None:
        if selection.subfield_id and domain.get_subfield(selection.subfield_id) is None:
            result.add_error(
                "subfield_id",
                "Selected subfield does not exist in the chosen domain",
                "SUBFIELD_NOT_FOUND",
            )

        if selection.career_example_id:
            career = domain.get_career_example(selection.career_example_id)
            if career is None:
                result.add_error(
                    "career_example_id",
                    "Selected career example does not exist in the chosen domain",
                    "CAREER_EXAMPLE_NOT_FOUND",
                )
            elif selection.subfield_id and career.subfield_id != selection.subfield_id:
                result.add_warning(
                    "career_example_id",
                    "Selected career example belongs to a different subfield",
                    "Consider selecting a career example from the chosen subfield",
                )

    @staticmethod
    def _check_experience_level(domain: CareerDomain, level: str, result: ValidationResult) -> None:
        if not domain.offers_level(level):
            result.add_warning(
                "experience_level",
                f"Limited opportunities at {level} level in this domain",
                "Consider exploring related domains or different experience levels",
            )

        if level == "internship" and not domain.internship_opportunities:
            result.add_warning(
                "experience_level",
                "No specific internship programs listed for this domain",
                "Look for general internship opportunities or consider entry-level positions",
            )

    @staticmethod
    def _check_skill_alignment(
        domain: CareerDomain, subfield_id: Optional[str], skills: list[str], result: ValidationResult
    ) -> None:
        domain_skills = domain.get_skills()
        aligned = [skill for skill in skills if any_overlap_ci(skill, domain_skills)]
        alignment = len(aligned) / len(skills)

        if alignment < STRONG_MISALIGNMENT_THRESHOLD:
            result.add_warning(
                "selected_skills",
                "Most selected skills may not align well with the chosen domain",
                "Review and select skills more relevant to the career domain",
            )
        elif alignment < SOFT_MISALIGNMENT_THRESHOLD:
            result.add_warning(
                "selected_skills",
                "Some selected skills may not be directly relevant to the chosen domain",
                "Consider adding more domain-specific skills",
            )

        subfield = domain.get_subfield(subfield_id) if subfield_id else None
        if subfield:
            # A required skill counts as covered when a selected skill contains it
            missing = [
                required
                for required in subfield.required_skills
                if not any(contains_ci(skill, required) for skill in skills)
            ]
            if missing:
                result.add_warning(
                    "selected_skills",
                    f"Consider adding these important skills: {', '.join(missing[:MAX_MISSING_SUBFIELD_SKILLS])}",
                    "These skills are commonly required in your chosen subfield",
                )

    @staticmethod
    def _check_career_goals(domain: CareerDomain, goals: list, result: ValidationResult) -> None:
        goal_text = " ".join(str(goal) for goal in goals if not _is_blank(goal)).lower()
        if not goal_text:
            result.add_warning(
                "career_goals",
                "No career goals specified",
                "Adding career goals will help provide more targeted recommendations",
            )
            return

        if not any(keyword.lower() in goal_text for keyword in domain.keywords):
            result.add_warning(
                "career_goals",
                "Career goals may not align well with the selected domain",
                "Consider refining goals to better match the chosen career domain",
            )

    # =========================================================================
    # FIELD VALIDATORS
    # =========================================================================

    def validate_domain_id(self, domain_id: Optional[str]) -> ValidationResult:
        result = ValidationResult()
        if _is_blank(domain_id):
            result.add_error("domain_id", "Domain ID is required", "DOMAIN_ID_REQUIRED")
        elif self.store.get_domain(domain_id) is None:
            result.add_error("domain_id", "Invalid domain ID", "INVALID_DOMAIN_ID")
        return result

    def validate_subfield_id(self, domain_id: Optional[str], subfield_id: Optional[str]) -> ValidationResult:
        """Check that subfield_id is given and exists under domain_id."""
        result = ValidationResult()
        if _is_blank(subfield_id):
            result.add_error("subfield_id", "Subfield ID is required", "SUBFIELD_ID_REQUIRED")
            return result

        domain = self.store.get_domain(domain_id)
        if domain is None:
            result.add_error("domain_id", "Invalid domain ID", "INVALID_DOMAIN_ID")
        elif domain.get_subfield(subfield_id) is None:
            result.add_error(
                "subfield_id", "Invalid subfield ID for the selected domain", "INVALID_SUBFIELD_ID"
            )
        return result

    @staticmethod
    def validate_experience_level(level: Any) -> ValidationResult:
        result = ValidationResult()
        if _is_blank(level):
            result.add_error(
                "experience_level", "Experience level is required", "EXPERIENCE_LEVEL_REQUIRED"
            )
        elif level not in EXPERIENCE_LEVELS:
            result.add_error(
                "experience_level",
                f"Invalid experience level. Must be one of: {', '.join(EXPERIENCE_LEVELS)}",
                "INVALID_EXPERIENCE_LEVEL",
            )
        return result

    def validate_skills(self, skills: Any, domain_id: Optional[str] = None) -> ValidationResult:
        """
        Check a skill list for format, blanks, duplicates and domain relevance.

        Only a malformed collection is an error; everything else is a warning.

        Args:
            skills: List of skill names or SkillRef records
            domain_id: If given and known, check relevance to this domain

        Returns:
            ValidationResult
        """
        result = ValidationResult()
        names = _skill_names(skills)
        if names is None:
            result.add_error(
                "selected_skills", "Skills must be provided as a list", "INVALID_SKILLS_FORMAT"
            )
            return result

        stripped = [name.strip() for name in names]
        present = [name for name in stripped if name]

        if len(present) < len(stripped):
            result.add_warning(
                "selected_skills",
                "Some skills are empty or contain only whitespace",
                "Remove empty skill entries",
            )

        if len({name.lower() for name in stripped}) < len(stripped):
            result.add_warning(
                "selected_skills", "Duplicate skills detected", "Remove duplicate skill entries"
            )

        domain = self.store.get_domain(domain_id) if domain_id else None
        if domain and present:
            domain_skills = domain.get_skills()
            relevant = [name for name in present if any_overlap_ci(name, domain_skills)]
            if len(relevant) < len(present) * STRONG_MISALIGNMENT_THRESHOLD:
                result.add_warning(
                    "selected_skills",
                    "Many selected skills may not be relevant to the chosen domain",
                    "Consider selecting skills more aligned with the career domain",
                )

        if not names:
            result.add_warning(
                "selected_skills",
                "No skills selected",
                "Select at least 2-3 relevant skills for better recommendations",
            )
        elif len(names) < MIN_SUGGESTED_SKILLS:
            result.add_warning(
                "selected_skills",
                "Very few skills selected",
                "Consider adding more skills for better career matching",
            )

        return result

    @staticmethod
    def validate_career_goals(goals: Any) -> ValidationResult:
        result = ValidationResult()
        items = _as_list(goals)
        if items is None:
            result.add_error(
                "career_goals", "Career goals must be provided as a list", "INVALID_CAREER_GOALS_FORMAT"
            )
            return result

        if any(_is_blank(goal) for goal in items):
            result.add_warning(
                "career_goals",
                "Some career goals are empty",
                "Remove empty goal entries or provide meaningful descriptions",
            )

        if any(len(str(goal)) > MAX_CAREER_GOAL_LENGTH for goal in items if goal is not None):
            result.add_warning(
                "career_goals",
                "Some career goals are very long",
                f"Keep career goals concise (under {MAX_CAREER_GOAL_LENGTH} characters)",
            )

        if not items:
            result.add_warning(
                "career_goals",
                "No career goals specified",
                "Add 1-3 career goals to get better recommendations",
            )

        return result

    # =========================================================================
    # ASSESSMENT FORM
    # =========================================================================

    def validate_assessment_form(self, form: AssessmentForm) -> ValidationResult:
        """
        Validate the one-shot career assessment form.

        Runs presence/range/enum checks on each field, then reuses
        validate_domain_id, validate_experience_level and validate_skills
        (skills warnings are included in the result).

        Args:
            form: Submitted form

        Returns:
            ValidationResult
        """
        result = ValidationResult()

        if _is_blank(form.full_name):
            result.add_error("full_name", "Full name is required", "FULL_NAME_REQUIRED")
        elif len(str(form.full_name).strip()) < MIN_FULL_NAME_LENGTH:
            result.add_error(
                "full_name",
                f"Full name must be at least {MIN_FULL_NAME_LENGTH} characters long",
                "FULL_NAME_TOO_SHORT",
            )

        if (
            not isinstance(form.age, (int, float))
            or isinstance(form.age, bool)
            or not MIN_AGE <= form.age <= MAX_AGE
        ):
            result.add_error("age", f"Age must be between {MIN_AGE} and {MAX_AGE}", "INVALID_AGE")

        if form.education_level not in EDUCATION_LEVELS:
            result.add_error(
                "education_level", "Valid education level is required", "INVALID_EDUCATION_LEVEL"
            )

        result.merge(self.validate_domain_id(form.domain))

        if _is_blank(form.job_role):
            result.add_error("job_role", "Job role is required", "JOB_ROLE_REQUIRED")

        result.merge(self.validate_experience_level(form.experience_level))
        result.merge(self.validate_skills(form.skills, form.domain))

        log_validation_result("assessment form", result)
        return result
