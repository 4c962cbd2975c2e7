"""Unit tests for intake normalization and request payload parsing."""

import pytest

from pathfinder.contexts.intake import (
    AssessmentForm,
    DomainSearchFilters,
    DomainSelection,
    SalaryFilter,
    SkillRef,
    WorkEnvironmentFilter,
    normalize_skills,
    normalize_terms,
    normalize_text,
)
from pathfinder.contexts.intake.normalizer import pick, skill_name


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,expected",
    [
        ("  Machine Learning ", "Machine Learning"),
        ("data\u00a0science", "data science"),
        ("\ufeffPython", "Python"),
        ("\u201clead\u201d", '"lead"'),
        ("team\u2019s", "team's"),
        ("full-time", "full-time"),
    ],
)
def test_normalize_text(raw, expected):
    assert normalize_text(raw) == expected


@pytest.mark.unit
def test_normalize_skills_accepts_mixed_shapes():
    skills = [
        "Python",
        SkillRef(id="sql", name="SQL", category="technical"),
        {"id": "git", "name": " Git "},
        "",
        {"id": "blank"},
        "Python",
    ]
    assert normalize_skills(skills) == ["Python", "SQL", "Git", "Python"]


@pytest.mark.unit
@pytest.mark.parametrize("skills", [None, [], ()])
def test_normalize_skills_empty(skills):
    assert normalize_skills(skills) == []


@pytest.mark.unit
def test_skill_name_rejects_unsupported_values():
    with pytest.raises(TypeError):
        skill_name(42)


@pytest.mark.unit
def test_skill_ref_from_dict_defaults_id_to_name():
    ref = SkillRef.from_dict({"name": "Statistics", "priority": "high"})
    assert ref == SkillRef(id="Statistics", name="Statistics", priority="high")


@pytest.mark.unit
def test_normalize_terms_drops_blanks():
    assert normalize_terms([" medicine ", "", "   ", "design"]) == ["medicine", "design"]
    assert normalize_terms(None) == []


@pytest.mark.unit
def test_pick_prefers_snake_case():
    data = {"domain_ids": ["a"], "domainIds": ["b"]}

    assert pick(data, "domain_ids", "domainIds") == ["a"]
    assert pick({"domainIds": ["b"]}, "domain_ids", "domainIds") == ["b"]
    assert pick({}, "domain_ids", "domainIds", default=()) == ()


@pytest.mark.unit
def test_search_filters_from_camel_case_payload():
    filters = DomainSearchFilters.from_dict(
        {
            "query": "  data ",
            "domainIds": ["tech"],
            "experienceLevels": ["entry", ""],
            "salaryRange": {"min": 40000},
            "workEnvironment": {"remote": True},
            "skills": [{"id": "py", "name": "Python"}],
        }
    )

    assert filters.query == "data"
    assert filters.domain_ids == ("tech",)
    assert filters.experience_levels == ("entry",)
    assert filters.salary_range == SalaryFilter(min=40000)
    assert filters.work_environment == WorkEnvironmentFilter(remote=True)
    assert filters.skills == ("Python",)
    assert filters.subfield_ids is None
    assert filters.keywords is None


@pytest.mark.unit
def test_search_filters_from_empty_payload():
    assert DomainSearchFilters.from_dict(None) == DomainSearchFilters()
    assert DomainSearchFilters.from_dict({"query": ""}).query is None


@pytest.mark.unit
def test_search_filters_accept_scalar_values():
    filters = DomainSearchFilters.from_dict({"domainIds": "tech", "keywords": " data ", "query": 5})

    assert filters.domain_ids == ("tech",)
    assert filters.keywords == ("data",)
    assert filters.query == "5"
    assert DomainSearchFilters.from_dict({"query": "   "}).query is None


@pytest.mark.unit
def test_search_filters_store_tuples():
    filters = DomainSearchFilters(domain_ids=["tech"], keywords=["data"])

    assert filters.domain_ids == ("tech",)
    assert hash(filters) == hash(DomainSearchFilters(domain_ids=("tech",), keywords=("data",)))


@pytest.mark.unit
@pytest.mark.parametrize("payload", [None, {}])
def test_nested_filters_absent(payload):
    assert SalaryFilter.from_dict(payload) is None
    assert WorkEnvironmentFilter.from_dict(payload) is None


@pytest.mark.unit
def test_domain_selection_from_snake_case_payload():
    selection = DomainSelection.from_dict(
        {
            "domain_id": "tech",
            "experience_level": "entry",
            "selected_skills": ["Python", {"name": "SQL"}],
            "career_goals": [" Build tools "],
        }
    )

    assert selection.selected_skills == ("Python", "SQL")
    assert selection.career_goals == ("Build tools",)
    assert selection.subfield_id is None
    assert selection.to_dict()["selected_skills"] == ["Python", "SQL"]


@pytest.mark.unit
def test_domain_selection_keeps_malformed_lists_for_validation():
    selection = DomainSelection.from_dict({"domainId": "tech", "selectedSkills": "Python"})

    assert selection.selected_skills == "Python"
    assert selection.career_goals == ()


@pytest.mark.unit
@pytest.mark.parametrize("age,expected", [("34", 34), (34, 34), ("thirty", None), (None, None)])
def test_assessment_form_age_parsing(age, expected):
    form = AssessmentForm.from_dict({"fullName": "Ada", "age": age, "domainId": "tech"})

    assert form.age == expected
    assert form.domain == "tech"
