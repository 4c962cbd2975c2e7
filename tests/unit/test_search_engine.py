"""Unit tests for DomainSearchEngine against the fixture taxonomy."""

import json

import pytest

from pathfinder.contexts.intake import DomainSearchFilters, SalaryFilter, WorkEnvironmentFilter
from pathfinder.contexts.targeting import DomainSearchEngine
from pathfinder.contexts.targeting.defaults import POPULAR_SEARCH_TERMS
from pathfinder.contexts.taxonomy import TaxonomyStore


def _ids(response):
    return [(result.entity_type, result.id) for result in response.results]


@pytest.mark.unit
def test_search_without_filters_returns_everything_in_catalog_order(store):
    response = DomainSearchEngine(store).search()

    assert _ids(response) == [
        ("domain", "tech"),
        ("subfield", "software"),
        ("subfield", "data"),
        ("career", "junior-dev"),
        ("internship", "dev-intern"),
        ("domain", "health"),
        ("subfield", "nursing"),
        ("domain", "arts"),
        ("subfield", "graphic-design"),
    ]
    assert all(result.relevance_score == 0.5 for result in response.results)
    assert response.total_count == 9
    assert response.suggestions == ()


@pytest.mark.unit
def test_results_sorted_by_score_with_stable_ties(store):
    response = DomainSearchEngine(store).search(DomainSearchFilters(query="software"))

    assert _ids(response) == [
        ("subfield", "software"),
        ("career", "junior-dev"),
        ("internship", "dev-intern"),
        ("domain", "tech"),
    ]
    scores = [result.relevance_score for result in response.results]
    assert scores == pytest.approx([1.0, 0.8, 0.8, 0.7])


@pytest.mark.unit
def test_result_parents_and_matched_keywords(store):
    response = DomainSearchEngine(store).search(DomainSearchFilters(query="software"))
    by_id = {result.id: result for result in response.results}

    assert by_id["tech"].parent_domain is None
    assert by_id["tech"].matched_keywords == ("software",)
    assert by_id["software"].parent_domain == "Technology"
    assert by_id["software"].matched_keywords == ("software engineering",)
    assert by_id["junior-dev"].parent_subfield == "Software Development"
    assert by_id["dev-intern"].parent_subfield == "Software Development"


@pytest.mark.unit
def test_match_through_skills_only_gets_minimum_score(store):
    """A career found only via its required skills still has a positive score."""
    response = DomainSearchEngine(store).search(DomainSearchFilters(query="javascript"))

    assert _ids(response) == [("career", "junior-dev")]
    assert response.results[0].relevance_score == pytest.approx(0.1)


@pytest.mark.unit
def test_domain_filter_does_not_restrict_careers_or_internships(store):
    response = DomainSearchEngine(store).search(DomainSearchFilters(domain_ids=["health"]))

    assert _ids(response) == [
        ("career", "junior-dev"),
        ("internship", "dev-intern"),
        ("domain", "health"),
        ("subfield", "nursing"),
    ]


@pytest.mark.unit
@pytest.mark.parametrize("domain_id", ["tech", "health", "arts"])
def test_domain_id_filter_returns_exactly_that_domain(store, domain_id):
    response = DomainSearchEngine(store).search(DomainSearchFilters(domain_ids=[domain_id]))
    domains = [result.id for result in response.results if result.entity_type == "domain"]
    assert domains == [domain_id]


@pytest.mark.unit
def test_subfield_filter(store):
    response = DomainSearchEngine(store).search(DomainSearchFilters(subfield_ids=["data"]))
    subfields = [result.id for result in response.results if result.entity_type == "subfield"]
    assert subfields == ["data"]


@pytest.mark.unit
def test_keywords_filter_applies_to_domains(store):
    response = DomainSearchEngine(store).search(DomainSearchFilters(keywords=["program"]))
    domains = [result.id for result in response.results if result.entity_type == "domain"]
    assert domains == ["tech"]
    assert ("subfield", "nursing") in _ids(response)


@pytest.mark.unit
def test_experience_level_filter_applies_to_careers(store):
    engine = DomainSearchEngine(store)
    assert ("career", "junior-dev") in _ids(engine.search(DomainSearchFilters(experience_levels=["entry"])))
    assert ("career", "junior-dev") not in _ids(engine.search(DomainSearchFilters(experience_levels=["mid"])))


@pytest.mark.unit
@pytest.mark.parametrize(
    "low,high,included",
    [
        (50000, 90000, True),
        (None, 90000, True),
        (70000, None, False),
        (None, 80000, False),
    ],
)
def test_salary_range_must_contain_career_range(store, low, high, included):
    filters = DomainSearchFilters(salary_range=SalaryFilter(min=low, max=high))
    response = DomainSearchEngine(store).search(filters)
    assert (("career", "junior-dev") in _ids(response)) is included


@pytest.mark.unit
def test_work_environment_filter(store):
    engine = DomainSearchEngine(store)
    remote = engine.search(DomainSearchFilters(work_environment=WorkEnvironmentFilter(remote=True)))
    onsite = engine.search(DomainSearchFilters(work_environment=WorkEnvironmentFilter(onsite=True)))

    assert ("career", "junior-dev") in _ids(remote)
    assert ("career", "junior-dev") not in _ids(onsite)


@pytest.mark.unit
def test_suggestions_for_sparse_results(store):
    response = DomainSearchEngine(store).search(DomainSearchFilters(query="design"))

    assert _ids(response) == [("domain", "arts"), ("subfield", "graphic-design")]
    assert response.suggestions == (
        "Arts & Design",
        "Graphic Design",
        "visual design",
        "Graphic Designer",
    )


@pytest.mark.unit
def test_suggestions_exclude_exact_matches(store):
    response = DomainSearchEngine(store).search(DomainSearchFilters(query="software"))
    assert response.suggestions == ("Software Development", "software engineering", "Software Developer")


@pytest.mark.unit
def test_unknown_query_falls_back_to_popular_terms(store):
    response = DomainSearchEngine(store).search(DomainSearchFilters(query="nonexistentcareerxyz"))

    assert response.results == ()
    assert response.total_count == 0
    assert response.suggestions == POPULAR_SEARCH_TERMS


def _design_studios(count):
    return [
        {
            "id": f"domain-{index}",
            "name": f"Design Studio {index}",
            "keywords": ["design thinking", f"design sprint {index}"],
            "industry_trends": {"demand": "low", "growth": 0},
        }
        for index in range(count)
    ]


@pytest.mark.unit
def test_suggestions_deduplicated_and_capped():
    store = TaxonomyStore.from_dicts(_design_studios(3))
    response = DomainSearchEngine(store).search(DomainSearchFilters(query="design"))

    assert response.total_count == 3
    assert response.suggestions == (
        "Design Studio 0",
        "design thinking",
        "design sprint 0",
        "Design Studio 1",
        "design sprint 1",
    )


@pytest.mark.unit
def test_no_suggestions_when_results_are_plentiful():
    store = TaxonomyStore.from_dicts(_design_studios(5))
    response = DomainSearchEngine(store).search(DomainSearchFilters(query="design"))

    assert response.total_count == 5
    assert response.suggestions == ()


@pytest.mark.unit
def test_search_job_roles(store):
    engine = DomainSearchEngine(store)

    assert engine.search_job_roles("developer") == [
        "Software Developer",
        "Web Developer",
        "Junior Software Developer",
    ]
    assert engine.search_job_roles("NURSE", domain_id="health") == ["Registered Nurse"]
    assert engine.search_job_roles("nurse", domain_id="tech") == []
    assert engine.search_job_roles("developer", domain_id="unknown") == []


@pytest.mark.unit
def test_search_job_roles_capped_at_ten():
    record = {
        "id": "tech",
        "name": "Technology",
        "subfields": [
            {
                "id": "dev",
                "name": "Development",
                "average_salary": {"min": 1, "max": 2},
                "job_roles": [f"Developer {index}" for index in range(15)],
            }
        ],
        "industry_trends": {"demand": "high", "growth": 20},
    }
    engine = DomainSearchEngine(TaxonomyStore.from_dicts([record]))
    assert engine.search_job_roles("developer") == [f"Developer {index}" for index in range(10)]


@pytest.mark.unit
def test_response_is_json_serializable_and_idempotent(store):
    engine = DomainSearchEngine(store)
    filters = DomainSearchFilters.from_dict({"query": "software", "experienceLevels": ["entry"]})

    first = engine.search(filters).to_dict()
    second = engine.search(filters).to_dict()

    assert json.dumps(first) == json.dumps(second)
    assert first["total_count"] == len(first["results"])
    assert first["results"][0]["type"] == "subfield"
    assert first["filters"]["experience_levels"] == ["entry"]
