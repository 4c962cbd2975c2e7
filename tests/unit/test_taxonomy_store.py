"""Unit tests for the taxonomy data model and TaxonomyStore."""

import json

import pytest
import yaml

from pathfinder.contexts.taxonomy import (
    InvalidTaxonomyError,
    TaxonomyLoadError,
    TaxonomyStore,
)


@pytest.mark.unit
def test_store_lookups(store):
    assert len(store) == 3
    assert "tech" in store
    assert "unknown" not in store
    assert [domain.id for domain in store] == ["tech", "health", "arts"]

    assert store.get_domain("health").name == "Healthcare"
    assert store.get_domain("unknown") is None
    assert store.get_domain(None) is None

    assert store.get_subfield("tech", "data").name == "Data & Analytics"
    assert store.get_subfield("health", "data") is None
    assert store.get_career_example("tech", "junior-dev").experience_level == "entry"
    assert store.get_all_domain_names() == ["Technology", "Healthcare", "Arts & Design"]


@pytest.mark.unit
def test_records_are_immutable_tuples(store):
    domain = store.get_domain("tech")

    assert isinstance(domain.subfields, tuple)
    assert isinstance(domain.keywords, tuple)
    with pytest.raises(AttributeError):
        domain.name = "Renamed"


@pytest.mark.unit
def test_domain_defaults_for_optional_sections(store):
    arts = store.get_domain("arts")

    assert arts.career_examples == ()
    assert arts.internship_opportunities == ()
    assert arts.related_domains == ()
    assert arts.industry_trends.competitiveness == "high"


@pytest.mark.unit
def test_domain_skills_deduplicated_in_discovery_order(store):
    assert store.get_domain("tech").get_skills() == [
        "Programming",
        "Testing",
        "Statistics",
        "SQL",
        "JavaScript",
        "Git",
        "React",
    ]


@pytest.mark.unit
def test_job_role_listing(store):
    assert store.get_all_job_roles() == [
        "Software Developer",
        "Web Developer",
        "Data Analyst",
        "Registered Nurse",
        "Graphic Designer",
    ]
    assert store.get_job_roles_by_domain("tech") == [
        "Software Developer",
        "Web Developer",
        "Data Analyst",
        "Junior Software Developer",
    ]
    # Level filter only applies to career titles
    assert store.get_job_roles_by_domain("tech", experience_level="mid") == [
        "Software Developer",
        "Web Developer",
        "Data Analyst",
    ]
    assert store.get_job_roles_by_domain("unknown") == []


@pytest.mark.unit
def test_integrity_issues_report_dangling_related_domain(store):
    assert store.integrity_issues() == ["health: related domain 'missing-domain' does not exist"]


@pytest.mark.unit
def test_integrity_issues_report_duplicate_levels_and_unknown_subfields(domain_records):
    tech = domain_records[0]
    tech["experience_levels"].append(dict(tech["experience_levels"][0], title="Second Entry"))
    tech["career_examples"][0]["subfield_id"] = "robotics"
    domain_records[1]["related_domains"] = []

    store = TaxonomyStore.from_dicts(domain_records)

    assert store.integrity_issues() == [
        "tech: 2 experience level entries for 'entry'",
        "tech: career 'junior-dev' references unknown subfield 'robotics'",
    ]
    # First entry wins for lookups
    assert store.get_domain("tech").get_experience_level("entry").title == "Junior Technologist"


@pytest.mark.unit
def test_duplicate_domain_id_rejected(domain_records):
    domain_records[2]["id"] = "tech"
    with pytest.raises(InvalidTaxonomyError, match="Duplicate domain id 'tech'"):
        TaxonomyStore.from_dicts(domain_records)


@pytest.mark.unit
def test_duplicate_subfield_id_rejected(domain_records):
    domain_records[0]["subfields"][1]["id"] = "software"
    with pytest.raises(InvalidTaxonomyError, match="Duplicate subfield id 'software'"):
        TaxonomyStore.from_dicts(domain_records)


@pytest.mark.unit
@pytest.mark.parametrize(
    "mutate,message",
    [
        (lambda records: records[0].pop("name"), "Missing required field 'name'"),
        (
            lambda records: records[0]["career_examples"][0].update(experience_level="guru"),
            "Invalid experience_level 'guru'",
        ),
        (
            lambda records: records[1]["industry_trends"].update(demand="extreme"),
            "Invalid demand 'extreme'",
        ),
        (
            lambda records: records[2]["subfields"][0]["average_salary"].update(min=90000),
            "Salary min 90000 exceeds max 80000",
        ),
        (
            lambda records: records[0]["industry_trends"].update(growth=None),
            "Field 'growth' must be a number, got None",
        ),
        (
            lambda records: records[1]["industry_trends"].update(growth="fast"),
            "Field 'growth' must be a number, got 'fast'",
        ),
        (
            lambda records: records[0]["subfields"][0]["average_salary"].update(min="60k"),
            "Field 'min' must be a number, got '60k'",
        ),
        (
            lambda records: records[2]["subfields"][0]["average_salary"].update(max=True),
            "Field 'max' must be a number, got True",
        ),
    ],
)
def test_invalid_records_rejected(domain_records, mutate, message):
    mutate(domain_records)
    with pytest.raises(InvalidTaxonomyError, match=message):
        TaxonomyStore.from_dicts(domain_records)


@pytest.mark.unit
def test_invalid_taxonomy_error_is_value_error_with_location(domain_records):
    domain_records[0]["subfields"][0].pop("average_salary")

    with pytest.raises(ValueError) as exc_info:
        TaxonomyStore.from_dicts(domain_records)

    assert "domains[0].subfields[0]" in str(exc_info.value)


@pytest.mark.unit
def test_from_yaml_round_trip(domain_records, tmp_path):
    catalog = tmp_path / "catalog.yaml"
    catalog.write_text(yaml.safe_dump({"domains": domain_records}))

    store = TaxonomyStore.from_yaml(catalog)

    assert store.source == catalog
    assert [domain.id for domain in store] == ["tech", "health", "arts"]


@pytest.mark.unit
def test_from_yaml_missing_file(tmp_path):
    missing = tmp_path / "missing.yaml"
    with pytest.raises(TaxonomyLoadError) as exc_info:
        TaxonomyStore.from_yaml(missing)
    assert exc_info.value.path == missing


@pytest.mark.unit
def test_from_yaml_unparseable(tmp_path):
    catalog = tmp_path / "broken.yaml"
    catalog.write_text("domains: [unclosed\n")
    with pytest.raises(TaxonomyLoadError):
        TaxonomyStore.from_yaml(catalog)


@pytest.mark.unit
def test_from_yaml_without_domains_list(tmp_path):
    catalog = tmp_path / "empty.yaml"
    catalog.write_text("careers: []\n")
    with pytest.raises(InvalidTaxonomyError, match="top-level 'domains' list"):
        TaxonomyStore.from_yaml(catalog)


@pytest.mark.unit
def test_domain_to_dict_is_plain_data(store):
    data = store.get_domain("tech").to_dict()

    assert json.loads(json.dumps(data)) == data
    assert data["subfields"][0]["job_roles"] == ["Software Developer", "Web Developer"]
    assert data["internship_opportunities"][0]["stipend"]["period"] == "hourly"
