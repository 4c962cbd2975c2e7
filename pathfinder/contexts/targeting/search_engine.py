"""
Search engine over the career taxonomy.

Scans every domain and everything it owns (subfields, career examples,
internships), keeps the entities that pass the filters, and ranks them by
text relevance. Each entity is evaluated on its own: a career can match
even when its parent domain does not, and vice versa.

Scores come from calculate_relevance_score() with one adjustment: when a
query is set, an entity that matched only through text the scorer does not
look at (skills, descriptions, job roles, learning outcomes) would score 0,
so its score is raised to MIN_TEXT_MATCH_SCORE (0.1). Every result of a
non-empty query therefore scores above 0.

Filter coverage by entity type:

    filter              domain  subfield  career  internship
    query               yes     yes       yes     yes
    domain_ids          yes     yes       -       -
    subfield_ids        -       yes       -       -
    keywords            yes     -         -       -
    experience_levels   -       -         yes     -
    salary_range        -       -         yes     -
    work_environment    -       -         yes     -
    skills              -       -         -       -

Examples:
    >>> engine = DomainSearchEngine(TaxonomyStore.from_yaml())
    >>> response = engine.search(DomainSearchFilters(query="data"))
    >>> response.results[0].relevance_score > 0
    True
"""

from dataclasses import dataclass
from typing import Optional

from pathfinder.contexts.intake.search_filters import DomainSearchFilters
from pathfinder.contexts.targeting.defaults import (
    MAX_JOB_ROLE_RESULTS,
    MAX_SUGGESTIONS,
    MIN_TEXT_MATCH_SCORE,
    POPULAR_SEARCH_TERMS,
    SUGGESTION_TRIGGER,
)
from pathfinder.contexts.targeting.logger import log_search_complete
from pathfinder.contexts.targeting.relevance import (
    calculate_relevance_score,
    get_matched_keywords,
)
from pathfinder.contexts.taxonomy.domain_data_structure import (
    CareerDomain,
    CareerExample,
    InternshipOpportunity,
    Subfield,
    to_plain_data,
)
from pathfinder.contexts.taxonomy.taxonomy_store import TaxonomyStore
from pathfinder.utils.text_processing import (
    contains_ci,
    dedupe_preserving_order,
    searchable_text,
)

# =============================================================================
# RESULT STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class SearchResult:
    """One matched taxonomy entity, built fresh for each search call."""

    entity_type: str
    id: str
    title: str
    description: str
    relevance_score: float
    matched_keywords: tuple[str, ...] = ()
    parent_domain: Optional[str] = None
    parent_subfield: Optional[str] = None

    def to_dict(self) -> dict:
        data = to_plain_data(self)
        data["type"] = data.pop("entity_type")
        return data


@dataclass(frozen=True)
class DomainSearchResponse:
    """
    Ranked search results plus fallback suggestions.

    Attributes:
        results: Matches sorted by descending relevance (ties keep catalog order)
        filters: The filters that produced these results
        suggestions: Up to 5 alternative search terms (only for sparse queries)
    """

    results: tuple[SearchResult, ...]
    filters: DomainSearchFilters
    suggestions: tuple[str, ...] = ()

    @property
    def total_count(self) -> int:
        return len(self.results)

    def to_dict(self) -> dict:
        return {
            "results": [result.to_dict() for result in self.results],
            "total_count": self.total_count,
            "filters": self.filters.to_dict(),
            "suggestions": list(self.suggestions),
        }


# =============================================================================
# SEARCH ENGINE
# =============================================================================


class DomainSearchEngine:
    """
    Filters and ranks taxonomy entities against a DomainSearchFilters set.

    The engine holds only a reference to the (immutable) store, so a single
    instance can serve concurrent callers.
    """

    def __init__(self, store: TaxonomyStore):
        self.store = store

    def search(self, filters: Optional[DomainSearchFilters] = None) -> DomainSearchResponse:
        """
        Run a search across every domain, subfield, career and internship.

        Args:
            filters: Filter set; None or an empty DomainSearchFilters returns
                     every entity at the neutral score

        Returns:
            DomainSearchResponse (never raises; zero results is a valid outcome)
        """
        if filters is None:
            filters = DomainSearchFilters()
        query = filters.query or ""

        results = []
        for domain in self.store:
            if self._matches_domain(domain, filters):
                results.append(
                    self._build_result(
                        "domain", domain.id, domain.name, domain.description, domain.keywords, query
                    )
                )

            for subfield in domain.subfields:
                if self._matches_subfield(subfield, domain, filters):
                    results.append(
                        self._build_result(
                            "subfield",
                            subfield.id,
                            subfield.name,
                            subfield.description,
                            subfield.keywords,
                            query,
                            parent_domain=domain.name,
                        )
                    )

            for career in domain.career_examples:
                if self._matches_career(career, filters):
                    results.append(
                        self._build_result(
                            "career",
                            career.id,
                            career.title,
                            career.description,
                            career.keywords,
                            query,
                            parent_domain=domain.name,
                            parent_subfield=self._subfield_name(domain, career.subfield_id),
                        )
                    )

            for internship in domain.internship_opportunities:
                if self._matches_internship(internship, filters):
                    results.append(
                        self._build_result(
                            "internship",
                            internship.id,
                            internship.title,
                            internship.description,
                            internship.keywords,
                            query,
                            parent_domain=domain.name,
                            parent_subfield=self._subfield_name(domain, internship.subfield_id),
                        )
                    )

        # sorted() is stable, so equal scores keep catalog order
        results = sorted(results, key=lambda result: result.relevance_score, reverse=True)

        suggestions = []
        if query and len(results) < SUGGESTION_TRIGGER:
            suggestions = self._generate_suggestions(query)

        log_search_complete(query, len(results), len(suggestions))
        return DomainSearchResponse(
            results=tuple(results),
            filters=filters,
            suggestions=tuple(suggestions),
        )

    def search_job_roles(self, query: str, domain_id: Optional[str] = None) -> list[str]:
        """
        Job roles containing the query (case-insensitive), first 10.

        Args:
            query: Substring to look for
            domain_id: Restrict to one domain's subfield roles and career titles

        Example:
            >>> engine.search_job_roles("developer")
            ['Software Developer', 'Web Developer', ...]
        """
        roles = self.store.get_job_roles_by_domain(domain_id)
        return [role for role in roles if contains_ci(role, query)][:MAX_JOB_ROLE_RESULTS]

    # =========================================================================
    # PER-ENTITY MATCHING
    # =========================================================================

    @staticmethod
    def _matches_query(filters: DomainSearchFilters, *text_groups) -> bool:
        if not filters.query:
            return True
        return filters.query.lower() in searchable_text(*text_groups)

    def _matches_domain(self, domain: CareerDomain, filters: DomainSearchFilters) -> bool:
        if filters.domain_ids is not None and domain.id not in filters.domain_ids:
            return False

        if not self._matches_query(filters, (domain.name, domain.description), domain.keywords):
            return False

        if filters.keywords:
            has_keyword = any(
                contains_ci(domain_keyword, keyword)
                for keyword in filters.keywords
                for domain_keyword in domain.keywords
            )
            if not has_keyword:
                return False

        return True

    def _matches_subfield(
        self, subfield: Subfield, domain: CareerDomain, filters: DomainSearchFilters
    ) -> bool:
        if filters.subfield_ids is not None and subfield.id not in filters.subfield_ids:
            return False
        if filters.domain_ids is not None and domain.id not in filters.domain_ids:
            return False

        return self._matches_query(
            filters,
            (subfield.name, subfield.description),
            subfield.keywords,
            subfield.job_roles,
        )

    def _matches_career(self, career: CareerExample, filters: DomainSearchFilters) -> bool:
        if filters.experience_levels is not None and career.experience_level not in filters.experience_levels:
            return False

        salary = filters.salary_range
        if salary:
            if salary.min is not None and career.salary_range.min < salary.min:
                return False
            if salary.max is not None and career.salary_range.max > salary.max:
                return False

        environment = filters.work_environment
        if environment:
            if environment.remote and not career.work_environment.remote:
                return False
            if environment.hybrid and not career.work_environment.hybrid:
                return False
            if environment.onsite and not career.work_environment.onsite:
                return False

        return self._matches_query(
            filters,
            (career.title, career.description),
            career.keywords,
            career.required_skills,
            career.preferred_skills,
        )

    def _matches_internship(self, internship: InternshipOpportunity, filters: DomainSearchFilters) -> bool:
        return self._matches_query(
            filters,
            (internship.title, internship.description),
            internship.keywords,
            internship.required_skills,
            internship.learning_outcomes,
        )

    # =========================================================================
    # RESULT HELPERS
    # =========================================================================

    @staticmethod
    def _build_result(
        entity_type: str,
        entity_id: str,
        title: str,
        description: str,
        keywords: tuple[str, ...],
        query: str,
        parent_domain: Optional[str] = None,
        parent_subfield: Optional[str] = None,
    ) -> SearchResult:
        score = calculate_relevance_score(title, keywords, query)
        if query:
            score = max(score, MIN_TEXT_MATCH_SCORE)

        return SearchResult(
            entity_type=entity_type,
            id=entity_id,
            title=title,
            description=description,
            relevance_score=score,
            matched_keywords=tuple(get_matched_keywords(keywords, query)),
            parent_domain=parent_domain,
            parent_subfield=parent_subfield,
        )

    @staticmethod
    def _subfield_name(domain: CareerDomain, subfield_id: str) -> Optional[str]:
        subfield = domain.get_subfield(subfield_id)
        return subfield.name if subfield else None

    def _generate_suggestions(self, query: str) -> list[str]:
        """
        Catalog terms that contain the query without equalling it.

        Falls back to POPULAR_SEARCH_TERMS when nothing in the catalog
        contains the query.
        """
        lower_query = query.lower()
        terms = []
        for domain in self.store:
            terms.append(domain.name)
            terms.extend(domain.keywords)
            for subfield in domain.subfields:
                terms.append(subfield.name)
                terms.extend(subfield.keywords)
                terms.extend(subfield.job_roles)

        suggestions = [
            term for term in terms if lower_query in term.lower() and term.lower() != lower_query
        ]
        if not suggestions:
            suggestions = list(POPULAR_SEARCH_TERMS)

        return dedupe_preserving_order(suggestions)[:MAX_SUGGESTIONS]
