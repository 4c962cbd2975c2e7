"""
Targeting Context

Responsibilities:
- Scores text relevance of taxonomy entities against a query
- Filters and ranks domains, subfields, careers and internships
- Suggests alternative search terms for sparse queries
- Recommends whole domains for a user's skills, interests and level

Owns: Scoring weights, search and recommendation logic
Never: Loads the catalog or validates selections
"""

from pathfinder.contexts.targeting.recommender import DomainRecommendation, DomainRecommender
from pathfinder.contexts.targeting.relevance import (
    calculate_relevance_score,
    get_matched_keywords,
)
from pathfinder.contexts.targeting.search_engine import (
    DomainSearchEngine,
    DomainSearchResponse,
    SearchResult,
)

__all__ = [
    # Relevance
    "calculate_relevance_score",
    "get_matched_keywords",
    # Search
    "DomainSearchEngine",
    "DomainSearchResponse",
    "SearchResult",
    # Recommendation
    "DomainRecommender",
    "DomainRecommendation",
]
