"""
Text relevance scoring for search results.

Scores how well a query matches an entity's title and keyword list. Only
title and keywords contribute; descriptions and skills decide whether an
entity matches at all (see DomainSearchEngine) but never its rank.
"""

from typing import Iterable

from pathfinder.contexts.targeting.defaults import (
    KEYWORD_EXACT_SCORE,
    KEYWORD_PARTIAL_SCORE,
    NEUTRAL_RELEVANCE_SCORE,
    QUERY_CONTAINS_TITLE_SCORE,
    TITLE_CONTAINS_QUERY_SCORE,
    TITLE_EXACT_SCORE,
)
from pathfinder.utils.text_processing import overlaps_ci


def calculate_relevance_score(title: str, keywords: Iterable[str], query: str) -> float:
    """
    Score a title + keyword set against a query.

    Scoring:
    - Title: exact 1.0, title contains query 0.8, query contains title 0.6
    - Each keyword: exact +0.7, substring either direction +0.3
    - Clamped to [0, 1]; an empty query scores a neutral 0.5

    Args:
        title: Entity title (domain/subfield name, career/internship title)
        keywords: Entity keywords
        query: Free-text query

    Returns:
        Relevance score in [0, 1]

    Example:
        >>> calculate_relevance_score("Data Scientist", ["data", "analytics"], "data")
        1.0
        >>> calculate_relevance_score("Nurse", ["patient care"], "")
        0.5
    """
    if not query:
        return NEUTRAL_RELEVANCE_SCORE

    lower_query = query.lower()
    lower_title = title.lower()
    score = 0.0

    if lower_title == lower_query:
        score += TITLE_EXACT_SCORE
    elif lower_query in lower_title:
        score += TITLE_CONTAINS_QUERY_SCORE
    elif lower_title in lower_query:
        score += QUERY_CONTAINS_TITLE_SCORE

    for keyword in keywords:
        if keyword.lower() == lower_query:
            score += KEYWORD_EXACT_SCORE
        elif overlaps_ci(keyword, query):
            score += KEYWORD_PARTIAL_SCORE

    return max(0.0, min(score, 1.0))


def get_matched_keywords(keywords: Iterable[str], query: str) -> list[str]:
    """
    Keywords that contain, or are contained in, the query.

    Example:
        >>> get_matched_keywords(["machine learning", "python", "ai"], "Machine Learning Engineer")
        ['machine learning']
    """
    if not query:
        return []
    return [keyword for keyword in keywords if overlaps_ci(keyword, query)]
