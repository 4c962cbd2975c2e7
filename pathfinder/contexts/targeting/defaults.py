"""
Default scoring values for PATHFINDER targeting.

Provides shared constants used by:
- relevance.py (text relevance of a single entity against a query)
- search_engine.py (result floor, suggestion fallback, job-role cap)
- recommender.py (domain match weights, threshold, learning path)
"""

# Relevance scorer: title match tiers (mutually exclusive, best tier wins)
TITLE_EXACT_SCORE = 1.0
TITLE_CONTAINS_QUERY_SCORE = 0.8
QUERY_CONTAINS_TITLE_SCORE = 0.6

# Relevance scorer: per-keyword increments (additive across keywords)
KEYWORD_EXACT_SCORE = 0.7
KEYWORD_PARTIAL_SCORE = 0.3

# Score used for every entity when no query is given
NEUTRAL_RELEVANCE_SCORE = 0.5

# Floor for entities that matched the query only through description,
# skills, job roles or learning outcomes
MIN_TEXT_MATCH_SCORE = 0.1

# Suggestions are generated only when a query returns fewer results than this
SUGGESTION_TRIGGER = 5
MAX_SUGGESTIONS = 5
POPULAR_SEARCH_TERMS = (
    "software development",
    "data science",
    "business analysis",
    "design",
    "healthcare",
)

MAX_JOB_ROLE_RESULTS = 10

# Domain match weights (sum to 1.0)
MATCH_WEIGHTS = {
    "skills": 0.4,
    "interests": 0.3,
    "experience": 0.2,
    "demand": 0.1,
}

# Market demand contribution by industry_trends.demand
DEMAND_BONUS = {
    "high": 0.1,
    "medium": 0.05,
    "low": 0.0,
}

# Domains must score strictly above this to be recommended
MATCH_THRESHOLD = 0.3

# Growth (percent) above which a "strong growth" reason is given
GROWTH_REASON_THRESHOLD = 15

MAX_SKILL_REASONS = 3
MAX_INTEREST_REASONS = 2
MAX_MISSING_SKILLS_NAMED = 3
MAX_LEARNING_PATH = 5

# Levels that get portfolio/internship steps appended to the learning path
EARLY_CAREER_LEVELS = ("internship", "entry")
EARLY_CAREER_STEPS = (
    "Build a portfolio of projects",
    "Gain hands-on experience through internships",
)
