"""
Domain recommendations for a user profile.

Scores every domain as a whole against a user's skills, interests and target
experience level, keeps the domains above MATCH_THRESHOLD and annotates each
with reasons, matching subfields/careers and a short learning path.

Scoring (weights from defaults.MATCH_WEIGHTS):
    skills      0.4 x fraction of user skills overlapping the domain skill set
    interests   0.3 x fraction of interests overlapping a domain keyword
    experience  0.2 when a career or experience-level entry covers the level
    demand      0.1 high / 0.05 medium / 0 low

Overlap for scoring is bidirectional substring containment; reasons and the
recommended subfields/careers use the stricter one-way test (the catalog term
contains the user's term).
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from pathfinder.contexts.intake.normalizer import Skill, normalize_skills, normalize_terms
from pathfinder.contexts.targeting.defaults import (
    DEMAND_BONUS,
    EARLY_CAREER_LEVELS,
    EARLY_CAREER_STEPS,
    GROWTH_REASON_THRESHOLD,
    MATCH_THRESHOLD,
    MATCH_WEIGHTS,
    MAX_INTEREST_REASONS,
    MAX_LEARNING_PATH,
    MAX_MISSING_SKILLS_NAMED,
    MAX_SKILL_REASONS,
)
from pathfinder.contexts.targeting.logger import log_recommendations
from pathfinder.contexts.taxonomy.domain_data_structure import (
    CareerDomain,
    CareerExample,
    Subfield,
)
from pathfinder.contexts.taxonomy.taxonomy_store import TaxonomyStore
from pathfinder.utils.text_processing import any_contains_ci, any_overlap_ci


@dataclass(frozen=True)
class DomainRecommendation:
    """A recommended domain with its score and the reasoning behind it."""

    domain: CareerDomain
    match_score: float
    match_reasons: tuple[str, ...]
    recommended_subfields: tuple[Subfield, ...]
    recommended_careers: tuple[CareerExample, ...]
    learning_path: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "domain": self.domain.to_dict(),
            "match_score": self.match_score,
            "match_reasons": list(self.match_reasons),
            "recommended_subfields": [
                {"id": subfield.id, "name": subfield.name} for subfield in self.recommended_subfields
            ],
            "recommended_careers": [
                {"id": career.id, "title": career.title, "experience_level": career.experience_level}
                for career in self.recommended_careers
            ],
            "learning_path": list(self.learning_path),
        }


class DomainRecommender:
    """Ranks whole domains against a user profile."""

    def __init__(self, store: TaxonomyStore):
        self.store = store

    def recommend(
        self,
        skills: Optional[Iterable[Skill]],
        interests: Optional[Iterable[str]],
        experience_level: str,
    ) -> list[DomainRecommendation]:
        """
        Recommend domains for a user profile.

        Args:
            skills: Skill names or SkillRef records
            interests: Free-text interests
            experience_level: Target level (internship, entry, mid, senior, executive)

        Returns:
            Recommendations scoring above MATCH_THRESHOLD, highest first
            (ties keep catalog order)

        Example:
            >>> recommender = DomainRecommender(TaxonomyStore.from_yaml())
            >>> top = recommender.recommend(["JavaScript", "SQL"], ["programming"], "entry")[0]
            >>> top.domain.id
            'technology-computer-science'
        """
        skills = normalize_skills(skills)
        interests = normalize_terms(interests)

        recommendations = []
        for domain in self.store:
            score = self.calculate_match_score(domain, skills, interests, experience_level)
            if score <= MATCH_THRESHOLD:
                continue

            recommendations.append(
                DomainRecommendation(
                    domain=domain,
                    match_score=score,
                    match_reasons=tuple(self._match_reasons(domain, skills, interests, experience_level)),
                    recommended_subfields=tuple(
                        subfield
                        for subfield in domain.subfields
                        if self._subfield_matches_profile(subfield, skills, interests)
                    ),
                    recommended_careers=tuple(
                        career
                        for career in domain.career_examples
                        if career.experience_level == experience_level
                        or self._career_matches_profile(career, skills, interests)
                    ),
                    learning_path=tuple(self._learning_path(domain, skills, experience_level)),
                )
            )

        recommendations.sort(key=lambda rec: rec.match_score, reverse=True)
        log_recommendations(len(self.store), len(recommendations))
        return recommendations

    # =========================================================================
    # SCORING
    # =========================================================================

    @staticmethod
    def calculate_match_score(
        domain: CareerDomain, skills: list[str], interests: list[str], experience_level: str
    ) -> float:
        """
        Weighted match score of one domain, normalized by the weights applied.

        Args:
            domain: Domain to score
            skills: Normalized skill names
            interests: Normalized interests
            experience_level: Target level

        Returns:
            Score in [0, 1]
        """
        domain_skills = domain.get_skills()
        skill_matches = [skill for skill in skills if any_overlap_ci(skill, domain_skills)]
        interest_matches = [interest for interest in interests if any_overlap_ci(interest, domain.keywords)]

        # (contribution, weight) per factor evaluated
        contributions = [
            (len(skill_matches) / max(len(skills), 1) * MATCH_WEIGHTS["skills"], MATCH_WEIGHTS["skills"]),
            (
                len(interest_matches) / max(len(interests), 1) * MATCH_WEIGHTS["interests"],
                MATCH_WEIGHTS["interests"],
            ),
            (
                MATCH_WEIGHTS["experience"] if domain.offers_level(experience_level) else 0.0,
                MATCH_WEIGHTS["experience"],
            ),
            (DEMAND_BONUS.get(domain.industry_trends.demand, 0.0), MATCH_WEIGHTS["demand"]),
        ]

        score = sum(contribution for contribution, _ in contributions)
        total_weight = sum(weight for _, weight in contributions)
        return score / total_weight if total_weight else 0.0

    # =========================================================================
    # ANNOTATIONS
    # =========================================================================

    @staticmethod
    def _match_reasons(
        domain: CareerDomain, skills: list[str], interests: list[str], experience_level: str
    ) -> list[str]:
        reasons = []
        domain_skills = domain.get_skills()

        skill_matches = [skill for skill in skills if any_contains_ci(domain_skills, skill)]
        if skill_matches:
            named = ", ".join(skill_matches[:MAX_SKILL_REASONS])
            reasons.append(f"Your skills in {named} align well with this domain")

        interest_matches = [interest for interest in interests if any_contains_ci(domain.keywords, interest)]
        if interest_matches:
            named = ", ".join(interest_matches[:MAX_INTEREST_REASONS])
            reasons.append(f"Your interests in {named} match this field")

        trends = domain.industry_trends
        if trends.demand == "high":
            reasons.append("High demand in the job market")
        if trends.growth > GROWTH_REASON_THRESHOLD:
            reasons.append(f"Strong growth prospects ({trends.growth}% growth)")

        if domain.has_careers_at(experience_level):
            reasons.append(f"Good opportunities at {experience_level} level")

        return reasons

    @staticmethod
    def _subfield_matches_profile(subfield: Subfield, skills: list[str], interests: list[str]) -> bool:
        return any(any_contains_ci(subfield.required_skills, skill) for skill in skills) or any(
            any_contains_ci(subfield.keywords, interest) for interest in interests
        )

    @staticmethod
    def _career_matches_profile(career: CareerExample, skills: list[str], interests: list[str]) -> bool:
        return any(any_contains_ci(career.all_skills, skill) for skill in skills) or any(
            any_contains_ci(career.keywords, interest) for interest in interests
        )

    @staticmethod
    def _learning_path(domain: CareerDomain, skills: list[str], experience_level: str) -> list[str]:
        """
        Ordered next steps, at most MAX_LEARNING_PATH entries.

        1. "Learn X" for each level-specific required skill the user lacks
        2. One "Develop skills in ..." entry for missing domain skills
        3. Portfolio and internship steps for internship/entry levels
        """
        path = []
        known = {skill.lower() for skill in skills}

        level_info = domain.get_experience_level(experience_level)
        if level_info:
            path.extend(f"Learn {skill}" for skill in level_info.required_skills if skill.lower() not in known)

        missing = [
            domain_skill
            for domain_skill in domain.get_skills()
            if not any_contains_ci(skills, domain_skill)
        ]
        if missing:
            path.append(f"Develop skills in {', '.join(missing[:MAX_MISSING_SKILLS_NAMED])}")

        if experience_level in EARLY_CAREER_LEVELS:
            path.extend(EARLY_CAREER_STEPS)

        return path[:MAX_LEARNING_PATH]
