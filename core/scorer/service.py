#!/usr/bin/env python3
"""
Scoring Service - Rank the active internship catalog against a Preference.

Scores each internship with the additive rules in rules.py, stable-sorts
by score (highest first) and keeps the top N. When nothing in the top N
scored above zero, a uniform random sample of the catalog is returned
instead so the student always sees something.

The scorer performs no I/O and holds no mutable state, so one instance
can serve concurrent requests.
"""

from typing import List, Optional, Sequence
import logging
import random

from core.config_loader import ScorerConfig
from core.scorer.models import Internship, Preference, ScoredInternship
from core.scorer import rules

logger = logging.getLogger(__name__)


class RecommendationScorer:
    """
    Rule-based recommendation engine.

    - Sector match (exact)
    - Skill match (bidirectional substring, per matched required skill)
    - Location match (Remote sentinel and/or city)
    - Education presence
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def score_internship(
        self,
        internship: Internship,
        preference: Preference
    ) -> ScoredInternship:
        """Calculate the score of a single internship."""
        score = rules.sector_points(internship, preference, self.config)

        skill_score, matched_skills = rules.skill_points(internship, preference, self.config)
        score += skill_score

        score += rules.location_points(internship, preference, self.config)
        score += rules.education_points(internship, preference, self.config)

        logger.debug(f"Internship {internship.id}: score={score}, matched_skills={matched_skills}")

        return ScoredInternship(
            internship=internship,
            score=score,
            matched_skills=matched_skills
        )

    def score_all(
        self,
        internships: Sequence[Internship],
        preference: Preference
    ) -> List[ScoredInternship]:
        """Score every internship, sorted by score (highest first, stable)."""
        scored = [self.score_internship(i, preference) for i in internships]
        # list.sort is stable: equal scores keep catalog order
        scored.sort(key=lambda x: x.score, reverse=True)
        return scored

    def fallback_sample(
        self,
        internships: Sequence[Internship],
        rng: Optional[random.Random] = None
    ) -> List[ScoredInternship]:
        """Uniform sample without replacement, reported with zero scores."""
        rng = rng or random.Random()
        size = min(self.config.top_n, len(internships))
        return [
            ScoredInternship(internship=i, score=0, matched_skills=[])
            for i in rng.sample(list(internships), size)
        ]

    def rank(
        self,
        internships: Sequence[Internship],
        preference: Optional[Preference] = None,
        rng: Optional[random.Random] = None
    ) -> List[ScoredInternship]:
        """
        Rank internships for a preference.

        Args:
            internships: Active internships (callers filter on `active`)
            preference: Student preferences; None behaves like an empty one
            rng: Random source for the fallback sample. A fresh instance is
                created per call when omitted, so concurrent callers never
                share seed state.

        Returns:
            At most `top_n` ScoredInternship, best first. Empty when the
            catalog is empty.
        """
        if not internships:
            return []

        preference = preference or Preference()
        top = self.score_all(internships, preference)[:self.config.top_n]

        if all(r.score == 0 for r in top):
            logger.info(f"No preference signal matched {len(internships)} internships, "
                        f"returning random sample")
            return self.fallback_sample(internships, rng)

        return top

    def is_fallback(self, results: List[ScoredInternship]) -> bool:
        """True when results carry no rule match (empty or all zero)."""
        return bool(results) and all(r.score == 0 for r in results)


def rank(
    internships: Sequence[Internship],
    preference: Optional[Preference] = None,
    config: Optional[ScorerConfig] = None,
    rng: Optional[random.Random] = None
) -> List[ScoredInternship]:
    """Rank with a one-off scorer. See RecommendationScorer.rank."""
    return RecommendationScorer(config).rank(internships, preference, rng=rng)
