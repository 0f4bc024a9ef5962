#!/usr/bin/env python3
"""
Recommendation Service - load the active catalog and rank it.

The data source is injected as a plain callable so the service carries no
ambient database client; the web layer binds it to a repository and tests
bind it to a list.
"""

from typing import Callable, List, Optional, Sequence
import logging
import random

from core.config_loader import ScorerConfig
from core.scorer import RecommendationScorer, Internship, Preference, ScoredInternship

logger = logging.getLogger(__name__)

FetchActiveInternships = Callable[[], Sequence[Internship]]


class RecommendationService:
    """Compose catalog access with the scoring engine."""

    def __init__(
        self,
        fetch_active_internships: FetchActiveInternships,
        config: Optional[ScorerConfig] = None,
        rng_factory: Callable[[], random.Random] = random.Random
    ):
        self.fetch_active_internships = fetch_active_internships
        self.scorer = RecommendationScorer(config)
        self.rng_factory = rng_factory

    def recommend(self, preference: Preference) -> List[ScoredInternship]:
        """
        Recommend internships for a preference.

        Returns:
            Up to `top_n` ScoredInternship; empty when no internship is active.
        """
        internships = list(self.fetch_active_internships())
        if not internships:
            logger.info("No active internships available")
            return []

        results = self.scorer.rank(internships, preference, rng=self.rng_factory())

        if self.scorer.is_fallback(results):
            logger.info(f"Returning {len(results)} random internships (no preference match)")
        else:
            logger.info(f"Ranked {len(internships)} internships, top score {results[0].score}")

        return results
