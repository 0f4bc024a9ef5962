#!/usr/bin/env python3
"""
Scoring Module - Rule-based internship recommendation scoring.

Public API:
- rank: Score, sort and truncate the active catalog against a Preference
- RecommendationScorer: Engine bound to a ScorerConfig
- Internship, Preference, ScoredInternship: Engine data structures

The scoring module is split into focused modules:

- models.py: Data structures (Internship, Preference, ScoredInternship)
- rules.py: Individual additive rules (sector, skills, location, education)
- service.py: RecommendationScorer orchestrator (sort, top-N, fallback)
"""

from core.scorer.models import Internship, Preference, ScoredInternship
from core.scorer.service import RecommendationScorer, rank

__all__ = ['rank', 'RecommendationScorer', 'Internship', 'Preference', 'ScoredInternship']
