#!/usr/bin/env python3
"""
Scoring Rules - Independent additive rules for internship matching.

Each rule returns the points it contributes for one internship. Rules
never interact; the engine sums them.
"""

from typing import List, Tuple
import logging

from core.config_loader import ScorerConfig
from core.scorer.models import Internship, Preference

logger = logging.getLogger(__name__)


def sector_points(
    internship: Internship,
    preference: Preference,
    config: ScorerConfig
) -> int:
    """Sector is an exact, case-sensitive membership test."""
    if preference.sectors and internship.sector in preference.sectors:
        return config.sector_weight
    return 0


def skills_overlap(user_skill: str, required_skill: str) -> bool:
    """
    Bidirectional case-insensitive substring match.

    "Python" matches "python 3" and "Py" matches "Python". Blank skills
    never match.
    """
    user = user_skill.strip().lower()
    required = required_skill.strip().lower()
    if not user or not required:
        return False
    return required in user or user in required


def match_skills(required_skills: List[str], user_skills: List[str]) -> List[str]:
    """
    Return the internship's own skill labels that match any user skill.

    Duplicate required skills count once; input order is kept.
    """
    matched: List[str] = []
    seen = set()
    for required in required_skills:
        if required in seen:
            continue
        seen.add(required)
        if any(skills_overlap(user, required) for user in user_skills):
            matched.append(required)
    return matched


def skill_points(
    internship: Internship,
    preference: Preference,
    config: ScorerConfig
) -> Tuple[int, List[str]]:
    """
    Calculate skill points and the matched subset.

    Returns: (points, matched_skills)
    """
    if not preference.skills or not internship.required_skills:
        return 0, []

    matched = match_skills(internship.required_skills, preference.skills)
    return len(matched) * config.skill_weight, matched


def location_points(
    internship: Internship,
    preference: Preference,
    config: ScorerConfig
) -> int:
    # Remote and city matches are not exclusive: a remote internship
    # based in a preferred city earns both.
    locations = preference.preferred_locations
    if not locations:
        return 0

    points = 0
    if internship.remote and config.remote_sentinel in locations:
        points += config.remote_weight

    if internship.city:
        city = internship.city.lower()
        if any(loc.lower() == city for loc in locations):
            points += config.city_weight

    return points


def education_points(
    internship: Internship,
    preference: Preference,
    config: ScorerConfig
) -> int:
    """
    Presence check only: both sides declare an education level.

    Levels are not compared against each other.
    """
    if internship.min_education and preference.education and preference.education.strip():
        return config.education_weight
    return 0
