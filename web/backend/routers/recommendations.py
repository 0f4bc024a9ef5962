#!/usr/bin/env python3
"""
Recommendation endpoints - preference wizard options and ranked results.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core import preferences
from core.preferences import build_preference
from ..config import get_config
from ..dependencies import get_db, get_recommendation_service
from ..services import to_internship_details
from ..models.requests import PreferenceForm
from ..models.responses import OptionsResponse, Recommendation, RecommendationsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recommendations"])


@router.get("/options", response_model=OptionsResponse)
def get_options():
    """
    Get the curated choices shown by the preference wizard.
    """
    return OptionsResponse(
        skills=preferences.SUGGESTED_SKILLS,
        interests=preferences.INTERESTS,
        sectors=preferences.SECTORS,
        cities=preferences.POPULAR_CITIES,
        remote_option=get_config().scorer.remote_sentinel,
    )


@router.post("/recommendations", response_model=RecommendationsResponse)
def get_recommendations(
    form: PreferenceForm,
    db: Session = Depends(get_db)
):
    """
    Rank the active catalog against the submitted wizard preferences.

    Returns at most five internships, best match first. When nothing
    matches, a random selection of active internships is returned with
    `fallback` set.
    """
    service = get_recommendation_service(db)
    results = service.recommend(build_preference(form))

    recommendations = [
        Recommendation(
            **to_internship_details(r.internship).model_dump(),
            score=r.score,
            matched_skills=r.matched_skills
        )
        for r in results
    ]

    return RecommendationsResponse(
        success=True,
        count=len(recommendations),
        fallback=service.scorer.is_fallback(results),
        recommendations=recommendations
    )
