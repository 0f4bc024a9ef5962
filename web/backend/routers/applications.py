#!/usr/bin/env python3
"""
Application endpoints - record "Apply" clicks and list a user's applications.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services import ApplicationService
from ..models.requests import ApplicationCreate
from ..models.responses import ApplicationResponse, ApplicationsResponse
from ..utils import validate_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["applications"])


@router.post("/applications", response_model=ApplicationResponse)
def create_application(
    body: ApplicationCreate,
    db: Session = Depends(get_db)
):
    """
    Record that a user applied to an internship.

    Idempotent: applying again returns the existing record with
    `created` set to false.
    """
    validate_uuid(body.user_id, "user_id")
    validate_uuid(body.internship_id, "internship_id")

    service = ApplicationService(db)
    application, created = service.apply(body.user_id, body.internship_id)

    return ApplicationResponse(success=True, created=created, application=application)


@router.get("/users/{user_id}/applications", response_model=ApplicationsResponse)
def get_user_applications(
    user_id: str,
    db: Session = Depends(get_db)
):
    """
    Get a user's applications, newest first.
    """
    validate_uuid(user_id, "user_id")
    applications = ApplicationService(db).list_for_user(user_id)

    return ApplicationsResponse(success=True, count=len(applications), applications=applications)
