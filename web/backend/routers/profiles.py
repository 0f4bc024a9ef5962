#!/usr/bin/env python3
"""
Profile endpoints - create, view and edit a student's profile.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services import ProfileService
from ..models.requests import ProfileCreate, ProfileUpdate
from ..models.responses import ProfileResponse
from ..utils import validate_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


@router.post("", response_model=ProfileResponse, status_code=201)
def create_profile(
    body: ProfileCreate,
    db: Session = Depends(get_db)
):
    """
    Create the profile for a freshly signed-up user.
    """
    if body.id is not None:
        validate_uuid(body.id, "id")
    fields = body.model_dump(exclude={"id"})
    profile = ProfileService(db).create_profile(fields, user_id=body.id)
    return ProfileResponse(success=True, profile=profile)


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(
    user_id: str,
    db: Session = Depends(get_db)
):
    validate_uuid(user_id, "user_id")
    return ProfileResponse(success=True, profile=ProfileService(db).get_profile(user_id))


@router.put("/{user_id}", response_model=ProfileResponse)
def update_profile(
    user_id: str,
    body: ProfileUpdate,
    db: Session = Depends(get_db)
):
    """
    Update profile fields. Omitted fields are left unchanged.
    """
    validate_uuid(user_id, "user_id")
    profile = ProfileService(db).update_profile(user_id, body.model_dump(exclude_unset=True))
    return ProfileResponse(success=True, profile=profile)
