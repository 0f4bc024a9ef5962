#!/usr/bin/env python3
"""
Profile service - student profile management.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from database.models import Profile
from database.repositories import ProfileRepository
from ..models.responses import ProfileDetails
from ..utils import safe_str, safe_datetime_iso
from ..exceptions import ProfileNotFoundException, DuplicateProfileException

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for managing profiles."""

    def __init__(self, db: Session):
        self.repo = ProfileRepository(db)

    def get_profile(self, user_id: str) -> ProfileDetails:
        return self._to_profile_details(self._require(user_id))

    def create_profile(self, fields: Dict[str, Any], user_id: Optional[str] = None) -> ProfileDetails:
        """
        Create a profile after sign-up.

        Raises:
            DuplicateProfileException: If the id or email is already registered.
        """
        if user_id is not None and self.repo.get_by_id(user_id) is not None:
            raise DuplicateProfileException(f"Profile {user_id} already exists")
        if self.repo.get_by_email(fields['email']) is not None:
            raise DuplicateProfileException(f"Profile for {fields['email']} already exists")
        profile = self.repo.create(fields, user_id=user_id)
        logger.info(f"Created profile {profile.id}")
        return self._to_profile_details(profile)

    def update_profile(self, user_id: str, fields: Dict[str, Any]) -> ProfileDetails:
        profile = self.repo.update(user_id, fields)
        if profile is None:
            raise ProfileNotFoundException(f"Profile {user_id} not found")
        return self._to_profile_details(profile)

    def list_profiles(self) -> List[ProfileDetails]:
        return [self._to_profile_details(p) for p in self.repo.list_profiles()]

    def delete_profile(self, user_id: str) -> None:
        if not self.repo.delete(user_id):
            raise ProfileNotFoundException(f"Profile {user_id} not found")

    def _require(self, user_id: str) -> Profile:
        profile = self.repo.get_by_id(user_id)
        if profile is None:
            raise ProfileNotFoundException(f"Profile {user_id} not found")
        return profile

    def _to_profile_details(self, profile: Profile) -> ProfileDetails:
        return ProfileDetails(
            id=safe_str(profile.id),
            full_name=profile.full_name,
            email=profile.email,
            date_of_birth=safe_datetime_iso(profile.date_of_birth),
            college_name=profile.college_name,
            degree=profile.degree,
            branch=profile.branch,
            role=profile.role or "student",
            created_at=safe_datetime_iso(profile.created_at),
        )
