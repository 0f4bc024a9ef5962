#!/usr/bin/env python3
"""
Application service - record and list internship applications.
"""

import logging
from typing import List, Tuple
from sqlalchemy.orm import Session

from database.models import Application
from database.repositories import ApplicationRepository, InternshipRepository, ProfileRepository
from ..models.responses import ApplicationDetails
from ..utils import safe_str, safe_datetime_iso
from ..exceptions import InternshipNotFoundException, ProfileNotFoundException

logger = logging.getLogger(__name__)


class ApplicationService:
    """Service for managing applications."""

    def __init__(self, db: Session):
        self.repo = ApplicationRepository(db)
        self.internships = InternshipRepository(db)
        self.profiles = ProfileRepository(db)

    def apply(self, user_id: str, internship_id: str) -> Tuple[ApplicationDetails, bool]:
        """
        Record an application. Applying twice returns the first record.

        Returns: (application, created)
        """
        if self.profiles.get_by_id(user_id) is None:
            raise ProfileNotFoundException(f"Profile {user_id} not found")
        if self.internships.get_by_id(internship_id) is None:
            raise InternshipNotFoundException(f"Internship {internship_id} not found")

        application, created = self.repo.record_application(user_id, internship_id)
        return self._to_application_details(application), created

    def list_for_user(self, user_id: str) -> List[ApplicationDetails]:
        if self.profiles.get_by_id(user_id) is None:
            raise ProfileNotFoundException(f"Profile {user_id} not found")
        return [self._to_application_details(a) for a in self.repo.list_for_user(user_id)]

    def list_recent(self, limit: int = 10) -> List[ApplicationDetails]:
        return [self._to_application_details(a) for a in self.repo.list_recent(limit)]

    def _to_application_details(self, application: Application) -> ApplicationDetails:
        internship = application.internship
        profile = application.profile
        return ApplicationDetails(
            id=safe_str(application.id),
            user_id=safe_str(application.user_id),
            internship_id=safe_str(application.internship_id),
            applied_at=safe_datetime_iso(application.applied_at),
            internship_title=internship.title if internship else None,
            org_name=internship.org_name if internship else None,
            user_name=profile.full_name if profile else None,
            application_url=internship.application_url if internship else None,
        )
