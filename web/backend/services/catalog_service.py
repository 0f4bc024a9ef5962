#!/usr/bin/env python3
"""
Catalog service - admin curation of the internship catalog.
"""

import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from core.config_loader import CsvImportConfig
from database.repositories import InternshipRepository, ProfileRepository, ApplicationRepository
from etl.csv_import import import_csv, CsvImportError, ImportReport
from ..models.responses import InternshipDetails, OverviewStats
from ..utils import safe_str, safe_datetime_iso
from ..exceptions import InternshipNotFoundException, InvalidInternshipException, CsvImportException

logger = logging.getLogger(__name__)


def to_internship_details(internship: Any) -> InternshipDetails:
    """Convert a catalog row or scorer Internship to its API shape."""
    return InternshipDetails(
        id=safe_str(internship.id),
        title=internship.title,
        org_name=internship.org_name,
        sector=safe_str(internship.sector),
        description=internship.description,
        city=internship.city,
        state=internship.state,
        pin=internship.pin,
        remote=bool(internship.remote),
        min_education=internship.min_education,
        required_skills=list(internship.required_skills or []),
        stipend_min=internship.stipend_min,
        stipend_max=internship.stipend_max,
        application_url=safe_str(internship.application_url),
        deadline=safe_datetime_iso(internship.deadline),
        active=bool(internship.active),
    )


class CatalogService:
    """Service for managing catalog internships."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = InternshipRepository(db)

    def list_internships(self, active_only: bool = False) -> List[InternshipDetails]:
        return [to_internship_details(i) for i in self.repo.list_internships(active_only=active_only)]

    def create_internship(self, fields: Dict[str, Any]) -> InternshipDetails:
        internship = self.repo.create(fields)
        logger.info(f"Created internship {internship.id}: {internship.title} ({internship.org_name})")
        return to_internship_details(internship)

    def update_internship(self, internship_id: str, fields: Dict[str, Any]) -> InternshipDetails:
        """
        Update an internship.

        Raises:
            InternshipNotFoundException: If the internship does not exist.
            InvalidInternshipException: If the resulting stipend range is inverted.
        """
        current = self.repo.get_by_id(internship_id)
        if current is None:
            raise InternshipNotFoundException(f"Internship {internship_id} not found")

        stipend_min = fields.get('stipend_min', current.stipend_min)
        stipend_max = fields.get('stipend_max', current.stipend_max)
        if stipend_min is not None and stipend_max is not None and stipend_min > stipend_max:
            raise InvalidInternshipException("stipend_min must not exceed stipend_max")

        internship = self.repo.update(internship_id, fields)
        logger.info(f"Updated internship {internship_id}: {sorted(fields)}")
        return to_internship_details(internship)

    def delete_internship(self, internship_id: str) -> None:
        if not self.repo.delete(internship_id):
            raise InternshipNotFoundException(f"Internship {internship_id} not found")

    def import_csv(self, text: str, config: CsvImportConfig) -> ImportReport:
        """
        Bulk import internships from CSV text.

        Raises:
            CsvImportException: If the file holds no valid internship.
        """
        try:
            return import_csv(text, self.repo, config)
        except CsvImportError as e:
            raise CsvImportException(str(e))

    def get_overview(self) -> OverviewStats:
        profiles = ProfileRepository(self.db)
        return OverviewStats(
            total_internships=self.repo.count(),
            active_internships=self.repo.count(active_only=True),
            total_users=profiles.count(),
            student_users=profiles.count(role="student"),
            total_applications=ApplicationRepository(self.db).count(),
        )
