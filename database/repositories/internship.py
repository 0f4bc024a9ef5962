import logging
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple
from sqlalchemy import select, func

from core.scorer.models import Internship
from database.models import InternshipPost
from database.repositories.base import BaseRepository, as_uuid

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'title', 'org_name', 'sector', 'description', 'city', 'state', 'pin',
    'remote', 'min_education', 'required_skills', 'stipend_min', 'stipend_max',
    'application_url', 'deadline', 'active',
)

# Non-nullable columns; a null in an update leaves them unchanged
REQUIRED_FIELDS = ('title', 'org_name', 'sector', 'remote', 'required_skills', 'application_url', 'active')


def catalog_key(title: Optional[str], org_name: Optional[str]) -> Tuple[str, str]:
    """Duplicate-detection key: case-insensitive (title, organization)."""
    return ((title or "").strip().lower(), (org_name or "").strip().lower())


def to_domain(row: InternshipPost) -> Internship:
    return Internship(
        id=str(row.id),
        title=row.title,
        org_name=row.org_name,
        sector=row.sector or "",
        description=row.description or "",
        city=row.city,
        state=row.state,
        pin=row.pin,
        remote=bool(row.remote),
        required_skills=list(row.required_skills or []),
        min_education=row.min_education,
        stipend_min=row.stipend_min,
        stipend_max=row.stipend_max,
        application_url=row.application_url or "",
        active=bool(row.active),
        deadline=row.deadline,
    )


class InternshipRepository(BaseRepository):
    def fetch_active_internships(self) -> List[Internship]:
        """Active catalog in insertion order, as scorer domain objects."""
        stmt = (
            select(InternshipPost)
            .where(InternshipPost.active.is_(True))
            .order_by(InternshipPost.created_at, InternshipPost.title)
        )
        return [to_domain(row) for row in self.db.execute(stmt).scalars().all()]

    def list_internships(self, active_only: bool = False) -> List[InternshipPost]:
        stmt = select(InternshipPost)
        if active_only:
            stmt = stmt.where(InternshipPost.active.is_(True))
        stmt = stmt.order_by(InternshipPost.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def get_by_id(self, internship_id: Any) -> Optional[InternshipPost]:
        return self.db.get(InternshipPost, as_uuid(internship_id))

    def create(self, fields: Dict[str, Any]) -> InternshipPost:
        internship = InternshipPost(**{k: v for k, v in fields.items() if k in EDITABLE_FIELDS})
        self.db.add(internship)
        self.db.flush()
        return internship

    def update(self, internship_id: Any, fields: Dict[str, Any]) -> Optional[InternshipPost]:
        internship = self.get_by_id(internship_id)
        if internship is None:
            return None
        for key, value in fields.items():
            if key not in EDITABLE_FIELDS:
                continue
            if value is None and key in REQUIRED_FIELDS:
                continue
            setattr(internship, key, value)
        self.db.flush()
        return internship

    def delete(self, internship_id: Any) -> bool:
        internship = self.get_by_id(internship_id)
        if internship is None:
            return False
        self.db.delete(internship)
        self.db.flush()
        logger.info(f"Deleted internship {internship_id}")
        return True

    def bulk_insert(self, records: Iterable[Dict[str, Any]]) -> List[InternshipPost]:
        rows = [
            InternshipPost(**{k: v for k, v in record.items() if k in EDITABLE_FIELDS})
            for record in records
        ]
        self.db.add_all(rows)
        self.db.flush()
        logger.info(f"Inserted {len(rows)} internships")
        return rows

    def existing_keys(self) -> Set[Tuple[str, str]]:
        stmt = select(InternshipPost.title, InternshipPost.org_name)
        return {catalog_key(title, org) for title, org in self.db.execute(stmt).all()}

    def count(self, active_only: bool = False) -> int:
        stmt = select(func.count()).select_from(InternshipPost)
        if active_only:
            stmt = stmt.where(InternshipPost.active.is_(True))
        return int(self.db.execute(stmt).scalar_one())
