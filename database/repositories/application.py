import logging
from typing import Any, List, Tuple
from sqlalchemy import select, func
from sqlalchemy.orm import joinedload

from database.models import Application
from database.repositories.base import BaseRepository, as_uuid

logger = logging.getLogger(__name__)


class ApplicationRepository(BaseRepository):
    def record_application(self, user_id: Any, internship_id: Any) -> Tuple[Application, bool]:
        """
        Record that a user applied to an internship.

        Idempotent per (user, internship).

        Returns: (application, created)
        """
        user_uuid = as_uuid(user_id)
        internship_uuid = as_uuid(internship_id)

        stmt = select(Application).where(
            Application.user_id == user_uuid,
            Application.internship_id == internship_uuid
        )
        existing = self.db.execute(stmt).scalar_one_or_none()
        if existing is not None:
            logger.debug(f"Application already recorded for user {user_id} / internship {internship_id}")
            return existing, False

        application = Application(user_id=user_uuid, internship_id=internship_uuid)
        self.db.add(application)
        self.db.flush()
        logger.info(f"Recorded application: user {user_id} -> internship {internship_id}")
        return application, True

    def list_for_user(self, user_id: Any) -> List[Application]:
        stmt = (
            select(Application)
            .options(joinedload(Application.internship))
            .where(Application.user_id == as_uuid(user_id))
            .order_by(Application.applied_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_recent(self, limit: int = 10) -> List[Application]:
        stmt = (
            select(Application)
            .options(joinedload(Application.internship), joinedload(Application.profile))
            .order_by(Application.applied_at.desc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def count(self) -> int:
        return int(self.db.execute(select(func.count()).select_from(Application)).scalar_one())
