import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import select, func

from database.models import Profile
from database.repositories.base import BaseRepository, as_uuid

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ('full_name', 'email', 'date_of_birth', 'college_name', 'degree', 'branch', 'role')


class ProfileRepository(BaseRepository):
    def get_by_id(self, user_id: Any) -> Optional[Profile]:
        return self.db.get(Profile, as_uuid(user_id))

    def get_by_email(self, email: str) -> Optional[Profile]:
        stmt = select(Profile).where(func.lower(Profile.email) == email.strip().lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, fields: Dict[str, Any], user_id: Optional[Any] = None) -> Profile:
        profile = Profile(**{k: v for k, v in fields.items() if k in PROFILE_FIELDS})
        if user_id is not None:
            profile.id = as_uuid(user_id)
        self.db.add(profile)
        self.db.flush()
        return profile

    def update(self, user_id: Any, fields: Dict[str, Any]) -> Optional[Profile]:
        profile = self.get_by_id(user_id)
        if profile is None:
            return None
        for key, value in fields.items():
            # role is not editable through profile updates
            if key in PROFILE_FIELDS and key != 'role':
                setattr(profile, key, value)
        self.db.flush()
        return profile

    def list_profiles(self) -> List[Profile]:
        stmt = select(Profile).order_by(Profile.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def delete(self, user_id: Any) -> bool:
        """Delete a profile; its applications cascade."""
        profile = self.get_by_id(user_id)
        if profile is None:
            return False
        self.db.delete(profile)
        self.db.flush()
        logger.info(f"Deleted profile {user_id}")
        return True

    def count(self, role: Optional[str] = None) -> int:
        stmt = select(func.count()).select_from(Profile)
        if role is not None:
            stmt = stmt.where(Profile.role == role)
        return int(self.db.execute(stmt).scalar_one())
