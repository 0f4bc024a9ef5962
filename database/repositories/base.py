import uuid
from typing import Any

from sqlalchemy.orm import Session


def as_uuid(value: Any) -> uuid.UUID:
    """Coerce a str/UUID id. Raises ValueError on malformed input."""
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db
