import contextlib
from typing import Callable, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.config_loader import get_config

DATABASE_URL = get_config().database.url

engine = create_engine(DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextlib.contextmanager
def db_session_scope(session_factory: Optional[Callable[[], Session]] = None) -> Iterator[Session]:
    """Provide a transactional scope around a series of operations."""
    session = (session_factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
