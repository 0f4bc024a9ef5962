import contextlib
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from sqlalchemy.orm import Session

from database.repositories import InternshipRepository, ProfileRepository, ApplicationRepository


@dataclass
class Repositories:
    internships: InternshipRepository
    profiles: ProfileRepository
    applications: ApplicationRepository


@contextlib.contextmanager
def catalog_uow(session_factory: Optional[Callable[[], Session]] = None) -> Iterator[Repositories]:
    """Per-unit-of-work transaction scope.

    Yields repositories bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with catalog_uow() as repos:
            repos.internships.create(...)
        # commit happens automatically on successful exit
    """
    from database.database import db_session_scope

    with db_session_scope(session_factory) as session:
        yield Repositories(
            internships=InternshipRepository(session),
            profiles=ProfileRepository(session),
            applications=ApplicationRepository(session),
        )
