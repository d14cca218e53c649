import contextlib
import logging

from database.database import SessionLocal
from database.repository import JobRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def match_uow(session_factory=None):
    """Per-unit-of-work transaction scope.

    Yields a JobRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes. Code inside may also commit
    per job; the final commit then only flushes what is left.

    Usage:
        with match_uow() as repo:
            profile = repo.profiles.get_profile(user_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = (session_factory or SessionLocal)()
    try:
        repo = JobRepository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
