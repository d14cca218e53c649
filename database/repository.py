import logging

from sqlalchemy.orm import Session

from database.repositories import (
    JobPostingRepository,
    ProfileRepository,
    MatchRepository,
)

logger = logging.getLogger(__name__)


class JobRepository:
    """Repository facade bound to one Session.

    Groups the per-table repositories so a unit of work hands out a single
    object and every repository shares the same transaction.
    """

    def __init__(self, db: Session):
        self.db = db
        self.profiles = ProfileRepository(db)
        self.jobs = JobPostingRepository(db)
        self.matches = MatchRepository(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
