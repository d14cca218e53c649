import logging
from typing import List, Optional, Any
from sqlalchemy import select, func, delete
from sqlalchemy.orm import joinedload

from database.models import JobMatch
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def get_existing_match(
        self,
        user_id: Any,
        job_id: Any
    ) -> Optional[JobMatch]:
        stmt = select(JobMatch).where(
            JobMatch.user_id == user_id,
            JobMatch.job_id == job_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_id(self, match_id: Any) -> Optional[JobMatch]:
        stmt = (
            select(JobMatch)
            .options(joinedload(JobMatch.job))
            .where(JobMatch.id == match_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_matches_for_user(
        self,
        user_id: Any,
        min_score: Optional[int] = None,
        status: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[JobMatch]:
        stmt = (
            select(JobMatch)
            .options(joinedload(JobMatch.job))
            .where(JobMatch.user_id == user_id)
        )

        if status is not None:
            stmt = stmt.where(JobMatch.status == status)

        if min_score is not None:
            stmt = stmt.where(JobMatch.match_score >= min_score)

        stmt = stmt.order_by(JobMatch.match_score.desc(), JobMatch.matched_at.desc())
        if limit:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def create_match(self, user_id: Any, job_id: Any, **fields: Any) -> JobMatch:
        match = JobMatch(user_id=user_id, job_id=job_id, **fields)
        self.db.add(match)
        self.db.flush()
        return match

    def update_match(self, match: JobMatch, **fields: Any) -> JobMatch:
        for name, value in fields.items():
            setattr(match, name, value)
        match.matched_at = func.now()
        self.db.flush()
        return match

    def delete_match(self, match: JobMatch) -> None:
        self.db.execute(delete(JobMatch).where(JobMatch.id == match.id))
        logger.info(f"Deleted match {match.id} (user={match.user_id}, job={match.job_id})")
