import logging
from typing import List

from sqlalchemy import select

from database.models import JobPosting
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class JobPostingRepository(BaseRepository):
    def get_active_jobs(self) -> List[JobPosting]:
        """Active postings, newest first."""
        stmt = (
            select(JobPosting)
            .where(JobPosting.is_active.is_(True))
            .order_by(JobPosting.created_at.desc())
        )
        jobs = list(self.db.execute(stmt).scalars().all())
        logger.info(f"Found {len(jobs)} active jobs to match")
        return jobs
