import logging
from typing import List, Any
from sqlalchemy import select

from database.models import Profile, Skill, WorkExperience
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ProfileNotFoundError(LookupError):
    """Raised when a user has no profile row."""


class ProfileRepository(BaseRepository):
    def get_profile(self, user_id: Any) -> Profile:
        stmt = select(Profile).where(Profile.id == user_id)
        profile = self.db.execute(stmt).scalar_one_or_none()
        if profile is None:
            raise ProfileNotFoundError(f"No profile for user {user_id}")
        return profile

    def get_skills(self, user_id: Any) -> List[Skill]:
        stmt = select(Skill).where(Skill.user_id == user_id)
        return list(self.db.execute(stmt).scalars().all())

    def get_work_experience(self, user_id: Any) -> List[WorkExperience]:
        """Work history, most recent start first."""
        stmt = (
            select(WorkExperience)
            .where(WorkExperience.user_id == user_id)
            .order_by(WorkExperience.start_date.desc().nulls_last())
        )
        return list(self.db.execute(stmt).scalars().all())
