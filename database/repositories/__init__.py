from database.repositories.base import BaseRepository
from database.repositories.job_post import JobPostingRepository
from database.repositories.profile import ProfileRepository, ProfileNotFoundError
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'JobPostingRepository',
    'ProfileRepository',
    'ProfileNotFoundError',
    'MatchRepository',
]
