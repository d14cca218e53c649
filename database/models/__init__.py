from .base import Base
from .profile import Profile, Skill, WorkExperience
from .job import JobPosting
from .match import JobMatch

__all__ = [
    'Base',
    'Profile',
    'Skill',
    'WorkExperience',
    'JobPosting',
    'JobMatch',
]
