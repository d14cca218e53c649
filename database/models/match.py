import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Integer, UniqueConstraint, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship

from .base import Base


class JobMatch(Base):
    """
    Stores the match result between a user profile and a job posting.

    At most one row per (user_id, job_id); the unique constraint is the
    final arbiter when two runs race to insert the same pair.
    """
    __tablename__ = 'job_matches'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    job_id = Column(UUID(as_uuid=True), ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False)

    match_score = Column(Integer, nullable=False)

    skills_match_score = Column(Integer)
    experience_match_score = Column(Integer)
    industry_match_score = Column(Integer)
    location_match_score = Column(Integer)
    salary_match_score = Column(Integer)
    job_type_match_score = Column(Integer)
    geo_bonus = Column(Integer, default=0)

    match_label = Column(Text)  # excellent|good|fair|low
    status = Column(Text, nullable=False, default='new')  # new|low_match
    matched_skills = Column(JSONB, default=list)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=sql_text("timezone('UTC', now())"))
    matched_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    job = relationship("JobPosting", back_populates="matches")

    __table_args__ = (
        UniqueConstraint('user_id', 'job_id', name='uq_job_matches_user_job'),
        Index('idx_job_matches_user', 'user_id'),
        Index('idx_job_matches_score', 'match_score'),
        Index('idx_job_matches_status', 'status'),
    )
