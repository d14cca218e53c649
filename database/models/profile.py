import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Date, Integer, Index, func
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, ARRAY
from sqlalchemy.orm import relationship

from .base import Base


class Profile(Base):
    """
    Job seeker profile.

    Written by the user or by CV extraction; read-only to the scorer.
    The profile id is the user id.
    """
    __tablename__ = 'profiles'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    full_name = Column(Text)
    email = Column(Text)
    location = Column(Text)
    career_level = Column(Text)  # entry|mid|senior|executive

    salary_min = Column(Integer)
    salary_max = Column(Integer)

    preferred_industries = Column(ARRAY(Text))
    job_types = Column(ARRAY(Text))
    location_preferences = Column(ARRAY(Text))

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=func.now())

    skills = relationship("Skill", back_populates="profile", cascade="all, delete-orphan")
    work_experience = relationship("WorkExperience", back_populates="profile", cascade="all, delete-orphan")


class Skill(Base):
    """A named skill owned by a profile. Duplicate names are allowed."""
    __tablename__ = 'skills'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    skill_name = Column(Text, nullable=False)
    skill_type = Column(Text, nullable=False, default='technical')  # technical|soft|language
    proficiency = Column(Text)  # beginner|intermediate|advanced|expert
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    profile = relationship("Profile", back_populates="skills")

    __table_args__ = (
        Index('idx_skills_user', 'user_id'),
    )


class WorkExperience(Base):
    """A position held. end_date NULL means the position is ongoing."""
    __tablename__ = 'work_experience'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False)
    job_title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    description = Column(Text)
    start_date = Column(Date)
    end_date = Column(Date)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    profile = relationship("Profile", back_populates="work_experience")

    __table_args__ = (
        Index('idx_work_experience_user', 'user_id', 'start_date'),
    )
