import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Boolean, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from .base import Base


class JobPosting(Base):
    __tablename__ = 'jobs'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Core Identity
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text)
    job_type = Column(Text)  # full-time|part-time|contract|internship|...

    # Free text, e.g. "GHS 5,000 - 8,000"
    salary_range = Column(Text)

    # Content
    description = Column(Text)
    requirements = Column(Text)

    # Flags
    remote_option = Column(Boolean, default=False)
    visa_sponsorship = Column(Boolean, default=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # Provenance
    source_platform = Column(Text)
    source_url = Column(Text)
    posted_date = Column(TIMESTAMP(timezone=True))
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    matches = relationship("JobMatch", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_jobs_active', 'is_active'),
    )
