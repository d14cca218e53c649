#!/usr/bin/env python3
"""
Match service - business logic for reading stored job matches.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional
from sqlalchemy.orm import Session

from database.models import JobMatch, JobPosting
from database.repositories import MatchRepository
from ..models.responses import (
    MatchSummary,
    MatchDetail,
    MatchDetailResponse,
    JobDetails,
    SubScores,
)
from ..exceptions import MatchNotFoundException

logger = logging.getLogger(__name__)


def _iso(dt: Optional[datetime]) -> Optional[str]:
    return dt.isoformat() if isinstance(dt, datetime) else None


class MatchService:
    """Service for reading job matches."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = MatchRepository(db)

    def get_matches(
        self,
        user_id: Any,
        min_score: Optional[int] = None,
        status: Optional[str] = None,
        top_k: Optional[int] = None
    ) -> List[MatchSummary]:
        """
        Get a user's stored matches, best first.

        Args:
            user_id: Profile id of the user.
            min_score: Minimum match score filter.
            status: Match status filter ("new", "low_match"), None for all.
            top_k: Maximum number of results to return.

        Returns:
            List of match summaries.
        """
        matches = self.repo.get_matches_for_user(
            user_id, min_score=min_score, status=status, limit=top_k
        )
        return [self._to_match_summary(m) for m in matches]

    def get_match_detail(self, match_id: Any) -> MatchDetailResponse:
        """
        Get detailed information about a specific match.

        Raises:
            MatchNotFoundException: If match is not found.
        """
        match = self.repo.get_by_id(match_id)
        if not match:
            raise MatchNotFoundException(f"Match {match_id} not found")

        return MatchDetailResponse(
            success=True,
            match=self._to_match_detail(match),
            job=self._to_job_details(match.job) if match.job else None
        )

    def _to_match_summary(self, match: JobMatch) -> MatchSummary:
        job = match.job
        return MatchSummary(
            match_id=str(match.id),
            job_id=str(match.job_id),
            title=job.title if job else None,
            company=job.company if job else None,
            location=job.location if job else None,
            is_remote=job.remote_option if job else None,
            match_score=match.match_score,
            match_label=match.match_label,
            status=match.status,
            matched_at=_iso(match.matched_at)
        )

    def _to_match_detail(self, match: JobMatch) -> MatchDetail:
        return MatchDetail(
            match_id=str(match.id),
            user_id=str(match.user_id),
            match_score=match.match_score,
            match_label=match.match_label,
            status=match.status,
            sub_scores=SubScores(
                skills=match.skills_match_score,
                experience=match.experience_match_score,
                industry=match.industry_match_score,
                location=match.location_match_score,
                salary=match.salary_match_score,
                job_type=match.job_type_match_score,
                geo_bonus=match.geo_bonus or 0
            ),
            matched_skills=list(match.matched_skills or []),
            created_at=_iso(match.created_at),
            updated_at=_iso(match.updated_at),
            matched_at=_iso(match.matched_at)
        )

    def _to_job_details(self, job: JobPosting) -> JobDetails:
        return JobDetails(
            job_id=str(job.id),
            title=job.title,
            company=job.company,
            location=job.location,
            job_type=job.job_type,
            salary_range=job.salary_range,
            is_remote=job.remote_option,
            visa_sponsorship=job.visa_sponsorship,
            description=job.description,
            requirements=job.requirements
        )
