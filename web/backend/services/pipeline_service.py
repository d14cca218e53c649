#!/usr/bin/env python3
"""
Pipeline service - runs the matching sweep for a user on request.
"""

import logging
from typing import Any
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from core.scorer import ScoringService
from database.repository import JobRepository
from database.repositories import ProfileNotFoundError
from pipeline.runner import run_matching_for_user, MatchingPipelineResult
from ..exceptions import ProfileNotFoundException, MatchingDisabledException

logger = logging.getLogger(__name__)


class PipelineService:
    """Runs matching for one user inside the request's session."""

    def __init__(self, db: Session, config: AppConfig):
        self.db = db
        self.config = config

    def run_matching(self, user_id: Any) -> MatchingPipelineResult:
        """
        Score every active job for the user and reconcile stored matches.

        Raises:
            MatchingDisabledException: If matching is disabled in config.
            ProfileNotFoundException: If the user has no profile.
        """
        matching_config = self.config.matching
        if not matching_config or not matching_config.enabled:
            raise MatchingDisabledException("Matching is disabled in config")

        repo = JobRepository(self.db)
        try:
            return run_matching_for_user(
                repo=repo,
                user_id=user_id,
                scoring_service=ScoringService(matching_config.scorer),
                config=matching_config.scorer
            )
        except ProfileNotFoundError as e:
            raise ProfileNotFoundException(str(e)) from e
