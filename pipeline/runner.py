"""Shared matching pipeline runner module.

This module contains the batch matching sweep that can be used by both
main.py and the web application: load one user's profile, skills and work
history, score every active job, and reconcile each score with the stored
matches.
"""

import time
import logging
import threading
from typing import Any, Dict, Optional
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from core.config_loader import AppConfig, ScorerConfig
from core.scorer import ScoringService, reconcile_match, ReconcileOutcome
from core.scorer.experience import estimate_total_years
from core.scorer.service import skill_names
from database.repositories import ProfileNotFoundError
from database.uow import match_uow


logger = logging.getLogger(__name__)


@dataclass
class MatchingPipelineResult:
    """Result of running the matching pipeline for one user."""
    success: bool
    user_id: Optional[str] = None
    jobs_scored: int = 0
    matches_created: int = 0
    matches_updated: int = 0
    matches_unchanged: int = 0
    matches_skipped: int = 0
    failed: int = 0
    error: Optional[str] = None
    execution_time: float = 0.0

    def summary(self) -> Dict[str, int]:
        """Batch summary returned to callers."""
        return {
            'matchesCreated': self.matches_created,
            'matchesUpdated': self.matches_updated,
        }

    def record(self, outcome: ReconcileOutcome) -> None:
        if outcome == ReconcileOutcome.CREATED:
            self.matches_created += 1
        elif outcome == ReconcileOutcome.UPDATED:
            self.matches_updated += 1
        elif outcome == ReconcileOutcome.UNCHANGED:
            self.matches_unchanged += 1
        else:
            self.matches_skipped += 1


def run_matching_for_user(
    repo,
    user_id: Any,
    scoring_service: ScoringService,
    config: ScorerConfig,
    stop_event: Optional[threading.Event] = None
) -> MatchingPipelineResult:
    """Score all active jobs for a user and reconcile the results.

    Reading the profile or the job list is not retried here: any failure
    propagates and no job is scored. A failure while writing a single match
    is logged, rolled back and counted in ``failed``; the sweep continues
    with the next job.

    Args:
        repo: JobRepository bound to an open session
        user_id: Profile id of the user
        scoring_service: ScoringService used for every job
        config: ScorerConfig with persistence policy
        stop_event: Optional event checked between jobs

    Returns:
        MatchingPipelineResult with per-outcome counts
    """
    start = time.time()

    profile = repo.profiles.get_profile(user_id)
    skills = repo.profiles.get_skills(user_id)
    work_experience = repo.profiles.get_work_experience(user_id)
    jobs = repo.jobs.get_active_jobs()

    names = skill_names(skills)
    user_years = estimate_total_years(work_experience)
    logger.info(
        f"Matching user {user_id}: {len(names)} skills, {user_years} years, "
        f"{len(jobs)} active jobs"
    )

    result = MatchingPipelineResult(success=True, user_id=str(user_id))

    for job in jobs:
        if stop_event is not None and stop_event.is_set():
            logger.info(f"Matching interrupted after {result.jobs_scored} jobs")
            result.error = "Interrupted"
            break

        scored = scoring_service.score_job(profile, names, user_years, job)
        result.jobs_scored += 1

        try:
            outcome = reconcile_match(scored, repo, config)
        except SQLAlchemyError as e:
            repo.rollback()
            result.failed += 1
            logger.error(f"Failed to persist match for job {scored.job_id}: {e}", exc_info=True)
            continue

        result.record(outcome)

    result.execution_time = time.time() - start
    logger.info(
        f"Matching complete for user {user_id}: {result.matches_created} created, "
        f"{result.matches_updated} updated, {result.matches_unchanged} unchanged, "
        f"{result.matches_skipped} skipped, {result.failed} failed "
        f"in {result.execution_time:.2f}s"
    )
    return result


def run_matching_pipeline(
    config: AppConfig,
    user_id: Any,
    stop_event: Optional[threading.Event] = None,
    session_factory=None
) -> MatchingPipelineResult:
    """Run the matching pipeline for one user as a self-contained operation.

    Opens its own unit of work. Upstream read failures end the run with
    ``success=False`` and the error message; nothing is scored.

    Args:
        config: Application config
        user_id: Profile id of the user
        stop_event: Optional threading event to signal early termination
        session_factory: Optional sessionmaker, defaults to database.SessionLocal

    Returns:
        MatchingPipelineResult with success status and counts
    """
    pipeline_start = time.time()

    logger.info("=" * 60)
    logger.info(f"STARTING MATCHING PIPELINE for user {user_id}")
    logger.info("=" * 60)

    matching_config = config.matching
    if not matching_config or not matching_config.enabled:
        logger.info("=== MATCHING PIPELINE: Skipped (disabled in config) ===")
        return MatchingPipelineResult(
            success=False,
            user_id=str(user_id),
            error="Matching disabled in config"
        )

    scoring_service = ScoringService(matching_config.scorer)

    try:
        with match_uow(session_factory) as repo:
            result = run_matching_for_user(
                repo=repo,
                user_id=user_id,
                scoring_service=scoring_service,
                config=matching_config.scorer,
                stop_event=stop_event
            )
    except ProfileNotFoundError as e:
        logger.error(str(e))
        return MatchingPipelineResult(
            success=False,
            user_id=str(user_id),
            error=str(e),
            execution_time=time.time() - pipeline_start
        )
    except SQLAlchemyError as e:
        logger.error(f"Matching pipeline failed for user {user_id}: {e}", exc_info=True)
        return MatchingPipelineResult(
            success=False,
            user_id=str(user_id),
            error=f"Database error: {e}",
            execution_time=time.time() - pipeline_start
        )

    result.execution_time = time.time() - pipeline_start
    return result
