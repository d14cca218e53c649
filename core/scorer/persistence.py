#!/usr/bin/env python3
"""
Persistence Operations - Reconcile scored matches with stored matches.

For a (user, job) pair with a freshly computed score:
- no stored match, total >= threshold      -> insert
- stored match, total differs               -> update in place
- stored match, total unchanged             -> no-op
- no stored match, total < threshold        -> no-op
- stored match, total < threshold           -> ScorerConfig.stale_match_policy

Each reconcile commits on its own so an aborted batch never loses the
matches written before it.
"""

import logging
from enum import Enum
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError

from core.config_loader import ScorerConfig
from core.scorer.models import ScoredJobMatch

logger = logging.getLogger(__name__)


class ReconcileOutcome(str, Enum):
    CREATED = 'created'
    UPDATED = 'updated'
    UNCHANGED = 'unchanged'
    SKIPPED = 'skipped'          # below threshold, nothing stored
    STALE_KEPT = 'stale_kept'    # below threshold, stored row left as is
    DELETED = 'deleted'          # below threshold, stored row removed


def _match_fields(scored: ScoredJobMatch) -> Dict[str, Any]:
    fields = {
        'match_score': scored.total_score,
        'match_label': scored.match_label,
        'status': scored.status,
        'matched_skills': list(scored.matched_skills),
    }
    fields.update(scored.sub_scores())
    return fields


def _update_existing(existing, scored: ScoredJobMatch, repo) -> ReconcileOutcome:
    if existing.match_score == scored.total_score:
        logger.debug(f"Match for job {scored.job_id} unchanged at {scored.total_score}")
        return ReconcileOutcome.UNCHANGED

    previous = existing.match_score
    repo.matches.update_match(existing, **_match_fields(scored))
    repo.commit()
    logger.info(f"Updated match for job {scored.job_id}: {previous} -> {scored.total_score} ({scored.status})")
    return ReconcileOutcome.UPDATED


def reconcile_match(
    scored: ScoredJobMatch,
    repo,
    config: ScorerConfig
) -> ReconcileOutcome:
    """
    Insert, update or skip the stored match for scored's (user, job) pair.

    Args:
        scored: Freshly computed match
        repo: JobRepository bound to the current session
        config: ScorerConfig with persistence_threshold and stale_match_policy

    Returns:
        ReconcileOutcome describing what was written

    Raises:
        SQLAlchemyError: when the write fails; the session has not been
        committed and the caller is expected to roll back
    """
    threshold = config.persistence_threshold
    existing = repo.matches.get_existing_match(scored.user_id, scored.job_id)

    if existing is None:
        if scored.total_score < threshold:
            return ReconcileOutcome.SKIPPED

        try:
            repo.matches.create_match(scored.user_id, scored.job_id, **_match_fields(scored))
            repo.commit()
        except IntegrityError:
            # Another run inserted the pair first; fall back to updating its row
            repo.rollback()
            existing = repo.matches.get_existing_match(scored.user_id, scored.job_id)
            if existing is None:
                raise
            logger.warning(f"Match for job {scored.job_id} was inserted concurrently, updating instead")
            return _update_existing(existing, scored, repo)

        logger.info(f"Created match for job {scored.job_id}: {scored.total_score} ({scored.match_label}/{scored.status})")
        return ReconcileOutcome.CREATED

    if scored.total_score < threshold:
        policy = config.stale_match_policy
        if policy == 'keep':
            logger.warning(
                f"Match for job {scored.job_id} dropped to {scored.total_score} "
                f"(below {threshold}); keeping stored score {existing.match_score}"
            )
            return ReconcileOutcome.STALE_KEPT
        if policy == 'delete':
            repo.matches.delete_match(existing)
            repo.commit()
            return ReconcileOutcome.DELETED

    return _update_existing(existing, scored, repo)
