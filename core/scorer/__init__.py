#!/usr/bin/env python3
"""
Scoring Module - Rule-based job match scoring.

Public API:
- ScoringService: Scores jobs for a profile and classifies the totals
- ScoredJobMatch: Dataclass for scored match results
- reconcile_match: Insert/update/skip a scored match against the store

The scoring module is split into focused, single-responsibility modules:

- models.py: Data structures (ScoredJobMatch, status and label constants)
- skills.py: Skill normalization and synonym matching
- experience.py: Total years from work history, required years from job text
- criteria.py: The six bounded criterion scorers
- bonus.py: Geo bonus for visa-sponsoring jobs
- persistence.py: Database reconciliation (reconcile_match)
- service.py: ScoringService orchestrator
"""

from core.scorer.models import ScoredJobMatch
from core.scorer.service import ScoringService
from core.scorer.persistence import reconcile_match, ReconcileOutcome

__all__ = ['ScoringService', 'ScoredJobMatch', 'reconcile_match', 'ReconcileOutcome']
