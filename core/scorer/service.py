#!/usr/bin/env python3
"""
Scoring Service - Multi-criteria match scoring between a profile and jobs.

For each job:
- Skill Normalizer + Experience Estimator + Requirement Level Inferrer feed
  the six criterion scorers
- the Geo Bonus is added
- the total is clamped to [0, 100], rounded, and classified

Scoring is pure: nothing here touches the database. Persistence of the
results is handled by persistence.reconcile_match().
"""

from typing import Any, Iterable, List, Optional, Tuple
import logging

from core.config_loader import ScorerConfig
from core.scorer.models import (
    ScoredJobMatch, round_half_up,
    STATUS_NEW, STATUS_LOW_MATCH,
    LABEL_EXCELLENT, LABEL_GOOD, LABEL_FAIR, LABEL_LOW,
)
from core.scorer import criteria
from core.scorer.bonus import calculate_geo_bonus
from core.scorer.experience import infer_required_years
from core.scorer.skills import match_skills

logger = logging.getLogger(__name__)

MIN_TOTAL_SCORE = 0
MAX_TOTAL_SCORE = 100


def job_search_text(job: Any) -> str:
    """Lowercased title + description + requirements of a job posting."""
    parts = [
        getattr(job, 'title', None) or '',
        getattr(job, 'description', None) or '',
        getattr(job, 'requirements', None) or '',
    ]
    return ' '.join(parts).lower()


def skill_names(skills: Optional[Iterable[Any]]) -> List[str]:
    """Skill names from ORM rows, dicts or plain strings."""
    names = []
    for skill in skills or []:
        if isinstance(skill, str):
            names.append(skill)
        elif isinstance(skill, dict):
            names.append(skill.get('skill_name') or skill.get('name') or '')
        else:
            names.append(getattr(skill, 'skill_name', None) or '')
    return names


class ScoringService:
    """
    Service for rule-based job match scoring.

    Calculates six bounded sub-scores plus the geo bonus and reduces them
    to a total in [0, 100] with a status label.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def classify(self, total_score: int) -> Tuple[str, str]:
        """
        Map a total score to (match_label, status).

        >=70 excellent/new, 50-69 good/new, 40-49 fair/<fair_status>,
        below 40 low/low_match.
        """
        if total_score >= 70:
            return LABEL_EXCELLENT, STATUS_NEW
        if total_score >= 50:
            return LABEL_GOOD, STATUS_NEW
        if total_score >= 40:
            return LABEL_FAIR, self.config.fair_status
        return LABEL_LOW, STATUS_LOW_MATCH

    def aggregate(self, scored: ScoredJobMatch) -> ScoredJobMatch:
        """Clamp, round and classify the sub-scores already set on scored."""
        clamped = max(MIN_TOTAL_SCORE, min(MAX_TOTAL_SCORE, scored.raw_total))
        scored.total_score = round_half_up(clamped)
        scored.match_label, scored.status = self.classify(scored.total_score)
        return scored

    def score_job(
        self,
        profile: Any,
        user_skills: List[str],
        user_years: float,
        job: Any
    ) -> ScoredJobMatch:
        """Calculate the full match score of one job for one profile.

        Args:
            profile: Profile row (location, salary range, preferences)
            user_skills: Skill names of the profile
            user_years: Total years of experience of the profile
            job: Job posting row

        Returns:
            ScoredJobMatch with sub-scores, bonus, total and classification
        """
        job_text = job_search_text(job)

        skills_score, matched = match_skills(
            user_skills, job_text, denominator_cap=self.config.skills_denominator_cap
        )
        required_years = infer_required_years(job_text)

        scored = ScoredJobMatch(
            user_id=getattr(profile, 'id', None),
            job_id=getattr(job, 'id', None),
            skills_score=skills_score,
            experience_score=criteria.score_experience(user_years, required_years),
            industry_score=criteria.score_industry(
                getattr(profile, 'preferred_industries', None), job_text
            ),
            location_score=criteria.score_location(
                getattr(profile, 'location_preferences', None),
                getattr(job, 'location', None),
                getattr(job, 'remote_option', None)
            ),
            salary_score=criteria.score_salary(
                getattr(job, 'salary_range', None),
                getattr(profile, 'salary_min', None),
                getattr(profile, 'salary_max', None)
            ),
            job_type_score=criteria.score_job_type(
                getattr(profile, 'job_types', None), getattr(job, 'job_type', None)
            ),
            geo_bonus=calculate_geo_bonus(
                getattr(profile, 'location', None),
                getattr(job, 'visa_sponsorship', None),
                bonus=self.config.geo_bonus
            ),
            matched_skills=matched,
            user_years=user_years,
            required_years=required_years,
        )
        self.aggregate(scored)

        logger.debug(
            f"Job {scored.job_id}: skills={skills_score:.1f} exp={scored.experience_score} "
            f"industry={scored.industry_score} location={scored.location_score} "
            f"salary={scored.salary_score} type={scored.job_type_score} "
            f"bonus={scored.geo_bonus} total={scored.total_score}"
        )
        return scored
