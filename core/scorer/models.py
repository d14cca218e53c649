#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import List, Any, Dict
from dataclasses import dataclass, field

STATUS_NEW = 'new'
STATUS_LOW_MATCH = 'low_match'

LABEL_EXCELLENT = 'excellent'
LABEL_GOOD = 'good'
LABEL_FAIR = 'fair'
LABEL_LOW = 'low'


@dataclass
class ScoredJobMatch:
    """Complete scored match result for one (user, job) pair."""
    user_id: Any
    job_id: Any

    total_score: int = 0

    skills_score: float = 0.0
    experience_score: int = 0
    industry_score: int = 0
    location_score: int = 0
    salary_score: int = 0
    job_type_score: int = 0
    geo_bonus: int = 0

    match_label: str = LABEL_LOW
    status: str = STATUS_LOW_MATCH

    matched_skills: List[str] = field(default_factory=list)
    user_years: float = 0.0
    required_years: int = 0

    @property
    def raw_total(self) -> float:
        """Sum of sub-scores plus bonus before clamping and rounding."""
        return (
            self.skills_score + self.experience_score + self.industry_score +
            self.location_score + self.salary_score + self.job_type_score +
            self.geo_bonus
        )

    def sub_scores(self) -> Dict[str, int]:
        """Integer sub-scores as persisted."""
        return {
            'skills_match_score': round_half_up(self.skills_score),
            'experience_match_score': self.experience_score,
            'industry_match_score': self.industry_score,
            'location_match_score': self.location_score,
            'salary_match_score': self.salary_score,
            'job_type_match_score': self.job_type_score,
            'geo_bonus': self.geo_bonus,
        }


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (59.5 -> 60)."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)
