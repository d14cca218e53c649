#!/usr/bin/env python3
"""
Criterion Scorers - One bounded sub-score per matching criterion.

| Criterion  | Band  |
|------------|-------|
| skills     | 0-40  | (see skills.py)
| experience | 0-20  |
| industry   | 0-15  |
| location   | 0-10  |
| salary     | 0-10  |
| job type   | 0-5   |

Missing profile or job data never raises; it resolves to the neutral
score of the criterion.
"""

from typing import Iterable, List, Optional
import logging
import re

logger = logging.getLogger(__name__)

EXPERIENCE_MAX_SCORE = 20
INDUSTRY_MAX_SCORE = 15
LOCATION_MAX_SCORE = 10
SALARY_MAX_SCORE = 10
JOB_TYPE_MAX_SCORE = 5

INDUSTRY_NEUTRAL_SCORE = 8
LOCATION_NEUTRAL_SCORE = 7
LOCATION_MISMATCH_SCORE = 5
SALARY_NEUTRAL_SCORE = 7
SALARY_LOW_SCORE = 4
JOB_TYPE_NEUTRAL_SCORE = 3
JOB_TYPE_MISMATCH_SCORE = 2

_NUMBER_PATTERN = re.compile(r'\d[\d,]*(?:\.\d+)?')


def _clean_terms(values: Optional[Iterable[str]]) -> List[str]:
    return [v.strip().lower() for v in values or [] if v and v.strip()]


def parse_salary_number(salary_text: Optional[str]) -> Optional[float]:
    """First number in a free-text salary range, e.g. "GHS 5,000 - 8,000" -> 5000.0."""
    if not salary_text:
        return None
    match = _NUMBER_PATTERN.search(salary_text)
    if not match:
        return None
    try:
        return float(match.group(0).replace(',', ''))
    except ValueError:
        return None


def score_experience(user_years: float, required_years: float) -> int:
    if user_years >= required_years:
        return EXPERIENCE_MAX_SCORE
    if user_years >= 0.7 * required_years:
        return 15
    if user_years >= 0.5 * required_years:
        return 10
    return 5


def score_industry(preferred_industries: Optional[Iterable[str]], job_text: str) -> int:
    industries = _clean_terms(preferred_industries)
    if not industries:
        return INDUSTRY_NEUTRAL_SCORE
    job_text = (job_text or '').lower()
    if any(industry in job_text for industry in industries):
        return INDUSTRY_MAX_SCORE
    return INDUSTRY_NEUTRAL_SCORE


def score_location(
    preferred_locations: Optional[Iterable[str]],
    job_location: Optional[str],
    is_remote: Optional[bool]
) -> int:
    if is_remote:
        return LOCATION_MAX_SCORE
    locations = _clean_terms(preferred_locations)
    job_location = (job_location or '').strip().lower()
    if not locations or not job_location:
        return LOCATION_NEUTRAL_SCORE
    if any(location in job_location for location in locations):
        return LOCATION_MAX_SCORE
    return LOCATION_MISMATCH_SCORE


def score_salary(
    salary_range: Optional[str],
    user_min: Optional[float],
    user_max: Optional[float]
) -> int:
    job_salary = parse_salary_number(salary_range)
    if job_salary is None or not user_min:
        logger.debug(f"Salary not comparable (range={salary_range!r}, user_min={user_min}), using neutral score")
        return SALARY_NEUTRAL_SCORE

    if job_salary >= user_min and (not user_max or job_salary <= user_max):
        return SALARY_MAX_SCORE
    if job_salary >= 0.8 * user_min:
        return 7
    return SALARY_LOW_SCORE


def score_job_type(preferred_job_types: Optional[Iterable[str]], job_type: Optional[str]) -> int:
    job_types = _clean_terms(preferred_job_types)
    job_type = (job_type or '').strip().lower()
    if not job_types or not job_type:
        return JOB_TYPE_NEUTRAL_SCORE
    if any(preferred in job_type for preferred in job_types):
        return JOB_TYPE_MAX_SCORE
    return JOB_TYPE_MISMATCH_SCORE
