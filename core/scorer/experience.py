#!/usr/bin/env python3
"""
Experience - Total years from work history, required years from job text.

Two pieces:
1. estimate_total_years: sums whole months across (start, end) ranges
2. infer_required_years: keyword cues in the job text -> required years
"""

from datetime import date, datetime
from typing import Any, Iterable, Optional, Tuple
import logging

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

ONGOING_MARKERS = frozenset({'present', 'current', 'currently', 'now', 'ongoing', 'to date', 'today'})

_DATE_FORMATS = ('%Y-%m-%d', '%Y-%m', '%Y/%m/%d', '%Y/%m', '%m/%Y', '%Y')

# Checked in order; first group with a cue present wins
REQUIRED_YEARS_CUES: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (('senior', 'lead', '10+ years', '8+ years'), 7),
    (('5+ years', '5 years'), 5),
    (('mid', 'intermediate', '3+ years'), 3),
    (('junior', 'entry', 'graduate', '1+ year'), 1),
)
DEFAULT_REQUIRED_YEARS = 2

# Sentinel default so a bare year or "Jan 2020" resolves to the first of the month
_PARSE_DEFAULT = datetime(2000, 1, 1)


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a date from a date/datetime or a free-form string.

    Returns None when the value is empty or cannot be understood.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    try:
        return date_parser.parse(text, default=_PARSE_DEFAULT).date()
    except (ValueError, OverflowError):
        return None


def _entry_dates(entry: Any) -> Tuple[Any, Any]:
    if isinstance(entry, dict):
        return entry.get('start_date'), entry.get('end_date')
    return getattr(entry, 'start_date', None), getattr(entry, 'end_date', None)


def _is_ongoing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip() or value.strip().lower() in ONGOING_MARKERS
    return False


def months_between(start: date, end: date) -> int:
    """Whole months from start to end, never negative."""
    diff = relativedelta(end, start)
    return max(0, diff.years * 12 + diff.months)


def estimate_total_years(entries: Iterable[Any], today: Optional[date] = None) -> float:
    """
    Calculate total years of experience from work history date ranges.

    Entries may be ORM rows or dicts with start_date/end_date. A missing end
    date means the position is ongoing. Entries whose start date cannot be
    parsed contribute nothing; an end date that cannot be parsed is treated
    as ongoing.
    """
    today = today or date.today()
    total_months = 0

    for entry in entries or []:
        start_raw, end_raw = _entry_dates(entry)

        start_date = parse_date(start_raw)
        if start_date is None:
            logger.debug(f"Skipping experience entry with unparseable start date: {start_raw!r}")
            continue

        if _is_ongoing(end_raw):
            end_date = today
        else:
            end_date = parse_date(end_raw)
            if end_date is None:
                logger.debug(f"Unparseable end date {end_raw!r}, treating position as ongoing")
                end_date = today

        total_months += months_between(start_date, end_date)

    return round(total_months / 12, 1)


def infer_required_years(job_text: str) -> int:
    """Required years of experience implied by keyword cues in the job text."""
    text = (job_text or '').lower()
    for cues, years in REQUIRED_YEARS_CUES:
        if any(cue in text for cue in cues):
            return years
    return DEFAULT_REQUIRED_YEARS
