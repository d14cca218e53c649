#!/usr/bin/env python3
"""
Skill Normalizer - Match free-text user skills against a job's text.

A skill matches directly when its normalized form appears in the job text.
Otherwise the synonym table is consulted: the skill must overlap some
phrasing of a canonical skill, and the job text must contain a phrasing of
that same canonical skill.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple
import logging
import re

logger = logging.getLogger(__name__)

SKILLS_MAX_SCORE = 40.0
DEFAULT_DENOMINATOR_CAP = 10

# Synonym phrases this short only count when they stand alone as a word
SHORT_PHRASE_LEN = 3


def _freeze(table: Mapping[str, Iterable[str]]) -> Mapping[str, Tuple[str, ...]]:
    # The canonical phrase counts as one of its own variants
    return MappingProxyType({
        canonical: tuple(dict.fromkeys([canonical, *variants]))
        for canonical, variants in table.items()
    })


SKILL_SYNONYMS = _freeze({
    'project management': ['pm', 'programme management', 'program management', 'project manager', 'project coordination'],
    'javascript': ['js', 'ecmascript', 'es6'],
    'typescript': ['ts'],
    'node.js': ['nodejs', 'node js'],
    'react': ['reactjs', 'react.js'],
    'python': ['python3', 'py'],
    'machine learning': ['ml', 'deep learning', 'ai/ml'],
    'artificial intelligence': ['ai'],
    'data analysis': ['data analytics', 'data analyst', 'analytics', 'business intelligence'],
    'sql': ['mysql', 'postgresql', 'postgres', 'sql server', 't-sql'],
    'amazon web services': ['aws'],
    'google cloud platform': ['gcp', 'google cloud'],
    'microsoft azure': ['azure'],
    'kubernetes': ['k8s'],
    'ci/cd': ['continuous integration', 'continuous delivery', 'continuous deployment'],
    'microsoft excel': ['excel', 'spreadsheets'],
    'microsoft office': ['ms office', 'office suite'],
    'customer service': ['customer support', 'client service', 'customer care', 'customer experience'],
    'communication': ['communication skills', 'interpersonal skills', 'written communication', 'verbal communication'],
    'leadership': ['team lead', 'team leadership', 'people management'],
    'accounting': ['bookkeeping', 'financial reporting', 'accounts'],
    'digital marketing': ['online marketing', 'seo', 'sem', 'social media marketing'],
    'user experience': ['ux', 'ux design', 'user research'],
    'user interface': ['ui', 'ui design'],
    'human resources': ['hr', 'talent acquisition', 'recruitment'],
    'mobile money': ['momo', 'mobile payments'],
    'agile': ['scrum', 'kanban'],
})


def normalize_skill(skill: Optional[str]) -> str:
    """Lowercase and trim a skill name; None becomes an empty string."""
    return (skill or '').strip().lower()


def _contains(text: str, phrase: str) -> bool:
    if len(phrase) <= SHORT_PHRASE_LEN:
        return re.search(rf"(?<![a-z0-9]){re.escape(phrase)}(?![a-z0-9])", text) is not None
    return phrase in text


def _matches_via_synonyms(skill: str, job_text: str) -> bool:
    for variants in SKILL_SYNONYMS.values():
        if not any(_contains(variant, skill) or _contains(skill, variant) for variant in variants):
            continue
        if any(_contains(job_text, variant) for variant in variants):
            return True
    return False


def is_skill_matched(skill: str, job_text: str) -> bool:
    """Whether a single normalized skill matches the lowercased job text."""
    if not skill:
        return False
    if skill in job_text:
        return True
    return _matches_via_synonyms(skill, job_text)


def match_skills(
    user_skills: Iterable[str],
    job_text: str,
    denominator_cap: int = DEFAULT_DENOMINATOR_CAP
) -> Tuple[float, List[str]]:
    """
    Match user skills against job text.

    Args:
        user_skills: Skill names as entered by the user (duplicates tolerated)
        job_text: Concatenated job title, description and requirements
        denominator_cap: Largest skill count used as the ratio denominator

    Returns: (skills_score in [0, 40], matched skill names in input order,
    spelled as the user first entered them, trimmed)
    """
    job_text = (job_text or '').lower()

    # normalized name -> first original spelling
    distinct = {}
    for skill in user_skills or []:
        normalized = normalize_skill(skill)
        if normalized and normalized not in distinct:
            distinct[normalized] = skill.strip()
    if not distinct:
        return 0.0, []

    matched = [
        original for normalized, original in distinct.items()
        if is_skill_matched(normalized, job_text)
    ]

    denominator = max(1, min(len(distinct), denominator_cap))
    score = min(SKILLS_MAX_SCORE, (len(matched) / denominator) * SKILLS_MAX_SCORE)

    logger.debug(f"Matched {len(matched)}/{len(distinct)} skills: {matched}")
    return score, matched
