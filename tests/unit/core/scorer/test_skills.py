#!/usr/bin/env python3
"""
Test suite for skill normalization and synonym matching.
"""

import unittest

from core.scorer.skills import (
    SKILL_SYNONYMS,
    normalize_skill,
    is_skill_matched,
    match_skills,
)


class TestNormalizeSkill(unittest.TestCase):

    def test_lowercases_and_trims(self):
        self.assertEqual(normalize_skill("  Python "), "python")

    def test_none_becomes_empty(self):
        self.assertEqual(normalize_skill(None), "")


class TestSynonymTable(unittest.TestCase):

    def test_canonical_is_its_own_variant(self):
        for canonical, variants in SKILL_SYNONYMS.items():
            self.assertIn(canonical, variants)

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            SKILL_SYNONYMS['rust'] = ('rust',)


class TestIsSkillMatched(unittest.TestCase):

    def test_direct_substring(self):
        self.assertTrue(is_skill_matched("python", "senior python developer"))

    def test_synonym_in_job_text(self):
        """User phrasing and job phrasing differ but share a canonical skill."""
        self.assertTrue(is_skill_matched("programme management", "we need a project manager"))

    def test_short_variant_requires_whole_word(self):
        """'js' must not be found inside 'json'."""
        self.assertFalse(is_skill_matched("ecmascript", "build json apis"))
        self.assertTrue(is_skill_matched("ecmascript", "strong js skills"))

    def test_unrelated_skill(self):
        self.assertFalse(is_skill_matched("welding", "python developer"))

    def test_empty_skill_never_matches(self):
        self.assertFalse(is_skill_matched("", "anything"))


class TestMatchSkills(unittest.TestCase):

    def test_all_skills_matched(self):
        score, matched = match_skills(["Python", "SQL"], "Python developer with SQL")
        self.assertEqual(score, 40.0)
        self.assertEqual(matched, ["Python", "SQL"])

    def test_partial_match(self):
        score, matched = match_skills(["Python", "Go"], "Python developer")
        self.assertEqual(score, 20.0)
        self.assertEqual(matched, ["Python"])

    def test_duplicates_counted_once(self):
        score, matched = match_skills(["Python", " python", "PYTHON", "Rust"], "python developer")
        self.assertEqual(score, 20.0)
        self.assertEqual(matched, ["Python"])

    def test_first_spelling_kept_and_trimmed(self):
        score, matched = match_skills([" PostgreSQL ", "postgresql"], "postgresql dba")
        self.assertEqual(score, 40.0)
        self.assertEqual(matched, ["PostgreSQL"])

    def test_denominator_capped(self):
        """Twelve skills, five matched: ratio uses 10 as denominator."""
        skills = [f"skill{i:02d}" for i in range(1, 13)]
        job_text = " ".join(f"skill{i:02d}" for i in range(1, 6))
        score, matched = match_skills(skills, job_text)
        self.assertEqual(len(matched), 5)
        self.assertEqual(score, 20.0)

    def test_score_never_exceeds_band(self):
        skills = [f"skill{i:02d}" for i in range(1, 16)]
        score, matched = match_skills(skills, " ".join(skills))
        self.assertEqual(len(matched), 15)
        self.assertEqual(score, 40.0)

    def test_custom_cap(self):
        score, _ = match_skills(["a1x", "b2y", "c3z"], "a1x", denominator_cap=2)
        self.assertEqual(score, 20.0)

    def test_no_skills(self):
        self.assertEqual(match_skills([], "python"), (0.0, []))
        self.assertEqual(match_skills(None, "python"), (0.0, []))

    def test_blank_skills_ignored(self):
        self.assertEqual(match_skills(["", "  ", None], "python"), (0.0, []))

    def test_empty_job_text(self):
        self.assertEqual(match_skills(["Python"], None), (0.0, []))


if __name__ == '__main__':
    unittest.main()
