#!/usr/bin/env python3
"""
Test suite for ScoringService: criterion composition, clamping and labels.
"""

import unittest
from types import SimpleNamespace

from core.config_loader import ScorerConfig
from core.scorer import ScoringService, ScoredJobMatch
from core.scorer.service import job_search_text, skill_names


def make_profile(**overrides):
    fields = dict(
        id='user-1',
        location='Accra, Ghana',
        preferred_industries=['fintech'],
        location_preferences=['Accra'],
        salary_min=6000,
        salary_max=9000,
        job_types=['full-time'],
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def make_job(**overrides):
    fields = dict(
        id='job-1',
        title='Senior Python Developer',
        description='Fintech company building payment APIs with SQL',
        requirements='Python, SQL',
        location='Accra',
        remote_option=False,
        salary_range='GHS 5,000 - 8,000',
        job_type='Full-time',
        visa_sponsorship=True,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestHelpers(unittest.TestCase):

    def test_job_search_text(self):
        job = SimpleNamespace(title='Data Analyst', description=None, requirements='Excel')
        self.assertEqual(job_search_text(job), 'data analyst  excel')

    def test_skill_names_from_mixed_inputs(self):
        skills = ['Python', {'skill_name': 'SQL'}, SimpleNamespace(skill_name='Excel')]
        self.assertEqual(skill_names(skills), ['Python', 'SQL', 'Excel'])
        self.assertEqual(skill_names(None), [])


class TestClassify(unittest.TestCase):

    def setUp(self):
        self.service = ScoringService()

    def test_bands(self):
        self.assertEqual(self.service.classify(100), ('excellent', 'new'))
        self.assertEqual(self.service.classify(70), ('excellent', 'new'))
        self.assertEqual(self.service.classify(69), ('good', 'new'))
        self.assertEqual(self.service.classify(50), ('good', 'new'))
        self.assertEqual(self.service.classify(49), ('fair', 'new'))
        self.assertEqual(self.service.classify(40), ('fair', 'new'))
        self.assertEqual(self.service.classify(39), ('low', 'low_match'))
        self.assertEqual(self.service.classify(0), ('low', 'low_match'))

    def test_fair_status_configurable(self):
        service = ScoringService(ScorerConfig(fair_status='low_match'))
        self.assertEqual(service.classify(45), ('fair', 'low_match'))
        self.assertEqual(service.classify(50), ('good', 'new'))


class TestAggregate(unittest.TestCase):

    def setUp(self):
        self.service = ScoringService()

    def test_rounds_half_up(self):
        scored = ScoredJobMatch(user_id='u', job_id='j', skills_score=12.5)
        self.service.aggregate(scored)
        self.assertEqual(scored.total_score, 13)

    def test_clamps_above_100(self):
        scored = ScoredJobMatch(
            user_id='u', job_id='j', skills_score=40.0, experience_score=20,
            industry_score=15, location_score=10, salary_score=10,
            job_type_score=5, geo_bonus=10
        )
        self.service.aggregate(scored)
        self.assertEqual(scored.raw_total, 110)
        self.assertEqual(scored.total_score, 100)
        self.assertEqual(scored.match_label, 'excellent')

    def test_clamps_below_zero(self):
        scored = ScoredJobMatch(user_id='u', job_id='j', skills_score=-5.0)
        self.service.aggregate(scored)
        self.assertEqual(scored.total_score, 0)


class TestScoreJob(unittest.TestCase):

    def setUp(self):
        self.service = ScoringService()

    def test_full_breakdown(self):
        scored = self.service.score_job(make_profile(), ['Python', 'SQL'], 0.0, make_job())

        self.assertEqual(scored.user_id, 'user-1')
        self.assertEqual(scored.job_id, 'job-1')
        self.assertEqual(scored.skills_score, 40.0)
        self.assertEqual(scored.matched_skills, ['Python', 'SQL'])
        self.assertEqual(scored.required_years, 7)
        self.assertEqual(scored.experience_score, 5)
        self.assertEqual(scored.industry_score, 15)
        self.assertEqual(scored.location_score, 10)
        self.assertEqual(scored.salary_score, 7)
        self.assertEqual(scored.job_type_score, 5)
        self.assertEqual(scored.geo_bonus, 10)
        self.assertEqual(scored.total_score, 92)
        self.assertEqual((scored.match_label, scored.status), ('excellent', 'new'))

    def test_bonus_pushes_past_100_then_clamped(self):
        job = make_job(salary_range='GHS 7,000')
        scored = self.service.score_job(make_profile(), ['Python', 'SQL'], 10.0, job)
        self.assertEqual(scored.raw_total, 110)
        self.assertEqual(scored.total_score, 100)

    def test_no_bonus_without_sponsorship(self):
        scored = self.service.score_job(
            make_profile(), ['Python', 'SQL'], 0.0, make_job(visa_sponsorship=False)
        )
        self.assertEqual(scored.geo_bonus, 0)
        self.assertEqual(scored.total_score, 82)

    def test_empty_profile_gets_neutral_scores(self):
        profile = SimpleNamespace(id='user-2')
        job = SimpleNamespace(id='job-2', title='Accountant')
        scored = self.service.score_job(profile, [], 0.0, job)

        self.assertEqual(scored.skills_score, 0.0)
        self.assertEqual(scored.experience_score, 5)
        self.assertEqual(scored.industry_score, 8)
        self.assertEqual(scored.location_score, 7)
        self.assertEqual(scored.salary_score, 7)
        self.assertEqual(scored.job_type_score, 3)
        self.assertEqual(scored.geo_bonus, 0)
        self.assertEqual(scored.total_score, 30)
        self.assertEqual((scored.match_label, scored.status), ('low', 'low_match'))

    def test_total_always_in_range(self):
        for years in (0.0, 1.0, 3.0, 10.0):
            for skills in ([], ['Python'], ['Python', 'SQL', 'Go']):
                scored = self.service.score_job(make_profile(), skills, years, make_job())
                self.assertGreaterEqual(scored.total_score, 0)
                self.assertLessEqual(scored.total_score, 100)

    def test_idempotent(self):
        first = self.service.score_job(make_profile(), ['Python'], 2.0, make_job())
        second = self.service.score_job(make_profile(), ['Python'], 2.0, make_job())
        self.assertEqual(first, second)

    def test_more_matched_skills_never_lowers_total(self):
        job = make_job(visa_sponsorship=False)
        fewer = self.service.score_job(make_profile(), ['Python'], 2.0, job)
        more = self.service.score_job(make_profile(), ['Python', 'SQL'], 2.0, job)
        self.assertGreaterEqual(more.total_score, fewer.total_score)

    def test_more_experience_never_lowers_total(self):
        job = make_job(visa_sponsorship=False)
        previous = -1
        for years in (0.0, 3.5, 4.9, 7.0, 12.0):
            total = self.service.score_job(make_profile(), ['Python'], years, job).total_score
            self.assertGreaterEqual(total, previous)
            previous = total


class TestMissingJobFields(unittest.TestCase):

    def test_missing_location_and_type_are_neutral(self):
        job = SimpleNamespace(id='job-3', title='Accountant')
        scored = ScoringService().score_job(make_profile(), [], 0.0, job)

        self.assertEqual(scored.location_score, 7)
        self.assertEqual(scored.job_type_score, 3)
        self.assertEqual(scored.salary_score, 7)
        self.assertEqual(scored.geo_bonus, 0)


if __name__ == '__main__':
    unittest.main()
