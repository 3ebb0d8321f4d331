import pytest

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting
from services.pipeline import factors
from services.skill_matcher import compare_skills


def _profile(**kwargs) -> CandidateProfile:
    return CandidateProfile(id="p1", **kwargs)


def _job(**kwargs) -> JobPosting:
    return JobPosting(id="j1", **kwargs)


class TestSkillsFactor:
    def test_weighted_by_similarity(self):
        comparison = compare_skills(
            ["python", "postgresql", "django"],
            ["python", "sql", "django rest", "rust"],
        )
        result = factors.skills_factor(comparison, 25)
        # 25/4 * (1.0 + 0.7 + 0.7) = 15
        assert result.points == 15
        assert result.reason == "Good skills match: 3 skills matched"

    def test_all_exact_is_full_cap(self):
        comparison = compare_skills(["a", "b", "c", "d"], ["a", "b", "c", "d"])
        result = factors.skills_factor(comparison, 25)
        assert result.points == 25
        assert result.reason == "Excellent skills alignment: 4 skills matched"

    def test_no_job_skills_scores_zero(self):
        result = factors.skills_factor(compare_skills(["python"], []), 25)
        assert result.points == 0
        assert result.reason is None

    def test_zero_cap(self):
        assert factors.skills_factor(compare_skills(["a"], ["a"]), 0).points == 0


class TestExperienceFactor:
    def test_senior_role_without_experience_gets_floor(self):
        result = factors.experience_factor(0, "Senior Backend Engineer", 20)
        assert result.points == 5
        assert 0 < result.points < 20

    def test_senior_role_met(self):
        result = factors.experience_factor(7, "Senior Backend Engineer", 20)
        assert result.points == 20
        assert result.reason == "7 years of experience"

    def test_generic_role_met(self):
        assert factors.experience_factor(3, "Software Engineer", 20).points == 15

    def test_below_requirement_earns_per_year(self):
        assert factors.experience_factor(3, "Senior Backend Engineer", 20).points == 12
        assert factors.experience_factor(1.5, "Software Engineer", 20).points == 6
        assert factors.experience_factor(1, "Software Engineer", 20).points == 5

    def test_never_exceeds_cap(self):
        assert factors.experience_factor(40, "Junior Developer", 20).points == 20


class TestLocationFactor:
    @pytest.mark.parametrize("distance,points", [
        (0.0, 15), (5.0, 15), (10.0, 15), (20.0, 12), (40.0, 10), (80.0, 7), (500.0, 5),
    ])
    def test_distance_bands(self, distance, points):
        assert factors.location_factor(_profile(), _job(), distance, 15).points == points

    def test_distance_reasons(self):
        close = factors.location_factor(_profile(), _job(), 5.0, 15)
        nearby = factors.location_factor(_profile(), _job(), 20.0, 15)
        far = factors.location_factor(_profile(), _job(), 80.0, 15)
        assert close.reason == "Perfect location match (5.0km away)"
        assert nearby.reason == "Nearby location (20km away)"
        assert far.reason is None

    @pytest.mark.parametrize("mine,theirs,points", [
        ("Bangalore, India", "bangalore, india", 12),
        ("Bangalore", "Bangalore, India", 10),
        ("Mysore, Karnataka", "Bangalore, Karnataka", 8),
        ("Paris", "Tokyo", 5),
        (None, "Tokyo", 5),
        ("  ", "Tokyo", 5),
    ])
    def test_text_fallback(self, mine, theirs, points):
        result = factors.location_factor(_profile(location=mine), _job(location=theirs), None, 15)
        assert result.points == points

    def test_zero_cap(self):
        assert factors.location_factor(_profile(), _job(), 1.0, 0).points == 0


class TestSalaryFactor:
    @pytest.mark.parametrize("expected,offered,points", [
        (100000, 100000, 10),
        (115000, 100000, 8),
        (125000, 100000, 6),
        (140000, 100000, 4),
        (200000, 100000, 2),
    ])
    def test_bands(self, expected, offered, points):
        result = factors.salary_factor(_profile(expected_salary=expected), _job(salary=offered), 10)
        assert result.points == points

    def test_reasons(self):
        exact = factors.salary_factor(_profile(expected_salary=100), _job(salary=100), 10)
        close = factors.salary_factor(_profile(expected_salary=115), _job(salary=100), 10)
        assert exact.reason == "Salary expectations align perfectly"
        assert close.reason == "Salary expectations are close"

    @pytest.mark.parametrize("expected,offered", [(None, 100000), (100000, None), (100000, 0), (0, 100000)])
    def test_missing_salary_scores_zero(self, expected, offered):
        result = factors.salary_factor(_profile(expected_salary=expected), _job(salary=offered), 10)
        assert result.points == 0


class TestFlatFactors:
    def test_education(self):
        assert factors.education_factor(_profile(), 10).points == 0
        result = factors.education_factor(_profile(education=["MSc Physics"]), 10)
        assert result.points == 10
        assert result.reason == "Has relevant education"

    @pytest.mark.parametrize("availability,points", [
        ("available", 5), ("open_to_offers", 3), ("not_available", 0), (None, 0),
    ])
    def test_availability(self, availability, points):
        assert factors.availability_factor(_profile(availability=availability), 5).points == points

    def test_interest_placeholders(self):
        with_interests = _profile(interests=["hiking"])
        assert factors.personality_factor(with_interests, 10).points == 5
        assert factors.cultural_fit_factor(with_interests, 5).points == 3
        assert factors.personality_factor(_profile(), 10).points == 0
        assert factors.cultural_fit_factor(_profile(), 5).points == 0


class TestCareerProgression:
    def test_step_up(self):
        result = factors.career_progression_factor(
            _profile(current_job_title="Engineer"), _job(title="Senior Engineer"), 5,
        )
        assert result.points == 5
        assert result.reason == "Career step up: senior-level role"

    def test_lateral_move_gets_floor(self):
        result = factors.career_progression_factor(
            _profile(current_job_title="Senior Engineer"), _job(title="Senior Engineer"), 5,
        )
        assert result.points == 2
        assert result.reason is None

    def test_no_current_title_counts_as_step_up(self):
        result = factors.career_progression_factor(_profile(), _job(title="Engineering Manager"), 5)
        assert result.points == 5

    def test_keyword_must_be_a_whole_word(self):
        result = factors.career_progression_factor(
            _profile(current_job_title="Engineer"), _job(title="Team Leader"), 5,
        )
        assert result.points == 2

    def test_disabled_in_basic_profile(self):
        assert factors.career_progression_factor(_profile(), _job(title="Team Lead"), 0).points == 0
