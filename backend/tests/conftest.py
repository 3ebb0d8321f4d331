"""Shared test configuration, fixtures and pytest markers."""

from datetime import datetime

import pytest

from models.schemas.candidate_profile import CandidateProfile, Coordinates, WorkExperience

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0)

BANGALORE = Coordinates(latitude=12.9716, longitude=77.5946)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: large job batches exercising the worker pool"
    )


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def candidate() -> CandidateProfile:
    """A mid-career backend developer based in Bangalore."""
    return CandidateProfile(
        id="cand-1",
        first_name="Asha",
        last_name="Rao",
        skills=["Python", "Django", "AWS"],
        work_experience=[
            WorkExperience(company="Acme", position="Backend Engineer",
                           start_date="2020-01", end_date="2023-01"),
        ],
        coordinates=BANGALORE,
        location="Bangalore, Karnataka",
        expected_salary=100000,
        availability="available",
        education=["BSc Computer Science"],
        interests=["chess"],
        current_job_title="Backend Engineer",
    )
