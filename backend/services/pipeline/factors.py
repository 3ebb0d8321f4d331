"""The nine compatibility factors.

Every scorer takes its cap from the active WeightProfile and returns whole
points in [0, cap] plus an optional human-readable reason. Missing inputs
degrade a factor to its lowest band; nothing here raises on absent data.
"""

from typing import NamedTuple

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.enums import Availability
from models.schemas.job_posting import JobPosting
from models.schemas.skills_comparison import SkillsComparison
from services.experience import required_years_for_title
from services.geo import format_distance
from services.skill_taxonomy import contains_term
from services.pipeline.weights import round_half_up, scaled


class FactorScore(NamedTuple):
    points: int
    reason: str | None = None


# (max km inclusive, share of cap)
DISTANCE_BANDS: tuple[tuple[float, float], ...] = (
    (10, 1.0),
    (25, 0.8),
    (50, 0.67),
    (100, 0.47),
)
LOCATION_FLOOR = 1 / 3
LOCATION_TEXT_IDENTICAL = 0.8
LOCATION_TEXT_CONTAINS = 0.67
LOCATION_TEXT_SHARED_SEGMENT = 0.5

# (max relative difference inclusive, share of cap)
SALARY_BANDS: tuple[tuple[float, float], ...] = (
    (0.1, 1.0),
    (0.2, 0.8),
    (0.3, 0.6),
    (0.5, 0.4),
)
SALARY_FLOOR = 0.2

EXPERIENCE_FLOOR = 0.25
EXPERIENCE_YEARS_FOR_CAP = 5  # below requirement, each year earns cap / 5

AVAILABILITY_SHARE = {
    Availability.AVAILABLE: 1.0,
    Availability.OPEN_TO_OFFERS: 0.6,
    Availability.NOT_AVAILABLE: 0.0,
}

SENIORITY_KEYWORDS: tuple[str, ...] = ("senior", "lead", "manager")
CAREER_PROGRESSION_FLOOR = 0.4

# Interest-presence placeholders
PERSONALITY_SHARE = 0.5
CULTURAL_FIT_SHARE = 0.6


def skills_factor(comparison: SkillsComparison, cap: int) -> FactorScore:
    """Sum of (cap / n_job_skills) * similarity over matched job skills."""
    if cap <= 0 or not comparison.job_skills:
        return FactorScore(0)

    per_skill = cap / len(comparison.job_skills)
    points = min(cap, round_half_up(sum(per_skill * m.similarity for m in comparison.matched_skills)))

    n_matched = len(comparison.matched_skills)
    if points > cap * 0.8:
        return FactorScore(points, f"Excellent skills alignment: {n_matched} skills matched")
    if points > cap * 0.4:
        return FactorScore(points, f"Good skills match: {n_matched} skills matched")
    return FactorScore(points)


def experience_factor(years: float, job_title: str, cap: int) -> FactorScore:
    """Compare total years against the years implied by the job title."""
    if cap <= 0:
        return FactorScore(0)

    required = required_years_for_title(job_title)
    if years >= required:
        raw = min(cap, (years / (required + 2)) * cap)
    else:
        # Transferable experience still earns something below the requirement
        raw = max(cap * EXPERIENCE_FLOOR, years * cap / EXPERIENCE_YEARS_FOR_CAP)
    points = min(cap, round_half_up(raw))

    if years >= required and points > cap / 2:
        return FactorScore(points, f"{years:g} years of experience")
    return FactorScore(points)


def location_factor(
    profile: CandidateProfile,
    job: JobPosting,
    distance: float | None,
    cap: int,
) -> FactorScore:
    """Distance bands when both sides are geocoded, else free-text comparison."""
    if cap <= 0:
        return FactorScore(0)

    if distance is not None:
        for max_km, share in DISTANCE_BANDS:
            if distance <= max_km:
                points = scaled(cap, share)
                if share == 1.0:
                    return FactorScore(points, f"Perfect location match ({format_distance(distance)})")
                if max_km <= 50:
                    return FactorScore(points, f"Nearby location ({format_distance(distance)})")
                return FactorScore(points)
        return FactorScore(scaled(cap, LOCATION_FLOOR))

    # TODO: drop this text fallback once every posting is geocoded upstream
    if profile.location and job.location:
        mine = profile.location.strip().lower()
        theirs = job.location.strip().lower()
        if mine and theirs:
            if mine == theirs:
                return FactorScore(scaled(cap, LOCATION_TEXT_IDENTICAL), "Perfect location match")
            if mine in theirs or theirs in mine:
                return FactorScore(scaled(cap, LOCATION_TEXT_CONTAINS), "Similar location")
            my_parts = {part.strip() for part in mine.split(",") if part.strip()}
            their_parts = {part.strip() for part in theirs.split(",") if part.strip()}
            if my_parts & their_parts:
                return FactorScore(scaled(cap, LOCATION_TEXT_SHARED_SEGMENT), "Same region")

    return FactorScore(scaled(cap, LOCATION_FLOOR))


def salary_factor(profile: CandidateProfile, job: JobPosting, cap: int) -> FactorScore:
    """Relative gap between expected and offered salary; 0 when either is missing."""
    if cap <= 0 or not profile.expected_salary or not job.salary:
        return FactorScore(0)

    diff = abs(profile.expected_salary - job.salary) / job.salary
    for max_diff, share in SALARY_BANDS:
        if diff <= max_diff:
            if max_diff <= 0.1:
                return FactorScore(scaled(cap, share), "Salary expectations align perfectly")
            if max_diff <= 0.2:
                return FactorScore(scaled(cap, share), "Salary expectations are close")
            return FactorScore(scaled(cap, share))
    return FactorScore(scaled(cap, SALARY_FLOOR))


def education_factor(profile: CandidateProfile, cap: int) -> FactorScore:
    """Flat cap for any education record; degree relevance isn't weighed yet."""
    if cap <= 0 or not profile.education:
        return FactorScore(0)
    return FactorScore(cap, "Has relevant education")


def availability_factor(profile: CandidateProfile, cap: int) -> FactorScore:
    if cap <= 0 or profile.availability is None:
        return FactorScore(0)
    points = scaled(cap, AVAILABILITY_SHARE[profile.availability])
    if profile.availability == Availability.AVAILABLE:
        return FactorScore(points, "Currently available")
    if profile.availability == Availability.OPEN_TO_OFFERS:
        return FactorScore(points, "Open to new opportunities")
    return FactorScore(points)


def personality_factor(profile: CandidateProfile, cap: int) -> FactorScore:
    """Placeholder: partial credit for listing any interests."""
    if cap <= 0 or not profile.interests:
        return FactorScore(0)
    return FactorScore(scaled(cap, PERSONALITY_SHARE))


def career_progression_factor(profile: CandidateProfile, job: JobPosting, cap: int) -> FactorScore:
    """Full cap when the job adds a seniority keyword the current title lacks."""
    if cap <= 0:
        return FactorScore(0)

    job_title = job.title.lower()
    current_title = profile.current_job_title.lower()
    for keyword in SENIORITY_KEYWORDS:
        if contains_term(job_title, keyword) and not contains_term(current_title, keyword):
            return FactorScore(cap, f"Career step up: {keyword}-level role")
    return FactorScore(scaled(cap, CAREER_PROGRESSION_FLOOR))


def cultural_fit_factor(profile: CandidateProfile, cap: int) -> FactorScore:
    """Placeholder: partial credit for listing any interests."""
    if cap <= 0 or not profile.interests:
        return FactorScore(0)
    return FactorScore(scaled(cap, CULTURAL_FIT_SHARE))
