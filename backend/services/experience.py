"""Work-history duration and title-based seniority requirements."""

import re
from datetime import datetime

from models.schemas.candidate_profile import WorkExperience
from services.skill_taxonomy import contains_term

_MONTH_MAP = {
    "jan": 1, "january": 1, "feb": 2, "february": 2, "mar": 3, "march": 3,
    "apr": 4, "april": 4, "may": 5, "jun": 6, "june": 6,
    "jul": 7, "july": 7, "aug": 8, "august": 8, "sep": 9, "sept": 9,
    "september": 9, "oct": 10, "october": 10, "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

# "2021-03-15", "2021-03", "2021/03", "2021-03-15T09:00:00Z"
_ISO_RE = re.compile(r"^(\d{4})[-/](\d{1,2})(?:[-/]\d{1,2})?(?:[t ].*)?$")
# "03/2021"
_MONTH_YEAR_NUMERIC_RE = re.compile(r"^(\d{1,2})[-/](\d{4})$")

# (title keywords, required years), first hit wins
_SENIORITY_REQUIREMENTS: tuple[tuple[tuple[str, ...], float], ...] = (
    (("senior", "lead", "principal"), 5.0),
    (("mid", "intermediate"), 3.0),
    (("junior", "entry"), 0.0),
)
DEFAULT_REQUIRED_YEARS = 2.0


def parse_month(value: str, now: datetime | None = None) -> tuple[int, int] | None:
    """Parse a loosely formatted date into (year, month).

    Returns None when the text can't be read as a date.
    """
    text = value.strip().rstrip(".").lower()
    if not text:
        return None
    if text in ("present", "current", "now"):
        now = now or datetime.now()
        return now.year, now.month

    match = _ISO_RE.match(text)
    if match:
        year, month = int(match.group(1)), int(match.group(2))
        return (year, month) if 1 <= month <= 12 else None

    match = _MONTH_YEAR_NUMERIC_RE.match(text)
    if match:
        month, year = int(match.group(1)), int(match.group(2))
        return (year, month) if 1 <= month <= 12 else None

    # "Mar 2021", "March, 2021"
    parts = text.replace(",", " ").split()
    if len(parts) == 2 and parts[0].rstrip(".") in _MONTH_MAP and parts[1].isdigit():
        return int(parts[1]), _MONTH_MAP[parts[0].rstrip(".")]

    if text.isdigit() and len(text) == 4:
        return int(text), 1

    return None


def months_in_role(entry: WorkExperience, now: datetime | None = None) -> int:
    """Whole months between start and end (or now). Never negative; 0 if unparsable."""
    now = now or datetime.now()
    start = parse_month(entry.start_date, now)
    if start is None:
        return 0

    if entry.current or not entry.end_date.strip():
        end = (now.year, now.month)
    else:
        end = parse_month(entry.end_date, now)
        if end is None:
            return 0

    months = (end[0] - start[0]) * 12 + (end[1] - start[1])
    return max(0, months)


def years_of_experience(entries: list[WorkExperience], now: datetime | None = None) -> float:
    """Total experience across all entries, in years with one decimal."""
    total_months = sum(months_in_role(entry, now) for entry in entries)
    return round(total_months / 12, 1)


def required_years_for_title(title: str) -> float:
    """Infer the years of experience a job expects from its title."""
    title_lower = title.lower()
    for keywords, years in _SENIORITY_REQUIREMENTS:
        if any(contains_term(title_lower, keyword) for keyword in keywords):
            return years
    return DEFAULT_REQUIRED_YEARS
