"""Candidate-side input: the profile a job list is ranked against."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.schemas.enums import Availability


class Coordinates(BaseModel):
    """A geocoded point, supplied by the caller."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class WorkExperience(BaseModel):
    """A single work experience entry.

    Dates are kept as free text ("2021-03", "Mar 2021", "2021-03-15");
    they are parsed leniently when experience is computed.
    """
    model_config = ConfigDict(frozen=True)

    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _dates_to_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        return value


class Education(BaseModel):
    """A single education entry."""
    model_config = ConfigDict(frozen=True)

    institution: str = ""
    degree: str = ""  # e.g. "bachelors", "masters", "phd"
    field: str = ""
    graduation_year: str = ""


class CandidateProfile(BaseModel):
    """Read-only candidate record handed in by the profile store."""
    model_config = ConfigDict(frozen=True)

    id: str = ""
    first_name: str = ""
    last_name: str = ""
    skills: list[str] = []
    work_experience: list[WorkExperience] = []
    coordinates: Coordinates | None = None
    location: str | None = None
    expected_salary: float | None = Field(default=None, ge=0)
    availability: Availability | None = None
    education: list[Education] = []
    interests: list[str] = []
    current_job_title: str = ""

    @field_validator("education", mode="before")
    @classmethod
    def _education_from_text(cls, value):
        # Profiles often store education as plain "BSc in X from Y" strings
        if isinstance(value, list):
            return [{"degree": item} if isinstance(item, str) else item for item in value]
        return value

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
