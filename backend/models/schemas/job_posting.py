"""Job-side input: a single posting from the posting store or a job-source adapter."""

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.candidate_profile import Coordinates


class JobPosting(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    company: str = ""
    description: str = ""
    location: str | None = None
    coordinates: Coordinates | None = None
    salary: float | None = Field(default=None, ge=0)
    skills: list[str] = []  # declared order matters for gap importance
    category: str | None = None
    source: str | None = None  # internal, linkedin, naukri, external
