"""Factor weight profiles: the cap each compatibility factor can contribute.

Two profiles ship with the engine:
    enhanced: nine factors (25/20/15/10/10/5/10/5/5); caps sum past 100,
              so the engine clamps the total.
    basic:    the six-factor variant (skills weighted 40, no personality,
              career progression or cultural fit).
"""

import logging
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

FACTOR_NAMES: tuple[str, ...] = (
    "skills",
    "experience",
    "location",
    "salary",
    "education",
    "availability",
    "personality",
    "career_progression",
    "cultural_fit",
)


class WeightProfile(BaseModel):
    """Per-factor caps. A cap of 0 disables the factor."""
    model_config = ConfigDict(frozen=True)

    name: str
    skills: int = Field(default=0, ge=0)
    experience: int = Field(default=0, ge=0)
    location: int = Field(default=0, ge=0)
    salary: int = Field(default=0, ge=0)
    education: int = Field(default=0, ge=0)
    availability: int = Field(default=0, ge=0)
    personality: int = Field(default=0, ge=0)
    career_progression: int = Field(default=0, ge=0)
    cultural_fit: int = Field(default=0, ge=0)

    def cap(self, factor: str) -> int:
        if factor not in FACTOR_NAMES:
            raise ValueError(f"Unknown factor: {factor}")
        return getattr(self, factor)

    @property
    def max_total(self) -> int:
        return sum(self.cap(f) for f in FACTOR_NAMES)


ENHANCED = WeightProfile(
    name="enhanced",
    skills=25,
    experience=20,
    location=15,
    salary=10,
    education=10,
    availability=5,
    personality=10,
    career_progression=5,
    cultural_fit=5,
)

BASIC = WeightProfile(
    name="basic",
    skills=40,
    experience=20,
    location=15,
    salary=10,
    education=10,
    availability=5,
)

_PROFILES: MappingProxyType[str, WeightProfile] = MappingProxyType({
    ENHANCED.name: ENHANCED,
    BASIC.name: BASIC,
})


def get_weight_profile(name: str) -> WeightProfile:
    """Look up a built-in weight profile by name."""
    try:
        return _PROFILES[name]
    except KeyError:
        raise ValueError(
            f"Unknown weight profile: {name!r} (expected one of {', '.join(_PROFILES)})"
        ) from None


def available_profiles() -> list[str]:
    return list(_PROFILES)


def round_half_up(value: float) -> int:
    """Round .5 up for non-negative values; round() would round to even."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def scaled(cap: int, fraction: float) -> int:
    """A banded share of a factor's cap, as whole points."""
    return min(cap, round_half_up(cap * fraction))
