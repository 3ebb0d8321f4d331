"""Ranking knobs accepted by the ranker."""

from pydantic import BaseModel, Field


class RankOptions(BaseModel):
    min_score: int = Field(default=0, ge=0, le=100)
    max_distance_km: float | None = Field(default=None, gt=0)  # None = unbounded
    sort_by_distance: bool = False
    limit: int | None = Field(default=None, ge=0)  # None = keep everything
