"""Rank a job collection against one candidate profile.

Scoring each job is pure and independent, so the map step can fan out over
a thread pool once the batch is large enough. Scoring is CPU-bound pure
Python and holds the GIL, so the pool gives little speedup on CPython;
`max_workers=1` (the default) scores inline. Filtering, sorting and
truncation run sequentially over the finished results.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from config import settings
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import MatchResult
from models.schemas.rank_options import RankOptions
from services.pipeline.score_engine import resolve_weights, score_one
from services.pipeline.weights import WeightProfile

logger = logging.getLogger(__name__)


def _score_all(
    profile: CandidateProfile,
    jobs: list[JobPosting],
    weights: WeightProfile,
    now: datetime,
    max_workers: int,
) -> list[MatchResult]:
    if len(jobs) < settings.parallel_threshold or max_workers <= 1:
        return [score_one(profile, job, weights=weights, now=now) for job in jobs]

    logger.debug("Scoring %d jobs on %d workers", len(jobs), max_workers)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        # map() keeps input order, which the stable sort below relies on
        return list(pool.map(lambda job: score_one(profile, job, weights=weights, now=now), jobs))


def _distance_sort_key(result: MatchResult) -> tuple:
    if result.distance_km is None:
        return (1, 0.0, -result.score)
    return (0, result.distance_km, 0)


def rank(
    profile: CandidateProfile,
    jobs: list[JobPosting],
    options: RankOptions | None = None,
    *,
    weights: WeightProfile | str | None = None,
    now: datetime | None = None,
    max_workers: int | None = None,
) -> list[MatchResult]:
    """Score, filter, sort and truncate matches for a candidate."""
    options = options or RankOptions()
    weights = resolve_weights(weights)
    now = now or datetime.now()
    max_workers = max_workers if max_workers is not None else settings.max_workers

    results = _score_all(profile, list(jobs), weights, now, max_workers)
    scored_count = len(results)

    results = [r for r in results if r.score >= options.min_score]

    has_coordinates = profile.coordinates is not None
    if has_coordinates and options.max_distance_km is not None:
        results = [
            r for r in results
            if r.distance_km is None or r.distance_km <= options.max_distance_km
        ]

    if options.sort_by_distance and has_coordinates:
        results.sort(key=_distance_sort_key)
    else:
        results.sort(key=lambda r: r.score, reverse=True)

    if options.limit is not None:
        results = results[: options.limit]

    logger.info(
        "Ranked %d jobs for profile %s: %d kept (min_score=%d, max_distance=%s)",
        scored_count, profile.id or "<anonymous>", len(results),
        options.min_score, options.max_distance_km,
    )
    return results
