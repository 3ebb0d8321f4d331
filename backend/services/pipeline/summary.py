"""Aggregate view over a ranked match list."""

import numpy as np

from models.responses import MatchStats
from models.schemas.enums import MatchQuality
from models.schemas.match_result import MatchResult
from services.pipeline.weights import round_half_up


def summarize_matches(results: list[MatchResult]) -> MatchStats:
    """Count matches per quality band and average the scores."""
    counts = {quality: 0 for quality in MatchQuality}
    for result in results:
        counts[result.match_quality] += 1

    average = round_half_up(float(np.mean([r.score for r in results]))) if results else 0

    return MatchStats(
        excellent=counts[MatchQuality.EXCELLENT],
        good=counts[MatchQuality.GOOD],
        fair=counts[MatchQuality.FAIR],
        poor=counts[MatchQuality.POOR],
        average_score=average,
    )


def build_summary(results: list[MatchResult], candidate_name: str = "") -> str:
    """One-line summary, e.g. for a dashboard header."""
    stats = summarize_matches(results)
    who = candidate_name or "this candidate"
    return (
        f"Found {len(results)} job matches for {who}. "
        f"{stats.excellent} excellent matches, {stats.good} good matches. "
        f"Average match score: {stats.average_score}%."
    )
