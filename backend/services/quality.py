"""Score -> match quality label. Every quality label in the system comes from here."""

from models.schemas.enums import MatchQuality

# (lower bound inclusive, label), highest first
QUALITY_BANDS: tuple[tuple[int, MatchQuality], ...] = (
    (80, MatchQuality.EXCELLENT),
    (60, MatchQuality.GOOD),
    (40, MatchQuality.FAIR),
)


def classify_quality(score: float) -> MatchQuality:
    """Map a 0-100 score to excellent / good / fair / poor."""
    for lower, label in QUALITY_BANDS:
        if score >= lower:
            return label
    return MatchQuality.POOR
