"""Closed vocabularies shared by the matching schemas."""

from enum import Enum


class Availability(str, Enum):
    AVAILABLE = "available"
    OPEN_TO_OFFERS = "open_to_offers"
    NOT_AVAILABLE = "not_available"


class MatchType(str, Enum):
    EXACT = "exact"
    PARTIAL = "partial"
    SEMANTIC = "semantic"


class SkillImportance(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MatchQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
