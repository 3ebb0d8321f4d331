import pytest

from models.schemas.enums import MatchQuality
from services.quality import classify_quality


@pytest.mark.parametrize("score,expected", [
    (100, MatchQuality.EXCELLENT),
    (80, MatchQuality.EXCELLENT),
    (79, MatchQuality.GOOD),
    (60, MatchQuality.GOOD),
    (59, MatchQuality.FAIR),
    (40, MatchQuality.FAIR),
    (39, MatchQuality.POOR),
    (0, MatchQuality.POOR),
])
def test_classify_quality_bands(score, expected):
    assert classify_quality(score) == expected


def test_labels_serialize_as_plain_strings():
    assert classify_quality(85).value == "excellent"
    assert classify_quality(10) == "poor"
