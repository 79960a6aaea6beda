"""Score rounding and the rating scales built on top of 0-100 scores."""

import math

from models.responses import Recommendation

# 0-100 score bands, checked highest first
STATUS_BANDS: list[tuple[int, str]] = [
    (90, "excellent"),
    (75, "good"),
    (60, "average"),
    (40, "poor"),
]

# Five-level hiring scale used when a resume evaluation is stored
_HIRING_SCALE: dict[Recommendation, str] = {
    Recommendation.PROCEED: "yes",
    Recommendation.REJECT: "no",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (72.5 -> 73, not 72)."""
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    return min(100, max(0, round_half_up(value)))


def status_from_score(score: float) -> str:
    """Map a 0-100 score to excellent / good / average / poor / very_poor."""
    for threshold, status in STATUS_BANDS:
        if score >= threshold:
            return status
    return "very_poor"


def map_recommendation(recommendation: Recommendation | str) -> str:
    """Translate proceed/reject into the strong_yes..strong_no hiring scale."""
    return _HIRING_SCALE[Recommendation(recommendation)]
