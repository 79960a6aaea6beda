"""Experience sub-analysis: estimated years against the required level."""

from enum import Enum

from pydantic import BaseModel


class ExperienceMatch(str, Enum):
    UNDER = "under"
    MATCH = "match"
    OVER = "over"


class ExperienceAnalysis(BaseModel):
    """Structured output of the experience estimator.

    estimated_years is None when no level was required and the estimator
    was never run.
    """
    score: int = 0  # 0-100
    match: ExperienceMatch = ExperienceMatch.MATCH
    estimated_years: int | None = None
