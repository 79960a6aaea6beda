import math
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from models.schemas.experience_analysis import ExperienceMatch


class Recommendation(str, Enum):
    PROCEED = "proceed"
    REJECT = "reject"


class ScoreBreakdown(BaseModel):
    skills: int = 0
    experience: int = 0
    traits: int = 0
    job_match: int = 0


class ResumeEvaluation(BaseModel):
    """Rule-based evaluation of one resume against one job."""

    score: int = Field(ge=0, le=100)
    summary: str = ""
    matching_skills: list[str] = []
    missing_skills: list[str] = []
    experience_match: ExperienceMatch = ExperienceMatch.MATCH
    recommendation: Recommendation = Recommendation.REJECT
    feedback: str = ""
    passes_threshold: bool = False
    # Scoring transparency fields
    breakdown: ScoreBreakdown = ScoreBreakdown()
    found_traits: list[str] = []
    relevant_keywords: list[str] = []
    estimated_years: int | None = None
    scoring_method: str = "rule_based"

    model_config = {"frozen": True}


class ExternalEvaluation(BaseModel):
    """Shape the external model must answer with.

    Validation is strict on types: a missing or non-numeric score, or
    strengths/weaknesses that are not lists of strings, reject the response.
    """

    score: int
    analysis: str = ""
    strengths: list[str]
    weaknesses: list[str]

    model_config = {"frozen": True, "strict": True}

    @field_validator("score", mode="before")
    @classmethod
    def _clamp_score(cls, value):
        # services.rating imports this module
        from services.rating import clamp_score

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("score must be a number")
        if not math.isfinite(value):
            raise ValueError("score must be finite")
        return clamp_score(value)


class ScreeningResult(BaseModel):
    """Outcome of screening with the LLM first and the rule-based scorer as fallback."""

    score: int = 0
    recommendation: Recommendation = Recommendation.REJECT
    passes_threshold: bool = False
    summary: str = ""
    strengths: list[str] = []
    weaknesses: list[str] = []
    scoring_method: str = "rule_based"  # "rule_based" | "llm"
    degraded: bool = False
    rule_based: ResumeEvaluation | None = None
    external: ExternalEvaluation | None = None
