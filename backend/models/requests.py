from enum import Enum

from pydantic import BaseModel, Field


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    PRINCIPAL = "principal"


class JobRequirements(BaseModel):
    """What a job asks of a candidate.

    Every field is optional: an empty skill list, a blank description or a
    missing experience level each fall back to a neutral sub-score rather
    than failing the evaluation.
    """

    required_skills: list[str] = Field(default_factory=list, description="Skills the resume should mention")
    required_traits: list[str] = Field(default_factory=list, description="Soft traits, e.g. leadership")
    # Free string so unknown levels can map to the mid range
    experience_level: str | None = Field(default=None, description="entry, mid, senior, lead or principal")
    job_description: str = Field(default="", description="Job description text")
    title: str = Field(default="", description="Job title, only used in the LLM prompt")

    model_config = {"frozen": True}
