"""Per-factor result contracts produced by the scoring sub-analyses."""

from models.schemas.experience_analysis import ExperienceAnalysis, ExperienceMatch
from models.schemas.job_match_analysis import JobMatchAnalysis
from models.schemas.skills_analysis import SkillsAnalysis
from models.schemas.traits_analysis import TraitsAnalysis

__all__ = [
    "SkillsAnalysis",
    "ExperienceAnalysis",
    "ExperienceMatch",
    "TraitsAnalysis",
    "JobMatchAnalysis",
]
