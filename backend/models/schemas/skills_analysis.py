"""Skill sub-analysis: which required skills the resume mentions."""

from pydantic import BaseModel


class SkillsAnalysis(BaseModel):
    score: int = 0  # 0-100
    matching_skills: list[str] = []
    missing_skills: list[str] = []
