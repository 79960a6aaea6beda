"""Trait sub-analysis: soft traits evidenced by resume wording."""

from pydantic import BaseModel


class TraitsAnalysis(BaseModel):
    score: int = 0  # 0-100
    found_traits: list[str] = []
