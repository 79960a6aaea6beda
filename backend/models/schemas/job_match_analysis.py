"""Job-description sub-analysis: overlap of repeated JD keywords with the resume."""

from pydantic import BaseModel


class JobMatchAnalysis(BaseModel):
    score: int = 0  # 0-100
    keywords: list[str] = []  # extracted from the JD
    relevant_keywords: list[str] = []  # subset also present in the resume
