"""Years-of-experience estimation and level matching."""

import logging
import re

from models.requests import ExperienceLevel
from models.schemas.experience_analysis import ExperienceAnalysis, ExperienceMatch
from services.rating import round_half_up

logger = logging.getLogger(__name__)

# "5+ years of experience", "3 years experience", "Experience: 7+ years"
EXPERIENCE_PATTERNS: list[re.Pattern] = [
    re.compile(r"(\d+)\+?\s*years?\s*of\s*experience", re.IGNORECASE | re.ASCII),
    re.compile(r"(\d+)\+?\s*years?\s*experience", re.IGNORECASE | re.ASCII),
    re.compile(r"experience:\s*(\d+)\+?\s*years?", re.IGNORECASE | re.ASCII),
]

# Assumed when the resume never states a number of years
DEFAULT_YEARS = 3

# Score when the job does not ask for a level
NO_LEVEL_REQUIRED_SCORE = 70
IN_RANGE_SCORE = 90

# Inclusive (min, max) years per level
EXPERIENCE_LEVEL_RANGES: dict[ExperienceLevel, tuple[int, int]] = {
    ExperienceLevel.ENTRY: (0, 2),
    ExperienceLevel.MID: (2, 5),
    ExperienceLevel.SENIOR: (5, 15),
    ExperienceLevel.LEAD: (7, 20),
    ExperienceLevel.PRINCIPAL: (10, 25),
}


def extract_experience_indicators(text: str) -> list[str]:
    """Return every phrase in text that states a number of years of experience."""
    indicators: list[str] = []
    for pattern in EXPERIENCE_PATTERNS:
        indicators.extend(m.group(0) for m in pattern.finditer(text))
    return indicators


def estimate_years_of_experience(indicators: list[str]) -> int:
    """Take the largest year count claimed, or DEFAULT_YEARS if none was."""
    if not indicators:
        return DEFAULT_YEARS

    years = []
    for indicator in indicators:
        digits = re.search(r"\d+", indicator, re.ASCII)
        years.append(int(digits.group()) if digits else 0)
    return max(years + [0])


def level_range(level: str) -> tuple[int, int]:
    """Year range for a level name; unknown names get the mid range."""
    try:
        return EXPERIENCE_LEVEL_RANGES[ExperienceLevel(level.strip().lower())]
    except ValueError:
        logger.debug("Unknown experience level %r, using mid range", level)
        return EXPERIENCE_LEVEL_RANGES[ExperienceLevel.MID]


def analyze_experience(resume_lower: str, required_level: str | None) -> ExperienceAnalysis:
    """Compare estimated years against the range of the required level.

    A missing or blank level is neutral and skips estimation entirely.
    """
    if required_level is None or not required_level.strip():
        return ExperienceAnalysis(score=NO_LEVEL_REQUIRED_SCORE, match=ExperienceMatch.MATCH)

    years = estimate_years_of_experience(extract_experience_indicators(resume_lower))
    min_years, max_years = level_range(required_level)

    if years < min_years:
        match = ExperienceMatch.UNDER
        score = max(30, years / min_years * 70)
    elif years > max_years:
        match = ExperienceMatch.OVER
        score = max(60, 100 - (years - max_years) * 5)
    else:
        match = ExperienceMatch.MATCH
        score = IN_RANGE_SCORE

    return ExperienceAnalysis(score=round_half_up(score), match=match, estimated_years=years)
