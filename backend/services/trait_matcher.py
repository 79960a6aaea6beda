"""Soft-trait detection from resume wording."""

import logging

from models.schemas.traits_analysis import TraitsAnalysis
from services.rating import round_half_up

logger = logging.getLogger(__name__)

NO_TRAITS_REQUIRED_SCORE = 75

# Words that count as evidence for each trait (substring match)
TRAIT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "leadership": ("led", "lead", "managed", "supervised", "coordinated", "directed", "mentored"),
    "teamwork": ("team", "collaborated", "cooperation", "worked with", "cross-functional"),
    "communication": ("presented", "communicated", "wrote", "documented", "explained", "training"),
    "problem-solving": ("solved", "resolved", "troubleshooting", "debugging", "analyzed", "optimized"),
    "creativity": ("created", "designed", "innovative", "developed", "built", "invented"),
    "adaptability": ("adapted", "flexible", "changed", "learned", "transitioned", "diverse"),
    "attention-to-detail": ("accurate", "precise", "thorough", "detailed", "quality", "testing"),
    "time-management": ("deadline", "scheduled", "prioritized", "organized", "efficient", "timely"),
}


def get_trait_keywords(trait: str) -> tuple[str, ...]:
    """Evidence words for a trait; an unknown trait is its own keyword."""
    trait_lower = trait.lower()
    return TRAIT_KEYWORDS.get(trait_lower, (trait_lower,))


def analyze_traits(resume_lower: str, required_traits: list[str]) -> TraitsAnalysis:
    if not required_traits:
        return TraitsAnalysis(score=NO_TRAITS_REQUIRED_SCORE)

    found = [
        trait for trait in required_traits
        if any(keyword in resume_lower for keyword in get_trait_keywords(trait))
    ]
    score = round_half_up(len(found) / len(required_traits) * 100)
    logger.debug("Traits found %d/%d", len(found), len(required_traits))
    return TraitsAnalysis(score=score, found_traits=found)
