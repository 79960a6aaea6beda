"""Required-skill matching with alias expansion.

A skill counts as present when the lower-cased resume contains the skill
itself or one of its known variations as a substring.
"""

import logging

from models.schemas.skills_analysis import SkillsAnalysis
from services.rating import round_half_up

logger = logging.getLogger(__name__)

# Score when the job lists no skills: nothing can be disproved
NO_SKILLS_REQUIRED_SCORE = 80

# ---------------------------------------------------------------------------
# Skill variations: trigger substring -> alternate spellings
# A skill picks up the variations of every trigger it contains, so
# "JavaScript (ES6)" still gets "js" and "Next.js" gets "nextjs"/"next".
# ---------------------------------------------------------------------------
SKILL_VARIATIONS: dict[str, tuple[str, ...]] = {
    # Programming languages
    "javascript": ("js", "node.js", "nodejs"),
    "typescript": ("ts",),
    "python": ("py",),
    # Frontend
    "react": ("reactjs", "react.js"),
    "angular": ("angularjs",),
    "vue": ("vuejs", "vue.js"),
    # Frameworks and data stores
    "next.js": ("nextjs", "next"),
    "express": ("expressjs", "express.js"),
    "mongodb": ("mongo",),
    "postgresql": ("postgres", "psql"),
    "mysql": ("sql",),
}


def get_skill_variations(skill: str) -> list[str]:
    """Return the skill followed by every alternate form it triggers."""
    variations = [skill]
    skill_lower = skill.lower()
    for trigger, aliases in SKILL_VARIATIONS.items():
        if trigger in skill_lower:
            variations.extend(aliases)
    return variations


def has_skill(resume_lower: str, skill: str) -> bool:
    return any(v.lower() in resume_lower for v in get_skill_variations(skill))


def analyze_skills(resume_lower: str, required_skills: list[str]) -> SkillsAnalysis:
    """Split required skills into matching and missing, keeping input order."""
    if not required_skills:
        return SkillsAnalysis(score=NO_SKILLS_REQUIRED_SCORE)

    matching: list[str] = []
    missing: list[str] = []
    for skill in required_skills:
        if has_skill(resume_lower, skill):
            matching.append(skill)
        else:
            missing.append(skill)

    score = round_half_up(len(matching) / len(required_skills) * 100)
    logger.debug("Skills matched %d/%d", len(matching), len(required_skills))
    return SkillsAnalysis(score=score, matching_skills=matching, missing_skills=missing)
