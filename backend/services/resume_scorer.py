"""Rule-based resume scorer.

Pipeline:
1. Skill match against required skills (with alias expansion)
2. Experience level match from years stated in the resume
3. Trait evidence from resume wording
4. Overlap with keywords repeated in the job description
5. Weighted overall score + recommendation
6. Summary and feedback text

Each step produces a 0-100 sub-score. Every step has a neutral default
for missing job data, so an incomplete job posting never fails evaluation.
"""

import logging

from pydantic import BaseModel, model_validator

from models.requests import JobRequirements
from models.responses import Recommendation, ResumeEvaluation, ScoreBreakdown
from models.schemas.experience_analysis import ExperienceAnalysis, ExperienceMatch
from models.schemas.job_match_analysis import JobMatchAnalysis
from models.schemas.skills_analysis import SkillsAnalysis
from models.schemas.traits_analysis import TraitsAnalysis
from services.experience_estimator import analyze_experience
from services.keyword_extractor import analyze_job_description_match
from services.rating import clamp_score
from services.skill_matcher import analyze_skills
from services.trait_matcher import analyze_traits

logger = logging.getLogger(__name__)

MINIMUM_SCORE_THRESHOLD = 60

# Hard rejection floors, checked before the threshold
MIN_OVERALL_SCORE = 40
MIN_SKILLS_SCORE = 30
MIN_UNDER_EXPERIENCE_SCORE = 40

FEEDBACK_TOP_KEYWORDS = 5


class ScoringWeights(BaseModel):
    skills: float = 0.4
    experience: float = 0.3
    traits: float = 0.2
    job_match: float = 0.1

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_weights(self) -> "ScoringWeights":
        values = (self.skills, self.experience, self.traits, self.job_match)
        if any(w < 0 for w in values):
            raise ValueError("weights must be non-negative")
        if abs(sum(values) - 1.0) > 1e-6:
            raise ValueError(f"weights must sum to 1.0, got {sum(values):.3f}")
        return self


DEFAULT_WEIGHTS = ScoringWeights()


class ResumeScorer:
    """Stateless scorer; one instance can serve any number of concurrent calls."""

    def __init__(self, weights: ScoringWeights = DEFAULT_WEIGHTS) -> None:
        self.weights = weights

    def evaluate(self, resume_text: str, job: JobRequirements) -> ResumeEvaluation:
        resume_lower = resume_text.lower()

        skills = analyze_skills(resume_lower, job.required_skills)
        experience = analyze_experience(resume_lower, job.experience_level)
        traits = analyze_traits(resume_lower, job.required_traits)
        job_match = analyze_job_description_match(resume_lower, job.job_description)

        breakdown = ScoreBreakdown(
            skills=skills.score,
            experience=experience.score,
            traits=traits.score,
            job_match=job_match.score,
        )
        score = calculate_overall_score(breakdown, self.weights)
        recommendation = generate_recommendation(score, skills, experience)
        logger.debug(
            "Resume scored %d (skills=%d experience=%d traits=%d job_match=%d) -> %s",
            score, skills.score, experience.score, traits.score, job_match.score,
            recommendation.value,
        )

        return ResumeEvaluation(
            score=score,
            summary=generate_summary(score, skills, experience),
            matching_skills=list(skills.matching_skills),
            missing_skills=list(skills.missing_skills),
            experience_match=experience.match,
            recommendation=recommendation,
            feedback=generate_feedback(score, skills, experience, traits, job_match),
            passes_threshold=score >= MINIMUM_SCORE_THRESHOLD,
            breakdown=breakdown,
            found_traits=list(traits.found_traits),
            relevant_keywords=list(job_match.relevant_keywords),
            estimated_years=experience.estimated_years,
        )


_default_scorer = ResumeScorer()


def evaluate(resume_text: str, job: JobRequirements) -> ResumeEvaluation:
    """Score resume_text against job with the default weights."""
    return _default_scorer.evaluate(resume_text, job)


def calculate_overall_score(breakdown: ScoreBreakdown, weights: ScoringWeights = DEFAULT_WEIGHTS) -> int:
    """Weighted sum of the four sub-scores. Returns 0-100."""
    raw = (
        weights.skills * breakdown.skills
        + weights.experience * breakdown.experience
        + weights.traits * breakdown.traits
        + weights.job_match * breakdown.job_match
    )
    return clamp_score(raw)


def generate_recommendation(
    score: int,
    skills: SkillsAnalysis,
    experience: ExperienceAnalysis,
) -> Recommendation:
    """First matching rule wins; hard rejections come before the threshold."""
    if score < MIN_OVERALL_SCORE:
        return Recommendation.REJECT
    if skills.score < MIN_SKILLS_SCORE:
        return Recommendation.REJECT
    if experience.match == ExperienceMatch.UNDER and experience.score < MIN_UNDER_EXPERIENCE_SCORE:
        return Recommendation.REJECT
    if score >= MINIMUM_SCORE_THRESHOLD:
        return Recommendation.PROCEED
    return Recommendation.REJECT


# ---------------------------------------------------------------------------
# Text builders
# ---------------------------------------------------------------------------

def _closing_sentence(score: int, passed: str, failed: str) -> str:
    return passed if score >= MINIMUM_SCORE_THRESHOLD else failed


def generate_summary(score: int, skills: SkillsAnalysis, experience: ExperienceAnalysis) -> str:
    n_matched = len(skills.matching_skills)
    n_total = n_matched + len(skills.missing_skills)
    parts = [
        "Resume evaluation complete.",
        f"Overall match: {score}/100.",
        f"Skills: {n_matched}/{n_total} required skills found.",
        f"Experience level: {experience.match.value}.",
        _closing_sentence(
            score,
            "Candidate qualifies for interview.",
            "Candidate does not meet minimum requirements.",
        ),
    ]
    return " ".join(parts)


def generate_feedback(
    score: int,
    skills: SkillsAnalysis,
    experience: ExperienceAnalysis,
    traits: TraitsAnalysis,
    job_match: JobMatchAnalysis,
) -> str:
    """Multi-line feedback for the hiring team, one block per factor."""
    blocks = [f"Overall Score: {score}/100"]

    skill_lines = [f"Skills Assessment ({skills.score}/100):"]
    if skills.matching_skills:
        skill_lines.append(f"✓ Found: {', '.join(skills.matching_skills)}")
    if skills.missing_skills:
        skill_lines.append(f"✗ Missing: {', '.join(skills.missing_skills)}")
    blocks.append("\n".join(skill_lines))

    blocks.append(
        f"Experience Assessment ({experience.score}/100):\n"
        f"Experience level appears to be {experience.match.value} the requirements."
    )

    if traits.found_traits:
        blocks.append(f"Demonstrated Qualities:\n✓ {', '.join(traits.found_traits)}")

    if job_match.relevant_keywords:
        top = job_match.relevant_keywords[:FEEDBACK_TOP_KEYWORDS]
        blocks.append(f"Job Description Match ({job_match.score}/100):\nRelevant keywords: {', '.join(top)}")

    blocks.append("Recommendation: " + _closing_sentence(
        score,
        "Proceed to interview - candidate meets basic requirements.",
        "Does not meet minimum threshold for interview.",
    ))
    return "\n\n".join(blocks)
