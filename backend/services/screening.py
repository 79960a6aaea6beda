"""Screening with the external model first and the rule-based scorer as fallback.

The rule-based evaluation always runs: it is cheap, deterministic and
supplies the skill lists. The LLM score replaces it only when the call
succeeds.
"""

import logging

from config import settings
from models.requests import JobRequirements
from models.responses import ExternalEvaluation, Recommendation, ResumeEvaluation, ScreeningResult
from services import external_evaluator, llm_client, resume_scorer
from services.llm_client import ExternalEvaluationError

logger = logging.getLogger(__name__)


def _from_rule_based(evaluation: ResumeEvaluation, degraded: bool) -> ScreeningResult:
    return ScreeningResult(
        score=evaluation.score,
        recommendation=evaluation.recommendation,
        passes_threshold=evaluation.passes_threshold,
        summary=evaluation.summary,
        strengths=[f"Matched skill: {s}" for s in evaluation.matching_skills],
        weaknesses=[f"Missing skill: {s}" for s in evaluation.missing_skills],
        scoring_method="rule_based",
        degraded=degraded,
        rule_based=evaluation,
    )


def _from_external(external: ExternalEvaluation, evaluation: ResumeEvaluation) -> ScreeningResult:
    passes = external.score >= resume_scorer.MINIMUM_SCORE_THRESHOLD
    return ScreeningResult(
        score=external.score,
        recommendation=Recommendation.PROCEED if passes else Recommendation.REJECT,
        passes_threshold=passes,
        summary=external.analysis or evaluation.summary,
        strengths=list(external.strengths),
        weaknesses=list(external.weaknesses),
        scoring_method="llm",
        rule_based=evaluation,
        external=external,
    )


async def screen_resume(
    resume_text: str,
    job: JobRequirements,
    use_llm: bool | None = None,
) -> ScreeningResult:
    """Screen a resume, preferring the external model when enabled and configured."""
    evaluation = resume_scorer.evaluate(resume_text, job)

    if use_llm is None:
        use_llm = settings.use_llm
    if not use_llm:
        return _from_rule_based(evaluation, degraded=False)

    if not llm_client.llm_configured():
        logger.warning("LLM screening requested but no API key set, using rule-based score")
        return _from_rule_based(evaluation, degraded=True)

    try:
        external = await external_evaluator.evaluate_via_external_model(
            resume_text,
            job.job_description,
            job.required_skills,
            job.experience_level,
            job_title=job.title,
        )
    except ExternalEvaluationError as e:
        logger.warning("External scoring unavailable (%s), using rule-based score", e)
        return _from_rule_based(evaluation, degraded=True)

    return _from_external(external, evaluation)
