"""Resume scoring delegated to an external LLM.

The call fails as a unit: provider errors, malformed JSON and responses
of the wrong shape all raise ExternalEvaluationError.
"""

import logging

from pydantic import ValidationError

from models.responses import ExternalEvaluation
from services import llm_client, prompt_builder
from services.llm_client import ExternalEvaluationError

logger = logging.getLogger(__name__)


def validate_external_response(data: dict) -> ExternalEvaluation:
    try:
        return ExternalEvaluation.model_validate(data)
    except ValidationError as e:
        logger.error("External model response failed validation: %s", e.errors())
        raise ExternalEvaluationError("External model response has the wrong shape") from e


async def evaluate_via_external_model(
    resume_text: str,
    job_description: str,
    skills: list[str],
    experience_level: str | None,
    job_title: str = "",
) -> ExternalEvaluation:
    prompt = prompt_builder.build_evaluation_prompt(
        resume_text,
        job_description,
        skills=skills,
        experience_level=experience_level,
        job_title=job_title,
    )
    data = await llm_client.generate_json(prompt)
    return validate_external_response(data)
