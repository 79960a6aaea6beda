"""Score a resume file against a job's requirements.

Usage:
    python scripts/evaluate_resume.py resume.pdf --job job.json
    python scripts/evaluate_resume.py resume.txt --skills Python React --level mid
    python scripts/evaluate_resume.py resume.docx --job job.json --llm

The job JSON holds any of: required_skills, required_traits,
experience_level, job_description, title.

Exit codes: 0 passes the threshold, 2 does not, 1 on unreadable input.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

# Add backend to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from models.requests import JobRequirements  # noqa: E402
from services import document_parser, screening  # noqa: E402
from services.document_parser import DocumentParseError  # noqa: E402

logger = logging.getLogger(__name__)


def load_job(args: argparse.Namespace) -> JobRequirements:
    """Build the job from --job, with the other flags taking precedence."""
    fields: dict = {}
    if args.job:
        with open(args.job, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            # Let pydantic report the wrong top-level type
            return JobRequirements.model_validate(data)
        fields.update(data)
    if args.skills:
        fields["required_skills"] = args.skills
    if args.traits:
        fields["required_traits"] = args.traits
    if args.level:
        fields["experience_level"] = args.level
    if args.description:
        fields["job_description"] = args.description
    return JobRequirements.model_validate(fields)


async def run(args: argparse.Namespace) -> int:
    resume_path = Path(args.resume)
    try:
        resume_text = document_parser.extract_text(resume_path.read_bytes(), resume_path.name)
    except (OSError, DocumentParseError) as e:
        logger.error("Could not read resume %s: %s", resume_path, e)
        return 1

    if not resume_text:
        logger.warning("No text could be extracted from %s", resume_path)

    try:
        job = load_job(args)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Could not load job requirements %s: %s", args.job, e)
        return 1

    result = await screening.screen_resume(resume_text, job, use_llm=args.llm)
    print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return 0 if result.passes_threshold else 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate a resume against job requirements")
    parser.add_argument("resume", help="Resume file (.pdf, .docx or .txt)")
    parser.add_argument("--job", help="JSON file with job requirements")
    parser.add_argument("--skills", nargs="+", help="Required skills")
    parser.add_argument("--traits", nargs="+", help="Required traits")
    parser.add_argument("--level", help="Experience level: entry, mid, senior, lead, principal")
    parser.add_argument("--description", help="Job description text")
    parser.add_argument("--llm", action="store_true", default=None, help="Score with the external model first")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
