"""Shared test configuration, markers and fixtures."""

import pytest

from config import settings
from models.requests import JobRequirements
from services import llm_client


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "llm: exercises the external-model path (client is mocked)"
    )


@pytest.fixture(autouse=True)
def _isolate_llm(monkeypatch):
    """Never reach a real provider: no key, no cached client, LLM off."""
    monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(settings, "use_llm", False)
    llm_client.reset_client()
    yield
    llm_client.reset_client()


@pytest.fixture
def fullstack_job() -> JobRequirements:
    return JobRequirements(
        required_skills=["React", "Node.js", "PostgreSQL", "Docker"],
        required_traits=["leadership", "communication"],
        experience_level="senior",
        job_description=(
            "We are hiring a senior full-stack engineer. You will build React "
            "frontends and Node.js services backed by PostgreSQL. Our services "
            "run in Docker. Frontends and services are reviewed by the whole "
            "group; mentoring engineers is part of the job."
        ),
        title="Senior Full-Stack Engineer",
    )


_SAMPLE_RESUME = """Jane Smith
Senior Software Engineer with 8+ years of experience.

Experience
- Led a team of 6 engineers building React frontends and NodeJS services
- Migrated reporting from MySQL to Postgres, cutting query time by 40%
- Presented architecture reviews and documented service contracts
- Containerized all services with Docker

Skills
JavaScript, TypeScript, React, Node.js, PostgreSQL, Docker, AWS
"""


@pytest.fixture
def sample_resume() -> str:
    return _SAMPLE_RESUME
