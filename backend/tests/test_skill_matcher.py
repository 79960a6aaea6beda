"""Tests for required-skill matching and the variation table."""

import pytest

from services.skill_matcher import (
    NO_SKILLS_REQUIRED_SCORE,
    SKILL_VARIATIONS,
    analyze_skills,
    get_skill_variations,
    has_skill,
)


def test_variations_start_with_skill():
    assert get_skill_variations("JavaScript") == ["JavaScript", "js", "node.js", "nodejs"]


def test_variations_unknown_skill():
    assert get_skill_variations("Haskell") == ["Haskell"]


def test_variations_trigger_is_substring():
    assert "ts" in get_skill_variations("TypeScript 5")
    assert get_skill_variations("Next.js") == ["Next.js", "nextjs", "next"]


@pytest.mark.parametrize(
    "trigger, aliases",
    [
        ("javascript", ("js", "node.js", "nodejs")),
        ("typescript", ("ts",)),
        ("python", ("py",)),
        ("react", ("reactjs", "react.js")),
        ("angular", ("angularjs",)),
        ("vue", ("vuejs", "vue.js")),
        ("next.js", ("nextjs", "next")),
        ("express", ("expressjs", "express.js")),
        ("mongodb", ("mongo",)),
        ("postgresql", ("postgres", "psql")),
        ("mysql", ("sql",)),
    ],
)
def test_variation_table_entries(trigger, aliases):
    assert SKILL_VARIATIONS[trigger] == aliases


@pytest.mark.parametrize(
    "skill, resume",
    [
        ("JavaScript", "wrote js daily"),
        ("JavaScript", "backend in nodejs"),
        ("TypeScript", "strict ts codebases"),
        ("Python", "py scripts"),
        ("React", "reactjs hooks"),
        ("Angular", "migrated angularjs apps"),
        ("Vue", "vue.js components"),
        ("Next.js", "nextjs app router"),
        ("Express", "expressjs middleware"),
        ("MongoDB", "mongo replica sets"),
        ("PostgreSQL", "tuned psql queries"),
        ("MySQL", "sql reporting"),
    ],
)
def test_variation_matches_resume(skill, resume):
    assert has_skill(resume, skill)


def test_skill_literal_is_case_insensitive():
    assert has_skill("kubernetes operators", "Kubernetes")


def test_short_aliases_match_as_substrings():
    # Plain substring search: "ts" is found inside "results"
    assert has_skill("delivered results", "TypeScript")


def test_analyze_skills_empty_requirements():
    result = analyze_skills("anything", [])
    assert result.score == NO_SKILLS_REQUIRED_SCORE == 80
    assert result.matching_skills == []
    assert result.missing_skills == []


def test_analyze_skills_partial_keeps_order_and_spelling():
    result = analyze_skills("go and docker", ["Kubernetes", "Docker", "Go"])
    assert result.matching_skills == ["Docker", "Go"]
    assert result.missing_skills == ["Kubernetes"]
    assert result.score == 67


def test_analyze_skills_none_matched():
    result = analyze_skills("", ["Python", "Rust"])
    assert result.score == 0
    assert result.missing_skills == ["Python", "Rust"]
