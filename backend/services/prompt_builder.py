"""Prompt template for external-model resume scoring."""


def build_evaluation_prompt(
    resume_text: str,
    job_description: str,
    skills: list[str] | None = None,
    experience_level: str | None = None,
    job_title: str = "",
) -> str:
    """Ask the model for a 0-100 score with strengths and weaknesses as JSON."""
    title_line = f"- Position: {job_title}\n" if job_title else ""

    return f"""You are an expert HR professional and hiring manager.

Evaluate this candidate's resume against the job requirements below.

SCORING RUBRIC (follow strictly):
- 0-20:  No relevant match. Resume is for a completely different field.
- 20-40: Weak match. Some transferable skills but major gaps in core requirements.
- 40-60: Moderate match. Meets some key requirements but missing several important ones.
- 60-80: Strong match. Meets most requirements with minor gaps.
- 80-100: Exceptional match. Meets or exceeds nearly all requirements.

JOB INFORMATION:
{title_line}- Experience Level: {experience_level or "not specified"}
- Required Skills: {', '.join(skills or []) or "not specified"}

JOB DESCRIPTION:
---
{job_description or "not provided"}
---

RESUME:
---
{resume_text}
---

Be objective and evidence-based. Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "score": <integer 0-100>,
  "analysis": "<2-3 sentence analysis explaining the score>",
  "strengths": [<3-5 specific strengths with evidence from the resume>],
  "weaknesses": [<3-5 specific gaps with reference to the job requirements>]
}}"""
