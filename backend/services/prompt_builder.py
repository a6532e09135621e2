"""All prompt templates for Gemini API calls."""

SKILL_CATEGORIES = ("Programming", "Frameworks", "Databases", "Tools", "AI/ML")


def build_analysis_prompt(resume_text: str, job_description: str) -> str:
    """Gap analysis: grouped skills, missing/extra skills, summary, suggestions."""
    categories = ", ".join(SKILL_CATEGORIES)
    return f"""Analyze the following resume against the job description.

1. Extract skills from the resume and group them into these categories: {categories}.
2. Identify skills present in the job description but missing from the resume.
3. Identify extra skills in the resume that the job description does not require.
4. Provide a 2-sentence summary of the candidate's fitness for the role.
5. Provide 3 specific, actionable suggestions for improving the resume for this role.

RESUME:
---
{resume_text}
---

JOB DESCRIPTION:
---
{job_description}
---

Respond with ONLY valid JSON in this exact structure:
{{
  "summary": "<2-sentence fitness summary>",
  "grouped_skills": [{{"category": "<category>", "skills": [<skills>]}}],
  "missing_skills": [<job description skills absent from the resume>],
  "extra_skills": [<resume skills the job does not require>],
  "suggestions": [<3 actionable improvements>]
}}"""


def build_ats_prompt(resume_text: str) -> str:
    """ATS compatibility audit of a resume on its own."""
    return f"""Perform a deep ATS (Applicant Tracking System) audit on this resume.

Check for:
- Formatting (is it parseable?)
- Keyword density (generic business/tech terms)
- Readability (structure, dates, bullet points)

RESUME:
---
{resume_text}
---

Respond with ONLY valid JSON in this exact structure:
{{
  "total": <number 0-100>,
  "formatting": <number 0-100>,
  "keywords": <number 0-100>,
  "readability": <number 0-100>,
  "findings": [<observations>],
  "improvements": [<concrete fixes>]
}}"""


def build_question_prompt(resume_text: str, job_description: str) -> str:
    return f"""Based on the following resume and job description, generate one specific and challenging interview question for this candidate.
Reply with the question only.

RESUME:
---
{resume_text}
---

JOB DESCRIPTION:
---
{job_description}
---"""


def build_evaluation_prompt(question: str, answer: str, job_description: str) -> str:
    return f"""Evaluate the candidate's response to the interview question within the context of the role requirements.

QUESTION: {question}

ANSWER:
---
{answer}
---

JOB DESCRIPTION:
---
{job_description}
---

Respond with ONLY valid JSON in this exact structure:
{{
  "score": <percentage score 0-100>,
  "feedback": "<detailed constructive criticism>",
  "strengths": [<specific skills demonstrated>]
}}"""


# Response schemas passed to Gemini alongside the prompts above
_STRING_LIST = {"type": "ARRAY", "items": {"type": "STRING"}}

ANALYSIS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING"},
        "grouped_skills": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {"category": {"type": "STRING"}, "skills": _STRING_LIST},
            },
        },
        "missing_skills": _STRING_LIST,
        "extra_skills": _STRING_LIST,
        "suggestions": _STRING_LIST,
    },
    "required": ["summary", "grouped_skills", "missing_skills", "extra_skills", "suggestions"],
}

EVALUATION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "score": {"type": "NUMBER", "description": "A percentage score from 0 to 100"},
        "feedback": {"type": "STRING", "description": "Detailed constructive criticism"},
        "strengths": {**_STRING_LIST, "description": "Specific skills demonstrated"},
    },
    "required": ["score", "feedback", "strengths"],
}

ATS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "total": {"type": "NUMBER"},
        "formatting": {"type": "NUMBER"},
        "keywords": {"type": "NUMBER"},
        "readability": {"type": "NUMBER"},
        "findings": _STRING_LIST,
        "improvements": _STRING_LIST,
    },
    "required": ["total", "formatting", "keywords", "readability", "findings", "improvements"],
}
