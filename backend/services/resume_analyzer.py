"""Matching pipeline: local scoring + skill extraction + AI gap analysis.

Pipeline:
1. Input validation (before any computation or remote call)
2. Term-frequency cosine similarity (local score)
3. Taxonomy skill extraction from the resume, filtered against the JD
4. Gemini qualitative analysis (missing/extra/grouped skills, suggestions)
5. Combine into an AnalysisRecord and persist it to history

A collaborator failure aborts the whole analysis: no partial record is
returned or stored.
"""

import logging
import secrets
import time

from models.responses import AnalysisRecord, ATSReport
from models.schemas import AIAnalysisResult
from services.ai_collaborator import AICollaborator
from services.errors import ValidationError
from services.history_store import HistoryStore
from services.similarity import cosine_similarity
from services.skill_extractor import extract_skills, filter_matched_skills

logger = logging.getLogger(__name__)

JOB_TITLE_MAX_CHARS = 40


def new_id() -> str:
    return secrets.token_hex(6)


def now_millis() -> int:
    return int(time.time() * 1000)


def validate_inputs(resume_text: str, job_description: str) -> None:
    if not resume_text or not resume_text.strip():
        raise ValidationError("Resume text is empty")
    if not job_description or not job_description.strip():
        raise ValidationError("Job description is empty")


def derive_job_title(job_description: str) -> str:
    """First line of the job description, cut to 40 characters."""
    return job_description.split("\n")[0][:JOB_TITLE_MAX_CHARS]


def analyze(
    resume_text: str,
    job_description: str,
    ai_result: AIAnalysisResult,
) -> AnalysisRecord:
    """Merge the local score and skills with the collaborator's judgments."""
    validate_inputs(resume_text, job_description)

    score = cosine_similarity(resume_text, job_description)
    matched_skills = filter_matched_skills(extract_skills(resume_text), job_description)

    return AnalysisRecord(
        id=new_id(),
        timestamp=now_millis(),
        score=score,
        matched_skills=matched_skills,
        missing_skills=ai_result.missing_skills,
        extra_skills=ai_result.extra_skills,
        grouped_skills=ai_result.grouped_skills,
        suggestions=ai_result.suggestions,
        summary=ai_result.summary,
        job_title=derive_job_title(job_description),
    )


async def run_analysis(
    resume_text: str,
    job_description: str,
    collaborator: AICollaborator,
    store: HistoryStore[AnalysisRecord],
) -> AnalysisRecord:
    """Validate, await the collaborator, build the record and save it."""
    validate_inputs(resume_text, job_description)

    ai_result = await collaborator.analyze(resume_text, job_description)
    record = analyze(resume_text, job_description, ai_result)
    store.append(record)
    logger.info(
        "Analysis %s complete: score=%.1f, matched=%d skills",
        record.id, record.score, len(record.matched_skills),
    )
    return record


async def run_ats_report(resume_text: str, collaborator: AICollaborator) -> ATSReport:
    if not resume_text or not resume_text.strip():
        raise ValidationError("Resume text is empty")
    return await collaborator.ats_report(resume_text)
