from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import (
    get_analysis_store,
    get_collaborator,
    get_interview_coach,
    get_interview_store,
)
from config import settings
from models.requests import (
    AnswerRequest,
    ATSRequest,
    PracticeStartRequest,
    QuestionRequest,
    QuickAnalyzeRequest,
)
from models.responses import (
    AnalysisRecord,
    ATSReport,
    InterviewSession,
    LocalScoreResponse,
    PracticeStartResponse,
    PracticeTurn,
    QuestionResponse,
)
from services import pdf_parser, resume_analyzer
from services.ai_collaborator import AICollaborator
from services.errors import NotFoundError
from services.history_store import HistoryStore
from services.interview_coach import COMMON_QUESTIONS, InterviewCoach
from services.similarity import cosine_similarity
from services.skill_extractor import extract_skills, filter_matched_skills, group_skills

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.post("/analyze", response_model=AnalysisRecord)
@limiter.limit("10/minute")
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(...),
    collaborator: AICollaborator = Depends(get_collaborator),
    store: HistoryStore[AnalysisRecord] = Depends(get_analysis_store),
):
    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    resume_text = pdf_parser.extract_document_text(resume_file.filename or "", content)
    return await resume_analyzer.run_analysis(resume_text, job_description, collaborator, store)


@router.post("/analyze/quick", response_model=AnalysisRecord)
@limiter.limit("10/minute")
async def analyze_quick(
    request: Request,
    body: QuickAnalyzeRequest,
    collaborator: AICollaborator = Depends(get_collaborator),
    store: HistoryStore[AnalysisRecord] = Depends(get_analysis_store),
):
    return await resume_analyzer.run_analysis(
        body.resume_text, body.job_description, collaborator, store
    )


@router.post("/score", response_model=LocalScoreResponse)
async def score(body: QuickAnalyzeRequest):
    """Local-only score and skills; no AI call, nothing saved."""
    resume_analyzer.validate_inputs(body.resume_text, body.job_description)
    resume_skills = extract_skills(body.resume_text)
    return LocalScoreResponse(
        score=cosine_similarity(body.resume_text, body.job_description),
        resume_skills=resume_skills,
        matched_skills=filter_matched_skills(resume_skills, body.job_description),
        grouped_skills=group_skills(resume_skills),
    )


@router.get("/history", response_model=list[AnalysisRecord])
async def list_history(store: HistoryStore[AnalysisRecord] = Depends(get_analysis_store)):
    return store.list()


@router.delete("/history/{record_id}", response_model=list[AnalysisRecord])
async def delete_history(
    record_id: str,
    store: HistoryStore[AnalysisRecord] = Depends(get_analysis_store),
):
    if not any(record.id == record_id for record in store.list()):
        raise NotFoundError(f"No analysis {record_id!r} in history")
    return store.remove(record_id)


@router.post("/ats", response_model=ATSReport)
@limiter.limit("10/minute")
async def ats_report(
    request: Request,
    body: ATSRequest,
    collaborator: AICollaborator = Depends(get_collaborator),
):
    return await resume_analyzer.run_ats_report(body.resume_text, collaborator)


@router.get("/interview/questions", response_model=list[str])
async def preset_questions():
    return list(COMMON_QUESTIONS)


@router.post("/interview/sessions", response_model=PracticeStartResponse)
async def start_practice(
    body: PracticeStartRequest,
    coach: InterviewCoach = Depends(get_interview_coach),
):
    session = coach.start(body.resume_text, body.job_description)
    return PracticeStartResponse(session_id=session.id, job_title=session.job_title)


@router.post("/interview/sessions/{session_id}/question", response_model=QuestionResponse)
@limiter.limit("20/minute")
async def next_question(
    request: Request,
    session_id: str,
    body: QuestionRequest | None = None,
    coach: InterviewCoach = Depends(get_interview_coach),
):
    question = await coach.next_question(session_id, body.question if body else None)
    return QuestionResponse(question=question)


@router.post("/interview/sessions/{session_id}/answer", response_model=PracticeTurn)
@limiter.limit("20/minute")
async def submit_answer(
    request: Request,
    session_id: str,
    body: AnswerRequest,
    coach: InterviewCoach = Depends(get_interview_coach),
):
    return await coach.submit_answer(session_id, body.answer)


@router.post("/interview/sessions/{session_id}/finish", response_model=InterviewSession)
async def finish_practice(
    session_id: str,
    coach: InterviewCoach = Depends(get_interview_coach),
):
    return coach.finish(session_id)


@router.get("/interview/history", response_model=list[InterviewSession])
async def list_interview_history(
    store: HistoryStore[InterviewSession] = Depends(get_interview_store),
):
    return store.list()


@router.delete("/interview/history/{session_id}", response_model=list[InterviewSession])
async def delete_interview_history(
    session_id: str,
    store: HistoryStore[InterviewSession] = Depends(get_interview_store),
):
    if not any(session.id == session_id for session in store.list()):
        raise NotFoundError(f"No practice session {session_id!r} in history")
    return store.remove(session_id)
