"""Shared dependencies for API routes."""

from functools import lru_cache

from config import settings
from models.responses import AnalysisRecord, InterviewSession
from services.ai_collaborator import AICollaborator, GeminiCollaborator
from services.history_store import (
    ANALYSIS_KEY,
    INTERVIEW_KEY,
    HistoryBackend,
    HistoryStore,
    JsonFileBackend,
)
from services.interview_coach import InterviewCoach


@lru_cache
def get_history_backend() -> HistoryBackend:
    return JsonFileBackend(settings.history_dir)


@lru_cache
def get_analysis_store() -> HistoryStore[AnalysisRecord]:
    return HistoryStore(get_history_backend(), ANALYSIS_KEY, AnalysisRecord, settings.history_limit)


@lru_cache
def get_interview_store() -> HistoryStore[InterviewSession]:
    return HistoryStore(get_history_backend(), INTERVIEW_KEY, InterviewSession, settings.history_limit)


@lru_cache
def get_collaborator() -> AICollaborator:
    return GeminiCollaborator()


@lru_cache
def get_interview_coach() -> InterviewCoach:
    # Active practice sessions live on this single instance
    return InterviewCoach(
        get_collaborator(),
        get_interview_store(),
        max_active=settings.max_active_practice_sessions,
        ttl_seconds=settings.practice_session_ttl_minutes * 60,
    )
