"""Pydantic contracts for data crossing the AI collaborator boundary."""

from models.schemas.ai_results import AIAnalysisResult

__all__ = [
    "AIAnalysisResult",
]
