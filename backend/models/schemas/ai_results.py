"""Structured output of the AI collaborator's resume-vs-JD analysis."""

from pydantic import BaseModel

from models.responses import SkillCategory


class AIAnalysisResult(BaseModel):
    """Qualitative judgments the local engine cannot derive.

    Every field is optional on the wire; missing ones default to empty.
    """
    summary: str = ""
    grouped_skills: list[SkillCategory] = []
    missing_skills: list[str] = []
    extra_skills: list[str] = []
    suggestions: list[str] = []
