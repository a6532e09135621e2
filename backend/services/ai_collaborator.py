"""Typed interface to the generative-AI service.

The matching pipeline and interview coach depend on the AICollaborator
protocol; GeminiCollaborator is the production implementation. Replies are
validated here so callers only ever see fully-populated models: missing,
null or malformed fields fall back to their defaults.
"""

import logging
from typing import Any, Protocol, TypeVar

import pydantic

from config import settings
from models.responses import ATSReport, InterviewFeedback
from models.schemas import AIAnalysisResult
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

DEFAULT_QUESTION = "Could you describe a technical challenge you recently solved?"

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


class AICollaborator(Protocol):
    async def analyze(self, resume_text: str, job_description: str) -> AIAnalysisResult: ...

    async def generate_question(self, resume_text: str, job_description: str) -> str: ...

    async def evaluate_answer(
        self, question: str, answer: str, job_description: str
    ) -> InterviewFeedback: ...

    async def ats_report(self, resume_text: str) -> ATSReport: ...


def _drop_nulls(value: Any) -> Any:
    """Remove None from dicts and lists at every depth."""
    if isinstance(value, dict):
        return {key: _drop_nulls(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [_drop_nulls(item) for item in value if item is not None]
    return value


def coerce_model(model_cls: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate data into model_cls, replacing bad or null fields with defaults."""
    cleaned = _drop_nulls(data)
    try:
        return model_cls.model_validate(cleaned)
    except pydantic.ValidationError as e:
        bad_fields = {err["loc"][0] for err in e.errors() if err["loc"]}
        logger.warning(
            "Dropping malformed %s fields: %s", model_cls.__name__, sorted(map(str, bad_fields))
        )
        return model_cls.model_validate(
            {key: value for key, value in cleaned.items() if key not in bad_fields}
        )


def _clamp_score(value: float) -> float:
    return min(100.0, max(0.0, value))


class GeminiCollaborator:
    def __init__(self, model: str | None = None, complex_model: str | None = None):
        self._model = model or settings.gemini_model
        self._complex_model = complex_model or settings.gemini_complex_model

    async def analyze(self, resume_text: str, job_description: str) -> AIAnalysisResult:
        data = await gemini_client.generate_json(
            prompt_builder.build_analysis_prompt(resume_text, job_description),
            response_schema=prompt_builder.ANALYSIS_SCHEMA,
            model=self._model,
        )
        return coerce_model(AIAnalysisResult, data)

    async def generate_question(self, resume_text: str, job_description: str) -> str:
        text = await gemini_client.generate_text(
            prompt_builder.build_question_prompt(resume_text, job_description),
            model=self._complex_model,
        )
        return text or DEFAULT_QUESTION

    async def evaluate_answer(
        self, question: str, answer: str, job_description: str
    ) -> InterviewFeedback:
        data = await gemini_client.generate_json(
            prompt_builder.build_evaluation_prompt(question, answer, job_description),
            response_schema=prompt_builder.EVALUATION_SCHEMA,
            model=self._complex_model,
        )
        feedback = coerce_model(InterviewFeedback, data)
        return feedback.model_copy(update={"score": _clamp_score(feedback.score)})

    async def ats_report(self, resume_text: str) -> ATSReport:
        data = await gemini_client.generate_json(
            prompt_builder.build_ats_prompt(resume_text),
            response_schema=prompt_builder.ATS_SCHEMA,
            model=self._model,
        )
        report = coerce_model(ATSReport, data)
        return report.model_copy(update={
            field: _clamp_score(getattr(report, field))
            for field in ("total", "formatting", "keywords", "readability")
        })
