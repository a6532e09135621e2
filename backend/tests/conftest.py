"""Shared test fixtures: a scripted AI collaborator and in-memory history."""

import pytest

from models.responses import (
    AnalysisRecord,
    ATSReport,
    InterviewFeedback,
    InterviewSession,
    SkillCategory,
)
from models.schemas import AIAnalysisResult
from services.errors import CollaboratorError
from services.history_store import (
    ANALYSIS_KEY,
    INTERVIEW_KEY,
    HistoryStore,
    MemoryBackend,
)
from services.interview_coach import InterviewCoach


class FakeCollaborator:
    """Returns canned results; set ``fail`` to make every call raise."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: list[str] = []
        self.analysis = AIAnalysisResult(
            summary="Strong backend profile with cloud exposure.",
            grouped_skills=[SkillCategory(category="Programming", skills=["Python"])],
            missing_skills=["Kubernetes"],
            extra_skills=["Docker"],
            suggestions=["Quantify the impact of your AWS work."],
        )
        self.question = "How did you design your last AWS deployment?"
        self.scores = [80, 65]

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise CollaboratorError("service unavailable")

    async def analyze(self, resume_text, job_description):
        self._record("analyze")
        return self.analysis

    async def generate_question(self, resume_text, job_description):
        self._record("generate_question")
        return self.question

    async def evaluate_answer(self, question, answer, job_description):
        self._record("evaluate_answer")
        score = self.scores[(self.calls.count("evaluate_answer") - 1) % len(self.scores)]
        return InterviewFeedback(score=score, feedback="Clear and specific.", strengths=["AWS"])

    async def ats_report(self, resume_text):
        self._record("ats_report")
        return ATSReport(
            total=72, formatting=80, keywords=60, readability=75,
            findings=["Dates are consistent"], improvements=["Add a skills section"],
        )


@pytest.fixture
def collaborator():
    return FakeCollaborator()


@pytest.fixture
def failing_collaborator():
    return FakeCollaborator(fail=True)


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def analysis_store(backend):
    return HistoryStore(backend, ANALYSIS_KEY, AnalysisRecord)


@pytest.fixture
def interview_store(backend):
    return HistoryStore(backend, INTERVIEW_KEY, InterviewSession)


@pytest.fixture
def coach(collaborator, interview_store):
    return InterviewCoach(collaborator, interview_store)
