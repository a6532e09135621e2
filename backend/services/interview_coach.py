"""Interview practice: questions, answer evaluation and session archiving.

A PracticeSession accumulates turns in memory while the candidate practises;
it becomes an immutable InterviewSession (with its overall score) only when
finished, at which point it is written to the interview history.

Active sessions are bounded: sessions idle longer than the TTL expire, and
starting a session beyond the cap evicts the least recently used one.
"""

import logging
import math
import time
from collections import OrderedDict
from collections.abc import Callable

from models.responses import InterviewSession, PracticeTurn
from services.ai_collaborator import AICollaborator
from services.errors import CollaboratorError, NotFoundError, ValidationError
from services.history_store import HistoryStore
from services.resume_analyzer import derive_job_title, new_id, now_millis, validate_inputs

logger = logging.getLogger(__name__)

COMMON_QUESTIONS: tuple[str, ...] = (
    "Tell me about yourself and your background.",
    "Why are you interested in this specific role and company?",
    "Describe a time you faced a significant technical challenge.",
    "What are your greatest professional strengths and weaknesses?",
    "How do you handle conflict within a team environment?",
    "Where do you see your career heading in the next 5 years?",
)

FALLBACK_QUESTION = "Could you elaborate on your relevant experience for this position?"
DEFAULT_JOB_TITLE = "Role Practice"
DEFAULT_MAX_ACTIVE = 100
DEFAULT_TTL_SECONDS = 2 * 60 * 60


class PracticeSession:
    def __init__(self, session_id: str, resume_text: str, job_description: str, job_title: str):
        self.id = session_id
        self.resume_text = resume_text
        self.job_description = job_description
        self.job_title = job_title
        self.current_question: str | None = None
        self.turns: list[PracticeTurn] = []
        self.last_active = 0.0

    def overall_score(self) -> int:
        if not self.turns:
            return 0
        mean = sum(turn.feedback.score for turn in self.turns) / len(self.turns)
        # Halves round up (72.5 -> 73), not to even
        return math.floor(mean + 0.5)


class InterviewCoach:
    """Keeps active practice sessions and archives finished ones."""

    def __init__(
        self,
        collaborator: AICollaborator,
        store: HistoryStore[InterviewSession],
        max_active: int = DEFAULT_MAX_ACTIVE,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._collaborator = collaborator
        self._store = store
        self._max_active = max_active
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        # Least recently used first
        self._active: OrderedDict[str, PracticeSession] = OrderedDict()

    @property
    def active_count(self) -> int:
        return len(self._active)

    def _expire_idle(self) -> None:
        cutoff = self._clock() - self._ttl_seconds
        while self._active:
            oldest = next(iter(self._active.values()))
            if oldest.last_active > cutoff:
                break
            del self._active[oldest.id]
            logger.info("Practice session %s expired after inactivity", oldest.id)

    def start(self, resume_text: str, job_description: str) -> PracticeSession:
        validate_inputs(resume_text, job_description)
        self._expire_idle()
        while len(self._active) >= self._max_active:
            evicted_id, _ = self._active.popitem(last=False)
            logger.warning("Evicted practice session %s: too many active sessions", evicted_id)

        session = PracticeSession(
            session_id=new_id(),
            resume_text=resume_text,
            job_description=job_description,
            job_title=derive_job_title(job_description).strip() or DEFAULT_JOB_TITLE,
        )
        session.last_active = self._clock()
        self._active[session.id] = session
        return session

    def get(self, session_id: str) -> PracticeSession:
        self._expire_idle()
        session = self._active.get(session_id)
        if session is None:
            raise NotFoundError(f"No active practice session {session_id!r}")
        session.last_active = self._clock()
        self._active.move_to_end(session_id)
        return session

    async def next_question(self, session_id: str, question: str | None = None) -> str:
        """Open the next question: the given preset, or one generated for the role."""
        session = self.get(session_id)
        if question and question.strip():
            session.current_question = question.strip()
            return session.current_question

        try:
            session.current_question = await self._collaborator.generate_question(
                session.resume_text, session.job_description
            )
        except CollaboratorError as e:
            logger.warning("Question generation failed, using fallback: %s", e)
            session.current_question = FALLBACK_QUESTION
        return session.current_question

    async def submit_answer(self, session_id: str, answer: str) -> PracticeTurn:
        session = self.get(session_id)
        if session.current_question is None:
            raise ValidationError("No open question to answer")
        if not answer or not answer.strip():
            raise ValidationError("Answer is empty")

        feedback = await self._collaborator.evaluate_answer(
            session.current_question, answer, session.job_description
        )
        turn = PracticeTurn(
            question=session.current_question,
            answer=answer,
            feedback=feedback,
            timestamp=now_millis(),
        )
        session.turns.append(turn)
        session.current_question = None
        return turn

    def finish(self, session_id: str) -> InterviewSession:
        session = self.get(session_id)
        if not session.turns:
            raise ValidationError("Answer at least one question before finishing")

        archived = InterviewSession(
            id=session.id,
            timestamp=now_millis(),
            job_title=session.job_title,
            turns=list(session.turns),
            overall_score=session.overall_score(),
        )
        self._store.append(archived)
        del self._active[session_id]
        logger.info(
            "Practice session %s finished: %d turns, overall=%d",
            archived.id, len(archived.turns), archived.overall_score,
        )
        return archived
