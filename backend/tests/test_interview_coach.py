"""Tests for interview practice sessions."""

import pytest

from models.responses import InterviewFeedback, PracticeTurn
from services.errors import CollaboratorError, NotFoundError, ValidationError
from services.interview_coach import (
    COMMON_QUESTIONS,
    DEFAULT_JOB_TITLE,
    FALLBACK_QUESTION,
    InterviewCoach,
    PracticeSession,
)

RESUME = "Python developer with AWS and Docker skills"
JD = "Cloud Engineer\nPython and AWS required"


def _turn(score: float) -> PracticeTurn:
    return PracticeTurn(
        question="Q", answer="A", feedback=InterviewFeedback(score=score), timestamp=1
    )


def test_overall_score_rounds_mean_half_up():
    session = PracticeSession("s", RESUME, JD, "Cloud Engineer")
    session.turns = [_turn(72), _turn(73)]
    assert session.overall_score() == 73


def test_overall_score_empty():
    assert PracticeSession("s", RESUME, JD, "x").overall_score() == 0


def test_start_derives_job_title(coach):
    session = coach.start(RESUME, JD)
    assert session.job_title == "Cloud Engineer"


def test_start_falls_back_to_default_title(coach):
    session = coach.start(RESUME, "\nPython and AWS required")
    assert session.job_title == DEFAULT_JOB_TITLE


def test_start_rejects_empty_inputs(coach):
    with pytest.raises(ValidationError):
        coach.start("", JD)


def test_unknown_session(coach):
    with pytest.raises(NotFoundError):
        coach.finish("missing")


@pytest.mark.asyncio
async def test_preset_question_skips_ai(coach, collaborator):
    session = coach.start(RESUME, JD)
    question = await coach.next_question(session.id, COMMON_QUESTIONS[0])
    assert question == COMMON_QUESTIONS[0]
    assert collaborator.calls == []


@pytest.mark.asyncio
async def test_generated_question(coach, collaborator):
    session = coach.start(RESUME, JD)
    assert await coach.next_question(session.id) == collaborator.question


@pytest.mark.asyncio
async def test_question_generation_failure_uses_fallback(failing_collaborator, interview_store):
    coach = InterviewCoach(failing_collaborator, interview_store)
    session = coach.start(RESUME, JD)
    assert await coach.next_question(session.id) == FALLBACK_QUESTION


@pytest.mark.asyncio
async def test_answer_requires_open_question(coach):
    session = coach.start(RESUME, JD)
    with pytest.raises(ValidationError):
        await coach.submit_answer(session.id, "An answer")


@pytest.mark.asyncio
async def test_empty_answer_rejected(coach):
    session = coach.start(RESUME, JD)
    await coach.next_question(session.id)
    with pytest.raises(ValidationError):
        await coach.submit_answer(session.id, "   ")


@pytest.mark.asyncio
async def test_full_session_is_archived(coach, interview_store):
    session = coach.start(RESUME, JD)

    await coach.next_question(session.id)
    first = await coach.submit_answer(session.id, "I used Terraform and ECS.")
    await coach.next_question(session.id, COMMON_QUESTIONS[2])
    second = await coach.submit_answer(session.id, "A flaky deploy pipeline.")

    assert first.feedback.score == 80
    assert second.question == COMMON_QUESTIONS[2]

    archived = coach.finish(session.id)
    assert archived.overall_score == 73  # mean of 80 and 65 is 72.5
    assert archived.job_title == "Cloud Engineer"
    assert [t.answer for t in archived.turns] == [
        "I used Terraform and ECS.",
        "A flaky deploy pipeline.",
    ]
    assert interview_store.list() == [archived]

    # Finished sessions are no longer active
    with pytest.raises(NotFoundError):
        coach.get(session.id)


@pytest.mark.asyncio
async def test_evaluation_failure_keeps_question_open(failing_collaborator, interview_store):
    coach = InterviewCoach(failing_collaborator, interview_store)
    session = coach.start(RESUME, JD)
    await coach.next_question(session.id, COMMON_QUESTIONS[1])

    with pytest.raises(CollaboratorError):
        await coach.submit_answer(session.id, "I like the team's mission.")

    assert session.turns == []
    assert session.current_question == COMMON_QUESTIONS[1]
    assert failing_collaborator.calls == ["evaluate_answer"]


class _Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_active_sessions_are_capped(collaborator, interview_store):
    coach = InterviewCoach(collaborator, interview_store, max_active=3)
    sessions = [coach.start(RESUME, JD) for _ in range(500)]

    assert coach.active_count == 3
    assert coach.get(sessions[-1].id) is sessions[-1]
    with pytest.raises(NotFoundError):
        coach.get(sessions[0].id)


def test_cap_evicts_least_recently_used(collaborator, interview_store):
    coach = InterviewCoach(collaborator, interview_store, max_active=2)
    first = coach.start(RESUME, JD)
    second = coach.start(RESUME, JD)
    coach.get(first.id)

    coach.start(RESUME, JD)

    assert coach.get(first.id) is first
    with pytest.raises(NotFoundError):
        coach.get(second.id)


def test_idle_sessions_expire(collaborator, interview_store):
    clock = _Clock()
    coach = InterviewCoach(collaborator, interview_store, ttl_seconds=60, clock=clock)
    stale = coach.start(RESUME, JD)
    clock.now += 30
    fresh = coach.start(RESUME, JD)

    clock.now += 45
    assert coach.get(fresh.id) is fresh
    with pytest.raises(NotFoundError):
        coach.get(stale.id)
    assert coach.active_count == 1


def test_finish_without_turns_rejected(coach, interview_store):
    session = coach.start(RESUME, JD)
    with pytest.raises(ValidationError):
        coach.finish(session.id)
    assert interview_store.list() == []
