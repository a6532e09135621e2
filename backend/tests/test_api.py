import pytest
from fastapi.testclient import TestClient

from api import dependencies
from api.router import limiter
from main import app

RESUME = "Experienced Python developer with AWS and Docker skills"
JD = "Looking for a Python engineer with AWS experience"


@pytest.fixture
def client(collaborator, analysis_store, interview_store, coach):
    app.dependency_overrides[dependencies.get_collaborator] = lambda: collaborator
    app.dependency_overrides[dependencies.get_analysis_store] = lambda: analysis_store
    app.dependency_overrides[dependencies.get_interview_store] = lambda: interview_store
    app.dependency_overrides[dependencies.get_interview_coach] = lambda: coach
    limiter.enabled = False
    yield TestClient(app)
    limiter.enabled = True
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "gemini_configured" in data


def test_analyze_quick(client, analysis_store):
    response = client.post("/analyze/quick", json={"resume_text": RESUME, "job_description": JD})
    assert response.status_code == 200
    data = response.json()
    assert data["score"] > 50
    assert {"Python", "AWS"} <= set(data["matched_skills"])
    assert data["missing_skills"] == ["Kubernetes"]
    assert data["job_title"] == JD[:40]
    assert [r.id for r in analysis_store.list()] == [data["id"]]


def test_analyze_quick_empty_resume(client, collaborator, analysis_store):
    existing = client.post(
        "/analyze/quick", json={"resume_text": RESUME, "job_description": JD}
    ).json()
    collaborator.calls.clear()

    response = client.post(
        "/analyze/quick", json={"resume_text": "", "job_description": "Senior Engineer"}
    )
    assert response.status_code == 400
    assert collaborator.calls == []
    assert [r.id for r in analysis_store.list()] == [existing["id"]]


def test_analyze_quick_collaborator_failure(client, collaborator, analysis_store):
    collaborator.fail = True
    response = client.post("/analyze/quick", json={"resume_text": RESUME, "job_description": JD})
    assert response.status_code == 502
    assert "score" not in response.json()
    assert analysis_store.list() == []


def test_analyze_text_upload(client):
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.txt", RESUME.encode(), "text/plain")},
        data={"job_description": JD},
    )
    assert response.status_code == 200
    assert "Python" in response.json()["matched_skills"]


def test_analyze_rejects_unsupported_file(client):
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.docx", b"PK\x03\x04", "application/octet-stream")},
        data={"job_description": JD},
    )
    assert response.status_code == 400


def test_local_score_needs_no_ai(client, collaborator, analysis_store):
    response = client.post("/score", json={"resume_text": RESUME, "job_description": JD})
    assert response.status_code == 200
    data = response.json()
    assert data["resume_skills"] == ["Python", "AWS", "Docker"]
    assert data["matched_skills"] == ["Python", "AWS"]
    assert data["grouped_skills"][0] == {"category": "Programming", "skills": ["Python"]}
    assert collaborator.calls == []
    assert analysis_store.list() == []


def test_history_list_and_delete(client):
    first = client.post("/analyze/quick", json={"resume_text": RESUME, "job_description": JD}).json()
    second = client.post("/analyze/quick", json={"resume_text": RESUME, "job_description": JD}).json()

    history = client.get("/history").json()
    assert [r["id"] for r in history] == [second["id"], first["id"]]

    response = client.delete(f"/history/{first['id']}")
    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == [second["id"]]

    assert client.delete(f"/history/{first['id']}").status_code == 404


def test_ats_report(client):
    response = client.post("/ats", json={"resume_text": RESUME})
    assert response.status_code == 200
    assert response.json()["total"] == 72


def test_interview_flow(client, interview_store):
    assert len(client.get("/interview/questions").json()) == 6

    started = client.post(
        "/interview/sessions", json={"resume_text": RESUME, "job_description": JD}
    ).json()
    session_id = started["session_id"]

    question = client.post(f"/interview/sessions/{session_id}/question").json()["question"]
    assert question
    turn = client.post(
        f"/interview/sessions/{session_id}/answer", json={"answer": "I automated AWS deploys."}
    ).json()
    assert turn["feedback"]["score"] == 80

    finished = client.post(f"/interview/sessions/{session_id}/finish")
    assert finished.status_code == 200
    assert finished.json()["overall_score"] == 80

    history = client.get("/interview/history").json()
    assert [s["id"] for s in history] == [session_id]
    assert client.delete(f"/interview/history/{session_id}").json() == []
    assert interview_store.list() == []


def test_interview_finish_without_answers(client):
    started = client.post(
        "/interview/sessions", json={"resume_text": RESUME, "job_description": JD}
    ).json()
    response = client.post(f"/interview/sessions/{started['session_id']}/finish")
    assert response.status_code == 400


def test_interview_unknown_session(client):
    response = client.post("/interview/sessions/nope/answer", json={"answer": "hi"})
    assert response.status_code == 404
