from fastapi.testclient import TestClient

from main import app


client = TestClient(app)


def test_root_and_health():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["service"] == "Garden Style Agent"

    h = client.get("/health")
    assert h.status_code == 200
    assert h.json()["status"] == "healthy"


def test_first_turn_returns_plants_question():
    r = client.post("/api/agent", json={"messages": []})
    assert r.status_code == 200
    data = r.json()
    assert data["done"] is False
    assert data["nextQuestion"].startswith("Q-plants:")
    assert "summary" not in data


def test_malformed_bodies_are_treated_as_empty():
    for kwargs in (
        {"json": {}},
        {"json": {"messages": "hello"}},
        {"json": ["not", "an", "object"]},
        {"content": b"not json", "headers": {"Content-Type": "application/json"}},
        {"content": b""},
    ):
        r = client.post("/api/agent", **kwargs)
        assert r.status_code == 200, kwargs
        assert r.json()["nextQuestion"].startswith("Q-plants:"), kwargs


def test_malformed_entries_are_skipped():
    r = client.post(
        "/api/agent",
        json={
            "messages": [
                {"role": "system", "content": "ignored"},
                42,
                {"role": "user"},
                {"role": "user", "content": "Zen garden with moss. That's all!"},
            ]
        },
    )
    assert r.status_code == 200
    data = r.json()
    assert data["done"] is True
    assert data["summary"]["styles"] == ["Japanese Zen"]


def test_done_response_shape():
    r = client.post(
        "/api/agent",
        json={"messages": [{"role": "user", "content": "enough"}]},
    )
    data = r.json()
    assert data["done"] is True
    assert "nextQuestion" not in data
    assert "narrative" not in data
    summary = data["summary"]
    assert summary["moodWords"] == ["Calm", "Welcoming"]
    assert summary["usagePlan"] == ["Relaxation and light entertaining"]
    assert summary["sunlight"] is None
    assert summary["maintenance"] is None
    assert summary["climate"] is None
    assert summary["notes"] == []


def test_narrative_is_attached_when_available(monkeypatch):
    from garden_agent import narrative

    monkeypatch.setattr(narrative, "describe_concept", lambda summary: "A calm, welcoming garden.")
    r = client.post("/api/agent", json={"messages": [{"role": "user", "content": "that is all"}]})
    assert r.json()["narrative"] == "A calm, welcoming garden."


def test_agent_failure_returns_500(monkeypatch):
    import garden_agent

    def _boom(_messages):
        raise RuntimeError("boom")

    monkeypatch.setattr(garden_agent, "run_agent", _boom)
    r = client.post("/api/agent", json={"messages": []})
    assert r.status_code == 500
    assert r.json()["detail"] == "boom"


def test_question_catalog():
    r = client.get("/api/agent/questions")
    assert r.status_code == 200
    data = r.json()
    assert [q["key"] for q in data["questions"]] == [
        "feels", "style", "plants", "use", "maintenance", "sun", "climate", "constraints",
    ]
    assert all(q["text"].startswith(f"Q-{q['key']}:") for q in data["questions"])
    assert "I dislike roses" in data["quick_replies"]
