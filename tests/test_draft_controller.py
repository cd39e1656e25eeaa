import pytest
from fastapi.testclient import TestClient

from controller.draft_controller import get_autosave_quiet_period, get_draft_store, get_session_auto_save
from main import app


@pytest.fixture
def client(store):
    app.dependency_overrides[get_draft_store] = lambda: store
    app.dependency_overrides[get_session_auto_save] = lambda: True
    app.dependency_overrides[get_autosave_quiet_period] = lambda: 0.2
    yield TestClient(app)
    app.dependency_overrides.clear()


def draft_body(**changes):
    body = {
        "keywords": {"primary": ["seo course"], "secondary": [], "semantic": [], "lsi": []},
        "meta_tags": {"title": "Best SEO Course", "description": "", "slug": "best-seo-course"},
        "headings": {"h1": "SEO", "h2s": ["Why SEO"], "h3s": [{"h2Index": 0, "text": "Basics"}]},
        "short_intro": "",
        "content": "",
        "faq_content": [],
    }
    body.update(changes)
    return body


def test_put_then_get_draft(client, store):
    r = client.put("/api/drafts/user-1", json={"user_id": "user-1", **draft_body()})
    assert r.status_code == 200
    assert r.json()["created"] is True

    r = client.put("/api/drafts/user-1", json={"user_id": "user-1", **draft_body(content="Body")})
    assert r.json()["created"] is False
    assert r.json()["draft_id"] == 1

    r = client.get("/api/drafts/user-1")
    draft = r.json()["draft"]
    assert draft["content"] == "Body"
    assert draft["headings"]["h3s"] == [{"h2_index": 0, "text": "Basics"}]


def test_put_rejects_other_users_draft(client):
    r = client.put("/api/drafts/user-1", json={"user_id": "user-2", **draft_body()})
    assert r.status_code == 400


def test_get_missing_draft(client):
    r = client.get("/api/drafts/nobody")
    assert r.status_code == 200
    assert r.json() == {"message": "No draft found", "draft": None}


def test_delete_draft(client, store):
    client.put("/api/drafts/user-1", json={"user_id": "user-1", **draft_body()})

    assert client.delete("/api/drafts/user-1").json()["deleted"] is True
    assert client.delete("/api/drafts/user-1").json()["deleted"] is False


def test_store_failure_is_a_500(client, store):
    store.fail_next = 1
    r = client.put("/api/drafts/user-1", json={"user_id": "user-1", **draft_body()})
    assert r.status_code == 500
    assert "connection lost" in r.json()["detail"]


def test_autosave_session_saves_latest_edit(client, store):
    with client.websocket_connect("/api/drafts/user-1/autosave") as ws:
        assert ws.receive_json() == {"event": "session", "auto_save_enabled": True}
        ws.send_json({"action": "update", "draft": draft_body(content="first")})
        ws.send_json({"action": "update", "draft": draft_body(content="second")})

        event = ws.receive_json()

    assert event == {"event": "autosave", "status": "inserted", "draft_id": 1, "error": None}
    assert len(store.calls) == 1
    assert store.calls[0][0] == "user-1"
    assert store.calls[0][1]["content"] == "second"


def test_autosave_flush_and_unchanged(client, store):
    app.dependency_overrides[get_autosave_quiet_period] = lambda: 30.0
    with client.websocket_connect("/api/drafts/user-1/autosave") as ws:
        ws.receive_json()
        ws.send_json({"action": "update", "draft": draft_body()})
        ws.send_json({"action": "flush"})
        assert ws.receive_json()["status"] == "inserted"

        ws.send_json({"action": "update", "draft": draft_body()})
        ws.send_json({"action": "flush"})
        assert ws.receive_json()["status"] == "unchanged"

    assert len(store.calls) == 1


def test_autosave_reports_store_errors(client, store):
    store.fail_next = 1
    with client.websocket_connect("/api/drafts/user-1/autosave") as ws:
        ws.receive_json()
        ws.send_json({"action": "update", "draft": draft_body()})
        event = ws.receive_json()

    assert event["status"] == "error"
    assert event["error"] == "connection lost"
    assert store.calls == []


def test_autosave_rejects_invalid_draft(client, store):
    with client.websocket_connect("/api/drafts/user-1/autosave") as ws:
        ws.receive_json()
        ws.send_json({"action": "update", "draft": {"headings": {"h3s": [{"text": "no index"}]}}})
        event = ws.receive_json()

    assert event["event"] == "error"
    assert store.calls == []


def test_autosave_survives_non_json_frames(client, store):
    app.dependency_overrides[get_autosave_quiet_period] = lambda: 30.0
    with client.websocket_connect("/api/drafts/user-1/autosave") as ws:
        ws.receive_json()
        ws.send_text("not json")
        assert ws.receive_json()["event"] == "error"
        ws.send_bytes(b"\x00\x01")
        assert ws.receive_json()["event"] == "error"
        ws.send_text("[1, 2]")
        assert ws.receive_json()["event"] == "error"

        ws.send_json({"action": "update", "draft": draft_body()})
        ws.send_json({"action": "flush"})
        event = ws.receive_json()

    assert event["status"] == "inserted"
    assert len(store.calls) == 1


def test_closing_session_drops_pending_save(client, store):
    app.dependency_overrides[get_autosave_quiet_period] = lambda: 30.0
    with client.websocket_connect("/api/drafts/user-1/autosave") as ws:
        ws.receive_json()
        ws.send_json({"action": "update", "draft": draft_body()})

    assert store.calls == []


def test_disabled_session_never_saves(client, store):
    app.dependency_overrides[get_session_auto_save] = lambda: False
    with client.websocket_connect("/api/drafts/user-1/autosave") as ws:
        assert ws.receive_json() == {"event": "session", "auto_save_enabled": False}
        ws.send_json({"action": "update", "draft": draft_body()})
        ws.send_json({"action": "flush"})
        ws.send_json({"action": "update", "draft": {"headings": {"h3s": [{"text": "bad"}]}}})
        # the error reply proves both earlier messages were handled
        assert ws.receive_json()["event"] == "error"

    assert store.calls == []
