from __future__ import annotations

import pytest

from leadboard.models.opportunities import Opportunity


def _skill(client, name: str) -> int:
    r = client.post("/api/skills", json={"name": name})
    assert r.status_code == 201
    return r.json()["id"]


def _member(client, name: str = "Ana", email: str = "ana@example.com") -> int:
    r = client.post("/api/members", json={"name": name, "email": email, "role": "Tech", "skill_ids": []})
    assert r.status_code == 201
    return r.json()["id"]


def _create(client, **overrides) -> dict:
    payload = {"client_name": "Ana Ruiz", "company": "Acme", "original_message": "We need a React landing page"}
    payload.update(overrides)
    r = client.post("/api/opportunities", json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_from_extraction_result(client) -> None:
    react = _skill(client, "React")
    body = _create(client, ai_summary=" Landing page in React. ", urgency="High", skill_ids=[react])

    assert body["status"] == "new"
    assert body["urgency"] == "high"
    assert body["ai_summary"] == "Landing page in React."
    assert body["client_name"] == "Ana Ruiz"
    assert body["company"] == "Acme"
    assert body["skills"] == ["React"]
    assert body["assignee"] == ""


def test_create_with_member_starts_assigned(client) -> None:
    member_id = _member(client)
    body = _create(client, assigned_member_id=member_id)
    assert body["status"] == "assigned"
    assert body["assignee"] == "Ana"


def test_create_validation(client) -> None:
    base = {"client_name": "Ana", "company": "Acme", "original_message": "hi"}
    assert client.post("/api/opportunities", json={**base, "urgency": "urgent"}).status_code == 400
    assert client.post("/api/opportunities", json={**base, "skill_ids": [42]}).status_code == 400
    assert client.post("/api/opportunities", json={**base, "assigned_member_id": 42}).status_code == 400
    assert client.post("/api/opportunities", json={**base, "original_message": "   "}).status_code == 400
    assert client.post("/api/opportunities", json={"client_name": "Ana"}).status_code == 422
    assert client.get("/api/opportunities").json() == []
    assert client.get("/api/clients").json() == []


def test_list_newest_first_and_filter_by_status(client) -> None:
    first = _create(client, original_message="first")
    second = _create(client, original_message="second")
    client.patch(f"/api/opportunities/{first['id']}/status", json={"status": "archived"})

    r = client.get("/api/opportunities")
    assert [o["id"] for o in r.json()] == [second["id"], first["id"]]

    r = client.get("/api/opportunities", params={"status": "archived"})
    assert [o["id"] for o in r.json()] == [first["id"]]

    assert client.get("/api/opportunities", params={"status": "lost"}).status_code == 400


def test_status_transitions(client) -> None:
    opp = _create(client)
    for status in ["assigned", "done", "archived", "cancelled", "NEW"]:
        r = client.patch(f"/api/opportunities/{opp['id']}/status", json={"status": status})
        assert r.status_code == 200
        assert r.json()["status"] == status.lower()

    assert client.patch(f"/api/opportunities/{opp['id']}/status", json={"status": "won"}).status_code == 400
    assert client.patch("/api/opportunities/9999/status", json={"status": "done"}).status_code == 404


def test_assignment_sets_member_and_status(client) -> None:
    opp = _create(client)
    member_id = _member(client)

    r = client.patch(f"/api/opportunities/{opp['id']}/assignment", json={"member_id": member_id})
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "assigned"
    assert body["assigned_member_id"] == member_id
    assert body["assignee"] == "Ana"

    assert client.patch(f"/api/opportunities/{opp['id']}/assignment", json={"member_id": 999}).status_code == 400
    assert client.patch("/api/opportunities/999/assignment", json={"member_id": member_id}).status_code == 404


def test_details_update_touches_only_given_fields(client) -> None:
    react = _skill(client, "React")
    python = _skill(client, "Python")
    opp = _create(client, ai_summary="Original summary.", urgency="low", skill_ids=[react])

    r = client.patch(f"/api/opportunities/{opp['id']}", json={"urgency": "Medium"})
    assert r.status_code == 200
    assert r.json()["urgency"] == "medium"
    assert r.json()["ai_summary"] == "Original summary."
    assert r.json()["skills"] == ["React"]

    r = client.patch(f"/api/opportunities/{opp['id']}", json={"skill_ids": [python, react], "ai_summary": "New."})
    assert r.json()["skills"] == ["Python", "React"]
    assert r.json()["ai_summary"] == "New."

    r = client.patch(f"/api/opportunities/{opp['id']}", json={"skill_ids": []})
    assert r.json()["skills"] == []

    assert client.patch(f"/api/opportunities/{opp['id']}", json={"urgency": "asap"}).status_code == 400


def test_new_record_with_assignee_reports_assigned(client) -> None:
    from leadboard.database import SessionLocal

    member_id = _member(client)
    opp = _create(client, assigned_member_id=member_id)
    with SessionLocal() as db:
        db.query(Opportunity).filter(Opportunity.id == opp["id"]).update({"status": "New"})
        db.commit()

    listed = client.get("/api/opportunities").json()
    assert listed[0]["status"] == "assigned"


def test_null_urgency_in_details_update_is_rejected(client) -> None:
    opp = _create(client, urgency="high")

    r = client.patch(f"/api/opportunities/{opp['id']}", json={"urgency": None})
    assert r.status_code == 400

    listed = client.get("/api/opportunities").json()
    assert listed[0]["urgency"] == "high"


def test_client_created_concurrently_is_conflict(db_session, monkeypatch) -> None:
    from sqlalchemy.exc import IntegrityError

    from leadboard.models.clients import Client
    from leadboard.services.errors import ConflictError
    from leadboard.services.opportunities_service import create_opportunity

    def _commit() -> None:
        raise IntegrityError("INSERT INTO clients", {}, Exception("UNIQUE constraint failed: clients.name, clients.company"))

    monkeypatch.setattr(db_session, "commit", _commit)
    with pytest.raises(ConflictError):
        create_opportunity(db_session, "Ana Ruiz", "Acme", "Need a site")
    monkeypatch.undo()

    assert db_session.query(Client).count() == 0
    assert db_session.query(Opportunity).count() == 0
