from __future__ import annotations


def _skill(client, name: str) -> int:
    return client.post("/api/skills", json={"name": name}).json()["id"]


def _member(client, name: str, email: str) -> int:
    r = client.post("/api/members", json={"name": name, "email": email, "role": "Tech", "skill_ids": []})
    return r.json()["id"]


def _opp(client, skill_ids: list[int], member_id: int | None = None) -> int:
    r = client.post(
        "/api/opportunities",
        json={
            "client_name": "Ana",
            "company": "Acme",
            "original_message": "msg",
            "skill_ids": skill_ids,
            "assigned_member_id": member_id,
        },
    )
    assert r.status_code == 201
    return r.json()["id"]


def test_dashboard_stats_empty(client) -> None:
    r = client.get("/api/dashboard/stats")
    assert r.status_code == 200
    body = r.json()
    assert body["pending_action"] == 0
    assert body["top_needed_skill"] is None
    assert body["team_availability"] == 0
    assert body["total_opportunities"] == 0


def test_dashboard_stats(client) -> None:
    react = _skill(client, "React")
    python = _skill(client, "Python")
    go = _skill(client, "Go")
    ana = _member(client, "Ana", "ana@example.com")
    _member(client, "Bob", "bob@example.com")

    _opp(client, [react, python])
    _opp(client, [react], member_id=ana)
    for _ in range(3):
        closed = _opp(client, [go])
        client.patch(f"/api/opportunities/{closed}/status", json={"status": "archived"})

    body = client.get("/api/dashboard/stats").json()
    assert body["pending_action"] == 1
    assert body["top_needed_skill"] == "React"
    assert body["team_availability"] == 50
    assert body["total_opportunities"] == 5
    assert body["active_opportunities"] == 1
