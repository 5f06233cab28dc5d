from __future__ import annotations

from leadboard.config import Settings, _parse_origins, build_sqlalchemy_db_url


def test_health_heartbeat(client) -> None:
    r = client.get("/health/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_db(client) -> None:
    r = client.get("/health/db")
    assert r.status_code == 200
    body = r.json()
    assert body["orm"] == "ok"
    assert body["orm_db_url"].startswith("sqlite")
    assert body["completion_configured"] is False


def test_cors_origins_parsing() -> None:
    assert _parse_origins('["http://a", "http://b"]') == ["http://a", "http://b"]
    assert _parse_origins("http://a, http://b ,") == ["http://a", "http://b"]
    assert _parse_origins("") == []
    assert _parse_origins(None) == []


def test_db_url_resolution() -> None:
    explicit = Settings(_env_file=None, DB_URL="sqlite:///./x.db")
    assert build_sqlalchemy_db_url(explicit) == "sqlite:///./x.db"

    mysql = Settings(
        _env_file=None,
        DB_URL=None,
        ORM_USE_MYSQL=True,
        DB_USER="u",
        DB_PASSWORD="p",
        DB_HOST="db",
        DB_PORT=3307,
        DB_NAME="leads",
    )
    assert build_sqlalchemy_db_url(mysql) == "mysql+pymysql://u:p@db:3307/leads?charset=utf8mb4"

    dev = Settings(_env_file=None, DB_URL=None, ORM_USE_MYSQL=False, environment="development")
    assert build_sqlalchemy_db_url(dev) == "sqlite:///./dev.db"
