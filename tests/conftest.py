from __future__ import annotations

import os
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ["ORM_USE_MYSQL"] = "false"

    # Ensure local .env and shell credentials cannot leak into tests.
    os.environ["ENVIRONMENT"] = "test"
    os.environ.pop("OPENAI_API_KEY", None)


class FakeCompletions:
    """Stands in for `client.chat.completions` of the OpenAI SDK."""

    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(role="assistant", content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


class FakeCompletionClient:
    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.completions = FakeCompletions(content=content, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture()
def fake_client_factory():
    return FakeCompletionClient


@pytest.fixture()
def db_session() -> Any:
    from leadboard.database import Base, SessionLocal, engine
    import leadboard.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client() -> Any:
    from leadboard.database import Base, engine
    from leadboard.main import create_app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_app()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
