from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from chat_backend import models  # noqa: F401
from chat_backend.db import Base, get_db
from chat_backend.llm import get_completion_client
from chat_backend.main import app


class FakeCompletions:
    """替代 CompletionClient：固定回复或固定异常"""

    def __init__(self, reply: str = "Hello from the model", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[str] = []

    def complete(self, message: str) -> str:
        self.calls.append(message)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def completions() -> FakeCompletions:
    return FakeCompletions()


@pytest.fixture
def client(session_factory, completions):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_completion_client] = lambda: completions
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
