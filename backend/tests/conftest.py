"""Pytest fixtures: an in-memory database shared by the service, the API and the client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from taskboard.client import TaskClient
from taskboard.db.session import get_session
from taskboard.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    """HTTP test client with the app's sessions bound to the test engine."""

    def override_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def task_client(client: TestClient) -> TaskClient:
    return TaskClient("http://testserver/api/v1", session=client, timeout=5)
