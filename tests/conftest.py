import os


os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tasks_api.core.database import Base, get_db
from tasks_api.main import app
from tasks_api.models import task  # noqa: F401
from tasks_api.repositories.task_repository import SqlAlchemyTaskRepository
from tasks_api.services.task_service import TaskService

from .fakes import InMemoryTaskRepository

# One shared connection keeps the in-memory database alive across sessions
test_engine = create_engine(
    "sqlite://",
    poolclass=StaticPool,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db() -> Iterator[Session]:
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def database() -> Iterator[None]:
    Base.metadata.create_all(bind=test_engine)
    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session() -> Iterator[Session]:
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db_session: Session) -> SqlAlchemyTaskRepository:
    return SqlAlchemyTaskRepository(db_session)


@pytest.fixture
def fake_repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def service(fake_repository: InMemoryTaskRepository) -> TaskService:
    return TaskService(fake_repository)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
