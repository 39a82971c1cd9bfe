from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from tasks_api.core.exceptions import StoreUnavailableError
from tasks_api.main import app
from tasks_api.repositories.task_repository import SqlAlchemyTaskRepository
from tasks_api.services.task_service import TaskService, get_task_service


def broken_session() -> MagicMock:
    session = MagicMock(spec=Session)
    error = OperationalError("SELECT 1", {}, Exception("connection refused by db-host-17"))
    session.query.side_effect = error
    session.commit.side_effect = error
    return session


@pytest.fixture
def session() -> MagicMock:
    return broken_session()


@pytest.fixture
def broken_client(session: MagicMock) -> TestClient:
    app.dependency_overrides[get_task_service] = lambda: TaskService(
        SqlAlchemyTaskRepository(session)
    )
    return TestClient(app)


def test_repository_wraps_errors_and_rolls_back(session: MagicMock) -> None:
    repository = SqlAlchemyTaskRepository(session)

    with pytest.raises(StoreUnavailableError):
        repository.get(1)
    session.rollback.assert_called_once()


def test_repository_add_failure_is_store_unavailable(session: MagicMock) -> None:
    repository = SqlAlchemyTaskRepository(session)

    with pytest.raises(StoreUnavailableError):
        repository.add("title", None)
    session.rollback.assert_called_once()


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("GET", "/tasks", None),
        ("GET", "/tasks/1", None),
        ("POST", "/tasks", {"title": "x"}),
        ("PUT", "/tasks/1", {"title": "x"}),
        ("DELETE", "/tasks/1", None),
    ],
)
def test_store_failure_returns_opaque_503(broken_client: TestClient, method: str, path: str, body) -> None:
    response = broken_client.request(method, path, json=body)
    assert response.status_code == 503
    error = response.json()["error"]
    assert error["type"] == "store_unavailable"
    assert error["message"] == "Task store is unavailable"
    assert "db-host-17" not in response.text


def test_validation_runs_before_store(broken_client: TestClient, session: MagicMock) -> None:
    response = broken_client.post("/tasks", json={"title": ""})
    assert response.status_code == 400
    session.add.assert_not_called()
