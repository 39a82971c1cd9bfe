"""
Task Resource Service.

Create, read, update and delete operations over task records. Each
operation validates its input and then issues exactly one repository call;
concurrent updates to the same task are last-write-wins.
"""
import logging
from typing import List

from fastapi import Depends
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..core.exceptions import TaskNotFoundError, TaskValidationError
from ..models.task import MAX_TASK_ID, Task
from ..repositories.task_repository import SqlAlchemyTaskRepository, TaskRepository
from ..schemas.task import TaskPayload

logger = logging.getLogger(__name__)


def validate_task_payload(payload: TaskPayload) -> None:
    """
    Check the fields a stored task requires.

    Raises:
        TaskValidationError: If title is missing, null or empty
    """
    if payload.title is None:
        raise TaskValidationError("Field 'title' is required")
    if payload.title == "":
        raise TaskValidationError("Field 'title' must not be empty")


def is_assignable_id(task_id: int) -> bool:
    """Whether the store could ever have generated this id"""
    return 0 < task_id <= MAX_TASK_ID


class TaskService:
    """CRUD operations over tasks"""

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def list_tasks(self) -> List[Task]:
        return self.repository.list_all()

    def get_task(self, task_id: int) -> Task:
        task = self.repository.get(task_id) if is_assignable_id(task_id) else None
        if task is None:
            logger.warning(f"Task {task_id} not found")
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, payload: TaskPayload) -> Task:
        validate_task_payload(payload)
        task = self.repository.add(payload.title, payload.description)
        logger.info(f"Created task {task.id}")
        return task

    def update_task(self, task_id: int, payload: TaskPayload) -> Task:
        """Replace title and description of an existing task; never inserts."""
        validate_task_payload(payload)
        task = None
        if is_assignable_id(task_id):
            task = self.repository.replace(task_id, payload.title, payload.description)
        if task is None:
            logger.warning(f"Cannot update task {task_id}: not found")
            raise TaskNotFoundError(task_id)
        logger.info(f"Updated task {task_id}")
        return task

    def delete_task(self, task_id: int) -> None:
        """Delete a task. Deleting a missing task is a no-op."""
        if is_assignable_id(task_id) and self.repository.delete(task_id):
            logger.info(f"Deleted task {task_id}")
        else:
            logger.debug(f"Task {task_id} already absent, nothing to delete")


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    """Task service dependency for FastAPI"""
    return TaskService(SqlAlchemyTaskRepository(db))
