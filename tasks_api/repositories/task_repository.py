"""
Task persistence.

``TaskRepository`` is the boundary between the service and the backing
store: one method per store operation, each a single atomic unit of work.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import StoreUnavailableError
from ..models.task import Task

logger = logging.getLogger(__name__)


class TaskRepository(ABC):
    """Store operations required by the task service."""

    @abstractmethod
    def add(self, title: str, description: Optional[str]) -> Task:
        """Insert a task and return it with its generated id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Optional[Task]:
        """Return the task with ``task_id`` or None."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[Task]:
        """Return every task ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def replace(self, task_id: int, title: str, description: Optional[str]) -> Optional[Task]:
        """Overwrite the mutable fields of an existing task, or return None."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """Remove the task if present; return whether a row was deleted."""
        raise NotImplementedError


class SqlAlchemyTaskRepository(TaskRepository):
    """TaskRepository backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, operation: str, exc: SQLAlchemyError) -> StoreUnavailableError:
        self.db.rollback()
        logger.error(f"Task store error during {operation}: {exc}")
        return StoreUnavailableError()

    def add(self, title: str, description: Optional[str]) -> Task:
        try:
            db_task = Task(title=title, description=description)
            self.db.add(db_task)
            self.db.commit()
            self.db.refresh(db_task)
            return db_task
        except SQLAlchemyError as e:
            raise self._fail("add", e) from e

    def get(self, task_id: int) -> Optional[Task]:
        try:
            return self.db.query(Task).filter(Task.id == task_id).first()
        except SQLAlchemyError as e:
            raise self._fail("get", e) from e

    def list_all(self) -> List[Task]:
        try:
            return self.db.query(Task).order_by(Task.id.asc()).all()
        except SQLAlchemyError as e:
            raise self._fail("list", e) from e

    def replace(self, task_id: int, title: str, description: Optional[str]) -> Optional[Task]:
        try:
            db_task = self.db.query(Task).filter(Task.id == task_id).first()
            if db_task is None:
                return None

            db_task.title = title
            db_task.description = description
            self.db.commit()
            self.db.refresh(db_task)
            return db_task
        except SQLAlchemyError as e:
            raise self._fail("replace", e) from e

    def delete(self, task_id: int) -> bool:
        try:
            deleted = self.db.query(Task).filter(Task.id == task_id).delete(
                synchronize_session=False
            )
            self.db.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e
