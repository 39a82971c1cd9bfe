"""
Domain errors raised by the task service and repository.

Each error carries the HTTP status it is reported with; the handlers
registered in ``tasks_api.main`` turn them into the JSON error envelope.
"""
from fastapi import status


class TaskServiceError(Exception):
    """Base class for task service errors"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_type: str = "task_service_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskServiceError):
    """A required field is missing or empty"""

    status_code = status.HTTP_400_BAD_REQUEST
    error_type = "validation_error"


class TaskNotFoundError(TaskServiceError):
    """No task exists with the requested id"""

    status_code = status.HTTP_404_NOT_FOUND
    error_type = "not_found"

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class StoreUnavailableError(TaskServiceError):
    """The backing store could not complete the operation"""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_type = "store_unavailable"

    def __init__(self, message: str = "Task store is unavailable"):
        super().__init__(message)
