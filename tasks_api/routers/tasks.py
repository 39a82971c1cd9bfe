"""
HTTP handlers for the task resource.

Routes are registered from ``TASK_ROUTES`` rather than decorators so the
whole method/path table is visible in one place.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..schemas.task import ErrorResponse, TaskPayload, TaskResponse
from ..services.task_service import TaskService, get_task_service


def list_tasks(service: TaskService = Depends(get_task_service)):
    """List all tasks in id order"""
    return service.list_tasks()


def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Get a specific task by ID"""
    return service.get_task(task_id)


def create_task(payload: TaskPayload, service: TaskService = Depends(get_task_service)):
    """Create a new task; the store assigns its id"""
    return service.create_task(payload)


def update_task(
    task_id: int,
    payload: TaskPayload,
    service: TaskService = Depends(get_task_service)
):
    """Replace the title and description of a task"""
    return service.update_task(task_id, payload)


def delete_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """Delete a task; deleting a missing task still succeeds"""
    service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


_not_found = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_bad_request = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}

# (path, methods, handler, response model, status code, extra responses)
TASK_ROUTES = [
    ("", ["GET"], list_tasks, List[TaskResponse], status.HTTP_200_OK, {}),
    ("", ["POST"], create_task, TaskResponse, status.HTTP_201_CREATED, _bad_request),
    ("/{task_id}", ["GET"], get_task, TaskResponse, status.HTTP_200_OK, _not_found),
    ("/{task_id}", ["PUT"], update_task, TaskResponse, status.HTTP_200_OK,
     {**_bad_request, **_not_found}),
    ("/{task_id}", ["DELETE"], delete_task, None, status.HTTP_204_NO_CONTENT, {}),
]


def build_router() -> APIRouter:
    """Create the task router from the route table"""
    router = APIRouter()
    for path, methods, endpoint, response_model, status_code, responses in TASK_ROUTES:
        router.add_api_route(
            path,
            endpoint,
            methods=methods,
            response_model=response_model,
            status_code=status_code,
            responses=responses,
        )
        if path == "":
            # Accept the collection with a trailing slash as well
            router.add_api_route(
                "/",
                endpoint,
                methods=methods,
                response_model=response_model,
                status_code=status_code,
                include_in_schema=False,
            )
    return router


router = build_router()
