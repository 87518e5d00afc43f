"""Task API router."""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from ..models import Task, TaskCreate, TaskStatusUpdate
from ..services import Err, Failure, FailureKind, TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])

FAILURE_STATUS_CODES = {
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.INVALID_CREATION: status.HTTP_400_BAD_REQUEST,
    FailureKind.INVALID_UPDATE: status.HTTP_400_BAD_REQUEST,
}


# =============================================================================
# Helper Functions
# =============================================================================


def get_task_service(request: Request) -> TaskService:
    """Dependency returning the service attached to the app."""
    return request.app.state.task_service


def failure_response(failure: Failure) -> JSONResponse:
    """Render a failure as its message string with the mapped status code."""
    return JSONResponse(
        status_code=FAILURE_STATUS_CODES[failure.kind],
        content=failure.message,
    )


def task_json(task: Task) -> dict:
    return task.model_dump(mode="json", by_alias=True, exclude_none=True)


# =============================================================================
# REST API Endpoints (JSON)
# =============================================================================


@router.get("", response_model=list[Task], response_model_exclude_none=True)
def list_tasks(service: TaskService = Depends(get_task_service)):
    """Get all tasks."""
    return service.list_all()


@router.get("/{task_id}", response_model=Task, response_model_exclude_none=True)
def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Get a task by ID."""
    result = service.get_by_id(task_id)
    if isinstance(result, Err):
        return failure_response(result.failure)
    return result.value


@router.post(
    "",
    response_model=Task,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_task(task_data: TaskCreate, service: TaskService = Depends(get_task_service)):
    """Create a new task."""
    result = service.create(task_data)
    if isinstance(result, Err):
        return failure_response(result.failure)
    return result.value


@router.put("/{task_id}/status")
def update_task_status(
    task_id: str,
    update: TaskStatusUpdate,
    service: TaskService = Depends(get_task_service),
):
    """Update a task's status.

    Answers 204 but still carries the updated task as its body.
    """
    result = service.update_status(task_id, update.new_status)
    if isinstance(result, Err):
        return failure_response(result.failure)
    return JSONResponse(status_code=status.HTTP_204_NO_CONTENT, content=task_json(result.value))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Delete a task. Unknown IDs are not an error."""
    result = service.remove(task_id)
    if isinstance(result, Err):
        return failure_response(result.failure)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
