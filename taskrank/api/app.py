"""FastAPI web application for taskrank."""

import logging
from typing import List

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from taskrank import __version__
from taskrank.exceptions import TaskNotFoundError, TaskValidationError
from taskrank.models.task import Task, TaskCreate, TaskStats, TaskUpdate
from taskrank.engine.scheduler import TaskScheduler
from taskrank.engine.scoring import priority_score, is_overdue

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="taskrank API",
    description="Track tasks and see them ranked by urgency",
    version=__version__,
)

# In-memory scheduler for the process lifetime
scheduler = TaskScheduler()


def get_scheduler() -> TaskScheduler:
    """Dependency returning the process-wide scheduler."""
    return scheduler


# Response models
class TaskResponse(BaseModel):
    """Response wrapping a single task."""
    task: Task


class TaskListResponse(BaseModel):
    """Response for a plain list of tasks."""
    tasks: List[Task]
    count: int


class RankedTask(BaseModel):
    """One row of the ranked view."""
    position: int
    score: float
    overdue: bool
    task: Task


class RankedTaskListResponse(BaseModel):
    """Response for the ranked view."""
    tasks: List[RankedTask]
    count: int


@app.exception_handler(TaskNotFoundError)
async def task_not_found_handler(request: Request, exc: TaskNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(TaskValidationError)
async def task_validation_handler(request: Request, exc: TaskValidationError):
    logger.warning(f"Validation error on {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": str(exc)})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(draft: TaskCreate, tasks: TaskScheduler = Depends(get_scheduler)):
    """Create a task."""
    return TaskResponse(task=tasks.add_task(draft))


@app.get("/tasks", response_model=TaskListResponse)
async def list_tasks(tasks: TaskScheduler = Depends(get_scheduler)):
    """List all tasks in creation order."""
    all_tasks = tasks.all_tasks()
    return TaskListResponse(tasks=all_tasks, count=len(all_tasks))


@app.get("/tasks/ranked", response_model=RankedTaskListResponse)
async def ranked_tasks(tasks: TaskScheduler = Depends(get_scheduler)):
    """Open tasks ordered by urgency, most urgent first."""
    now = tasks.current_time()
    ranked = [
        RankedTask(
            position=index,
            score=priority_score(task, now),
            overdue=is_overdue(task, now),
            task=task,
        )
        for index, task in enumerate(tasks.ranked_view(now), start=1)
    ]
    return RankedTaskListResponse(tasks=ranked, count=len(ranked))


@app.get("/tasks/completed", response_model=TaskListResponse)
async def completed_tasks(tasks: TaskScheduler = Depends(get_scheduler)):
    """Completed tasks in creation order."""
    completed = tasks.completed_view()
    return TaskListResponse(tasks=completed, count=len(completed))


@app.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, tasks: TaskScheduler = Depends(get_scheduler)):
    """Get a task by id."""
    return TaskResponse(task=tasks.get_task(task_id))


@app.patch("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(task_id: str, updates: TaskUpdate, tasks: TaskScheduler = Depends(get_scheduler)):
    """Partially update a task."""
    return TaskResponse(task=tasks.update_task(task_id, updates))


@app.post("/tasks/{task_id}/advance", response_model=TaskResponse)
async def advance_task(task_id: str, tasks: TaskScheduler = Depends(get_scheduler)):
    """Move a task to its next status."""
    return TaskResponse(task=tasks.advance_status(task_id))


@app.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, tasks: TaskScheduler = Depends(get_scheduler)):
    """Delete a task."""
    tasks.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/stats", response_model=TaskStats)
async def stats(tasks: TaskScheduler = Depends(get_scheduler)):
    """Task counts by status, plus overdue."""
    return tasks.stats()


if __name__ == "__main__":
    import uvicorn
    from taskrank.config import HOST, PORT, setup_logging

    setup_logging()
    uvicorn.run(app, host=HOST, port=PORT)
