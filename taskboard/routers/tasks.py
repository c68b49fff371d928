from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.database import get_db
from taskboard.schemas.task import TaskCreate, TaskResponse, TaskWithUser
from taskboard.services import task_service

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get(
    "",
    response_model=list[TaskWithUser],
    summary="List all tasks",
    description="Returns all tasks with their owners.",
)
async def list_tasks(db: AsyncSession = Depends(get_db)):
    return await task_service.get_tasks(db)


@router.post("", response_model=TaskResponse, status_code=201, summary="Create a new task")
async def create_task(
    data: TaskCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    task = await task_service.create_task(db, data.model_dump())
    response.headers["Location"] = f"/tasks/{task.id}"
    return task


@router.patch(
    "/{task_id}/toggle",
    response_model=TaskResponse,
    summary="Toggle task completion",
    description="Switches is_completed between true/false.",
    responses={404: {"description": "Task not found"}},
)
async def toggle_task(task_id: int, db: AsyncSession = Depends(get_db)):
    task = await task_service.toggle_task(db, task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task
