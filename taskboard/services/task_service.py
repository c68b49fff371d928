from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from taskboard.models.task import TaskItem


async def get_tasks(db: AsyncSession) -> list[TaskItem]:
    result = await db.execute(
        select(TaskItem).options(selectinload(TaskItem.user)).order_by(TaskItem.id)
    )
    return list(result.scalars().all())


async def create_task(db: AsyncSession, data: dict) -> TaskItem:
    task = TaskItem(**data)
    db.add(task)
    await db.flush()
    await db.refresh(task)
    return task


async def toggle_task(db: AsyncSession, task_id: int) -> TaskItem | None:
    task = await db.get(TaskItem, task_id)
    if task is None:
        return None

    task.is_completed = not task.is_completed

    await db.flush()
    await db.refresh(task)
    return task
