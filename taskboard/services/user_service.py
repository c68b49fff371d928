from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from taskboard.models.task import TaskItem
from taskboard.models.user import User


async def get_users(db: AsyncSession) -> list[User]:
    result = await db.execute(
        select(User).options(selectinload(User.tasks)).order_by(User.id)
    )
    return list(result.scalars().all())


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    """Load a user together with their tasks and each task's comments."""
    result = await db.execute(
        select(User)
        .where(User.id == user_id)
        .options(selectinload(User.tasks).selectinload(TaskItem.comments))
    )
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, data: dict) -> User:
    user = User(**data)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user
