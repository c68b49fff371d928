from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from taskboard.models.comment import Comment


async def get_comments(db: AsyncSession, task_id: int) -> list[Comment]:
    result = await db.execute(
        select(Comment)
        .where(Comment.task_item_id == task_id)
        .options(selectinload(Comment.author))
        .order_by(Comment.created_at, Comment.id)
    )
    return list(result.scalars().all())


async def create_comment(db: AsyncSession, data: dict) -> Comment:
    # Leave created_at to the column default when the client omits it
    if data.get("created_at") is None:
        data.pop("created_at", None)
    comment = Comment(**data)
    db.add(comment)
    await db.flush()
    await db.refresh(comment)
    return comment
