from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.models.friendship import Friendship
from taskboard.models.user import User


async def get_friends(db: AsyncSession, user_id: int) -> list[User]:
    """Users that ``user_id`` has an outgoing friendship edge to."""
    result = await db.execute(
        select(User)
        .join(Friendship, Friendship.friend_id == User.id)
        .where(Friendship.user_id == user_id)
        .order_by(User.id)
    )
    return list(result.scalars().all())
