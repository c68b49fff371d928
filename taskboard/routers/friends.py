from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.database import get_db
from taskboard.schemas.user import UserResponse
from taskboard.services import friendship_service

router = APIRouter(tags=["Friends"])


@router.get(
    "/users/{user_id}/friends",
    response_model=list[UserResponse],
    summary="List friends for a user",
)
async def list_friends(user_id: int, db: AsyncSession = Depends(get_db)):
    return await friendship_service.get_friends(db, user_id)
