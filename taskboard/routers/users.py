from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.database import get_db
from taskboard.schemas.user import UserCreate, UserDetail, UserResponse, UserWithTasks
from taskboard.services import user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=list[UserWithTasks],
    summary="List all users",
    description="Returns all users including their tasks.",
)
async def list_users(db: AsyncSession = Depends(get_db)):
    return await user_service.get_users(db)


@router.get(
    "/{user_id}",
    response_model=UserDetail,
    summary="Get user by ID",
    description="Returns a specific user with tasks and comments.",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    user = await user_service.get_user(db, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post(
    "",
    response_model=UserResponse,
    status_code=201,
    summary="Create a new user",
)
async def create_user(
    data: UserCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    user = await user_service.create_user(db, data.model_dump())
    response.headers["Location"] = f"/users/{user.id}"
    return user
