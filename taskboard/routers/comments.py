from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.database import get_db
from taskboard.schemas.comment import CommentCreate, CommentResponse, CommentWithAuthor
from taskboard.services import comment_service

router = APIRouter(prefix="/tasks/{task_id}/comments", tags=["Comments"])


@router.get("", response_model=list[CommentWithAuthor], summary="Get comments for a task")
async def list_comments(task_id: int, db: AsyncSession = Depends(get_db)):
    return await comment_service.get_comments(db, task_id)


@router.post(
    "",
    response_model=CommentResponse,
    status_code=201,
    summary="Add a comment to a task",
    responses={400: {"description": "Path and body task ids differ"}},
)
async def create_comment(
    task_id: int,
    data: CommentCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    if data.task_item_id != task_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="TaskId mismatch.")
    comment = await comment_service.create_comment(db, data.model_dump())
    response.headers["Location"] = f"/tasks/{task_id}/comments/{comment.id}"
    return comment
