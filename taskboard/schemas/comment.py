from datetime import datetime

from pydantic import BaseModel


class CommentCreate(BaseModel):
    body: str
    task_item_id: int
    author_id: int
    created_at: datetime | None = None


class CommentResponse(BaseModel):
    id: int
    body: str
    created_at: datetime
    task_item_id: int
    author_id: int

    model_config = {"from_attributes": True}


class CommentAuthor(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}


class CommentWithAuthor(CommentResponse):
    author: CommentAuthor
