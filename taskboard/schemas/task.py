from pydantic import BaseModel

from taskboard.schemas.comment import CommentResponse


class TaskCreate(BaseModel):
    title: str
    is_completed: bool = False
    user_id: int


class TaskResponse(BaseModel):
    id: int
    title: str
    is_completed: bool
    user_id: int

    model_config = {"from_attributes": True}


class TaskOwner(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}


class TaskWithUser(TaskResponse):
    user: TaskOwner


class TaskWithComments(TaskResponse):
    comments: list[CommentResponse] = []
