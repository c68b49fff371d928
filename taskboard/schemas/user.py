from pydantic import BaseModel

from taskboard.schemas.task import TaskResponse, TaskWithComments


class UserCreate(BaseModel):
    username: str


class UserResponse(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}


class UserWithTasks(UserResponse):
    tasks: list[TaskResponse] = []


class UserDetail(UserResponse):
    tasks: list[TaskWithComments] = []
