from taskboard.models.base import Base
from taskboard.models.comment import Comment
from taskboard.models.friendship import Friendship
from taskboard.models.task import TaskItem
from taskboard.models.user import User

__all__ = [
    "Base",
    "Comment",
    "Friendship",
    "TaskItem",
    "User",
]
