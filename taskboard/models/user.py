from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskboard.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    # Relationships
    tasks: Mapped[list["TaskItem"]] = relationship(  # noqa: F821
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    # Authored comments are RESTRICT on delete; leave enforcement to the database
    comments: Mapped[list["Comment"]] = relationship(  # noqa: F821
        back_populates="author", passive_deletes="all"
    )
    friends: Mapped[list["Friendship"]] = relationship(  # noqa: F821
        back_populates="user",
        foreign_keys="Friendship.user_id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    friend_of: Mapped[list["Friendship"]] = relationship(  # noqa: F821
        back_populates="friend",
        foreign_keys="Friendship.friend_id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
