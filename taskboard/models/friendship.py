from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskboard.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Friendship(Base):
    """Directed friendship edge. A mutual friendship is stored as two rows."""

    __tablename__ = "friendships"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    friend_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    since: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    # Relationships
    user: Mapped["User"] = relationship(  # noqa: F821
        back_populates="friends", foreign_keys=[user_id]
    )
    friend: Mapped["User"] = relationship(  # noqa: F821
        back_populates="friend_of", foreign_keys=[friend_id]
    )

    __table_args__ = (
        CheckConstraint("user_id <> friend_id", name="no_self_friendship"),
    )
