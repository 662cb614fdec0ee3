"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Integer,
    String,
    UniqueConstraint,
)

from inbox.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation of a thread notification for one user."""

    __tablename__ = "notification"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "app_id", "repo_uri", "thread_id", name="uq_notification_thread"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(BigInteger, nullable=False, index=True)
    app_id = Column(String(64), nullable=False)
    repo_uri = Column(String(255), nullable=False, index=True)
    thread_id = Column(BigInteger, nullable=False)
    repo_url = Column(String(512), nullable=False, default="")
    title = Column(String(512), nullable=False)
    html_url = Column(String(1024), nullable=False, default="")
    icon = Column(String(64), nullable=False, default="")
    color = Column(String(7), nullable=False, default="#000000")
    actor_id = Column(BigInteger, nullable=False, default=0)
    actor_login = Column(String(255), nullable=False, default="")
    actor_name = Column(String(255), nullable=False, default="")
    actor_avatar_url = Column(String(1024), nullable=False, default="")
    actor_html_url = Column(String(1024), nullable=False, default="")
    participating = Column(Boolean, nullable=False, default=False)
    updated_at = Column(DateTime(), nullable=False)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
