# backend/atlas/models/discussion.py
import uuid
from datetime import datetime
from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from atlas.core.database import Base
from atlas.models.base import HasId, enum_column
from atlas.models.enums import DiscussionStatus


class DiscussionTopic(HasId, Base):
    __tablename__ = "discussion_topics"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[DiscussionStatus] = enum_column(
        DiscussionStatus, nullable=False, default=DiscussionStatus.OPEN
    )
    date: Mapped[datetime] = mapped_column(default=datetime.utcnow)


class DiscussionComment(HasId, Base):
    __tablename__ = "discussion_comments"

    discussion_topic_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("discussion_topics.id", ondelete="CASCADE"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    # one level of replies; must stay within the same topic
    reply_to_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("discussion_comments.id", ondelete="SET NULL"), nullable=True
    )
