# backend/atlas/schemas/discussion.py
from datetime import datetime
from uuid import UUID
from pydantic import Field, field_validator

from atlas.models.enums import DiscussionStatus
from atlas.schemas.common import RequestModel, ResponseModel, not_blank


class DiscussionTopicRequest(RequestModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: DiscussionStatus = DiscussionStatus.OPEN
    date: datetime | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return not_blank(v)


class DiscussionTopicResponse(ResponseModel):
    id: UUID
    title: str
    description: str | None
    status: DiscussionStatus
    date: datetime


class DiscussionCommentRequest(RequestModel):
    text: str = Field(..., min_length=1)
    date: datetime | None = None
    reply_to_id: UUID | None = None


class DiscussionCommentResponse(ResponseModel):
    id: UUID
    discussion_topic_id: UUID
    text: str
    date: datetime
    reply_to_id: UUID | None
