"""Discussion topics and their comment threads."""

import logging
import uuid
from typing import Optional
from pydantic import BaseModel

from atlas.core.exceptions import EntityNotFoundError, InvalidInputError
from atlas.models.discussion import DiscussionComment, DiscussionTopic
from atlas.repositories.base import PageResult
from atlas.repositories.discussion_repository import (
    DiscussionCommentRepository,
    DiscussionTopicRepository,
)
from atlas.services.base import CrudService

logger = logging.getLogger(__name__)


def _dated_values(data: BaseModel) -> dict:
    values = data.model_dump()
    if values.get("date") is None:
        values.pop("date", None)
    return values


class DiscussionService(CrudService[DiscussionTopic]):
    """Topics plus the comments scoped under them.

    A comment may reply to another comment of the same topic. Deleting a
    comment leaves its replies in place without a reply target; deleting a
    topic removes all of its comments.
    """

    repository_class = DiscussionTopicRepository

    def __init__(self, session):
        super().__init__(session)
        self.comments = DiscussionCommentRepository(session)

    def _build(self, data: BaseModel) -> DiscussionTopic:
        return DiscussionTopic(**_dated_values(data))

    def _apply(self, entity: DiscussionTopic, data: BaseModel) -> None:
        for field, value in _dated_values(data).items():
            setattr(entity, field, value)

    async def _before_delete(self, entity: DiscussionTopic) -> None:
        removed = await self.comments.delete_where(DiscussionComment.discussion_topic_id == entity.id)
        if removed:
            logger.info(f"Removed {removed} comments of topic {entity.id}")

    async def find_all_by_topic(
        self, topic_id: uuid.UUID, page: int, size: int, search: Optional[str] = None
    ) -> PageResult[DiscussionComment]:
        await self.repository.get_or_raise(topic_id)
        return await self.comments.find_page(
            page, size, DiscussionComment.discussion_topic_id == topic_id, search=search
        )

    async def find_comment(self, topic_id: uuid.UUID, comment_id: uuid.UUID) -> DiscussionComment:
        await self.repository.get_or_raise(topic_id)
        comment = await self.comments.get_or_raise(comment_id)
        if comment.discussion_topic_id != topic_id:
            raise EntityNotFoundError("DiscussionComment", comment_id)
        return comment

    async def _check_reply(
        self, topic_id: uuid.UUID, reply_to_id: Optional[uuid.UUID], comment_id: Optional[uuid.UUID] = None
    ) -> None:
        if reply_to_id is None:
            return
        if reply_to_id == comment_id:
            raise InvalidInputError("A comment cannot reply to itself")
        target = await self.comments.get_by_id(reply_to_id)
        if target is None or target.discussion_topic_id != topic_id:
            raise InvalidInputError(
                f'Comment "{reply_to_id}" is not part of discussion topic "{topic_id}"'
            )

    async def create_comment(self, topic_id: uuid.UUID, data: BaseModel) -> DiscussionComment:
        await self.repository.get_or_raise(topic_id)
        await self._check_reply(topic_id, data.reply_to_id)
        comment = await self.comments.add(DiscussionComment(discussion_topic_id=topic_id, **_dated_values(data)))
        await self.session.commit()
        logger.info(f"Added comment {comment.id} to topic {topic_id}")
        return comment

    async def update_comment(
        self, topic_id: uuid.UUID, comment_id: uuid.UUID, data: BaseModel
    ) -> DiscussionComment:
        comment = await self.find_comment(topic_id, comment_id)
        await self._check_reply(topic_id, data.reply_to_id, comment_id)
        for field, value in _dated_values(data).items():
            setattr(comment, field, value)
        await self.session.flush()
        await self.session.commit()
        return comment

    async def delete_comment(self, topic_id: uuid.UUID, comment_id: uuid.UUID) -> None:
        comment = await self.find_comment(topic_id, comment_id)
        await self.comments.clear_replies_to(comment.id)
        await self.comments.delete(comment)
        await self.session.commit()
        logger.info(f"Deleted comment {comment_id} of topic {topic_id}")
