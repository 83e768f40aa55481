"""Repositories for discussion topics and comments."""

import uuid
from sqlalchemy import update

from atlas.models.discussion import DiscussionComment, DiscussionTopic
from atlas.repositories.base import CrudRepository


class DiscussionTopicRepository(CrudRepository[DiscussionTopic]):
    model = DiscussionTopic
    entity_name = "DiscussionTopic"
    search_fields = ("title",)


class DiscussionCommentRepository(CrudRepository[DiscussionComment]):
    model = DiscussionComment
    entity_name = "DiscussionComment"
    search_fields = ("text",)

    async def clear_replies_to(self, comment_id: uuid.UUID) -> int:
        """Detach every comment replying to ``comment_id``."""
        result = await self.session.execute(
            update(DiscussionComment)
            .where(DiscussionComment.reply_to_id == comment_id)
            .values(reply_to_id=None)
        )
        return result.rowcount or 0
