"""Tests for discussion topics and comment threads."""

from datetime import datetime

import pytest

from atlas.core.exceptions import EntityNotFoundError, InvalidInputError
from atlas.models.enums import DiscussionStatus
from atlas.schemas.discussion import DiscussionCommentRequest, DiscussionTopicRequest
from atlas.services.discussion_service import DiscussionService


@pytest.fixture
def service(test_session):
    return DiscussionService(test_session)


@pytest.fixture
async def topic(service):
    return await service.create(DiscussionTopicRequest(title="Is Shor NISQ ready?"))


class TestTopics:
    @pytest.mark.asyncio
    async def test_create_defaults(self, topic):
        assert topic.status == DiscussionStatus.OPEN
        assert topic.date is not None

    @pytest.mark.asyncio
    async def test_status_can_change_both_ways(self, service, topic):
        closed = await service.update(
            topic.id, DiscussionTopicRequest(title=topic.title, status=DiscussionStatus.CLOSED)
        )
        assert closed.status == DiscussionStatus.CLOSED

        reopened = await service.update(topic.id, DiscussionTopicRequest(title=topic.title))
        assert reopened.status == DiscussionStatus.OPEN

    @pytest.mark.asyncio
    async def test_delete_removes_comments(self, service, topic):
        await service.create_comment(topic.id, DiscussionCommentRequest(text="first"))

        await service.delete(topic.id)

        assert (await service.comments.find_page(0, 10)).total == 0


class TestComments:
    @pytest.mark.asyncio
    async def test_reply_thread_pages(self, service, topic):
        question = await service.create_comment(topic.id, DiscussionCommentRequest(text="Why not?"))
        await service.create_comment(topic.id, DiscussionCommentRequest(text="Too many qubits.", reply_to_id=question.id))

        page = await service.find_all_by_topic(topic.id, 0, 1)

        assert len(page.items) == 1
        assert page.total == 2
        assert page.total_pages == 2

    @pytest.mark.asyncio
    async def test_reply_into_other_topic_is_rejected(self, service, topic):
        other = await service.create(DiscussionTopicRequest(title="Grover speed-up"))
        foreign = await service.create_comment(other.id, DiscussionCommentRequest(text="quadratic"))

        with pytest.raises(InvalidInputError):
            await service.create_comment(topic.id, DiscussionCommentRequest(text="reply", reply_to_id=foreign.id))

    @pytest.mark.asyncio
    async def test_comment_cannot_reply_to_itself(self, service, topic):
        comment = await service.create_comment(topic.id, DiscussionCommentRequest(text="hello"))

        with pytest.raises(InvalidInputError):
            await service.update_comment(
                topic.id, comment.id, DiscussionCommentRequest(text="hello", reply_to_id=comment.id)
            )

    @pytest.mark.asyncio
    async def test_comment_of_other_topic_is_not_found(self, service, topic):
        other = await service.create(DiscussionTopicRequest(title="Grover speed-up"))
        comment = await service.create_comment(other.id, DiscussionCommentRequest(text="quadratic"))

        with pytest.raises(EntityNotFoundError):
            await service.find_comment(topic.id, comment.id)

    @pytest.mark.asyncio
    async def test_deleting_comment_clears_replies(self, service, topic):
        question = await service.create_comment(topic.id, DiscussionCommentRequest(text="Why not?"))
        answer = await service.create_comment(
            topic.id, DiscussionCommentRequest(text="Too many qubits.", reply_to_id=question.id)
        )

        await service.delete_comment(topic.id, question.id)

        remaining = await service.find_comment(topic.id, answer.id)
        assert remaining.reply_to_id is None
        assert (await service.find_all_by_topic(topic.id, 0, 10)).total == 1

    @pytest.mark.asyncio
    async def test_comments_listed_in_creation_order(self, service, topic):
        await service.create_comment(topic.id, DiscussionCommentRequest(text="first"))
        await service.create_comment(topic.id, DiscussionCommentRequest(text="second", date=datetime(2000, 1, 1)))

        page = await service.find_all_by_topic(topic.id, 0, 10)

        assert [c.text for c in page.items] == ["first", "second"]
