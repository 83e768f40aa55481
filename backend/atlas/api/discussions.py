# backend/atlas/api/discussions.py
import uuid
from fastapi import APIRouter, Depends, status

from atlas.api.crud import add_crud_routes
from atlas.api.deps import Paging, get_discussion_service, get_paging
from atlas.schemas.common import PageResponse, to_page
from atlas.schemas.discussion import (
    DiscussionCommentRequest,
    DiscussionCommentResponse,
    DiscussionTopicRequest,
    DiscussionTopicResponse,
)
from atlas.services.discussion_service import DiscussionService

router = APIRouter(prefix="/discussion-topics", tags=["discussion-topics"])

add_crud_routes(router, get_discussion_service, DiscussionTopicRequest, DiscussionTopicResponse)


@router.get("/{topic_id}/discussion-comments", response_model=PageResponse[DiscussionCommentResponse])
async def list_comments(
    topic_id: uuid.UUID,
    paging: Paging = Depends(get_paging),
    service: DiscussionService = Depends(get_discussion_service),
):
    """Comments of a topic in the order they were written."""
    result = await service.find_all_by_topic(topic_id, paging.page, paging.size, paging.search)
    return to_page(result, DiscussionCommentResponse)


@router.post(
    "/{topic_id}/discussion-comments",
    response_model=DiscussionCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    topic_id: uuid.UUID,
    data: DiscussionCommentRequest,
    service: DiscussionService = Depends(get_discussion_service),
):
    return await service.create_comment(topic_id, data)


@router.get("/{topic_id}/discussion-comments/{comment_id}", response_model=DiscussionCommentResponse)
async def get_comment(
    topic_id: uuid.UUID,
    comment_id: uuid.UUID,
    service: DiscussionService = Depends(get_discussion_service),
):
    return await service.find_comment(topic_id, comment_id)


@router.put("/{topic_id}/discussion-comments/{comment_id}", response_model=DiscussionCommentResponse)
async def update_comment(
    topic_id: uuid.UUID,
    comment_id: uuid.UUID,
    data: DiscussionCommentRequest,
    service: DiscussionService = Depends(get_discussion_service),
):
    return await service.update_comment(topic_id, comment_id, data)


@router.delete("/{topic_id}/discussion-comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    topic_id: uuid.UUID,
    comment_id: uuid.UUID,
    service: DiscussionService = Depends(get_discussion_service),
):
    await service.delete_comment(topic_id, comment_id)
