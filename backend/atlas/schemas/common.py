# backend/atlas/schemas/common.py
from typing import Any, Generic, TypeVar
from pydantic import BaseModel, ConfigDict

from atlas.repositories.base import PageResult

ItemT = TypeVar("ItemT")


class RequestModel(BaseModel):
    """Base for request bodies; unknown fields (including ``id``) are rejected."""

    model_config = ConfigDict(extra="forbid")


class ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PageResponse(BaseModel, Generic[ItemT]):
    items: list[ItemT]
    total: int
    page: int
    size: int
    total_pages: int


def to_page(result: PageResult, schema: type[BaseModel]) -> PageResponse:
    """Convert a repository page into its response model."""
    return PageResponse[schema](
        items=[schema.model_validate(item) for item in result.items],
        total=result.total,
        page=result.page,
        size=result.size,
        total_pages=result.total_pages,
    )


def not_blank(value: str | None) -> str | None:
    if value is None:
        return value
    stripped = value.strip()
    if not stripped:
        raise ValueError("must not be blank")
    return stripped


class ErrorResponse(BaseModel):
    code: str
    message: str
    detail: Any = None
