# backend/atlas/schemas/publication.py
from datetime import datetime
from uuid import UUID
from pydantic import Field, field_validator

from atlas.schemas.common import RequestModel, ResponseModel, not_blank


class PublicationRequest(RequestModel):
    title: str = Field(..., min_length=1, max_length=500)
    doi: str | None = None
    url: str | None = None
    authors: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return not_blank(v)


class PublicationResponse(ResponseModel):
    id: UUID
    title: str
    doi: str | None
    url: str | None
    authors: list[str]
    created_at: datetime
    last_modified_at: datetime


class ToscaApplicationRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    tosca_id: str | None = None
    tosca_namespace: str | None = None
    tosca_name: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return not_blank(v)


class ToscaApplicationResponse(ResponseModel):
    id: UUID
    name: str
    tosca_id: str | None
    tosca_namespace: str | None
    tosca_name: str | None
    created_at: datetime
