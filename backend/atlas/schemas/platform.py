# backend/atlas/schemas/platform.py
from datetime import datetime
from uuid import UUID
from pydantic import Field, field_validator

from atlas.schemas.common import RequestModel, ResponseModel, not_blank


class SoftwarePlatformRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    link: str | None = None
    license: str | None = None
    version: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return not_blank(v)


class SoftwarePlatformResponse(ResponseModel):
    id: UUID
    name: str
    link: str | None
    license: str | None
    version: str | None
    created_at: datetime
    last_modified_at: datetime


class CloudServiceRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    provider: str | None = None
    url: str | None = None
    description: str | None = None
    cost_model: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return not_blank(v)


class CloudServiceResponse(ResponseModel):
    id: UUID
    name: str
    provider: str | None
    url: str | None
    description: str | None
    cost_model: str | None
    created_at: datetime
    last_modified_at: datetime
