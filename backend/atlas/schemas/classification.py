# backend/atlas/schemas/classification.py
from datetime import datetime
from uuid import UUID
from pydantic import Field, field_validator

from atlas.schemas.common import RequestModel, ResponseModel, not_blank


class NamedRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return not_blank(v)


class NamedResponse(ResponseModel):
    id: UUID
    name: str
    created_at: datetime


class TagCreate(RequestModel):
    value: str = Field(..., min_length=1, max_length=255)
    category: str | None = None

    @field_validator("value")
    @classmethod
    def value_not_blank(cls, v: str) -> str:
        return not_blank(v)


class TagUpdate(RequestModel):
    category: str | None = None


class TagResponse(ResponseModel):
    value: str
    category: str | None
    created_at: datetime


class ProblemTypeRequest(NamedRequest):
    parent_problem_type_id: UUID | None = None


class ProblemTypeResponse(NamedResponse):
    parent_problem_type_id: UUID | None


class ApplicationAreaRequest(NamedRequest):
    pass


class ApplicationAreaResponse(NamedResponse):
    pass


class LearningMethodRequest(NamedRequest):
    pass


class LearningMethodResponse(NamedResponse):
    pass


class PatternRelationTypeRequest(NamedRequest):
    pass


class PatternRelationTypeResponse(NamedResponse):
    pass


class AlgorithmRelationTypeRequest(NamedRequest):
    inverse_type_name: str | None = None


class AlgorithmRelationTypeResponse(NamedResponse):
    inverse_type_name: str | None
