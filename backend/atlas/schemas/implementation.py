# backend/atlas/schemas/implementation.py
from datetime import datetime
from uuid import UUID
from pydantic import Field, field_validator

from atlas.models.enums import ImplementationKind, ImplementationPackageType
from atlas.schemas.common import RequestModel, ResponseModel, not_blank


class ImplementationRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    contributors: str | None = None
    assumptions: str | None = None
    input_format: str | None = None
    parameter: str | None = None
    output_format: str | None = None
    link: str | None = None
    dependencies: str | None = None
    version: str | None = None
    license: str | None = None
    technology: str | None = None
    problem_statement: str | None = None
    # derived from the implemented algorithm when omitted
    implementation_kind: ImplementationKind | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return not_blank(v)


class ImplementationResponse(ResponseModel):
    id: UUID
    name: str
    description: str | None
    contributors: str | None
    assumptions: str | None
    input_format: str | None
    parameter: str | None
    output_format: str | None
    link: str | None
    dependencies: str | None
    version: str | None
    license: str | None
    technology: str | None
    problem_statement: str | None
    implementation_kind: ImplementationKind
    implemented_algorithm_id: UUID
    created_at: datetime
    last_modified_at: datetime


class ImplementationPackageRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    package_type: ImplementationPackageType


class ImplementationPackageResponse(ResponseModel):
    id: UUID
    implementation_id: UUID
    name: str
    description: str | None
    package_type: ImplementationPackageType
    created_at: datetime


class FileRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    mime_type: str | None = None
    file_url: str = Field(..., min_length=1, max_length=1000)
    implementation_package_id: UUID | None = None


class FileResponse(ResponseModel):
    id: UUID
    implementation_id: UUID
    implementation_package_id: UUID | None
    name: str
    mime_type: str | None
    file_url: str
    created_at: datetime
