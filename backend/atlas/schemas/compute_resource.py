# backend/atlas/schemas/compute_resource.py
from datetime import datetime
from uuid import UUID
from pydantic import Field, field_validator

from atlas.models.enums import (
    ComputeResourceKind,
    ComputeResourcePropertyDataType,
    PropertyOwnerType,
    QuantumComputationModel,
)
from atlas.schemas.common import RequestModel, ResponseModel, not_blank


class ComputeResourceRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    vendor: str | None = None
    technology: str | None = None
    quantum_computation_model: QuantumComputationModel | None = None
    resource_kind: ComputeResourceKind = ComputeResourceKind.QPU
    local_execution: bool | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return not_blank(v)


class ComputeResourceResponse(ResponseModel):
    id: UUID
    name: str
    vendor: str | None
    technology: str | None
    quantum_computation_model: QuantumComputationModel | None
    resource_kind: ComputeResourceKind
    local_execution: bool | None
    created_at: datetime
    last_modified_at: datetime


class ComputeResourcePropertyTypeRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=255)
    datatype: ComputeResourcePropertyDataType
    description: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return not_blank(v)


class ComputeResourcePropertyTypeResponse(ResponseModel):
    id: UUID
    name: str
    datatype: ComputeResourcePropertyDataType
    description: str | None


class ComputeResourcePropertyRequest(RequestModel):
    type_id: UUID
    value: str


class ComputeResourcePropertyResponse(ResponseModel):
    id: UUID
    value: str
    type: ComputeResourcePropertyTypeResponse
    owner_type: PropertyOwnerType
    owner_id: UUID
