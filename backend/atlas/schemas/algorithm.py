# backend/atlas/schemas/algorithm.py
from datetime import datetime
from uuid import UUID
from pydantic import Field, field_validator

from atlas.models.enums import ComputationModel, QuantumComputationModel
from atlas.schemas.classification import AlgorithmRelationTypeResponse, PatternRelationTypeResponse
from atlas.schemas.common import RequestModel, ResponseModel, not_blank


class AlgorithmRequest(RequestModel):
    """Create/update body of an algorithm.

    The quantum-only fields are ignored for CLASSIC algorithms.
    """

    name: str = Field(..., min_length=1, max_length=255)
    acronym: str | None = None
    intent: str | None = None
    problem: str | None = None
    input_format: str | None = None
    algo_parameter: str | None = None
    output_format: str | None = None
    solution: str | None = None
    assumptions: str | None = None
    computation_model: ComputationModel
    nisq_ready: bool | None = None
    quantum_computation_model: QuantumComputationModel | None = None
    speed_up: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return not_blank(v)


class AlgorithmResponse(ResponseModel):
    id: UUID
    name: str
    acronym: str | None
    intent: str | None
    problem: str | None
    input_format: str | None
    algo_parameter: str | None
    output_format: str | None
    solution: str | None
    assumptions: str | None
    computation_model: ComputationModel
    nisq_ready: bool | None
    quantum_computation_model: QuantumComputationModel | None
    speed_up: str | None
    created_at: datetime
    last_modified_at: datetime


class AlgorithmRelationRequest(RequestModel):
    target_algorithm_id: UUID
    algorithm_relation_type_id: UUID
    description: str | None = None


class AlgorithmRelationResponse(ResponseModel):
    id: UUID
    source_algorithm_id: UUID
    target_algorithm_id: UUID
    algorithm_relation_type_id: UUID
    algorithm_relation_type: AlgorithmRelationTypeResponse
    description: str | None


class PatternRelationRequest(RequestModel):
    pattern: str = Field(..., min_length=1, max_length=1000)
    pattern_relation_type_id: UUID
    description: str | None = None


class PatternRelationResponse(ResponseModel):
    id: UUID
    algorithm_id: UUID
    pattern: str
    pattern_relation_type_id: UUID
    pattern_relation_type: PatternRelationTypeResponse
    description: str | None


class SketchRequest(RequestModel):
    image_url: str | None = None
    description: str | None = None


class SketchResponse(ResponseModel):
    id: UUID
    algorithm_id: UUID
    image_url: str | None
    description: str | None
    created_at: datetime
