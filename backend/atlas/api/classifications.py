# backend/atlas/api/classifications.py
"""Lookup resources: tags, problem types, application areas, learning methods and relation types."""

import uuid
from fastapi import APIRouter, Depends

from atlas.api.crud import add_crud_routes, add_link_routes
from atlas.api.deps import (
    get_algorithm_relation_type_service,
    get_algorithm_service,
    get_application_area_service,
    get_implementation_service,
    get_learning_method_service,
    get_pattern_relation_type_service,
    get_problem_type_service,
    get_tag_service,
)
from atlas.schemas.algorithm import AlgorithmResponse
from atlas.schemas.classification import (
    AlgorithmRelationTypeRequest,
    AlgorithmRelationTypeResponse,
    ApplicationAreaRequest,
    ApplicationAreaResponse,
    LearningMethodRequest,
    LearningMethodResponse,
    PatternRelationTypeRequest,
    PatternRelationTypeResponse,
    ProblemTypeRequest,
    ProblemTypeResponse,
    TagCreate,
    TagResponse,
    TagUpdate,
)
from atlas.schemas.implementation import ImplementationResponse
from atlas.services.classification_service import ProblemTypeService

tags_router = APIRouter(prefix="/tags", tags=["tags"])

add_crud_routes(tags_router, get_tag_service, TagCreate, TagResponse, update_model=TagUpdate, key_type=str)
add_link_routes(
    tags_router, "algorithms", get_algorithm_service, "tags", AlgorithmResponse,
    reverse=True, owner_type=str, include_put=False,
)
add_link_routes(
    tags_router, "implementations", get_implementation_service, "tags", ImplementationResponse,
    reverse=True, owner_type=str, include_put=False,
)

problem_types_router = APIRouter(prefix="/problem-types", tags=["problem-types"])


@problem_types_router.get("/{problem_type_id}/problem-type-parent-tree", response_model=list[ProblemTypeResponse])
async def get_parent_tree(
    problem_type_id: uuid.UUID,
    service: ProblemTypeService = Depends(get_problem_type_service),
):
    """The problem type followed by all its ancestors up to the root."""
    return await service.find_parent_list(problem_type_id)


add_crud_routes(problem_types_router, get_problem_type_service, ProblemTypeRequest, ProblemTypeResponse)
add_link_routes(
    problem_types_router, "algorithms", get_algorithm_service, "problem_types", AlgorithmResponse,
    reverse=True, include_put=False,
)

application_areas_router = APIRouter(prefix="/application-areas", tags=["application-areas"])

add_crud_routes(
    application_areas_router, get_application_area_service, ApplicationAreaRequest, ApplicationAreaResponse
)
add_link_routes(
    application_areas_router, "algorithms", get_algorithm_service, "application_areas", AlgorithmResponse,
    reverse=True, include_put=False,
)

learning_methods_router = APIRouter(prefix="/learning-methods", tags=["learning-methods"])

add_crud_routes(
    learning_methods_router, get_learning_method_service, LearningMethodRequest, LearningMethodResponse
)
add_link_routes(
    learning_methods_router, "algorithms", get_algorithm_service, "learning_methods", AlgorithmResponse,
    reverse=True, include_put=False,
)

pattern_relation_types_router = APIRouter(prefix="/pattern-relation-types", tags=["pattern-relation-types"])

add_crud_routes(
    pattern_relation_types_router,
    get_pattern_relation_type_service,
    PatternRelationTypeRequest,
    PatternRelationTypeResponse,
)

algorithm_relation_types_router = APIRouter(prefix="/algorithm-relation-types", tags=["algorithm-relation-types"])

add_crud_routes(
    algorithm_relation_types_router,
    get_algorithm_relation_type_service,
    AlgorithmRelationTypeRequest,
    AlgorithmRelationTypeResponse,
)
