# backend/atlas/api/algorithms.py
import uuid
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from atlas.api.crud import add_crud_routes, add_link_routes
from atlas.api.deps import Paging, get_algorithm_service, get_paging
from atlas.api.properties import add_property_routes
from atlas.models.enums import PropertyOwnerType
from atlas.schemas.algorithm import (
    AlgorithmRelationRequest,
    AlgorithmRelationResponse,
    AlgorithmRequest,
    AlgorithmResponse,
    PatternRelationRequest,
    PatternRelationResponse,
    SketchRequest,
    SketchResponse,
)
from atlas.schemas.classification import (
    ApplicationAreaResponse,
    LearningMethodResponse,
    ProblemTypeResponse,
    TagResponse,
)
from atlas.schemas.common import PageResponse, to_page
from atlas.schemas.publication import PublicationResponse
from atlas.services.algorithm_service import AlgorithmService

router = APIRouter(prefix="/algorithms", tags=["algorithms"])

add_crud_routes(router, get_algorithm_service, AlgorithmRequest, AlgorithmResponse)

add_link_routes(router, "publications", get_algorithm_service, "publications", PublicationResponse)
add_link_routes(router, "problem-types", get_algorithm_service, "problem_types", ProblemTypeResponse)
add_link_routes(router, "application-areas", get_algorithm_service, "application_areas", ApplicationAreaResponse)
add_link_routes(router, "learning-methods", get_algorithm_service, "learning_methods", LearningMethodResponse)
add_link_routes(router, "tags", get_algorithm_service, "tags", TagResponse, target_type=str, include_put=False)
add_property_routes(router, PropertyOwnerType.ALGORITHM)


@router.put("/{entity_id}/tags/{target_id}", status_code=status.HTTP_204_NO_CONTENT, name="link_algorithms_tags")
async def link_tag(
    entity_id: uuid.UUID,
    target_id: str,
    category: Optional[str] = Query(None, description="Category used if the tag is created"),
    service: AlgorithmService = Depends(get_algorithm_service),
):
    """Tag an algorithm; unknown tags are created on the fly."""
    await service.link_tag(entity_id, target_id, category)


# ============================================================================
# Algorithm relations
# ============================================================================


@router.get("/{algorithm_id}/algorithm-relations", response_model=PageResponse[AlgorithmRelationResponse])
async def list_algorithm_relations(
    algorithm_id: uuid.UUID,
    paging: Paging = Depends(get_paging),
    service: AlgorithmService = Depends(get_algorithm_service),
):
    """Relations where the algorithm is source or target."""
    result = await service.find_algorithm_relations(algorithm_id, paging.page, paging.size)
    return to_page(result, AlgorithmRelationResponse)


@router.post(
    "/{algorithm_id}/algorithm-relations",
    response_model=AlgorithmRelationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_algorithm_relation(
    algorithm_id: uuid.UUID,
    data: AlgorithmRelationRequest,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    return await service.add_algorithm_relation(algorithm_id, data)


@router.get("/{algorithm_id}/algorithm-relations/{relation_id}", response_model=AlgorithmRelationResponse)
async def get_algorithm_relation(
    algorithm_id: uuid.UUID,
    relation_id: uuid.UUID,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    return await service.find_algorithm_relation(algorithm_id, relation_id)


@router.put("/{algorithm_id}/algorithm-relations/{relation_id}", response_model=AlgorithmRelationResponse)
async def update_algorithm_relation(
    algorithm_id: uuid.UUID,
    relation_id: uuid.UUID,
    data: AlgorithmRelationRequest,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    return await service.update_algorithm_relation(algorithm_id, relation_id, data)


@router.delete("/{algorithm_id}/algorithm-relations/{relation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_algorithm_relation(
    algorithm_id: uuid.UUID,
    relation_id: uuid.UUID,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    await service.remove_algorithm_relation(algorithm_id, relation_id)


# ============================================================================
# Pattern relations
# ============================================================================


@router.get("/{algorithm_id}/pattern-relations", response_model=PageResponse[PatternRelationResponse])
async def list_pattern_relations(
    algorithm_id: uuid.UUID,
    paging: Paging = Depends(get_paging),
    service: AlgorithmService = Depends(get_algorithm_service),
):
    result = await service.find_pattern_relations(algorithm_id, paging.page, paging.size, paging.search)
    return to_page(result, PatternRelationResponse)


@router.post(
    "/{algorithm_id}/pattern-relations",
    response_model=PatternRelationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_pattern_relation(
    algorithm_id: uuid.UUID,
    data: PatternRelationRequest,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    return await service.create_pattern_relation(algorithm_id, data)


@router.get("/{algorithm_id}/pattern-relations/{relation_id}", response_model=PatternRelationResponse)
async def get_pattern_relation(
    algorithm_id: uuid.UUID,
    relation_id: uuid.UUID,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    return await service.find_pattern_relation(algorithm_id, relation_id)


@router.put("/{algorithm_id}/pattern-relations/{relation_id}", response_model=PatternRelationResponse)
async def update_pattern_relation(
    algorithm_id: uuid.UUID,
    relation_id: uuid.UUID,
    data: PatternRelationRequest,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    return await service.update_pattern_relation(algorithm_id, relation_id, data)


@router.delete("/{algorithm_id}/pattern-relations/{relation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pattern_relation(
    algorithm_id: uuid.UUID,
    relation_id: uuid.UUID,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    await service.delete_pattern_relation(algorithm_id, relation_id)


# ============================================================================
# Sketches
# ============================================================================


@router.get("/{algorithm_id}/sketches", response_model=PageResponse[SketchResponse])
async def list_sketches(
    algorithm_id: uuid.UUID,
    paging: Paging = Depends(get_paging),
    service: AlgorithmService = Depends(get_algorithm_service),
):
    result = await service.find_sketches(algorithm_id, paging.page, paging.size)
    return to_page(result, SketchResponse)


@router.post(
    "/{algorithm_id}/sketches",
    response_model=SketchResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_sketch(
    algorithm_id: uuid.UUID,
    data: SketchRequest,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    return await service.create_sketch(algorithm_id, data)


@router.get("/{algorithm_id}/sketches/{sketch_id}", response_model=SketchResponse)
async def get_sketch(
    algorithm_id: uuid.UUID,
    sketch_id: uuid.UUID,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    return await service.find_sketch(algorithm_id, sketch_id)


@router.put("/{algorithm_id}/sketches/{sketch_id}", response_model=SketchResponse)
async def update_sketch(
    algorithm_id: uuid.UUID,
    sketch_id: uuid.UUID,
    data: SketchRequest,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    return await service.update_sketch(algorithm_id, sketch_id, data)


@router.delete("/{algorithm_id}/sketches/{sketch_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sketch(
    algorithm_id: uuid.UUID,
    sketch_id: uuid.UUID,
    service: AlgorithmService = Depends(get_algorithm_service),
):
    await service.delete_sketch(algorithm_id, sketch_id)
