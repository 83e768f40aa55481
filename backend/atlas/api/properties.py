# backend/atlas/api/properties.py
"""Compute-resource-property endpoints shared by the owning resources."""

import uuid
from fastapi import APIRouter, Depends, status

from atlas.api.deps import Paging, get_paging, get_property_service
from atlas.models.compute_resource import PropertyOwner
from atlas.models.enums import PropertyOwnerType
from atlas.schemas.common import PageResponse, to_page
from atlas.schemas.compute_resource import (
    ComputeResourcePropertyRequest,
    ComputeResourcePropertyResponse,
)
from atlas.services.compute_resource_property_service import ComputeResourcePropertyService

SUB_PATH = "compute-resource-properties"


def add_property_routes(router: APIRouter, owner_type: PropertyOwnerType) -> None:
    """Register property CRUD under ``/{entity_id}/compute-resource-properties``."""
    owner_name = owner_type.value.lower()

    @router.get(
        f"/{{entity_id}}/{SUB_PATH}",
        response_model=PageResponse[ComputeResourcePropertyResponse],
        name=f"list_{owner_name}_properties",
    )
    async def list_properties(
        entity_id: uuid.UUID,
        paging: Paging = Depends(get_paging),
        service: ComputeResourcePropertyService = Depends(get_property_service),
    ):
        result = await service.find_all(PropertyOwner(owner_type, entity_id), paging.page, paging.size)
        return to_page(result, ComputeResourcePropertyResponse)

    @router.post(
        f"/{{entity_id}}/{SUB_PATH}",
        response_model=ComputeResourcePropertyResponse,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{owner_name}_property",
    )
    async def create_property(
        entity_id: uuid.UUID,
        data: ComputeResourcePropertyRequest,
        service: ComputeResourcePropertyService = Depends(get_property_service),
    ):
        return await service.create(PropertyOwner(owner_type, entity_id), data)

    @router.get(
        f"/{{entity_id}}/{SUB_PATH}/{{property_id}}",
        response_model=ComputeResourcePropertyResponse,
        name=f"get_{owner_name}_property",
    )
    async def get_property(
        entity_id: uuid.UUID,
        property_id: uuid.UUID,
        service: ComputeResourcePropertyService = Depends(get_property_service),
    ):
        return await service.find_by_id(PropertyOwner(owner_type, entity_id), property_id)

    @router.put(
        f"/{{entity_id}}/{SUB_PATH}/{{property_id}}",
        response_model=ComputeResourcePropertyResponse,
        name=f"update_{owner_name}_property",
    )
    async def update_property(
        entity_id: uuid.UUID,
        property_id: uuid.UUID,
        data: ComputeResourcePropertyRequest,
        service: ComputeResourcePropertyService = Depends(get_property_service),
    ):
        return await service.update(PropertyOwner(owner_type, entity_id), property_id, data)

    @router.delete(
        f"/{{entity_id}}/{SUB_PATH}/{{property_id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        name=f"delete_{owner_name}_property",
    )
    async def delete_property(
        entity_id: uuid.UUID,
        property_id: uuid.UUID,
        service: ComputeResourcePropertyService = Depends(get_property_service),
    ):
        await service.delete(PropertyOwner(owner_type, entity_id), property_id)
