# backend/atlas/api/implementations.py
"""Implementation endpoints.

Implementations are managed below their algorithm
(``/algorithms/{algorithm_id}/implementations``); every nested call first
verifies that the implementation belongs to that algorithm. A flat
read-only view is available under ``/implementations``.
"""

import uuid
from typing import Any, Optional, Type
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from atlas.api.deps import Paging, get_implementation_service, get_paging, get_property_service
from atlas.models.compute_resource import PropertyOwner
from atlas.models.enums import PropertyOwnerType
from atlas.schemas.classification import TagResponse
from atlas.schemas.common import PageResponse, to_page
from atlas.schemas.compute_resource import (
    ComputeResourcePropertyRequest,
    ComputeResourcePropertyResponse,
)
from atlas.schemas.implementation import (
    FileRequest,
    FileResponse,
    ImplementationPackageRequest,
    ImplementationPackageResponse,
    ImplementationRequest,
    ImplementationResponse,
)
from atlas.schemas.platform import SoftwarePlatformResponse
from atlas.schemas.publication import PublicationResponse
from atlas.services.compute_resource_property_service import ComputeResourcePropertyService
from atlas.services.implementation_service import ImplementationService

router = APIRouter(prefix="/implementations", tags=["implementations"])
nested_router = APIRouter(prefix="/algorithms", tags=["implementations"])

BASE = "/{algorithm_id}/implementations"
ITEM = BASE + "/{implementation_id}"


@router.get("", response_model=PageResponse[ImplementationResponse])
async def list_all_implementations(
    paging: Paging = Depends(get_paging),
    service: ImplementationService = Depends(get_implementation_service),
):
    """List implementations of all algorithms."""
    result = await service.find_all(paging.page, paging.size, paging.search)
    return to_page(result, ImplementationResponse)


@router.get("/{implementation_id}", response_model=ImplementationResponse)
async def get_any_implementation(
    implementation_id: uuid.UUID,
    service: ImplementationService = Depends(get_implementation_service),
):
    return await service.find_by_id(implementation_id)


# ============================================================================
# Implementation CRUD below an algorithm
# ============================================================================


@nested_router.get(BASE, response_model=PageResponse[ImplementationResponse])
async def list_implementations(
    algorithm_id: uuid.UUID,
    paging: Paging = Depends(get_paging),
    service: ImplementationService = Depends(get_implementation_service),
):
    result = await service.find_by_algorithm(algorithm_id, paging.page, paging.size, paging.search)
    return to_page(result, ImplementationResponse)


@nested_router.post(BASE, response_model=ImplementationResponse, status_code=status.HTTP_201_CREATED)
async def create_implementation(
    algorithm_id: uuid.UUID,
    data: ImplementationRequest,
    service: ImplementationService = Depends(get_implementation_service),
):
    return await service.create_for_algorithm(algorithm_id, data)


@nested_router.get(ITEM, response_model=ImplementationResponse)
async def get_implementation(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    service: ImplementationService = Depends(get_implementation_service),
):
    return await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)


@nested_router.put(ITEM, response_model=ImplementationResponse)
async def update_implementation(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    data: ImplementationRequest,
    service: ImplementationService = Depends(get_implementation_service),
):
    return await service.update_for_algorithm(algorithm_id, implementation_id, data)


@nested_router.delete(ITEM, status_code=status.HTTP_204_NO_CONTENT)
async def delete_implementation(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.delete_for_algorithm(algorithm_id, implementation_id)


# ============================================================================
# Links
# ============================================================================


def _add_link_routes(
    sub_path: str,
    link_name: str,
    response_model: Type[BaseModel],
    target_type: Any = uuid.UUID,
    include_put: bool = True,
) -> None:
    name = sub_path.replace("-", "_")

    @nested_router.get(
        f"{ITEM}/{sub_path}",
        response_model=PageResponse[response_model],
        name=f"list_implementation_{name}",
    )
    async def list_linked(
        algorithm_id: uuid.UUID,
        implementation_id: uuid.UUID,
        paging: Paging = Depends(get_paging),
        service: ImplementationService = Depends(get_implementation_service),
    ):
        await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
        link = getattr(service, link_name)
        result = await link.find_right(implementation_id, paging.page, paging.size, paging.search)
        return to_page(result, response_model)

    if include_put:
        @nested_router.put(
            f"{ITEM}/{sub_path}/{{target_id}}",
            status_code=status.HTTP_204_NO_CONTENT,
            name=f"link_implementation_{name}",
        )
        async def link_entities(
            algorithm_id: uuid.UUID,
            implementation_id: uuid.UUID,
            target_id: target_type,
            service: ImplementationService = Depends(get_implementation_service),
        ):
            await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
            await getattr(service, link_name).add(implementation_id, target_id)

    @nested_router.delete(
        f"{ITEM}/{sub_path}/{{target_id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        name=f"unlink_implementation_{name}",
    )
    async def unlink_entities(
        algorithm_id: uuid.UUID,
        implementation_id: uuid.UUID,
        target_id: target_type,
        service: ImplementationService = Depends(get_implementation_service),
    ):
        await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
        await getattr(service, link_name).remove(implementation_id, target_id)


_add_link_routes("publications", "publications", PublicationResponse)
_add_link_routes("software-platforms", "software_platforms", SoftwarePlatformResponse)
_add_link_routes("tags", "tags", TagResponse, target_type=str, include_put=False)


@nested_router.put(ITEM + "/tags/{target_id}", status_code=status.HTTP_204_NO_CONTENT)
async def link_implementation_tag(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    target_id: str,
    category: Optional[str] = Query(None, description="Category used if the tag is created"),
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    await service.link_tag(implementation_id, target_id, category)


# ============================================================================
# Compute resource properties
# ============================================================================

PROPERTIES = ITEM + "/compute-resource-properties"


def _owner(implementation_id: uuid.UUID) -> PropertyOwner:
    return PropertyOwner(PropertyOwnerType.IMPLEMENTATION, implementation_id)


@nested_router.get(PROPERTIES, response_model=PageResponse[ComputeResourcePropertyResponse])
async def list_implementation_properties(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    paging: Paging = Depends(get_paging),
    service: ImplementationService = Depends(get_implementation_service),
    properties: ComputeResourcePropertyService = Depends(get_property_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    result = await properties.find_all(_owner(implementation_id), paging.page, paging.size)
    return to_page(result, ComputeResourcePropertyResponse)


@nested_router.post(
    PROPERTIES, response_model=ComputeResourcePropertyResponse, status_code=status.HTTP_201_CREATED
)
async def create_implementation_property(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    data: ComputeResourcePropertyRequest,
    service: ImplementationService = Depends(get_implementation_service),
    properties: ComputeResourcePropertyService = Depends(get_property_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    return await properties.create(_owner(implementation_id), data)


@nested_router.get(PROPERTIES + "/{property_id}", response_model=ComputeResourcePropertyResponse)
async def get_implementation_property(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    property_id: uuid.UUID,
    service: ImplementationService = Depends(get_implementation_service),
    properties: ComputeResourcePropertyService = Depends(get_property_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    return await properties.find_by_id(_owner(implementation_id), property_id)


@nested_router.put(PROPERTIES + "/{property_id}", response_model=ComputeResourcePropertyResponse)
async def update_implementation_property(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    property_id: uuid.UUID,
    data: ComputeResourcePropertyRequest,
    service: ImplementationService = Depends(get_implementation_service),
    properties: ComputeResourcePropertyService = Depends(get_property_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    return await properties.update(_owner(implementation_id), property_id, data)


@nested_router.delete(PROPERTIES + "/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_implementation_property(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    property_id: uuid.UUID,
    service: ImplementationService = Depends(get_implementation_service),
    properties: ComputeResourcePropertyService = Depends(get_property_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    await properties.delete(_owner(implementation_id), property_id)


# ============================================================================
# Implementation packages
# ============================================================================

PACKAGES = ITEM + "/implementation-packages"


@nested_router.get(PACKAGES, response_model=PageResponse[ImplementationPackageResponse])
async def list_packages(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    paging: Paging = Depends(get_paging),
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    result = await service.find_packages(implementation_id, paging.page, paging.size, paging.search)
    return to_page(result, ImplementationPackageResponse)


@nested_router.post(PACKAGES, response_model=ImplementationPackageResponse, status_code=status.HTTP_201_CREATED)
async def create_package(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    data: ImplementationPackageRequest,
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    return await service.create_package(implementation_id, data)


@nested_router.get(PACKAGES + "/{package_id}", response_model=ImplementationPackageResponse)
async def get_package(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    package_id: uuid.UUID,
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    return await service.find_package(implementation_id, package_id)


@nested_router.put(PACKAGES + "/{package_id}", response_model=ImplementationPackageResponse)
async def update_package(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    package_id: uuid.UUID,
    data: ImplementationPackageRequest,
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    return await service.update_package(implementation_id, package_id, data)


@nested_router.delete(PACKAGES + "/{package_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_package(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    package_id: uuid.UUID,
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    await service.delete_package(implementation_id, package_id)


# ============================================================================
# Files
# ============================================================================

FILES = ITEM + "/files"


@nested_router.get(FILES, response_model=PageResponse[FileResponse])
async def list_files(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    paging: Paging = Depends(get_paging),
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    result = await service.find_files(implementation_id, paging.page, paging.size, paging.search)
    return to_page(result, FileResponse)


@nested_router.post(FILES, response_model=FileResponse, status_code=status.HTTP_201_CREATED)
async def create_file(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    data: FileRequest,
    service: ImplementationService = Depends(get_implementation_service),
):
    """Register file metadata; the content itself lives at ``file_url``."""
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    return await service.create_file(implementation_id, data)


@nested_router.get(FILES + "/{file_id}", response_model=FileResponse)
async def get_file(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    file_id: uuid.UUID,
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    return await service.find_file(implementation_id, file_id)


@nested_router.put(FILES + "/{file_id}", response_model=FileResponse)
async def update_file(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    file_id: uuid.UUID,
    data: FileRequest,
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    return await service.update_file(implementation_id, file_id, data)


@nested_router.delete(FILES + "/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(
    algorithm_id: uuid.UUID,
    implementation_id: uuid.UUID,
    file_id: uuid.UUID,
    service: ImplementationService = Depends(get_implementation_service),
):
    await service.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
    await service.delete_file(implementation_id, file_id)
