# backend/atlas/api/compute_resources.py
from fastapi import APIRouter

from atlas.api.crud import add_crud_routes, add_link_routes
from atlas.api.deps import (
    get_cloud_service_service,
    get_compute_resource_service,
    get_property_type_service,
    get_software_platform_service,
)
from atlas.api.properties import add_property_routes
from atlas.models.enums import PropertyOwnerType
from atlas.schemas.compute_resource import (
    ComputeResourcePropertyTypeRequest,
    ComputeResourcePropertyTypeResponse,
    ComputeResourceRequest,
    ComputeResourceResponse,
)
from atlas.schemas.platform import CloudServiceResponse, SoftwarePlatformResponse

router = APIRouter(prefix="/compute-resources", tags=["compute-resources"])

add_crud_routes(router, get_compute_resource_service, ComputeResourceRequest, ComputeResourceResponse)
add_property_routes(router, PropertyOwnerType.COMPUTE_RESOURCE)
add_link_routes(
    router, "software-platforms", get_software_platform_service, "compute_resources",
    SoftwarePlatformResponse, reverse=True,
)
add_link_routes(
    router, "cloud-services", get_cloud_service_service, "compute_resources",
    CloudServiceResponse, reverse=True,
)

property_types_router = APIRouter(
    prefix="/compute-resource-property-types", tags=["compute-resource-property-types"]
)

add_crud_routes(
    property_types_router,
    get_property_type_service,
    ComputeResourcePropertyTypeRequest,
    ComputeResourcePropertyTypeResponse,
)
