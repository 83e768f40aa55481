# backend/atlas/api/platforms.py
"""Software platforms, cloud services and the links between them."""

from fastapi import APIRouter

from atlas.api.crud import add_crud_routes, add_link_routes
from atlas.api.deps import (
    get_cloud_service_service,
    get_implementation_service,
    get_software_platform_service,
)
from atlas.schemas.compute_resource import ComputeResourceResponse
from atlas.schemas.implementation import ImplementationResponse
from atlas.schemas.platform import (
    CloudServiceRequest,
    CloudServiceResponse,
    SoftwarePlatformRequest,
    SoftwarePlatformResponse,
)

software_platforms_router = APIRouter(prefix="/software-platforms", tags=["software-platforms"])

add_crud_routes(
    software_platforms_router, get_software_platform_service, SoftwarePlatformRequest, SoftwarePlatformResponse
)
add_link_routes(
    software_platforms_router, "cloud-services", get_software_platform_service, "cloud_services",
    CloudServiceResponse,
)
add_link_routes(
    software_platforms_router, "compute-resources", get_software_platform_service, "compute_resources",
    ComputeResourceResponse,
)
add_link_routes(
    software_platforms_router, "implementations", get_implementation_service, "software_platforms",
    ImplementationResponse, reverse=True,
)

cloud_services_router = APIRouter(prefix="/cloud-services", tags=["cloud-services"])

add_crud_routes(cloud_services_router, get_cloud_service_service, CloudServiceRequest, CloudServiceResponse)
add_link_routes(
    cloud_services_router, "compute-resources", get_cloud_service_service, "compute_resources",
    ComputeResourceResponse,
)
add_link_routes(
    cloud_services_router, "software-platforms", get_software_platform_service, "cloud_services",
    SoftwarePlatformResponse, reverse=True,
)
