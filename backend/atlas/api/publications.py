# backend/atlas/api/publications.py
from fastapi import APIRouter

from atlas.api.crud import add_crud_routes, add_link_routes
from atlas.api.deps import (
    get_algorithm_service,
    get_implementation_service,
    get_publication_service,
    get_tosca_application_service,
)
from atlas.schemas.algorithm import AlgorithmResponse
from atlas.schemas.implementation import ImplementationResponse
from atlas.schemas.publication import (
    PublicationRequest,
    PublicationResponse,
    ToscaApplicationRequest,
    ToscaApplicationResponse,
)

router = APIRouter(prefix="/publications", tags=["publications"])

add_crud_routes(router, get_publication_service, PublicationRequest, PublicationResponse)
add_link_routes(
    router, "algorithms", get_algorithm_service, "publications", AlgorithmResponse, reverse=True,
)
add_link_routes(
    router, "implementations", get_implementation_service, "publications", ImplementationResponse, reverse=True,
)

tosca_router = APIRouter(prefix="/tosca-applications", tags=["tosca-applications"])

add_crud_routes(tosca_router, get_tosca_application_service, ToscaApplicationRequest, ToscaApplicationResponse)
