# backend/atlas/api/deps.py
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from atlas.core.config import settings
from atlas.core.database import get_db
from atlas.services.algorithm_service import AlgorithmService
from atlas.services.classification_service import (
    AlgorithmRelationTypeService,
    ApplicationAreaService,
    LearningMethodService,
    PatternRelationTypeService,
    ProblemTypeService,
    TagService,
)
from atlas.services.cloud_service_service import CloudServiceService
from atlas.services.compute_resource_property_service import (
    ComputeResourcePropertyService,
    ComputeResourcePropertyTypeService,
)
from atlas.services.compute_resource_service import ComputeResourceService
from atlas.services.discussion_service import DiscussionService
from atlas.services.implementation_service import ImplementationService
from atlas.services.publication_service import PublicationService
from atlas.services.software_platform_service import SoftwarePlatformService
from atlas.services.tosca_application_service import ToscaApplicationService


@dataclass
class Paging:
    page: int
    size: int
    search: Optional[str] = None


def get_paging(
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    search: Optional[str] = Query(None, description="Case-insensitive free-text filter"),
) -> Paging:
    return Paging(page=page, size=size, search=search or None)


def get_algorithm_service(db: AsyncSession = Depends(get_db)) -> AlgorithmService:
    return AlgorithmService(db)


def get_implementation_service(db: AsyncSession = Depends(get_db)) -> ImplementationService:
    return ImplementationService(db)


def get_compute_resource_service(db: AsyncSession = Depends(get_db)) -> ComputeResourceService:
    return ComputeResourceService(db)


def get_property_type_service(db: AsyncSession = Depends(get_db)) -> ComputeResourcePropertyTypeService:
    return ComputeResourcePropertyTypeService(db)


def get_property_service(db: AsyncSession = Depends(get_db)) -> ComputeResourcePropertyService:
    return ComputeResourcePropertyService(db)


def get_software_platform_service(db: AsyncSession = Depends(get_db)) -> SoftwarePlatformService:
    return SoftwarePlatformService(db)


def get_cloud_service_service(db: AsyncSession = Depends(get_db)) -> CloudServiceService:
    return CloudServiceService(db)


def get_discussion_service(db: AsyncSession = Depends(get_db)) -> DiscussionService:
    return DiscussionService(db)


def get_tag_service(db: AsyncSession = Depends(get_db)) -> TagService:
    return TagService(db)


def get_problem_type_service(db: AsyncSession = Depends(get_db)) -> ProblemTypeService:
    return ProblemTypeService(db)


def get_application_area_service(db: AsyncSession = Depends(get_db)) -> ApplicationAreaService:
    return ApplicationAreaService(db)


def get_learning_method_service(db: AsyncSession = Depends(get_db)) -> LearningMethodService:
    return LearningMethodService(db)


def get_pattern_relation_type_service(db: AsyncSession = Depends(get_db)) -> PatternRelationTypeService:
    return PatternRelationTypeService(db)


def get_algorithm_relation_type_service(db: AsyncSession = Depends(get_db)) -> AlgorithmRelationTypeService:
    return AlgorithmRelationTypeService(db)


def get_publication_service(db: AsyncSession = Depends(get_db)) -> PublicationService:
    return PublicationService(db)


def get_tosca_application_service(db: AsyncSession = Depends(get_db)) -> ToscaApplicationService:
    return ToscaApplicationService(db)
