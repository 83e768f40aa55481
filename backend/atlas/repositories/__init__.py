"""Repository layer for database operations.

This module provides repository classes for the catalog entities and the
join tables linking them.
"""

from atlas.repositories.base import AssociationRepository, CrudRepository, PageResult
from atlas.repositories.algorithm_repository import (
    AlgorithmRelationRepository,
    AlgorithmRepository,
    PatternRelationRepository,
    SketchRepository,
)
from atlas.repositories.implementation_repository import (
    FileRepository,
    ImplementationPackageRepository,
    ImplementationRepository,
)
from atlas.repositories.compute_resource_repository import (
    ComputeResourcePropertyRepository,
    ComputeResourcePropertyTypeRepository,
    ComputeResourceRepository,
)
from atlas.repositories.platform_repository import CloudServiceRepository, SoftwarePlatformRepository
from atlas.repositories.discussion_repository import (
    DiscussionCommentRepository,
    DiscussionTopicRepository,
)
from atlas.repositories.classification_repository import (
    AlgorithmRelationTypeRepository,
    ApplicationAreaRepository,
    LearningMethodRepository,
    PatternRelationTypeRepository,
    ProblemTypeRepository,
    TagRepository,
)
from atlas.repositories.publication_repository import PublicationRepository, ToscaApplicationRepository

__all__ = [
    "AssociationRepository",
    "CrudRepository",
    "PageResult",
    "AlgorithmRepository",
    "AlgorithmRelationRepository",
    "PatternRelationRepository",
    "SketchRepository",
    "ImplementationRepository",
    "ImplementationPackageRepository",
    "FileRepository",
    "ComputeResourceRepository",
    "ComputeResourcePropertyTypeRepository",
    "ComputeResourcePropertyRepository",
    "SoftwarePlatformRepository",
    "CloudServiceRepository",
    "DiscussionTopicRepository",
    "DiscussionCommentRepository",
    "TagRepository",
    "ProblemTypeRepository",
    "ApplicationAreaRepository",
    "LearningMethodRepository",
    "PatternRelationTypeRepository",
    "AlgorithmRelationTypeRepository",
    "PublicationRepository",
    "ToscaApplicationRepository",
]
