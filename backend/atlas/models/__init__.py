# Database models
from atlas.models.algorithm import Algorithm, AlgorithmRelation, PatternRelation, Sketch
from atlas.models.implementation import Implementation, ImplementationPackage, File
from atlas.models.compute_resource import (
    ComputeResource,
    ComputeResourceProperty,
    ComputeResourcePropertyType,
    PropertyOwner,
)
from atlas.models.platform import SoftwarePlatform, CloudService
from atlas.models.discussion import DiscussionTopic, DiscussionComment
from atlas.models.classification import (
    Tag,
    ProblemType,
    ApplicationArea,
    LearningMethod,
    PatternRelationType,
    AlgorithmRelationType,
)
from atlas.models.publication import Publication
from atlas.models.tosca import ToscaApplication
from atlas.models import associations

__all__ = [
    "Algorithm",
    "AlgorithmRelation",
    "PatternRelation",
    "Sketch",
    "Implementation",
    "ImplementationPackage",
    "File",
    "ComputeResource",
    "ComputeResourceProperty",
    "ComputeResourcePropertyType",
    "PropertyOwner",
    "SoftwarePlatform",
    "CloudService",
    "DiscussionTopic",
    "DiscussionComment",
    "Tag",
    "ProblemType",
    "ApplicationArea",
    "LearningMethod",
    "PatternRelationType",
    "AlgorithmRelationType",
    "Publication",
    "ToscaApplication",
    "associations",
]
