"""Algorithm aggregate: algorithms, their relations, pattern relations, sketches and links."""

import logging
import uuid
from typing import Optional
from pydantic import BaseModel

from atlas.core.exceptions import (
    EntityNotFoundError,
    EntityReferenceConstraintViolationError,
    InvalidInputError,
)
from atlas.models.algorithm import Algorithm, AlgorithmRelation, PatternRelation, Sketch
from atlas.models.associations import (
    algorithm_application_areas,
    algorithm_learning_methods,
    algorithm_problem_types,
    algorithm_publications,
    algorithm_tags,
)
from atlas.models.enums import ComputationModel, PropertyOwnerType
from atlas.repositories.algorithm_repository import (
    AlgorithmRelationRepository,
    AlgorithmRepository,
    PatternRelationRepository,
    SketchRepository,
)
from atlas.repositories.base import PageResult
from atlas.repositories.classification_repository import (
    AlgorithmRelationTypeRepository,
    ApplicationAreaRepository,
    LearningMethodRepository,
    PatternRelationTypeRepository,
    ProblemTypeRepository,
    TagRepository,
)
from atlas.repositories.compute_resource_repository import ComputeResourcePropertyRepository
from atlas.repositories.implementation_repository import ImplementationRepository
from atlas.repositories.publication_repository import PublicationRepository
from atlas.services.base import CrudService, Link

logger = logging.getLogger(__name__)

# Only meaningful for QUANTUM and HYBRID algorithms
QUANTUM_FIELDS = ("nisq_ready", "quantum_computation_model", "speed_up")


def _variant_values(data: BaseModel) -> dict:
    values = data.model_dump()
    if values["computation_model"] == ComputationModel.CLASSIC:
        for field in QUANTUM_FIELDS:
            values[field] = None
    return values


class AlgorithmService(CrudService[Algorithm]):
    """Algorithms and everything they own.

    Deleting an algorithm removes its relations, pattern relations, sketches
    and properties together with its link rows, but never the shared lookup
    entities it is linked to. It is refused while implementations exist.
    """

    repository_class = AlgorithmRepository

    def __init__(self, session):
        super().__init__(session)
        self.relations = AlgorithmRelationRepository(session)
        self.relation_types = AlgorithmRelationTypeRepository(session)
        self.pattern_relations = PatternRelationRepository(session)
        self.pattern_relation_types = PatternRelationTypeRepository(session)
        self.sketches = SketchRepository(session)

        self.tags = Link(session, algorithm_tags, self.repository, "algorithm_id", TagRepository(session), "tag_value")
        self.publications = Link(
            session, algorithm_publications, self.repository, "algorithm_id",
            PublicationRepository(session), "publication_id",
        )
        self.problem_types = Link(
            session, algorithm_problem_types, self.repository, "algorithm_id",
            ProblemTypeRepository(session), "problem_type_id",
        )
        self.application_areas = Link(
            session, algorithm_application_areas, self.repository, "algorithm_id",
            ApplicationAreaRepository(session), "application_area_id",
        )
        self.learning_methods = Link(
            session, algorithm_learning_methods, self.repository, "algorithm_id",
            LearningMethodRepository(session), "learning_method_id",
        )

    def _build(self, data: BaseModel) -> Algorithm:
        return Algorithm(**_variant_values(data))

    def _apply(self, entity: Algorithm, data: BaseModel) -> None:
        for field, value in _variant_values(data).items():
            setattr(entity, field, value)

    async def _before_delete(self, entity: Algorithm) -> None:
        implementations = await ImplementationRepository(self.session).count_by_algorithm(entity.id)
        if implementations:
            raise EntityReferenceConstraintViolationError(
                f'Algorithm "{entity.id}" is still implemented by {implementations} implementations'
            )

        await self.relations.delete_where(AlgorithmRelationRepository.involving(entity.id))
        await self.pattern_relations.delete_where(PatternRelation.algorithm_id == entity.id)
        await self.sketches.delete_where(Sketch.algorithm_id == entity.id)
        await ComputeResourcePropertyRepository(self.session).delete_by_owner(
            PropertyOwnerType.ALGORITHM, entity.id
        )
        for link in (self.tags, self.publications, self.problem_types, self.application_areas, self.learning_methods):
            await link.association.unlink_all_left(entity.id)

    async def link_tag(self, algorithm_id: uuid.UUID, value: str, category: Optional[str] = None) -> None:
        """Link a tag, creating it on first use."""
        await self.repository.get_or_raise(algorithm_id)
        await self.tags.right.get_or_create(value, category)
        await self.tags.add(algorithm_id, value)

    # Algorithm relations

    async def find_algorithm_relations(
        self, algorithm_id: uuid.UUID, page: int, size: int
    ) -> PageResult[AlgorithmRelation]:
        """Relations in which the algorithm is either source or target."""
        await self.repository.get_or_raise(algorithm_id)
        return await self.relations.find_page(page, size, AlgorithmRelationRepository.involving(algorithm_id))

    async def find_algorithm_relation(self, algorithm_id: uuid.UUID, relation_id: uuid.UUID) -> AlgorithmRelation:
        await self.repository.get_or_raise(algorithm_id)
        relation = await self.relations.get_or_raise(relation_id)
        if algorithm_id not in (relation.source_algorithm_id, relation.target_algorithm_id):
            raise EntityNotFoundError("AlgorithmRelation", relation_id)
        return relation

    async def _resolve_relation_ends(self, source_id: uuid.UUID, data: BaseModel):
        await self.repository.get_or_raise(source_id)
        await self.repository.get_or_raise(data.target_algorithm_id)
        relation_type = await self.relation_types.get_or_raise(data.algorithm_relation_type_id)
        if source_id == data.target_algorithm_id:
            raise InvalidInputError("An algorithm cannot be related to itself")
        return relation_type

    async def add_algorithm_relation(self, source_id: uuid.UUID, data: BaseModel) -> AlgorithmRelation:
        """Relate ``source_id`` to another algorithm.

        Re-adding an existing (source, target, type) triple only refreshes its
        description.

        Args:
            source_id: Source algorithm
            data: Target algorithm, relation type and description

        Returns:
            The created or refreshed relation

        Raises:
            EntityNotFoundError: If an algorithm or the relation type is unknown
            InvalidInputError: If source and target are the same algorithm
        """
        relation_type = await self._resolve_relation_ends(source_id, data)
        relation = await self.relations.find_by_triple(
            source_id, data.target_algorithm_id, data.algorithm_relation_type_id
        )
        if relation is not None:
            relation.description = data.description
        else:
            relation = AlgorithmRelation(
                source_algorithm_id=source_id,
                target_algorithm_id=data.target_algorithm_id,
                algorithm_relation_type_id=relation_type.id,
                algorithm_relation_type=relation_type,
                description=data.description,
            )
            await self.relations.add(relation)
        await self.session.commit()
        logger.info(f"Saved algorithm relation {relation.id} from {source_id} to {data.target_algorithm_id}")
        return relation

    async def update_algorithm_relation(
        self, algorithm_id: uuid.UUID, relation_id: uuid.UUID, data: BaseModel
    ) -> AlgorithmRelation:
        relation = await self.find_algorithm_relation(algorithm_id, relation_id)
        relation_type = await self._resolve_relation_ends(relation.source_algorithm_id, data)
        clash = await self.relations.find_by_triple(
            relation.source_algorithm_id, data.target_algorithm_id, data.algorithm_relation_type_id
        )
        if clash is not None and clash.id != relation.id:
            raise InvalidInputError("An identical algorithm relation already exists")

        relation.target_algorithm_id = data.target_algorithm_id
        relation.algorithm_relation_type_id = relation_type.id
        relation.algorithm_relation_type = relation_type
        relation.description = data.description
        await self.session.flush()
        await self.session.commit()
        logger.info(f"Updated algorithm relation {relation_id}")
        return relation

    async def remove_algorithm_relation(self, algorithm_id: uuid.UUID, relation_id: uuid.UUID) -> None:
        """Delete a relation of the algorithm; unknown or foreign relations are ignored."""
        await self.repository.get_or_raise(algorithm_id)
        relation = await self.relations.get_by_id(relation_id)
        if relation is None or algorithm_id not in (relation.source_algorithm_id, relation.target_algorithm_id):
            return
        await self.relations.delete(relation)
        await self.session.commit()
        logger.info(f"Removed algorithm relation {relation_id}")

    # Pattern relations

    async def find_pattern_relations(
        self, algorithm_id: uuid.UUID, page: int, size: int, search: Optional[str] = None
    ) -> PageResult[PatternRelation]:
        await self.repository.get_or_raise(algorithm_id)
        return await self.pattern_relations.find_page(
            page, size, PatternRelation.algorithm_id == algorithm_id, search=search
        )

    async def find_pattern_relation(self, algorithm_id: uuid.UUID, relation_id: uuid.UUID) -> PatternRelation:
        await self.repository.get_or_raise(algorithm_id)
        relation = await self.pattern_relations.get_or_raise(relation_id)
        if relation.algorithm_id != algorithm_id:
            raise EntityNotFoundError("PatternRelation", relation_id)
        return relation

    async def create_pattern_relation(self, algorithm_id: uuid.UUID, data: BaseModel) -> PatternRelation:
        await self.repository.get_or_raise(algorithm_id)
        relation_type = await self.pattern_relation_types.get_or_raise(data.pattern_relation_type_id)
        relation = PatternRelation(
            algorithm_id=algorithm_id,
            pattern=data.pattern,
            pattern_relation_type_id=relation_type.id,
            pattern_relation_type=relation_type,
            description=data.description,
        )
        await self.pattern_relations.add(relation)
        await self.session.commit()
        logger.info(f"Created pattern relation {relation.id} for algorithm {algorithm_id}")
        return relation

    async def update_pattern_relation(
        self, algorithm_id: uuid.UUID, relation_id: uuid.UUID, data: BaseModel
    ) -> PatternRelation:
        relation = await self.find_pattern_relation(algorithm_id, relation_id)
        relation_type = await self.pattern_relation_types.get_or_raise(data.pattern_relation_type_id)
        relation.pattern = data.pattern
        relation.pattern_relation_type_id = relation_type.id
        relation.pattern_relation_type = relation_type
        relation.description = data.description
        await self.session.flush()
        await self.session.commit()
        return relation

    async def delete_pattern_relation(self, algorithm_id: uuid.UUID, relation_id: uuid.UUID) -> None:
        relation = await self.find_pattern_relation(algorithm_id, relation_id)
        await self.pattern_relations.delete(relation)
        await self.session.commit()
        logger.info(f"Deleted pattern relation {relation_id}")

    # Sketches

    async def find_sketches(self, algorithm_id: uuid.UUID, page: int, size: int) -> PageResult[Sketch]:
        await self.repository.get_or_raise(algorithm_id)
        return await self.sketches.find_page(page, size, Sketch.algorithm_id == algorithm_id)

    async def find_sketch(self, algorithm_id: uuid.UUID, sketch_id: uuid.UUID) -> Sketch:
        await self.repository.get_or_raise(algorithm_id)
        sketch = await self.sketches.get_or_raise(sketch_id)
        if sketch.algorithm_id != algorithm_id:
            raise EntityNotFoundError("Sketch", sketch_id)
        return sketch

    async def create_sketch(self, algorithm_id: uuid.UUID, data: BaseModel) -> Sketch:
        await self.repository.get_or_raise(algorithm_id)
        sketch = await self.sketches.add(Sketch(algorithm_id=algorithm_id, **data.model_dump()))
        await self.session.commit()
        return sketch

    async def update_sketch(self, algorithm_id: uuid.UUID, sketch_id: uuid.UUID, data: BaseModel) -> Sketch:
        sketch = await self.find_sketch(algorithm_id, sketch_id)
        for field, value in data.model_dump().items():
            setattr(sketch, field, value)
        await self.session.flush()
        await self.session.commit()
        return sketch

    async def delete_sketch(self, algorithm_id: uuid.UUID, sketch_id: uuid.UUID) -> None:
        sketch = await self.find_sketch(algorithm_id, sketch_id)
        await self.sketches.delete(sketch)
        await self.session.commit()
