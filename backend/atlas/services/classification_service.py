"""Services for the classification lookups (tags, problem types, relation types, ...)."""

import logging
import uuid
from typing import List, Optional
from pydantic import BaseModel

from atlas.core.exceptions import EntityReferenceConstraintViolationError, InvalidInputError
from atlas.models.algorithm import AlgorithmRelation, PatternRelation
from atlas.models.associations import (
    algorithm_application_areas,
    algorithm_learning_methods,
    algorithm_problem_types,
    algorithm_tags,
    implementation_tags,
)
from atlas.models.classification import ProblemType, Tag
from atlas.repositories.algorithm_repository import (
    AlgorithmRelationRepository,
    PatternRelationRepository,
)
from atlas.repositories.base import AssociationRepository
from atlas.repositories.classification_repository import (
    AlgorithmRelationTypeRepository,
    ApplicationAreaRepository,
    LearningMethodRepository,
    PatternRelationTypeRepository,
    ProblemTypeRepository,
    TagRepository,
)
from atlas.services.base import CrudService

logger = logging.getLogger(__name__)


class TagService(CrudService[Tag]):
    """Tags are keyed by their value; deleting one unlinks it everywhere."""

    repository_class = TagRepository

    async def _check(self, data: BaseModel, entity: Optional[Tag] = None) -> None:
        if entity is None and await self.repository.exists(data.value):
            raise EntityReferenceConstraintViolationError(f'Tag "{data.value}" already exists')

    async def _before_delete(self, entity: Tag) -> None:
        for table, column in ((algorithm_tags, "algorithm_id"), (implementation_tags, "implementation_id")):
            links = AssociationRepository(self.session, table, column, "tag_value")
            await links.unlink_all_right(entity.value)


class ProblemTypeService(CrudService[ProblemType]):
    repository_class = ProblemTypeRepository

    async def _check(self, data: BaseModel, entity: Optional[ProblemType] = None) -> None:
        parent_id = data.parent_problem_type_id
        if parent_id is None:
            return
        if entity is not None and parent_id == entity.id:
            raise InvalidInputError("A problem type cannot be its own parent")

        await self.repository.get_or_raise(parent_id)
        if entity is not None:
            ancestors = await self.find_parent_list(parent_id)
            if any(ancestor.id == entity.id for ancestor in ancestors):
                raise InvalidInputError(
                    f'Setting parent "{parent_id}" would make problem type "{entity.id}" its own ancestor'
                )

    async def _before_delete(self, entity: ProblemType) -> None:
        links = AssociationRepository(self.session, algorithm_problem_types, "algorithm_id", "problem_type_id")
        if await links.count_for_right(entity.id) > 0:
            raise EntityReferenceConstraintViolationError(
                f'ProblemType "{entity.id}" is still linked to algorithms'
            )
        detached = await self.repository.detach_children(entity.id)
        if detached:
            logger.info(f"Detached {detached} child problem types from {entity.id}")

    async def find_parent_list(self, problem_type_id: uuid.UUID) -> List[ProblemType]:
        """Return the problem type followed by its ancestors up to the root.

        Args:
            problem_type_id: Starting problem type

        Returns:
            List starting with the requested problem type and ending at the root

        Raises:
            EntityNotFoundError: If the starting problem type does not exist
        """
        problem_type = await self.repository.get_or_raise(problem_type_id)
        chain = [problem_type]
        seen = {problem_type.id}
        while problem_type.parent_problem_type_id is not None:
            problem_type = await self.repository.get_by_id(problem_type.parent_problem_type_id)
            if problem_type is None or problem_type.id in seen:
                break
            chain.append(problem_type)
            seen.add(problem_type.id)
        return chain


class ApplicationAreaService(CrudService):
    repository_class = ApplicationAreaRepository

    async def _before_delete(self, entity) -> None:
        links = AssociationRepository(
            self.session, algorithm_application_areas, "algorithm_id", "application_area_id"
        )
        await links.unlink_all_right(entity.id)


class LearningMethodService(CrudService):
    repository_class = LearningMethodRepository

    async def _before_delete(self, entity) -> None:
        links = AssociationRepository(
            self.session, algorithm_learning_methods, "algorithm_id", "learning_method_id"
        )
        await links.unlink_all_right(entity.id)


class PatternRelationTypeService(CrudService):
    repository_class = PatternRelationTypeRepository

    async def _before_delete(self, entity) -> None:
        in_use = await PatternRelationRepository(self.session).count(
            PatternRelation.pattern_relation_type_id == entity.id
        )
        if in_use:
            raise EntityReferenceConstraintViolationError(
                f'PatternRelationType "{entity.id}" is used by {in_use} pattern relations'
            )


class AlgorithmRelationTypeService(CrudService):
    repository_class = AlgorithmRelationTypeRepository

    async def _before_delete(self, entity) -> None:
        in_use = await AlgorithmRelationRepository(self.session).count(
            AlgorithmRelation.algorithm_relation_type_id == entity.id
        )
        if in_use:
            raise EntityReferenceConstraintViolationError(
                f'AlgorithmRelationType "{entity.id}" is used by {in_use} algorithm relations'
            )
