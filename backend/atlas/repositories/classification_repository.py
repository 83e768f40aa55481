"""Repositories for the classification lookup tables."""

import uuid
from sqlalchemy import update

from atlas.models.classification import (
    AlgorithmRelationType,
    ApplicationArea,
    LearningMethod,
    PatternRelationType,
    ProblemType,
    Tag,
)
from atlas.repositories.base import CrudRepository


class TagRepository(CrudRepository[Tag]):
    model = Tag
    entity_name = "Tag"
    search_fields = ("value", "category")

    @property
    def key(self):
        return Tag.value

    def ordering(self) -> tuple:
        return (Tag.value,)

    async def get_or_create(self, value: str, category: str | None = None) -> Tag:
        """Return the tag with ``value``, inserting it first if it is unknown."""
        tag = await self.get_by_id(value)
        if tag is None:
            tag = await self.add(Tag(value=value, category=category))
        return tag


class ProblemTypeRepository(CrudRepository[ProblemType]):
    model = ProblemType
    entity_name = "ProblemType"
    search_fields = ("name",)

    async def detach_children(self, parent_id: uuid.UUID) -> int:
        result = await self.session.execute(
            update(ProblemType)
            .where(ProblemType.parent_problem_type_id == parent_id)
            .values(parent_problem_type_id=None)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0


class ApplicationAreaRepository(CrudRepository[ApplicationArea]):
    model = ApplicationArea
    entity_name = "ApplicationArea"
    search_fields = ("name",)


class LearningMethodRepository(CrudRepository[LearningMethod]):
    model = LearningMethod
    entity_name = "LearningMethod"
    search_fields = ("name",)


class PatternRelationTypeRepository(CrudRepository[PatternRelationType]):
    model = PatternRelationType
    entity_name = "PatternRelationType"
    search_fields = ("name",)


class AlgorithmRelationTypeRepository(CrudRepository[AlgorithmRelationType]):
    model = AlgorithmRelationType
    entity_name = "AlgorithmRelationType"
    search_fields = ("name",)
