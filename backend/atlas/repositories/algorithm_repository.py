"""Repositories for the algorithm aggregate."""

import uuid
from typing import Optional
from sqlalchemy import or_, select

from atlas.models.algorithm import Algorithm, AlgorithmRelation, PatternRelation, Sketch
from atlas.repositories.base import CrudRepository


class AlgorithmRepository(CrudRepository[Algorithm]):
    model = Algorithm
    entity_name = "Algorithm"
    search_fields = ("name", "acronym", "problem")


class AlgorithmRelationRepository(CrudRepository[AlgorithmRelation]):
    model = AlgorithmRelation
    entity_name = "AlgorithmRelation"

    @staticmethod
    def involving(algorithm_id: uuid.UUID):
        """Criterion matching relations where the algorithm is source or target."""
        return or_(
            AlgorithmRelation.source_algorithm_id == algorithm_id,
            AlgorithmRelation.target_algorithm_id == algorithm_id,
        )

    async def find_by_triple(
        self,
        source_algorithm_id: uuid.UUID,
        target_algorithm_id: uuid.UUID,
        algorithm_relation_type_id: uuid.UUID,
    ) -> Optional[AlgorithmRelation]:
        result = await self.session.execute(
            select(AlgorithmRelation).where(
                AlgorithmRelation.source_algorithm_id == source_algorithm_id,
                AlgorithmRelation.target_algorithm_id == target_algorithm_id,
                AlgorithmRelation.algorithm_relation_type_id == algorithm_relation_type_id,
            )
        )
        return result.scalars().unique().one_or_none()


class PatternRelationRepository(CrudRepository[PatternRelation]):
    model = PatternRelation
    entity_name = "PatternRelation"
    search_fields = ("pattern", "description")


class SketchRepository(CrudRepository[Sketch]):
    model = Sketch
    entity_name = "Sketch"
