"""Tests for tags, problem types and the other classification lookups."""

import uuid
import pytest

from atlas.core.exceptions import (
    EntityNotFoundError,
    EntityReferenceConstraintViolationError,
    InvalidInputError,
)
from atlas.models.enums import ComputationModel
from atlas.schemas.algorithm import AlgorithmRelationRequest, AlgorithmRequest, PatternRelationRequest
from atlas.schemas.classification import (
    AlgorithmRelationTypeRequest,
    LearningMethodRequest,
    PatternRelationTypeRequest,
    ProblemTypeRequest,
    TagCreate,
    TagUpdate,
)
from atlas.services.algorithm_service import AlgorithmService
from atlas.services.classification_service import (
    AlgorithmRelationTypeService,
    LearningMethodService,
    PatternRelationTypeService,
    ProblemTypeService,
    TagService,
)


@pytest.fixture
async def algorithm(test_session):
    return await AlgorithmService(test_session).create(
        AlgorithmRequest(name="QAOA", computation_model=ComputationModel.HYBRID)
    )


class TestTags:
    @pytest.mark.asyncio
    async def test_duplicate_value_conflicts(self, test_session):
        tags = TagService(test_session)
        await tags.create(TagCreate(value="optimization"))

        with pytest.raises(EntityReferenceConstraintViolationError):
            await tags.create(TagCreate(value="optimization", category="other"))

    @pytest.mark.asyncio
    async def test_update_changes_category_only(self, test_session):
        tags = TagService(test_session)
        await tags.create(TagCreate(value="optimization"))

        tag = await tags.update("optimization", TagUpdate(category="problem class"))

        assert tag.value == "optimization"
        assert tag.category == "problem class"

    @pytest.mark.asyncio
    async def test_delete_unlinks_algorithms(self, test_session, algorithm):
        algorithms = AlgorithmService(test_session)
        await algorithms.link_tag(algorithm.id, "variational")

        await TagService(test_session).delete("variational")

        assert (await algorithms.tags.find_right(algorithm.id, 0, 10)).total == 0
        assert (await algorithms.find_by_id(algorithm.id)).name == "QAOA"

    @pytest.mark.asyncio
    async def test_unknown_tag(self, test_session):
        with pytest.raises(EntityNotFoundError):
            await TagService(test_session).find_by_id("nope")


class TestProblemTypes:
    @pytest.mark.asyncio
    async def test_parent_list_walks_to_root(self, test_session):
        service = ProblemTypeService(test_session)
        root = await service.create(ProblemTypeRequest(name="Optimization"))
        middle = await service.create(ProblemTypeRequest(name="Combinatorial", parent_problem_type_id=root.id))
        leaf = await service.create(ProblemTypeRequest(name="MaxCut", parent_problem_type_id=middle.id))

        chain = await service.find_parent_list(leaf.id)

        assert [p.name for p in chain] == ["MaxCut", "Combinatorial", "Optimization"]

    @pytest.mark.asyncio
    async def test_self_parent_is_rejected(self, test_session):
        service = ProblemTypeService(test_session)
        problem_type = await service.create(ProblemTypeRequest(name="Search"))

        with pytest.raises(InvalidInputError):
            await service.update(problem_type.id, ProblemTypeRequest(name="Search", parent_problem_type_id=problem_type.id))

    @pytest.mark.asyncio
    async def test_cycle_is_rejected(self, test_session):
        service = ProblemTypeService(test_session)
        root = await service.create(ProblemTypeRequest(name="Optimization"))
        child = await service.create(ProblemTypeRequest(name="Combinatorial", parent_problem_type_id=root.id))

        with pytest.raises(InvalidInputError):
            await service.update(root.id, ProblemTypeRequest(name="Optimization", parent_problem_type_id=child.id))

        assert (await service.find_by_id(root.id)).parent_problem_type_id is None

    @pytest.mark.asyncio
    async def test_unknown_parent(self, test_session):
        with pytest.raises(EntityNotFoundError):
            await ProblemTypeService(test_session).create(
                ProblemTypeRequest(name="Orphan", parent_problem_type_id=uuid.uuid4())
            )

    @pytest.mark.asyncio
    async def test_linked_problem_type_cannot_be_deleted(self, test_session, algorithm):
        service = ProblemTypeService(test_session)
        problem_type = await service.create(ProblemTypeRequest(name="MaxCut"))
        await AlgorithmService(test_session).problem_types.add(algorithm.id, problem_type.id)

        with pytest.raises(EntityReferenceConstraintViolationError):
            await service.delete(problem_type.id)

    @pytest.mark.asyncio
    async def test_delete_detaches_children(self, test_session):
        service = ProblemTypeService(test_session)
        root = await service.create(ProblemTypeRequest(name="Optimization"))
        child = await service.create(ProblemTypeRequest(name="Combinatorial", parent_problem_type_id=root.id))

        await service.delete(root.id)

        assert (await service.find_by_id(child.id)).parent_problem_type_id is None


class TestRelationTypes:
    @pytest.mark.asyncio
    async def test_algorithm_relation_type_in_use(self, test_session, algorithm):
        algorithms = AlgorithmService(test_session)
        other = await algorithms.create(AlgorithmRequest(name="VQE", computation_model=ComputationModel.HYBRID))
        types = AlgorithmRelationTypeService(test_session)
        relation_type = await types.create(AlgorithmRelationTypeRequest(name="generalizes"))
        await algorithms.add_algorithm_relation(
            algorithm.id,
            AlgorithmRelationRequest(target_algorithm_id=other.id, algorithm_relation_type_id=relation_type.id),
        )

        with pytest.raises(EntityReferenceConstraintViolationError):
            await types.delete(relation_type.id)

    @pytest.mark.asyncio
    async def test_pattern_relation_type_in_use(self, test_session, algorithm):
        types = PatternRelationTypeService(test_session)
        relation_type = await types.create(PatternRelationTypeRequest(name="implements"))
        await AlgorithmService(test_session).create_pattern_relation(
            algorithm.id,
            PatternRelationRequest(pattern="https://patterns.example/vqa", pattern_relation_type_id=relation_type.id),
        )

        with pytest.raises(EntityReferenceConstraintViolationError):
            await types.delete(relation_type.id)

    @pytest.mark.asyncio
    async def test_unused_relation_type_can_be_deleted(self, test_session):
        types = AlgorithmRelationTypeService(test_session)
        relation_type = await types.create(AlgorithmRelationTypeRequest(name="unused"))

        await types.delete(relation_type.id)

        assert (await types.find_all(0, 10)).total == 0


class TestLearningMethods:
    @pytest.mark.asyncio
    async def test_delete_unlinks_algorithms(self, test_session, algorithm):
        methods = LearningMethodService(test_session)
        algorithms = AlgorithmService(test_session)
        method = await methods.create(LearningMethodRequest(name="Reinforcement learning"))
        await algorithms.learning_methods.add(algorithm.id, method.id)

        await methods.delete(method.id)

        assert (await algorithms.learning_methods.find_right(algorithm.id, 0, 10)).total == 0
