"""Tests for the algorithm aggregate service."""

import uuid
import pytest
from pydantic import ValidationError

from atlas.core.exceptions import (
    EntityNotFoundError,
    EntityReferenceConstraintViolationError,
    InvalidInputError,
)
from atlas.models.enums import ComputationModel, QuantumComputationModel
from atlas.schemas.algorithm import (
    AlgorithmRelationRequest,
    AlgorithmRequest,
    PatternRelationRequest,
    SketchRequest,
)
from atlas.schemas.classification import (
    AlgorithmRelationTypeRequest,
    ApplicationAreaRequest,
    PatternRelationTypeRequest,
    ProblemTypeRequest,
)
from atlas.schemas.implementation import ImplementationRequest
from atlas.services.algorithm_service import AlgorithmService
from atlas.services.classification_service import (
    AlgorithmRelationTypeService,
    ApplicationAreaService,
    PatternRelationTypeService,
    ProblemTypeService,
    TagService,
)
from atlas.services.implementation_service import ImplementationService


def quantum(name="Shor", **fields):
    return AlgorithmRequest(
        name=name,
        computation_model=ComputationModel.QUANTUM,
        nisq_ready=False,
        quantum_computation_model=QuantumComputationModel.GATE_BASED,
        speed_up="exponential",
        **fields,
    )


def classic(name="Quicksort", **fields):
    return AlgorithmRequest(name=name, computation_model=ComputationModel.CLASSIC, **fields)


@pytest.fixture
def service(test_session):
    return AlgorithmService(test_session)


@pytest.fixture
async def relation_type(test_session):
    return await AlgorithmRelationTypeService(test_session).create(
        AlgorithmRelationTypeRequest(name="isSubroutineOf", inverse_type_name="hasSubroutine")
    )


class TestAlgorithmCrud:
    @pytest.mark.asyncio
    async def test_create_quantum_algorithm(self, service):
        algorithm = await service.create(quantum(acronym="SA"))

        assert algorithm.id is not None
        assert algorithm.is_quantum
        assert algorithm.quantum_computation_model == QuantumComputationModel.GATE_BASED
        assert algorithm.speed_up == "exponential"

    @pytest.mark.asyncio
    async def test_classic_algorithm_drops_quantum_fields(self, service):
        request = AlgorithmRequest(
            name="Quicksort",
            computation_model=ComputationModel.CLASSIC,
            nisq_ready=True,
            speed_up="none",
        )

        algorithm = await service.create(request)

        assert algorithm.nisq_ready is None
        assert algorithm.speed_up is None
        assert algorithm.quantum_computation_model is None

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValidationError):
            AlgorithmRequest(name="   ", computation_model=ComputationModel.CLASSIC)

    def test_id_in_request_body_is_rejected(self):
        with pytest.raises(ValidationError):
            AlgorithmRequest(id=str(uuid.uuid4()), name="Shor", computation_model=ComputationModel.QUANTUM)

    @pytest.mark.asyncio
    async def test_find_unknown_algorithm(self, service):
        with pytest.raises(EntityNotFoundError):
            await service.find_by_id(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_find_all_with_search(self, service):
        await service.create(quantum("Shor", problem="Integer factorization"))
        await service.create(quantum("Grover", problem="Unstructured search"))

        page = await service.find_all(0, 10, search="FACTOR")

        assert [a.name for a in page.items] == ["Shor"]

    @pytest.mark.asyncio
    async def test_update_keeps_identity_and_links(self, service, test_session):
        algorithm = await service.create(quantum())
        await service.link_tag(algorithm.id, "factoring")

        updated = await service.update(algorithm.id, classic("Shor (classical simulation)"))

        assert updated.id == algorithm.id
        assert updated.computation_model == ComputationModel.CLASSIC
        assert updated.speed_up is None
        tags = await service.tags.find_right(algorithm.id, 0, 10)
        assert [t.value for t in tags.items] == ["factoring"]

    @pytest.mark.asyncio
    async def test_update_unknown_algorithm(self, service):
        with pytest.raises(EntityNotFoundError):
            await service.update(uuid.uuid4(), classic())


class TestAlgorithmDelete:
    @pytest.mark.asyncio
    async def test_delete_cascades_owned_records_but_not_lookups(
        self, service, test_session, relation_type
    ):
        shor = await service.create(quantum("Shor"))
        qft = await service.create(quantum("QFT"))
        pattern_type = await PatternRelationTypeService(test_session).create(
            PatternRelationTypeRequest(name="uses")
        )
        problem_type = await ProblemTypeService(test_session).create(ProblemTypeRequest(name="Factoring"))
        area = await ApplicationAreaService(test_session).create(ApplicationAreaRequest(name="Cryptography"))

        await service.add_algorithm_relation(
            qft.id,
            AlgorithmRelationRequest(target_algorithm_id=shor.id, algorithm_relation_type_id=relation_type.id),
        )
        await service.create_pattern_relation(
            shor.id,
            PatternRelationRequest(pattern="https://patterns.example/oracle", pattern_relation_type_id=pattern_type.id),
        )
        await service.create_sketch(shor.id, SketchRequest(image_url="https://img.example/shor.png"))
        await service.link_tag(shor.id, "factoring")
        await service.problem_types.add(shor.id, problem_type.id)
        await service.application_areas.add(shor.id, area.id)

        await service.delete(shor.id)

        with pytest.raises(EntityNotFoundError):
            await service.find_by_id(shor.id)
        assert (await service.relations.find_page(0, 10)).total == 0
        assert (await service.pattern_relations.find_page(0, 10)).total == 0
        assert (await service.sketches.find_page(0, 10)).total == 0
        # shared lookups survive
        assert (await TagService(test_session).find_by_id("factoring")).value == "factoring"
        assert (await ProblemTypeService(test_session).find_by_id(problem_type.id)).name == "Factoring"
        assert (await ApplicationAreaService(test_session).find_by_id(area.id)).name == "Cryptography"
        assert (await service.tags.find_left("factoring", 0, 10)).total == 0

    @pytest.mark.asyncio
    async def test_delete_refused_while_implemented(self, service, test_session):
        algorithm = await service.create(classic("alg1"))
        await ImplementationService(test_session).create_for_algorithm(
            algorithm.id, ImplementationRequest(name="impl1")
        )

        with pytest.raises(EntityReferenceConstraintViolationError):
            await service.delete(algorithm.id)

        assert (await service.find_by_id(algorithm.id)).name == "alg1"


class TestAlgorithmRelations:
    @pytest.mark.asyncio
    async def test_relation_is_visible_from_source(self, service, relation_type):
        a = await service.create(quantum("A"))
        b = await service.create(quantum("B"))

        await service.add_algorithm_relation(
            a.id, AlgorithmRelationRequest(target_algorithm_id=b.id, algorithm_relation_type_id=relation_type.id)
        )
        page = await service.find_algorithm_relations(a.id, 0, 10)

        assert page.total == 1
        assert page.items[0].source_algorithm_id == a.id
        assert page.items[0].target_algorithm_id == b.id
        assert page.items[0].algorithm_relation_type.name == "isSubroutineOf"

    @pytest.mark.asyncio
    async def test_relation_is_visible_from_target(self, service, relation_type):
        a = await service.create(quantum("A"))
        b = await service.create(quantum("B"))
        await service.add_algorithm_relation(
            a.id, AlgorithmRelationRequest(target_algorithm_id=b.id, algorithm_relation_type_id=relation_type.id)
        )

        page = await service.find_algorithm_relations(b.id, 0, 10)

        assert page.total == 1

    @pytest.mark.asyncio
    async def test_same_triple_updates_description(self, service, relation_type):
        a = await service.create(quantum("A"))
        b = await service.create(quantum("B"))
        request = dict(target_algorithm_id=b.id, algorithm_relation_type_id=relation_type.id)

        first = await service.add_algorithm_relation(a.id, AlgorithmRelationRequest(description="old", **request))
        second = await service.add_algorithm_relation(a.id, AlgorithmRelationRequest(description="new", **request))

        assert first.id == second.id
        assert second.description == "new"
        assert (await service.find_algorithm_relations(a.id, 0, 10)).total == 1

    @pytest.mark.asyncio
    async def test_self_relation_is_rejected(self, service, relation_type):
        a = await service.create(quantum("A"))

        with pytest.raises(InvalidInputError):
            await service.add_algorithm_relation(
                a.id, AlgorithmRelationRequest(target_algorithm_id=a.id, algorithm_relation_type_id=relation_type.id)
            )

    @pytest.mark.asyncio
    async def test_unknown_relation_type(self, service):
        a = await service.create(quantum("A"))
        b = await service.create(quantum("B"))

        with pytest.raises(EntityNotFoundError):
            await service.add_algorithm_relation(
                a.id, AlgorithmRelationRequest(target_algorithm_id=b.id, algorithm_relation_type_id=uuid.uuid4())
            )

    @pytest.mark.asyncio
    async def test_remove_foreign_relation_is_a_noop(self, service, relation_type):
        a = await service.create(quantum("A"))
        b = await service.create(quantum("B"))
        c = await service.create(quantum("C"))
        relation = await service.add_algorithm_relation(
            a.id, AlgorithmRelationRequest(target_algorithm_id=b.id, algorithm_relation_type_id=relation_type.id)
        )

        await service.remove_algorithm_relation(c.id, relation.id)
        await service.remove_algorithm_relation(a.id, uuid.uuid4())

        assert (await service.find_algorithm_relations(a.id, 0, 10)).total == 1

    @pytest.mark.asyncio
    async def test_update_relation_changes_target(self, service, relation_type):
        a = await service.create(quantum("A"))
        b = await service.create(quantum("B"))
        c = await service.create(quantum("C"))
        relation = await service.add_algorithm_relation(
            a.id, AlgorithmRelationRequest(target_algorithm_id=b.id, algorithm_relation_type_id=relation_type.id)
        )

        updated = await service.update_algorithm_relation(
            a.id,
            relation.id,
            AlgorithmRelationRequest(
                target_algorithm_id=c.id, algorithm_relation_type_id=relation_type.id, description="moved"
            ),
        )

        assert updated.target_algorithm_id == c.id
        assert updated.description == "moved"
        assert (await service.find_algorithm_relations(b.id, 0, 10)).total == 0


class TestPatternRelationsAndSketches:
    @pytest.mark.asyncio
    async def test_pattern_relation_of_other_algorithm_is_not_found(self, service, test_session):
        a = await service.create(quantum("A"))
        b = await service.create(quantum("B"))
        pattern_type = await PatternRelationTypeService(test_session).create(
            PatternRelationTypeRequest(name="uses")
        )
        relation = await service.create_pattern_relation(
            a.id, PatternRelationRequest(pattern="https://patterns.example/qft", pattern_relation_type_id=pattern_type.id)
        )

        with pytest.raises(EntityNotFoundError):
            await service.find_pattern_relation(b.id, relation.id)
        assert (await service.find_pattern_relation(a.id, relation.id)).pattern_relation_type.name == "uses"

    @pytest.mark.asyncio
    async def test_sketch_crud(self, service):
        a = await service.create(quantum("A"))

        sketch = await service.create_sketch(a.id, SketchRequest(description="circuit"))
        await service.update_sketch(a.id, sketch.id, SketchRequest(description="circuit v2"))
        page = await service.find_sketches(a.id, 0, 10)
        await service.delete_sketch(a.id, sketch.id)

        assert [s.description for s in page.items] == ["circuit v2"]
        assert (await service.find_sketches(a.id, 0, 10)).total == 0
