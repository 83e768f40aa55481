"""Tests for implementations, their packages and files."""

import uuid
import pytest

from atlas.core.exceptions import EntityNotFoundError, InvalidInputError
from atlas.models.enums import ComputationModel, ImplementationKind, ImplementationPackageType
from atlas.schemas.algorithm import AlgorithmRequest
from atlas.schemas.implementation import FileRequest, ImplementationPackageRequest, ImplementationRequest
from atlas.services.algorithm_service import AlgorithmService
from atlas.services.implementation_service import ImplementationService


@pytest.fixture
def service(test_session):
    return ImplementationService(test_session)


@pytest.fixture
async def algorithm(test_session):
    return await AlgorithmService(test_session).create(
        AlgorithmRequest(name="alg1", computation_model=ComputationModel.CLASSIC)
    )


class TestImplementationsOfAlgorithm:
    @pytest.mark.asyncio
    async def test_create_for_unknown_algorithm(self, service):
        with pytest.raises(EntityNotFoundError):
            await service.create_for_algorithm(uuid.uuid4(), ImplementationRequest(name="impl1"))

        assert (await service.find_all(0, 10)).total == 0

    @pytest.mark.asyncio
    async def test_create_and_list_by_algorithm(self, service, algorithm):
        implementation = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))

        page = await service.find_by_algorithm(algorithm.id, 0, 10)

        assert implementation.implemented_algorithm_id == algorithm.id
        assert [i.name for i in page.items] == ["impl1"]

    @pytest.mark.asyncio
    async def test_kind_follows_algorithm_when_omitted(self, service, algorithm, test_session):
        hybrid = await AlgorithmService(test_session).create(
            AlgorithmRequest(name="QAOA", computation_model=ComputationModel.HYBRID)
        )

        classic = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))
        quantum = await service.create_for_algorithm(hybrid.id, ImplementationRequest(name="qiskit-qaoa"))

        assert classic.implementation_kind == ImplementationKind.CLASSIC
        assert quantum.implementation_kind == ImplementationKind.QUANTUM

    @pytest.mark.asyncio
    async def test_explicit_kind_is_kept_on_update(self, service, test_session):
        hybrid = await AlgorithmService(test_session).create(
            AlgorithmRequest(name="QAOA", computation_model=ComputationModel.HYBRID)
        )
        implementation = await service.create_for_algorithm(
            hybrid.id, ImplementationRequest(name="scipy-optimizer", implementation_kind=ImplementationKind.CLASSIC)
        )

        updated = await service.update_for_algorithm(
            hybrid.id, implementation.id, ImplementationRequest(name="scipy-optimizer", version="2")
        )

        assert updated.implementation_kind == ImplementationKind.CLASSIC
        assert updated.version == "2"

    @pytest.mark.asyncio
    async def test_foreign_algorithm_cannot_reach_implementation(self, service, algorithm, test_session):
        other = await AlgorithmService(test_session).create(
            AlgorithmRequest(name="alg2", computation_model=ComputationModel.QUANTUM)
        )
        implementation = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))

        with pytest.raises(EntityNotFoundError):
            await service.check_if_implementation_is_of_algorithm(other.id, implementation.id)
        with pytest.raises(EntityNotFoundError):
            await service.delete_for_algorithm(other.id, implementation.id)

        assert (await service.find_by_id(implementation.id)).name == "impl1"

    @pytest.mark.asyncio
    async def test_update_for_algorithm(self, service, algorithm):
        implementation = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))

        updated = await service.update_for_algorithm(
            algorithm.id, implementation.id, ImplementationRequest(name="impl1", version="2.0")
        )

        assert updated.version == "2.0"
        assert updated.implemented_algorithm_id == algorithm.id

    @pytest.mark.asyncio
    async def test_delete_removes_packages_and_files(self, service, algorithm):
        implementation = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))
        package = await service.create_package(
            implementation.id,
            ImplementationPackageRequest(name="bundle", package_type=ImplementationPackageType.FILE),
        )
        await service.create_file(
            implementation.id,
            FileRequest(name="circuit.qasm", file_url="s3://atlas/circuit.qasm", implementation_package_id=package.id),
        )
        await service.link_tag(implementation.id, "qiskit")

        await service.delete_for_algorithm(algorithm.id, implementation.id)

        assert (await service.packages.find_page(0, 10)).total == 0
        assert (await service.files.find_page(0, 10)).total == 0
        assert (await service.tags.find_left("qiskit", 0, 10)).total == 0


class TestTagLinks:
    @pytest.mark.asyncio
    async def test_link_is_visible_from_both_sides(self, service, algorithm):
        implementation = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))

        await service.link_tag(implementation.id, "qiskit", "framework")
        await service.link_tag(implementation.id, "qiskit")

        tags = await service.tags.find_right(implementation.id, 0, 10)
        implementations = await service.tags.find_left("qiskit", 0, 10)
        assert [(t.value, t.category) for t in tags.items] == [("qiskit", "framework")]
        assert [i.id for i in implementations.items] == [implementation.id]

    @pytest.mark.asyncio
    async def test_unlink_is_visible_from_both_sides(self, service, algorithm):
        implementation = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))
        await service.link_tag(implementation.id, "qiskit")

        await service.tags.remove(implementation.id, "qiskit")
        await service.tags.remove(implementation.id, "qiskit")

        assert (await service.tags.find_right(implementation.id, 0, 10)).total == 0
        assert (await service.tags.find_left("qiskit", 0, 10)).total == 0


class TestPackagesAndFiles:
    @pytest.mark.asyncio
    async def test_package_of_other_implementation_is_not_found(self, service, algorithm):
        first = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))
        second = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl2"))
        package = await service.create_package(
            first.id, ImplementationPackageRequest(name="deploy", package_type=ImplementationPackageType.TOSCA)
        )

        with pytest.raises(EntityNotFoundError):
            await service.find_package(second.id, package.id)

    @pytest.mark.asyncio
    async def test_file_urls_are_unique(self, service, algorithm):
        implementation = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))
        await service.create_file(implementation.id, FileRequest(name="a.py", file_url="s3://atlas/a.py"))

        with pytest.raises(InvalidInputError):
            await service.create_file(implementation.id, FileRequest(name="copy.py", file_url="s3://atlas/a.py"))

    @pytest.mark.asyncio
    async def test_file_update_may_keep_its_url(self, service, algorithm):
        implementation = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))
        file = await service.create_file(implementation.id, FileRequest(name="a.py", file_url="s3://atlas/a.py"))

        updated = await service.update_file(
            implementation.id, file.id, FileRequest(name="main.py", file_url="s3://atlas/a.py")
        )

        assert updated.name == "main.py"

    @pytest.mark.asyncio
    async def test_file_cannot_use_foreign_package(self, service, algorithm):
        first = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))
        second = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl2"))
        package = await service.create_package(
            first.id, ImplementationPackageRequest(name="bundle", package_type=ImplementationPackageType.FILE)
        )

        with pytest.raises(EntityNotFoundError):
            await service.create_file(
                second.id,
                FileRequest(name="a.py", file_url="s3://atlas/a.py", implementation_package_id=package.id),
            )

    @pytest.mark.asyncio
    async def test_deleting_package_keeps_its_files(self, service, algorithm):
        implementation = await service.create_for_algorithm(algorithm.id, ImplementationRequest(name="impl1"))
        package = await service.create_package(
            implementation.id,
            ImplementationPackageRequest(name="bundle", package_type=ImplementationPackageType.FILE),
        )
        file = await service.create_file(
            implementation.id,
            FileRequest(name="a.py", file_url="s3://atlas/a.py", implementation_package_id=package.id),
        )

        await service.delete_package(implementation.id, package.id)

        remaining = await service.find_file(implementation.id, file.id)
        assert remaining.implementation_package_id is None
