"""Tests for software platforms, cloud services and their links."""

import uuid
import pytest

from atlas.core.exceptions import EntityNotFoundError
from atlas.models.enums import ComputationModel
from atlas.schemas.algorithm import AlgorithmRequest
from atlas.schemas.compute_resource import ComputeResourceRequest
from atlas.schemas.implementation import ImplementationRequest
from atlas.schemas.platform import CloudServiceRequest, SoftwarePlatformRequest
from atlas.services.algorithm_service import AlgorithmService
from atlas.services.cloud_service_service import CloudServiceService
from atlas.services.compute_resource_service import ComputeResourceService
from atlas.services.implementation_service import ImplementationService
from atlas.services.software_platform_service import SoftwarePlatformService


@pytest.fixture
def platforms(test_session):
    return SoftwarePlatformService(test_session)


@pytest.fixture
def clouds(test_session):
    return CloudServiceService(test_session)


@pytest.fixture
async def qiskit(platforms):
    return await platforms.create(SoftwarePlatformRequest(name="Qiskit", version="1.0"))


@pytest.fixture
async def ibmq(clouds):
    return await clouds.create(CloudServiceRequest(name="IBM Quantum", provider="IBM"))


class TestSoftwarePlatformLinks:
    @pytest.mark.asyncio
    async def test_cloud_service_link_visible_from_both_sides(self, platforms, qiskit, ibmq):
        await platforms.cloud_services.add(qiskit.id, ibmq.id)

        services = await platforms.cloud_services.find_right(qiskit.id, 0, 10)
        linked_platforms = await platforms.cloud_services.find_left(ibmq.id, 0, 10)

        assert [s.name for s in services.items] == ["IBM Quantum"]
        assert [p.name for p in linked_platforms.items] == ["Qiskit"]

    @pytest.mark.asyncio
    async def test_linking_twice_is_a_noop(self, platforms, qiskit, ibmq):
        await platforms.cloud_services.add(qiskit.id, ibmq.id)
        await platforms.cloud_services.add(qiskit.id, ibmq.id)

        assert (await platforms.cloud_services.find_right(qiskit.id, 0, 10)).total == 1

    @pytest.mark.asyncio
    async def test_unlink_visible_from_both_sides(self, platforms, qiskit, ibmq):
        await platforms.cloud_services.add(qiskit.id, ibmq.id)

        await platforms.cloud_services.remove(qiskit.id, ibmq.id)
        await platforms.cloud_services.remove(qiskit.id, ibmq.id)

        assert (await platforms.cloud_services.find_right(qiskit.id, 0, 10)).total == 0
        assert (await platforms.cloud_services.find_left(ibmq.id, 0, 10)).total == 0

    @pytest.mark.asyncio
    async def test_link_to_unknown_cloud_service(self, platforms, qiskit):
        with pytest.raises(EntityNotFoundError):
            await platforms.cloud_services.add(qiskit.id, uuid.uuid4())

    @pytest.mark.asyncio
    async def test_implementation_link_visible_from_platform(self, test_session, platforms, qiskit):
        algorithm = await AlgorithmService(test_session).create(
            AlgorithmRequest(name="Grover", computation_model=ComputationModel.QUANTUM)
        )
        implementations = ImplementationService(test_session)
        implementation = await implementations.create_for_algorithm(
            algorithm.id, ImplementationRequest(name="grover-qiskit")
        )

        await implementations.software_platforms.add(implementation.id, qiskit.id)

        page = await implementations.software_platforms.find_left(qiskit.id, 0, 10)
        assert [i.name for i in page.items] == ["grover-qiskit"]


class TestDeleteRemovesLinks:
    @pytest.mark.asyncio
    async def test_deleting_platform_unlinks_it(self, platforms, clouds, qiskit, ibmq):
        await platforms.cloud_services.add(qiskit.id, ibmq.id)

        await platforms.delete(qiskit.id)

        assert (await platforms.cloud_services.find_left(ibmq.id, 0, 10)).total == 0
        assert (await clouds.find_by_id(ibmq.id)).name == "IBM Quantum"

    @pytest.mark.asyncio
    async def test_deleting_compute_resource_unlinks_it(self, test_session, platforms, clouds, qiskit, ibmq):
        resources = ComputeResourceService(test_session)
        lima = await resources.create(ComputeResourceRequest(name="ibmq_lima"))
        await clouds.compute_resources.add(ibmq.id, lima.id)
        await platforms.compute_resources.add(qiskit.id, lima.id)

        await resources.delete(lima.id)

        assert (await clouds.compute_resources.find_right(ibmq.id, 0, 10)).total == 0
        assert (await platforms.compute_resources.find_right(qiskit.id, 0, 10)).total == 0

    @pytest.mark.asyncio
    async def test_deleting_cloud_service_unlinks_it(self, platforms, clouds, qiskit, ibmq):
        await platforms.cloud_services.add(qiskit.id, ibmq.id)

        await clouds.delete(ibmq.id)

        assert (await platforms.cloud_services.find_right(qiskit.id, 0, 10)).total == 0
