"""Software platforms and their links to cloud services, compute resources and implementations."""

from atlas.models.associations import (
    implementation_software_platforms,
    software_platform_cloud_services,
    software_platform_compute_resources,
)
from atlas.models.platform import SoftwarePlatform
from atlas.repositories.base import AssociationRepository
from atlas.repositories.compute_resource_repository import ComputeResourceRepository
from atlas.repositories.platform_repository import CloudServiceRepository, SoftwarePlatformRepository
from atlas.services.base import CrudService, Link


class SoftwarePlatformService(CrudService[SoftwarePlatform]):
    repository_class = SoftwarePlatformRepository

    def __init__(self, session):
        super().__init__(session)
        self.cloud_services = Link(
            session, software_platform_cloud_services, self.repository, "software_platform_id",
            CloudServiceRepository(session), "cloud_service_id",
        )
        self.compute_resources = Link(
            session, software_platform_compute_resources, self.repository, "software_platform_id",
            ComputeResourceRepository(session), "compute_resource_id",
        )

    async def _before_delete(self, entity: SoftwarePlatform) -> None:
        await self.cloud_services.association.unlink_all_left(entity.id)
        await self.compute_resources.association.unlink_all_left(entity.id)
        implementations = AssociationRepository(
            self.session, implementation_software_platforms, "implementation_id", "software_platform_id"
        )
        await implementations.unlink_all_right(entity.id)
