"""Cloud services and the compute resources they provide."""

from atlas.models.associations import cloud_service_compute_resources, software_platform_cloud_services
from atlas.models.platform import CloudService
from atlas.repositories.base import AssociationRepository
from atlas.repositories.compute_resource_repository import ComputeResourceRepository
from atlas.repositories.platform_repository import CloudServiceRepository
from atlas.services.base import CrudService, Link


class CloudServiceService(CrudService[CloudService]):
    repository_class = CloudServiceRepository

    def __init__(self, session):
        super().__init__(session)
        self.compute_resources = Link(
            session, cloud_service_compute_resources, self.repository, "cloud_service_id",
            ComputeResourceRepository(session), "compute_resource_id",
        )

    async def _before_delete(self, entity: CloudService) -> None:
        await self.compute_resources.association.unlink_all_left(entity.id)
        platforms = AssociationRepository(
            self.session, software_platform_cloud_services, "software_platform_id", "cloud_service_id"
        )
        await platforms.unlink_all_right(entity.id)
