"""Compute resources (QPUs and simulators)."""

from pydantic import BaseModel

from atlas.models.associations import (
    cloud_service_compute_resources,
    software_platform_compute_resources,
)
from atlas.models.compute_resource import ComputeResource
from atlas.models.enums import ComputeResourceKind, PropertyOwnerType
from atlas.repositories.base import AssociationRepository
from atlas.repositories.compute_resource_repository import (
    ComputeResourcePropertyRepository,
    ComputeResourceRepository,
)
from atlas.services.base import CrudService


def _variant_values(data: BaseModel) -> dict:
    values = data.model_dump()
    if values["resource_kind"] == ComputeResourceKind.QPU:
        values["local_execution"] = None
    return values


class ComputeResourceService(CrudService[ComputeResource]):
    repository_class = ComputeResourceRepository

    def _build(self, data: BaseModel) -> ComputeResource:
        return ComputeResource(**_variant_values(data))

    def _apply(self, entity: ComputeResource, data: BaseModel) -> None:
        for field, value in _variant_values(data).items():
            setattr(entity, field, value)

    async def _before_delete(self, entity: ComputeResource) -> None:
        await ComputeResourcePropertyRepository(self.session).delete_by_owner(
            PropertyOwnerType.COMPUTE_RESOURCE, entity.id
        )
        for table, column in (
            (software_platform_compute_resources, "software_platform_id"),
            (cloud_service_compute_resources, "cloud_service_id"),
        ):
            links = AssociationRepository(self.session, table, column, "compute_resource_id")
            await links.unlink_all_right(entity.id)
