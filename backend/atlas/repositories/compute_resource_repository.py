"""Repositories for compute resources and their typed properties."""

import uuid

from atlas.models.compute_resource import (
    ComputeResource,
    ComputeResourceProperty,
    ComputeResourcePropertyType,
)
from atlas.models.enums import PropertyOwnerType
from atlas.repositories.base import CrudRepository


class ComputeResourceRepository(CrudRepository[ComputeResource]):
    model = ComputeResource
    entity_name = "ComputeResource"
    search_fields = ("name", "vendor")


class ComputeResourcePropertyTypeRepository(CrudRepository[ComputeResourcePropertyType]):
    model = ComputeResourcePropertyType
    entity_name = "ComputeResourcePropertyType"
    search_fields = ("name",)


class ComputeResourcePropertyRepository(CrudRepository[ComputeResourceProperty]):
    model = ComputeResourceProperty
    entity_name = "ComputeResourceProperty"

    @staticmethod
    def owned_by(owner_type: PropertyOwnerType, owner_id: uuid.UUID):
        return (
            ComputeResourceProperty.owner_type == owner_type,
            ComputeResourceProperty.owner_id == owner_id,
        )

    async def count_by_type(self, type_id: uuid.UUID) -> int:
        return await self.count(
            ComputeResourceProperty.compute_resource_property_type_id == type_id
        )

    async def delete_by_owner(self, owner_type: PropertyOwnerType, owner_id: uuid.UUID) -> int:
        return await self.delete_where(*self.owned_by(owner_type, owner_id))
