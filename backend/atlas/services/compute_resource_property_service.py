"""Typed compute-resource properties and their type registry.

A property is owned by exactly one algorithm, implementation or compute
resource, addressed as a ``PropertyOwner``. Its string value must parse
under the datatype of its type before it is written.
"""

import logging
import uuid
from typing import Optional
from pydantic import BaseModel

from atlas.core.exceptions import (
    EntityNotFoundError,
    EntityReferenceConstraintViolationError,
    InvalidInputError,
)
from atlas.models.compute_resource import (
    ComputeResourceProperty,
    ComputeResourcePropertyType,
    PropertyOwner,
)
from atlas.models.enums import PropertyOwnerType
from atlas.repositories.algorithm_repository import AlgorithmRepository
from atlas.repositories.base import CrudRepository, PageResult
from atlas.repositories.compute_resource_repository import (
    ComputeResourcePropertyRepository,
    ComputeResourcePropertyTypeRepository,
    ComputeResourceRepository,
)
from atlas.repositories.implementation_repository import ImplementationRepository
from atlas.services.base import CrudService

logger = logging.getLogger(__name__)

OWNER_REPOSITORIES: dict[PropertyOwnerType, type[CrudRepository]] = {
    PropertyOwnerType.ALGORITHM: AlgorithmRepository,
    PropertyOwnerType.IMPLEMENTATION: ImplementationRepository,
    PropertyOwnerType.COMPUTE_RESOURCE: ComputeResourceRepository,
}


class ComputeResourcePropertyTypeService(CrudService[ComputeResourcePropertyType]):
    repository_class = ComputeResourcePropertyTypeRepository

    async def _check(self, data: BaseModel, entity: Optional[ComputeResourcePropertyType] = None) -> None:
        if entity is None or data.datatype == entity.datatype:
            return
        # stored values must keep parsing under the new datatype
        properties = await ComputeResourcePropertyRepository(self.session).find_all(
            ComputeResourceProperty.compute_resource_property_type_id == entity.id
        )
        invalid = [prop.value for prop in properties if not data.datatype.is_valid(prop.value)]
        if invalid:
            raise InvalidInputError(
                f'Cannot change ComputeResourcePropertyType "{entity.id}" to {data.datatype.value}: '
                f'{len(invalid)} stored values do not parse, e.g. "{invalid[0]}"'
            )

    async def _before_delete(self, entity: ComputeResourcePropertyType) -> None:
        in_use = await ComputeResourcePropertyRepository(self.session).count_by_type(entity.id)
        if in_use:
            raise EntityReferenceConstraintViolationError(
                f'ComputeResourcePropertyType "{entity.id}" is still used by {in_use} properties'
            )


class ComputeResourcePropertyService:
    """Property CRUD, always addressed through the owning entity."""

    def __init__(self, session):
        self.session = session
        self.repository = ComputeResourcePropertyRepository(session)
        self.types = ComputeResourcePropertyTypeRepository(session)

    async def _resolve_owner(self, owner: PropertyOwner) -> None:
        await OWNER_REPOSITORIES[owner.owner_type](self.session).get_or_raise(owner.owner_id)

    async def _validated_type(self, data: BaseModel) -> ComputeResourcePropertyType:
        property_type = await self.types.get_or_raise(data.type_id)
        if not property_type.datatype.is_valid(data.value):
            raise InvalidInputError(
                f'Value "{data.value}" is not a valid {property_type.datatype.value} '
                f'for property type "{property_type.name}"'
            )
        return property_type

    async def find_all(self, owner: PropertyOwner, page: int, size: int) -> PageResult[ComputeResourceProperty]:
        await self._resolve_owner(owner)
        return await self.repository.find_page(page, size, *ComputeResourcePropertyRepository.owned_by(*owner))

    async def find_by_id(self, owner: PropertyOwner, property_id: uuid.UUID) -> ComputeResourceProperty:
        """Get a property of ``owner``.

        Raises:
            EntityNotFoundError: If the owner or property is unknown, or the
                property belongs to another owner
        """
        await self._resolve_owner(owner)
        prop = await self.repository.get_or_raise(property_id)
        if prop.owner != owner:
            raise EntityNotFoundError("ComputeResourceProperty", property_id)
        return prop

    async def create(self, owner: PropertyOwner, data: BaseModel) -> ComputeResourceProperty:
        await self._resolve_owner(owner)
        property_type = await self._validated_type(data)
        prop = ComputeResourceProperty(
            compute_resource_property_type_id=property_type.id,
            type=property_type,
            value=data.value,
            owner_type=owner.owner_type,
            owner_id=owner.owner_id,
        )
        await self.repository.add(prop)
        await self.session.commit()
        logger.info(f"Created property {prop.id} for {owner.owner_type.value} {owner.owner_id}")
        return prop

    async def update(
        self, owner: PropertyOwner, property_id: uuid.UUID, data: BaseModel
    ) -> ComputeResourceProperty:
        prop = await self.find_by_id(owner, property_id)
        property_type = await self._validated_type(data)
        prop.compute_resource_property_type_id = property_type.id
        prop.type = property_type
        prop.value = data.value
        await self.session.flush()
        await self.session.commit()
        return prop

    async def delete(self, owner: PropertyOwner, property_id: uuid.UUID) -> None:
        prop = await self.find_by_id(owner, property_id)
        await self.repository.delete(prop)
        await self.session.commit()
        logger.info(f"Deleted property {property_id}")
