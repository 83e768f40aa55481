"""Implementation aggregate: implementations, their packages, files and links."""

import logging
import uuid
from typing import Optional
from pydantic import BaseModel

from atlas.core.exceptions import EntityNotFoundError, InvalidInputError
from atlas.models.associations import (
    implementation_publications,
    implementation_software_platforms,
    implementation_tags,
)
from atlas.models.enums import ComputationModel, ImplementationKind, PropertyOwnerType
from atlas.models.implementation import File, Implementation, ImplementationPackage
from atlas.repositories.algorithm_repository import AlgorithmRepository
from atlas.repositories.base import PageResult
from atlas.repositories.classification_repository import TagRepository
from atlas.repositories.compute_resource_repository import ComputeResourcePropertyRepository
from atlas.repositories.implementation_repository import (
    FileRepository,
    ImplementationPackageRepository,
    ImplementationRepository,
)
from atlas.repositories.platform_repository import SoftwarePlatformRepository
from atlas.repositories.publication_repository import PublicationRepository
from atlas.services.base import CrudService, Link

logger = logging.getLogger(__name__)


class ImplementationService(CrudService[Implementation]):
    """Implementations always belong to exactly one algorithm.

    Nested endpoints call ``check_if_implementation_is_of_algorithm`` first so
    an implementation can never be reached through a foreign algorithm.
    """

    repository_class = ImplementationRepository

    def __init__(self, session):
        super().__init__(session)
        self.algorithms = AlgorithmRepository(session)
        self.packages = ImplementationPackageRepository(session)
        self.files = FileRepository(session)

        self.tags = Link(
            session, implementation_tags, self.repository, "implementation_id",
            TagRepository(session), "tag_value",
        )
        self.publications = Link(
            session, implementation_publications, self.repository, "implementation_id",
            PublicationRepository(session), "publication_id",
        )
        self.software_platforms = Link(
            session, implementation_software_platforms, self.repository, "implementation_id",
            SoftwarePlatformRepository(session), "software_platform_id",
        )

    async def check_if_implementation_is_of_algorithm(
        self, algorithm_id: uuid.UUID, implementation_id: uuid.UUID
    ) -> Implementation:
        """Resolve an implementation through its algorithm.

        Raises:
            EntityNotFoundError: If either id is unknown or the implementation
                belongs to a different algorithm
        """
        await self.algorithms.get_or_raise(algorithm_id)
        implementation = await self.repository.get_or_raise(implementation_id)
        if implementation.implemented_algorithm_id != algorithm_id:
            raise EntityNotFoundError(
                "Implementation",
                implementation_id,
                f'Implementation with ID "{implementation_id}" does not belong to algorithm "{algorithm_id}"',
            )
        return implementation

    async def find_by_algorithm(
        self, algorithm_id: uuid.UUID, page: int, size: int, search: Optional[str] = None
    ) -> PageResult[Implementation]:
        await self.algorithms.get_or_raise(algorithm_id)
        return await self.repository.find_page(
            page, size, Implementation.implemented_algorithm_id == algorithm_id, search=search
        )

    async def create_for_algorithm(self, algorithm_id: uuid.UUID, data: BaseModel) -> Implementation:
        """Create an implementation of an existing algorithm.

        Raises:
            EntityNotFoundError: If the algorithm does not exist
        """
        algorithm = await self.algorithms.get_or_raise(algorithm_id)
        values = data.model_dump()
        if values["implementation_kind"] is None:
            values["implementation_kind"] = (
                ImplementationKind.CLASSIC
                if algorithm.computation_model == ComputationModel.CLASSIC
                else ImplementationKind.QUANTUM
            )
        implementation = Implementation(implemented_algorithm_id=algorithm_id, **values)
        await self.repository.add(implementation)
        await self.session.commit()
        logger.info(f"Created implementation {implementation.id} of algorithm {algorithm_id}")
        return implementation

    async def update_for_algorithm(
        self, algorithm_id: uuid.UUID, implementation_id: uuid.UUID, data: BaseModel
    ) -> Implementation:
        await self.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
        return await self.update(implementation_id, data)

    async def delete_for_algorithm(self, algorithm_id: uuid.UUID, implementation_id: uuid.UUID) -> None:
        await self.check_if_implementation_is_of_algorithm(algorithm_id, implementation_id)
        await self.delete(implementation_id)

    def _apply(self, entity: Implementation, data: BaseModel) -> None:
        values = data.model_dump()
        # an omitted kind keeps the current one
        if values["implementation_kind"] is None:
            values.pop("implementation_kind")
        for field, value in values.items():
            setattr(entity, field, value)

    async def _before_delete(self, entity: Implementation) -> None:
        await ComputeResourcePropertyRepository(self.session).delete_by_owner(
            PropertyOwnerType.IMPLEMENTATION, entity.id
        )
        await self.files.delete_where(File.implementation_id == entity.id)
        await self.packages.delete_where(ImplementationPackage.implementation_id == entity.id)
        for link in (self.tags, self.publications, self.software_platforms):
            await link.association.unlink_all_left(entity.id)

    async def link_tag(self, implementation_id: uuid.UUID, value: str, category: Optional[str] = None) -> None:
        """Link a tag, creating it on first use."""
        await self.repository.get_or_raise(implementation_id)
        await self.tags.right.get_or_create(value, category)
        await self.tags.add(implementation_id, value)

    # Implementation packages

    async def find_packages(
        self, implementation_id: uuid.UUID, page: int, size: int, search: Optional[str] = None
    ) -> PageResult[ImplementationPackage]:
        await self.repository.get_or_raise(implementation_id)
        return await self.packages.find_page(
            page, size, ImplementationPackage.implementation_id == implementation_id, search=search
        )

    async def find_package(self, implementation_id: uuid.UUID, package_id: uuid.UUID) -> ImplementationPackage:
        await self.repository.get_or_raise(implementation_id)
        package = await self.packages.get_or_raise(package_id)
        if package.implementation_id != implementation_id:
            raise EntityNotFoundError("ImplementationPackage", package_id)
        return package

    async def create_package(self, implementation_id: uuid.UUID, data: BaseModel) -> ImplementationPackage:
        await self.repository.get_or_raise(implementation_id)
        package = await self.packages.add(
            ImplementationPackage(implementation_id=implementation_id, **data.model_dump())
        )
        await self.session.commit()
        logger.info(f"Created {package.package_type.value} package {package.id} for implementation {implementation_id}")
        return package

    async def update_package(
        self, implementation_id: uuid.UUID, package_id: uuid.UUID, data: BaseModel
    ) -> ImplementationPackage:
        package = await self.find_package(implementation_id, package_id)
        for field, value in data.model_dump().items():
            setattr(package, field, value)
        await self.session.flush()
        await self.session.commit()
        return package

    async def delete_package(self, implementation_id: uuid.UUID, package_id: uuid.UUID) -> None:
        package = await self.find_package(implementation_id, package_id)
        # files survive their package
        await self.files.detach_package(package.id)
        await self.packages.delete(package)
        await self.session.commit()
        logger.info(f"Deleted implementation package {package_id}")

    # Files

    async def find_files(
        self, implementation_id: uuid.UUID, page: int, size: int, search: Optional[str] = None
    ) -> PageResult[File]:
        await self.repository.get_or_raise(implementation_id)
        return await self.files.find_page(page, size, File.implementation_id == implementation_id, search=search)

    async def find_file(self, implementation_id: uuid.UUID, file_id: uuid.UUID) -> File:
        await self.repository.get_or_raise(implementation_id)
        file = await self.files.get_or_raise(file_id)
        if file.implementation_id != implementation_id:
            raise EntityNotFoundError("File", file_id)
        return file

    async def _check_file(self, implementation_id: uuid.UUID, data: BaseModel, file_id: Optional[uuid.UUID] = None):
        if data.implementation_package_id is not None:
            await self.find_package(implementation_id, data.implementation_package_id)
        existing = await self.files.get_by_url(data.file_url)
        if existing is not None and existing.id != file_id:
            raise InvalidInputError(f'A file with URL "{data.file_url}" already exists')

    async def create_file(self, implementation_id: uuid.UUID, data: BaseModel) -> File:
        await self.repository.get_or_raise(implementation_id)
        await self._check_file(implementation_id, data)
        file = await self.files.add(File(implementation_id=implementation_id, **data.model_dump()))
        await self.session.commit()
        logger.info(f"Registered file {file.id} for implementation {implementation_id}")
        return file

    async def update_file(self, implementation_id: uuid.UUID, file_id: uuid.UUID, data: BaseModel) -> File:
        file = await self.find_file(implementation_id, file_id)
        await self._check_file(implementation_id, data, file_id)
        for field, value in data.model_dump().items():
            setattr(file, field, value)
        await self.session.flush()
        await self.session.commit()
        return file

    async def delete_file(self, implementation_id: uuid.UUID, file_id: uuid.UUID) -> None:
        file = await self.find_file(implementation_id, file_id)
        await self.files.delete(file)
        await self.session.commit()
