"""Repositories for the implementation aggregate."""

import uuid
from typing import Optional
from sqlalchemy import select, update

from atlas.models.implementation import File, Implementation, ImplementationPackage
from atlas.repositories.base import CrudRepository


class ImplementationRepository(CrudRepository[Implementation]):
    model = Implementation
    entity_name = "Implementation"
    search_fields = ("name", "description")

    async def count_by_algorithm(self, algorithm_id: uuid.UUID) -> int:
        return await self.count(Implementation.implemented_algorithm_id == algorithm_id)


class ImplementationPackageRepository(CrudRepository[ImplementationPackage]):
    model = ImplementationPackage
    entity_name = "ImplementationPackage"
    search_fields = ("name",)


class FileRepository(CrudRepository[File]):
    model = File
    entity_name = "File"
    search_fields = ("name",)

    async def get_by_url(self, file_url: str) -> Optional[File]:
        result = await self.session.execute(select(File).where(File.file_url == file_url))
        return result.scalar_one_or_none()

    async def detach_package(self, package_id: uuid.UUID) -> int:
        result = await self.session.execute(
            update(File)
            .where(File.implementation_package_id == package_id)
            .values(implementation_package_id=None)
        )
        return result.rowcount or 0
