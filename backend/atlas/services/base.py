"""Shared service plumbing: generic CRUD and symmetric link handling."""

import logging
from typing import Any, Generic, Optional, Type, TypeVar
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.schema import Table

from atlas.repositories.base import AssociationRepository, CrudRepository, PageResult

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class CrudService(Generic[ModelT]):
    """CRUD over one repository where every mutation is a single transaction.

    Subclasses set ``repository_class`` and override the hooks:

    - ``_check`` validates a request before anything is written
    - ``_build`` / ``_apply`` map a request body onto a new or existing entity
    - ``_before_delete`` enforces delete policies and removes dependent rows
    """

    repository_class: Type[CrudRepository]

    def __init__(self, session: AsyncSession):
        """Initialize the service.

        Args:
            session: SQLAlchemy async session, committed once per mutation
        """
        self.session = session
        self.repository = self.repository_class(session)

    def _identity(self, entity: ModelT) -> Any:
        return getattr(entity, self.repository.key.key)

    async def _check(self, data: BaseModel, entity: Optional[ModelT] = None) -> None:
        pass

    def _build(self, data: BaseModel) -> ModelT:
        return self.repository.model(**data.model_dump())

    def _apply(self, entity: ModelT, data: BaseModel) -> None:
        for field, value in data.model_dump().items():
            setattr(entity, field, value)

    async def _before_delete(self, entity: ModelT) -> None:
        pass

    async def find_by_id(self, entity_id: Any) -> ModelT:
        return await self.repository.get_or_raise(entity_id)

    async def find_all(self, page: int, size: int, search: Optional[str] = None) -> PageResult[ModelT]:
        return await self.repository.find_page(page, size, search=search)

    async def create(self, data: BaseModel) -> ModelT:
        await self._check(data)
        entity = await self.repository.add(self._build(data))
        await self.session.commit()
        logger.info(f"Created {self.repository.entity_name} {self._identity(entity)}")
        return entity

    async def update(self, entity_id: Any, data: BaseModel) -> ModelT:
        entity = await self.repository.get_or_raise(entity_id)
        await self._check(data, entity)
        self._apply(entity, data)
        await self.session.flush()
        await self.session.commit()
        logger.info(f"Updated {self.repository.entity_name} {entity_id}")
        return entity

    async def delete(self, entity_id: Any) -> None:
        entity = await self.repository.get_or_raise(entity_id)
        await self._before_delete(entity)
        await self.repository.delete(entity)
        await self.session.commit()
        logger.info(f"Deleted {self.repository.entity_name} {entity_id}")


class Link:
    """Symmetric many-to-many link between the entities of two repositories.

    The link lives in one join table; ``find_right`` and ``find_left`` answer
    both directions from it. Linking twice or unlinking an absent link is a
    no-op, but both ends must exist.
    """

    def __init__(
        self,
        session: AsyncSession,
        table: Table,
        left: CrudRepository,
        left_column: str,
        right: CrudRepository,
        right_column: str,
    ):
        self.session = session
        self.left = left
        self.right = right
        self.association = AssociationRepository(session, table, left_column, right_column)

    async def _resolve(self, left_id: Any, right_id: Any) -> None:
        await self.left.get_or_raise(left_id)
        await self.right.get_or_raise(right_id)

    async def add(self, left_id: Any, right_id: Any) -> None:
        await self._resolve(left_id, right_id)
        if await self.association.link(left_id, right_id):
            logger.info(
                f"Linked {self.left.entity_name} {left_id} and {self.right.entity_name} {right_id}"
            )
        await self.session.commit()

    async def remove(self, left_id: Any, right_id: Any) -> None:
        await self._resolve(left_id, right_id)
        if await self.association.unlink(left_id, right_id):
            logger.info(
                f"Unlinked {self.left.entity_name} {left_id} and {self.right.entity_name} {right_id}"
            )
        await self.session.commit()

    async def find_right(
        self, left_id: Any, page: int, size: int, search: Optional[str] = None
    ) -> PageResult:
        """Page over the right-hand entities linked to ``left_id``."""
        await self.left.get_or_raise(left_id)
        statement = self.association.select_right(self.right.model, self.right.key, left_id)
        return await self.right.find_page(page, size, search=search, statement=statement)

    async def find_left(
        self, right_id: Any, page: int, size: int, search: Optional[str] = None
    ) -> PageResult:
        """Page over the left-hand entities linked to ``right_id``."""
        await self.right.get_or_raise(right_id)
        statement = self.association.select_left(self.left.model, self.left.key, right_id)
        return await self.left.find_page(page, size, search=search, statement=statement)
