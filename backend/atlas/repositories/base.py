"""Generic repository classes shared by every catalog entity."""

import math
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar
from sqlalchemy import Select, and_, delete, func, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.schema import Table

from atlas.core.exceptions import EntityNotFoundError

ModelT = TypeVar("ModelT")


def escape_like(value: str) -> str:
    """Make ``%`` and ``_`` in user input match literally inside a LIKE pattern."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass
class PageResult(Generic[ModelT]):
    """One page of a query result together with the overall match count."""

    items: List[ModelT]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total / self.size)


class CrudRepository(Generic[ModelT]):
    """Repository providing CRUD and paging for one mapped model.

    Subclasses set ``model``, a human readable ``entity_name`` used in
    error messages and optionally ``search_fields`` for free-text search.
    Repositories only flush; committing is left to the calling service so
    that one service call maps to one transaction.
    """

    model: Type[ModelT]
    entity_name: str = "Entity"
    search_fields: Sequence[str] = ()

    def __init__(self, session: AsyncSession):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @property
    def key(self):
        """Primary key column, used when joining through link tables."""
        return self.model.id

    def ordering(self) -> tuple:
        """Default ordering of list results (insertion order)."""
        return (self.model.created_at, self.model.id)

    async def get_by_id(self, entity_id: Any) -> Optional[ModelT]:
        """Get an entity by its identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None
        """
        return await self.session.get(self.model, entity_id)

    async def get_or_raise(self, entity_id: Any) -> ModelT:
        """Get an entity by its identifier or fail.

        Raises:
            EntityNotFoundError: If no entity has the given identifier
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity

    async def exists(self, entity_id: Any) -> bool:
        return await self.get_by_id(entity_id) is not None

    async def find_page(
        self,
        page: int,
        size: int,
        *criteria,
        search: Optional[str] = None,
        statement: Optional[Select] = None,
    ) -> PageResult[ModelT]:
        """Return one page of entities.

        Args:
            page: Zero-based page number
            size: Page size
            *criteria: Additional WHERE clauses
            search: Optional case-insensitive free-text filter over search_fields
            statement: Base statement to page over (defaults to all entities)

        Returns:
            PageResult holding the requested slice and the total match count
        """
        query = statement if statement is not None else select(self.model)
        if criteria:
            query = query.where(*criteria)
        if search and self.search_fields:
            pattern = f"%{escape_like(search)}%"
            query = query.where(
                or_(*[getattr(self.model, field).ilike(pattern, escape="\\") for field in self.search_fields])
            )

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.session.execute(count_query)).scalar() or 0

        query = query.order_by(*self.ordering()).offset(page * size).limit(size)
        result = await self.session.execute(query)
        return PageResult(items=list(result.scalars().unique().all()), total=total, page=page, size=size)

    async def find_all(self, *criteria) -> List[ModelT]:
        query = select(self.model)
        if criteria:
            query = query.where(*criteria)
        result = await self.session.execute(query.order_by(*self.ordering()))
        return list(result.scalars().unique().all())

    async def count(self, *criteria) -> int:
        query = select(func.count()).select_from(self.model)
        if criteria:
            query = query.where(*criteria)
        return (await self.session.execute(query)).scalar() or 0

    async def add(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self.session.delete(entity)
        await self.session.flush()

    async def delete_where(self, *criteria) -> int:
        """Bulk delete matching rows without loading them.

        Returns:
            Number of deleted rows
        """
        result = await self.session.execute(delete(self.model).where(*criteria))
        return result.rowcount or 0


class AssociationRepository:
    """Repository over a many-to-many join table.

    A link is stored once as a (left, right) row; both directions of the
    relationship are answered from the same table. ``link`` and ``unlink``
    are idempotent and report whether anything changed.
    """

    def __init__(self, session: AsyncSession, table: Table, left: str, right: str):
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session
            table: Join table
            left: Column name referencing the owning side
            right: Column name referencing the linked side
        """
        self.session = session
        self.table = table
        self.left = table.c[left]
        self.right = table.c[right]

    def _pair(self, left_id: Any, right_id: Any):
        return and_(self.left == left_id, self.right == right_id)

    async def is_linked(self, left_id: Any, right_id: Any) -> bool:
        result = await self.session.execute(
            select(func.count()).select_from(self.table).where(self._pair(left_id, right_id))
        )
        return (result.scalar() or 0) > 0

    async def link(self, left_id: Any, right_id: Any) -> bool:
        """Create the link unless it already exists.

        Returns:
            True if a link row was inserted, False if it was already present
        """
        if await self.is_linked(left_id, right_id):
            return False
        await self.session.execute(
            insert(self.table).values({self.left.name: left_id, self.right.name: right_id})
        )
        return True

    async def unlink(self, left_id: Any, right_id: Any) -> bool:
        """Remove the link if present.

        Returns:
            True if a link row was removed, False if there was none
        """
        result = await self.session.execute(delete(self.table).where(self._pair(left_id, right_id)))
        return (result.rowcount or 0) > 0

    async def unlink_all_left(self, left_id: Any) -> int:
        result = await self.session.execute(delete(self.table).where(self.left == left_id))
        return result.rowcount or 0

    async def unlink_all_right(self, right_id: Any) -> int:
        result = await self.session.execute(delete(self.table).where(self.right == right_id))
        return result.rowcount or 0

    async def count_for_right(self, right_id: Any) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(self.table).where(self.right == right_id)
        )
        return result.scalar() or 0

    def select_right(self, model, key, left_id: Any) -> Select:
        """Statement selecting the ``model`` rows linked to ``left_id``."""
        return select(model).join(self.table, self.right == key).where(self.left == left_id)

    def select_left(self, model, key, right_id: Any) -> Select:
        """Statement selecting the ``model`` rows linked to ``right_id``."""
        return select(model).join(self.table, self.left == key).where(self.right == right_id)
