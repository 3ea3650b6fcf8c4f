"""Generic async repository: the keyed entity store.

Every collection offers the same three operations:

  get(id)       -> entity | None
  insert(obj)   -> insert-or-replace by primary key
  values()      -> full scan

plus equality-filtered scans. Nothing in the system is ever deleted, so no
delete is exposed.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic keyed store over one ORM model."""

    model: type[ModelT]
    # Column used to give scans a stable order
    order_by: str = "id"

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self, filters: dict[str, Any] | None = None):
        q = select(self.model)
        if filters:
            for col_name, value in filters.items():
                q = q.where(getattr(self.model, col_name) == value)
        col = getattr(self.model, self.order_by)
        return q.order_by(col.asc(), self.model.id.asc())

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get(self, entity_id: str) -> ModelT | None:
        if not entity_id:
            return None
        return await self._session.get(self.model, entity_id)

    async def values(self) -> list[ModelT]:
        result = await self._session.execute(self._base_query())
        return list(result.scalars().all())

    async def where(self, **filters: Any) -> list[ModelT]:
        """Scan filtered by column equality, e.g. ``where(company_id=...)``."""
        result = await self._session.execute(self._base_query(filters))
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def insert(self, instance: ModelT) -> ModelT:
        """Insert, or replace the row with the same id. Returns the persistent instance."""
        merged = await self._session.merge(instance)
        await self._session.flush()
        return merged
