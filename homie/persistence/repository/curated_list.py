"""PostgreSQL implementation of curated list repositories."""

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from homie.domain.model import CuratedList, CuratedListItem
from homie.domain.repository import CuratedListItemRepository, CuratedListRepository
from homie.domain.value import CuratedListId, Fid
from homie.persistence.mappers import (
    curated_list_item_to_dict,
    curated_list_to_dict,
    row_to_curated_list,
    row_to_curated_list_item,
)
from homie.persistence.tables import curated_list_items_table, curated_lists_table


class PostgresCuratedListRepository(CuratedListRepository):
    """PostgreSQL implementation of CuratedListRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, list_id: CuratedListId) -> CuratedList | None:
        stmt = select(curated_lists_table).where(curated_lists_table.c.id == list_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_curated_list(dict(row)) if row else None

    async def find_by_owner(self, fid: Fid) -> list[CuratedList]:
        stmt = (
            select(curated_lists_table)
            .where(curated_lists_table.c.fid == fid)
            .order_by(curated_lists_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_curated_list(dict(row)) for row in result.mappings().all()]

    async def save(self, curated_list: CuratedList) -> CuratedList:
        """Insert a list.

        The unique constraint on (fid, list_name) raises IntegrityError
        for duplicates.
        """
        stmt = (
            insert(curated_lists_table)
            .values(**curated_list_to_dict(curated_list))
            .returning(curated_lists_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_curated_list(dict(row))

    async def delete(self, list_id: CuratedListId, fid: Fid) -> bool:
        stmt = delete(curated_lists_table).where(
            and_(
                curated_lists_table.c.id == list_id,
                curated_lists_table.c.fid == fid,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]


class PostgresCuratedListItemRepository(CuratedListItemRepository):
    """PostgreSQL implementation of CuratedListItemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_list(self, list_id: CuratedListId) -> list[CuratedListItem]:
        stmt = (
            select(curated_list_items_table)
            .where(curated_list_items_table.c.list_id == list_id)
            .order_by(curated_list_items_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_curated_list_item(dict(row)) for row in result.mappings().all()]

    async def save(self, item: CuratedListItem) -> CuratedListItem:
        """Insert an item.

        The unique constraint on (list_id, cast_hash) raises IntegrityError
        for duplicates; existing items are never overwritten.
        """
        stmt = (
            insert(curated_list_items_table)
            .values(**curated_list_item_to_dict(item))
            .returning(curated_list_items_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_curated_list_item(dict(row))

    async def delete_by_list(self, list_id: CuratedListId) -> int:
        stmt = delete(curated_list_items_table).where(
            curated_list_items_table.c.list_id == list_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, list_id: CuratedListId, cast_hash: str) -> bool:
        stmt = delete(curated_list_items_table).where(
            and_(
                curated_list_items_table.c.list_id == list_id,
                curated_list_items_table.c.cast_hash == cast_hash,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
