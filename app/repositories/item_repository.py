"""상품 레포지토리 — 상품 저장 및 조회 쿼리.

Item Repository — Persistence and lookup queries for items.
Queries on ``Item`` are polymorphic: rows come back as Book/Album/Movie.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Item
from app.repositories.base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """상품 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Item)

    async def find_all(self, db: AsyncSession) -> list[Item]:
        """전체 상품을 ID 순으로 조회합니다 (All items ordered by id)."""
        return await self.get_all(db, order_by=Item.id)


# 싱글턴 인스턴스 — Singleton instance
item_repository: ItemRepository = ItemRepository()
