"""상품 서비스 — 상품 등록/조회/수정 비즈니스 로직.

Item Service — Business logic for item registration, lookup and update.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Book, Item
from app.repositories.item_repository import item_repository
from app.schemas.item import BookCreate, ItemResponse, ItemUpdate
from app.utils.exceptions import NotFoundError


class ItemService:
    """상품 관련 비즈니스 로직을 처리하는 서비스."""

    def _to_response(self, item: Item) -> ItemResponse:
        return ItemResponse(
            id=item.id,
            name=item.name,
            price=item.price,
            stock_quantity=item.stock_quantity,
            dtype=item.dtype,
        )

    async def save_item(self, db: AsyncSession, data: BookCreate) -> int:
        """도서를 등록하고 ID를 반환합니다 (Register a book, return its id)."""
        book: Book = Book(
            name=data.name,
            price=data.price,
            stock_quantity=data.stock_quantity,
            author=data.author,
            isbn=data.isbn,
        )
        await item_repository.save(db, book)
        return book.id

    async def find_items(self, db: AsyncSession) -> list[ItemResponse]:
        items: list[Item] = await item_repository.find_all(db)
        return [self._to_response(i) for i in items]

    async def find_one(self, db: AsyncSession, item_id: int) -> ItemResponse:
        """상품 단건 조회.

        Raises:
            NotFoundError: 상품이 없을 때 (Item not found)
        """
        item: Item | None = await item_repository.get_by_id(db, item_id)
        if item is None:
            raise NotFoundError("Item not found")
        return self._to_response(item)

    async def update_item(self, db: AsyncSession, item_id: int, data: ItemUpdate) -> ItemResponse:
        """상품 정보를 수정합니다.

        Update an item. Only the fields sent by the client are changed;
        the UPDATE is issued by dirty checking on flush, not by merging
        a detached copy.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            item_id: 상품 ID (Item identifier)
            data: 수정 데이터 (Update data)

        Returns:
            ItemResponse: 수정된 상품 (Updated item)

        Raises:
            NotFoundError: 상품이 없을 때 (Item not found)
        """
        item: Item | None = await item_repository.get_by_id(db, item_id)
        if item is None:
            raise NotFoundError("Item not found")

        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(item, field, value)

        await db.flush()
        return self._to_response(item)


# 싱글턴 인스턴스 — Singleton instance
item_service: ItemService = ItemService()
