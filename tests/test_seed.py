"""샘플 데이터 시드 테스트.

Sample data loader tests.
"""

from unittest.mock import AsyncMock, MagicMock

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

import app.main as main_module
from app.config import settings
from app.models import Book, Member, Order, OrderItem
from app.seed import init_db


class TestInitDb:
    """init_db 테스트."""

    async def test_inserts_sample_orders(self, db: AsyncSession):
        assert await init_db(db) is True

        assert await db.scalar(select(func.count()).select_from(Member)) == 2
        assert await db.scalar(select(func.count()).select_from(Book)) == 4
        assert await db.scalar(select(func.count()).select_from(Order)) == 2

    async def test_second_call_is_noop(self, db: AsyncSession):
        """이미 회원이 있으면 아무것도 하지 않음."""
        await init_db(db)
        assert await init_db(db) is False
        assert await db.scalar(select(func.count()).select_from(Order)) == 2

    async def test_book_details(self, db: AsyncSession):
        await init_db(db)
        books = (await db.execute(select(Book).order_by(Book.id))).scalars().all()
        assert [(b.name, b.price) for b in books] == [
            ("JPA1 BOOK", 10000),
            ("JPA2 BOOK", 20000),
            ("SPRING1 BOOK", 20000),
            ("SPRING2 BOOK", 40000),
        ]
        assert all(b.dtype == "B" for b in books)


class TestHealth:
    """헬스 체크."""

    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}


class TestInitDbOrderLines:
    """주문상품 가격은 상품 가격과 별개로 적재."""

    async def test_order_prices_and_counts(self, db: AsyncSession):
        await init_db(db)
        lines = (await db.execute(select(OrderItem).order_by(OrderItem.id))).scalars().all()
        assert [(oi.order_price, oi.count) for oi in lines] == [
            (10000, 1),
            (20000, 2),
            (10000, 1),
            (20000, 2),
        ]

    async def test_user_b_ordered_below_list_price(self, db: AsyncSession):
        await init_db(db)
        orders = (await db.execute(
            select(Order).options(selectinload(Order.order_items).selectinload(OrderItem.item)).order_by(Order.id)
        )).scalars().all()
        assert [o.get_total_price() for o in orders] == [50000, 50000]
        assert [oi.item.price for oi in orders[1].order_items] == [20000, 40000]


class TestLifespan:
    """기동 시 샘플 데이터 적재."""

    async def test_seeds_without_creating_schema(self, db: AsyncSession, engine: AsyncEngine, monkeypatch):
        """스키마는 Alembic 소유 — lifespan은 테이블을 만들지 않고 데이터만 적재."""
        fake_engine = MagicMock()
        fake_engine.begin.side_effect = AssertionError("schema must not be created at start-up")
        fake_engine.dispose = AsyncMock()
        monkeypatch.setattr(main_module, "engine", fake_engine)
        monkeypatch.setattr(
            main_module, "async_session", async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        )
        monkeypatch.setattr(settings, "INIT_DB", True)

        async with main_module.lifespan(main_module.app):
            pass

        fake_engine.begin.assert_not_called()
        fake_engine.dispose.assert_awaited_once()
        assert await db.scalar(select(func.count()).select_from(Member)) == 2

    async def test_disabled(self, db: AsyncSession, engine: AsyncEngine, monkeypatch):
        fake_engine = MagicMock()
        fake_engine.dispose = AsyncMock()
        monkeypatch.setattr(main_module, "engine", fake_engine)
        monkeypatch.setattr(
            main_module, "async_session", async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        )
        monkeypatch.setattr(settings, "INIT_DB", False)

        async with main_module.lifespan(main_module.app):
            pass

        assert await db.scalar(select(func.count()).select_from(Member)) == 0
