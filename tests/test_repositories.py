"""레포지토리 쿼리 테스트 — 동적 검색, 페치 조인, 프로젝션.

Repository query tests against the seeded sample data
(userA: JPA1 x1 + JPA2 x2, userB: SPRING1 x1 + SPRING2 x2).
"""

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Member, OrderStatus
from app.repositories.member_repository import member_repository
from app.repositories.order_query_repository import (
    order_query_repository,
    order_simple_query_repository,
)
from app.repositories.order_repository import order_repository
from app.schemas.order import OrderSearch


class TestOrderRepositoryFindAll:
    """동적 검색 쿼리."""

    async def test_no_criteria_returns_all(self, db: AsyncSession, seeded):
        orders = await order_repository.find_all(db, OrderSearch())
        assert len(orders) == 2
        assert orders[0].id < orders[1].id

    async def test_member_name_filter_is_substring(self, db: AsyncSession, seeded):
        orders = await order_repository.find_all(db, OrderSearch(member_name="rB"))
        assert len(orders) == 1
        member = await orders[0].awaitable_attrs.member
        assert member.name == "userB"

    async def test_status_filter(self, db: AsyncSession, seeded):
        assert len(await order_repository.find_all(db, OrderSearch(order_status=OrderStatus.ORDER))) == 2
        assert await order_repository.find_all(db, OrderSearch(order_status=OrderStatus.CANCEL)) == []

    async def test_associations_are_not_preloaded(self, db: AsyncSession, seeded):
        orders = await order_repository.find_all(db, OrderSearch())
        unloaded = inspect(orders[0]).unloaded
        assert {"member", "delivery", "order_items"} <= unloaded


class TestOrderRepositoryFetchJoin:
    """페치 조인 쿼리."""

    async def test_member_delivery_loaded(self, db: AsyncSession, seeded):
        orders = await order_repository.find_all_with_member_delivery(db)
        assert len(orders) == 2
        unloaded = inspect(orders[0]).unloaded
        assert "member" not in unloaded
        assert "delivery" not in unloaded
        assert "order_items" in unloaded
        assert orders[0].member.name == "userA"
        assert orders[0].delivery.address.city == "서울"

    async def test_paging(self, db: AsyncSession, seeded):
        orders = await order_repository.find_all_with_member_delivery(db, offset=1, limit=1)
        assert len(orders) == 1
        assert orders[0].member.name == "userB"

    async def test_paging_with_items_batch_loaded(self, db: AsyncSession, seeded):
        orders = await order_repository.find_all_with_member_delivery(db, limit=10, with_items=True)
        assert [len(o.order_items) for o in orders] == [2, 2]
        assert orders[0].order_items[0].item.name == "JPA1 BOOK"

    async def test_with_item_is_unique_per_order(self, db: AsyncSession, seeded):
        """컬렉션 조인으로 늘어난 행이 주문 단위로 중복 제거된다."""
        orders = await order_repository.find_all_with_item(db)
        assert len(orders) == 2
        names = [[oi.item.name for oi in o.order_items] for o in orders]
        assert names == [["JPA1 BOOK", "JPA2 BOOK"], ["SPRING1 BOOK", "SPRING2 BOOK"]]

    async def test_find_one_with_items(self, db: AsyncSession, seeded):
        orders = await order_repository.find_all(db, OrderSearch())
        order = await order_repository.find_one_with_items(db, orders[1].id)
        assert order.get_total_price() == 10000 * 1 + 20000 * 2

    async def test_find_one_missing(self, db: AsyncSession, seeded):
        assert await order_repository.find_one(db, 9999) is None


class TestOrderQueryRepositories:
    """DTO 프로젝션 쿼리."""

    async def test_simple_projection(self, db: AsyncSession, seeded):
        dtos = await order_simple_query_repository.find_order_dtos(db)
        assert [d.name for d in dtos] == ["userA", "userB"]
        assert dtos[1].address.city == "부산"
        assert dtos[0].order_status == OrderStatus.ORDER

    async def test_query_dto_variants_agree(self, db: AsyncSession, seeded):
        n_plus_one = await order_query_repository.find_order_query_dtos(db)
        optimized = await order_query_repository.find_all_by_dto_optimization(db)

        assert [o.model_dump() for o in n_plus_one] == [o.model_dump() for o in optimized]
        assert [len(o.order_items) for o in optimized] == [2, 2]
        assert optimized[0].order_items[1].item_name == "JPA2 BOOK"
        assert optimized[0].order_items[1].count == 2

    async def test_flat_rows_one_per_line(self, db: AsyncSession, seeded):
        flats = await order_query_repository.find_all_by_dto_flat(db)
        assert len(flats) == 4
        assert [f.item_name for f in flats] == ["JPA1 BOOK", "JPA2 BOOK", "SPRING1 BOOK", "SPRING2 BOOK"]

    async def test_empty_database(self, db: AsyncSession):
        assert await order_query_repository.find_all_by_dto_optimization(db) == []
        assert await order_simple_query_repository.find_order_dtos(db) == []


class TestMemberRepository:
    """회원 조회."""

    async def test_find_by_name(self, db: AsyncSession, member: Member):
        found = await member_repository.find_by_name(db, "tester")
        assert [m.id for m in found] == [member.id]
        assert await member_repository.find_by_name(db, "nobody") == []
