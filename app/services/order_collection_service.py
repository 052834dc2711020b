"""주문 + 주문상품 조회 서비스 — 컬렉션(OneToMany) 조회 최적화 단계별 구현.

Order collection service — Ways of reading orders together with their
order lines (Order -> OrderItem -> Item):

    v1:   엔티티 직접 반환 (Entity graph, associations forced)
    v2:   엔티티 -> DTO, 지연 로딩 (DTO mapping with lazy loads)
    v3:   컬렉션 페치 조인 (Collection fetch join, not pageable)
    v3.1: xToOne 페치 조인 + 페이징 + 컬렉션 배치 로딩 (Pageable, IN-batch collection)
    v4:   DTO 직접 조회, 주문상품 N+1 (Query DTOs, one item query per order)
    v5:   DTO 직접 조회, IN 절 최적화 (Query DTOs, one IN query for all items)
    v6:   DTO 평면 조회 후 그룹핑 (One flat query, regrouped in memory)
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.order import Order
from app.repositories.order_query_repository import order_query_repository
from app.repositories.order_repository import order_repository
from app.schemas.order import (
    OrderDto,
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
    OrderSearch,
)
from app.utils.serialization import entity_to_dict


class OrderCollectionService:
    """주문상품 컬렉션을 포함한 주문 조회 전략을 제공하는 서비스."""

    async def _load_graph(self, order: Order) -> None:
        """주문 그래프를 지연 로딩으로 강제 초기화 (Force-initialize lazily)."""
        await order.awaitable_attrs.member
        await order.awaitable_attrs.delivery
        order_items = await order.awaitable_attrs.order_items
        for order_item in order_items:
            await order_item.awaitable_attrs.item

    async def orders_v1(self, db: AsyncSession) -> list[dict[str, Any]]:
        orders: list[Order] = await order_repository.find_all(db, OrderSearch())
        for order in orders:
            await self._load_graph(order)
        return [entity_to_dict(order) for order in orders]

    async def orders_v2(self, db: AsyncSession) -> list[OrderDto]:
        orders: list[Order] = await order_repository.find_all(db, OrderSearch())
        result: list[OrderDto] = []
        for order in orders:
            await self._load_graph(order)
            result.append(OrderDto.from_order(order))
        return result

    async def orders_v3(self, db: AsyncSession) -> list[OrderDto]:
        orders: list[Order] = await order_repository.find_all_with_item(db)
        return [OrderDto.from_order(o) for o in orders]

    async def orders_v3_page(self, db: AsyncSession, offset: int, limit: int) -> list[OrderDto]:
        """페이징 가능한 주문 조회.

        To-one associations are fetch-joined (no row multiplication, so
        offset/limit apply to orders); order lines and items are loaded
        with one ``IN`` query per level.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            offset: 시작 위치 (Orders to skip)
            limit: 최대 건수 (Max orders)

        Returns:
            list[OrderDto]: 주문 DTO 목록 (Order DTOs)
        """
        orders: list[Order] = await order_repository.find_all_with_member_delivery(
            db, offset=offset, limit=limit, with_items=True
        )
        return [OrderDto.from_order(o) for o in orders]

    async def orders_v4(self, db: AsyncSession) -> list[OrderQueryDto]:
        return await order_query_repository.find_order_query_dtos(db)

    async def orders_v5(self, db: AsyncSession) -> list[OrderQueryDto]:
        return await order_query_repository.find_all_by_dto_optimization(db)

    async def orders_v6(self, db: AsyncSession) -> list[OrderQueryDto]:
        """평면 조회 결과를 주문 단위로 다시 묶습니다.

        Regroup the flat rows per order, keeping the query's order.
        """
        flats: list[OrderFlatDto] = await order_query_repository.find_all_by_dto_flat(db)

        grouped: dict[int, OrderQueryDto] = {}
        for flat in flats:
            order: OrderQueryDto | None = grouped.get(flat.order_id)
            if order is None:
                order = OrderQueryDto(
                    order_id=flat.order_id,
                    name=flat.name,
                    order_date=flat.order_date,
                    order_status=flat.order_status,
                    address=flat.address,
                )
                grouped[flat.order_id] = order
            order.order_items.append(
                OrderItemQueryDto(
                    order_id=flat.order_id,
                    item_name=flat.item_name,
                    order_price=flat.order_price,
                    count=flat.count,
                )
            )
        return list(grouped.values())


# 싱글턴 인스턴스 — Singleton instance
order_collection_service: OrderCollectionService = OrderCollectionService()
