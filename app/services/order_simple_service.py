"""주문 요약 조회 서비스 — xToOne(회원, 배송) 조회 성능 최적화 단계별 구현.

Order summary service — Four ways of reading orders with their to-one
associations (Order -> Member, Order -> Delivery). All four return the
same data for the same dataset; they differ only in how much of the
graph is loaded before serialization:

    v1: 엔티티 직접 반환 (Entity graph returned as-is, member forced)
    v2: 엔티티 -> DTO 변환, 지연 로딩 N+1 (DTO mapping, lazy loads per order)
    v3: 페치 조인 후 DTO 변환 (Fetch join, then DTO mapping)
    v4: DTO 프로젝션 직접 조회 (Projection query straight into DTOs)
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.order import Order
from app.repositories.order_query_repository import order_simple_query_repository
from app.repositories.order_repository import order_repository
from app.schemas.order import OrderSearch, OrderSimpleQueryDto, SimpleOrderDto
from app.utils.serialization import entity_to_dict


class OrderSimpleService:
    """주문 요약 조회 전략을 제공하는 서비스."""

    async def orders_v1(self, db: AsyncSession) -> list[dict[str, Any]]:
        """엔티티를 직접 직렬화합니다 — 권장하지 않는 방식.

        Serialize Order entities directly. Only ``member`` is force-loaded;
        other lazy associations serialize as ``null`` unless the session
        already has them loaded. Back references are skipped so that the
        bidirectional graph does not recurse forever. The response shape is
        tied to the entity, so any entity change leaks into the API.
        """
        orders: list[Order] = await order_repository.find_all(db, OrderSearch())
        for order in orders:
            # 반환하고자 하는 필드만 강제로 지연 로딩 (Force only the wanted lazy field)
            await order.awaitable_attrs.member
        return [entity_to_dict(order) for order in orders]

    async def orders_v2(self, db: AsyncSession) -> list[SimpleOrderDto]:
        """엔티티를 DTO로 변환합니다 — 주문마다 회원/배송 지연 로딩 (1 + N + N)."""
        orders: list[Order] = await order_repository.find_all(db, OrderSearch())
        result: list[SimpleOrderDto] = []
        for order in orders:
            # 지연 로딩 발생 — 이미 세션에 있는 회원은 쿼리 없이 반환
            await order.awaitable_attrs.member
            await order.awaitable_attrs.delivery
            result.append(SimpleOrderDto.from_order(order))
        return result

    async def orders_v3(self, db: AsyncSession) -> list[SimpleOrderDto]:
        """페치 조인으로 회원/배송을 한 번에 조회한 뒤 DTO로 변환합니다 (1 query)."""
        orders: list[Order] = await order_repository.find_all_with_member_delivery(db)
        return [SimpleOrderDto.from_order(o) for o in orders]

    async def orders_v4(self, db: AsyncSession) -> list[OrderSimpleQueryDto]:
        """필요한 컬럼만 DTO로 바로 조회합니다 (1 query, no entities)."""
        return await order_simple_query_repository.find_order_dtos(db)


# 싱글턴 인스턴스 — Singleton instance
order_simple_service: OrderSimpleService = OrderSimpleService()
