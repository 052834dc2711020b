"""주문 조회 전용 레포지토리 — 엔티티 대신 DTO로 바로 조회.

Order query repositories — Select DTOs directly instead of entities.
Only the columns a view needs are selected; nothing ends up in the
session's identity map.

    - OrderSimpleQueryRepository: 주문 요약 프로젝션 (Order summary projection)
    - OrderQueryRepository: 주문상품 컬렉션 포함 프로젝션 (Projections with order lines)
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.delivery import Delivery
from app.models.item import Item
from app.models.member import Member
from app.models.order import Order, OrderItem
from app.schemas.common import AddressDto
from app.schemas.order import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
    OrderSimpleQueryDto,
)


def _order_summary_query() -> Select:
    """주문 ⨝ 회원 ⨝ 배송 요약 컬럼 프로젝션 (Order summary columns)."""
    return (
        select(
            Order.id.label("order_id"),
            Member.name.label("name"),
            Order.order_date.label("order_date"),
            Order.status.label("order_status"),
            Delivery.city,
            Delivery.street,
            Delivery.zipcode,
        )
        .join(Order.member)
        .join(Order.delivery)
        .order_by(Order.id)
    )


def _address(row) -> AddressDto:
    return AddressDto(city=row.city, street=row.street, zipcode=row.zipcode)


class OrderSimpleQueryRepository:
    """주문 요약 프로젝션 쿼리 레포지토리."""

    async def find_order_dtos(self, db: AsyncSession) -> list[OrderSimpleQueryDto]:
        """주문 요약을 단일 프로젝션 쿼리로 조회합니다.

        Select order summaries with one Order ⨝ Member ⨝ Delivery query.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[OrderSimpleQueryDto]: 주문 요약 목록 (Order summaries ordered by id)
        """
        rows = (await db.execute(_order_summary_query())).all()
        return [
            OrderSimpleQueryDto(
                order_id=row.order_id,
                name=row.name,
                order_date=row.order_date,
                order_status=row.order_status,
                address=_address(row),
            )
            for row in rows
        ]


class OrderQueryRepository:
    """주문상품 컬렉션을 포함한 주문 프로젝션 쿼리 레포지토리.

    Projection queries for orders including their order lines.
    The to-one part is always one query; the variants differ in how the
    order lines are fetched.
    """

    async def _find_orders(self, db: AsyncSession) -> list[OrderQueryDto]:
        rows = (await db.execute(_order_summary_query())).all()
        return [
            OrderQueryDto(
                order_id=row.order_id,
                name=row.name,
                order_date=row.order_date,
                order_status=row.order_status,
                address=_address(row),
            )
            for row in rows
        ]

    @staticmethod
    def _order_items_query() -> Select:
        return (
            select(
                OrderItem.order_id.label("order_id"),
                Item.name.label("item_name"),
                OrderItem.order_price.label("order_price"),
                OrderItem.count.label("count"),
            )
            .join(OrderItem.item)
            .order_by(OrderItem.id)
        )

    async def _find_order_items(self, db: AsyncSession, order_id: int) -> list[OrderItemQueryDto]:
        query: Select = self._order_items_query().where(OrderItem.order_id == order_id)
        rows = (await db.execute(query)).all()
        return [OrderItemQueryDto.model_validate(row._mapping) for row in rows]

    async def find_order_query_dtos(self, db: AsyncSession) -> list[OrderQueryDto]:
        """루트 조회 1번 + 주문마다 주문상품 조회 N번 (1 + N queries)."""
        orders: list[OrderQueryDto] = await self._find_orders(db)
        for order in orders:
            order.order_items = await self._find_order_items(db, order.order_id)
        return orders

    async def find_all_by_dto_optimization(self, db: AsyncSession) -> list[OrderQueryDto]:
        """루트 조회 1번 + IN 절 주문상품 조회 1번 (1 + 1 queries).

        Order lines of all orders are fetched with a single ``IN`` query and
        grouped by order id in memory.
        """
        orders: list[OrderQueryDto] = await self._find_orders(db)
        if not orders:
            return orders

        order_ids: list[int] = [o.order_id for o in orders]
        query: Select = self._order_items_query().where(OrderItem.order_id.in_(order_ids))
        rows = (await db.execute(query)).all()

        # 주문 ID별 그룹핑 — Group order lines by order id
        items_by_order: dict[int, list[OrderItemQueryDto]] = {}
        for row in rows:
            dto: OrderItemQueryDto = OrderItemQueryDto.model_validate(row._mapping)
            items_by_order.setdefault(dto.order_id, []).append(dto)

        for order in orders:
            order.order_items = items_by_order.get(order.order_id, [])
        return orders

    async def find_all_by_dto_flat(self, db: AsyncSession) -> list[OrderFlatDto]:
        """주문/회원/배송/주문상품/상품 전체를 한 번의 조인으로 조회합니다.

        One flat join query; each row is one order line with its order data
        repeated. Regrouping per order is left to the caller.
        """
        query: Select = (
            select(
                Order.id.label("order_id"),
                Member.name.label("name"),
                Order.order_date.label("order_date"),
                Order.status.label("order_status"),
                Delivery.city,
                Delivery.street,
                Delivery.zipcode,
                Item.name.label("item_name"),
                OrderItem.order_price.label("order_price"),
                OrderItem.count.label("count"),
            )
            .join(Order.member)
            .join(Order.delivery)
            .join(Order.order_items)
            .join(OrderItem.item)
            .order_by(Order.id, OrderItem.id)
        )
        rows = (await db.execute(query)).all()
        # Row는 tuple이므로 "count" 컬럼은 _mapping으로 접근 (tuple.count shadows it)
        return [
            OrderFlatDto(
                order_id=row.order_id,
                name=row.name,
                order_date=row.order_date,
                order_status=row.order_status,
                address=_address(row),
                item_name=row.item_name,
                order_price=row.order_price,
                count=row._mapping["count"],
            )
            for row in rows
        ]


# 싱글턴 인스턴스 — Singleton instances
order_simple_query_repository: OrderSimpleQueryRepository = OrderSimpleQueryRepository()
order_query_repository: OrderQueryRepository = OrderQueryRepository()
