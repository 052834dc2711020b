"""주문 레포지토리 — 주문 엔티티 조회 쿼리.

Order Repository — Entity queries for orders.
Each finder decides how much of the order graph is loaded up front:

    - find_all: 동적 검색, 연관 엔티티는 지연 로딩 (Dynamic search, associations lazy)
    - find_all_with_member_delivery: xToOne 페치 조인 (Fetch join of member + delivery)
    - find_all_with_item: 컬렉션까지 페치 조인 (Fetch join including order lines)
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from app.config import settings
from app.models.member import Member
from app.models.order import Order, OrderItem
from app.repositories.base import BaseRepository
from app.schemas.order import OrderSearch


class OrderRepository(BaseRepository[Order]):
    """주문 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Order)

    async def find_one(self, db: AsyncSession, order_id: int) -> Order | None:
        return await self.get_by_id(db, order_id)

    async def find_one_with_items(self, db: AsyncSession, order_id: int) -> Order | None:
        """주문을 회원/배송/주문상품/상품과 함께 조회합니다.

        Retrieve an order with member, delivery, order lines and their items
        loaded, as required by cancellation and total price calculation.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_id: 주문 ID (Order identifier)

        Returns:
            Order | None: 연관 엔티티가 로드된 주문 또는 None
        """
        query: Select = (
            select(Order)
            .options(
                joinedload(Order.member),
                joinedload(Order.delivery),
                selectinload(Order.order_items).selectinload(OrderItem.item),
            )
            .where(Order.id == order_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_all(self, db: AsyncSession, search: OrderSearch) -> list[Order]:
        """검색 조건으로 주문을 동적 조회합니다.

        Dynamic criteria query. Filters are only applied when set:
        ``order_status`` by equality, ``member_name`` by substring match.
        Associations are NOT preloaded; touching them lazy-loads per order.
        At most ``settings.ORDER_SEARCH_LIMIT`` rows are returned.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 검색 조건 (Search criteria)

        Returns:
            list[Order]: 주문 목록 (Orders ordered by id)
        """
        query: Select = select(Order).join(Order.member)

        # 동적 조건 — 값이 있는 조건만 적용 (Only apply criteria that are set)
        if search.order_status is not None:
            query = query.where(Order.status == search.order_status)
        if search.member_name:
            query = query.where(Member.name.like(f"%{search.member_name}%"))

        query = query.order_by(Order.id).limit(settings.ORDER_SEARCH_LIMIT)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_all_with_member_delivery(
        self,
        db: AsyncSession,
        offset: int = 0,
        limit: int | None = None,
        with_items: bool = False,
    ) -> list[Order]:
        """회원과 배송을 페치 조인으로 함께 조회합니다.

        Fetch join of the to-one associations (member, delivery) in one query.
        Paging is safe here because to-one joins do not multiply rows.
        With ``with_items`` the order lines are batch-loaded by an extra
        ``IN`` query per level instead of being joined.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            offset: 시작 위치 (Rows to skip)
            limit: 최대 건수, None이면 제한 없음 (Max rows, None for no limit)
            with_items: 주문상품/상품 배치 로딩 여부 (Batch-load order lines and items)

        Returns:
            list[Order]: 주문 목록 (Orders ordered by id)
        """
        query: Select = (
            select(Order)
            .options(
                joinedload(Order.member, innerjoin=True),
                joinedload(Order.delivery, innerjoin=True),
            )
            .order_by(Order.id)
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)
        if with_items:
            query = query.options(selectinload(Order.order_items).selectinload(OrderItem.item))

        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_all_with_item(self, db: AsyncSession) -> list[Order]:
        """주문상품 컬렉션까지 페치 조인으로 한 번에 조회합니다.

        Fetch join of member, delivery, order lines and items in one query.
        The collection join multiplies root rows, so the result is made
        unique on the order identity. Not pageable.

        Returns:
            list[Order]: 중복 제거된 주문 목록 (De-duplicated orders ordered by id)
        """
        query: Select = (
            select(Order)
            .options(
                joinedload(Order.member, innerjoin=True),
                joinedload(Order.delivery, innerjoin=True),
                joinedload(Order.order_items).joinedload(OrderItem.item),
            )
            .order_by(Order.id)
        )
        result = await db.execute(query)
        return list(result.unique().scalars().all())


# 싱글턴 인스턴스 — Singleton instance
order_repository: OrderRepository = OrderRepository()
