"""주문 서비스 — 주문 생성/취소/검색 비즈니스 로직.

Order Service — Business logic for placing, cancelling and searching orders.
The entities carry the domain rules (stock, cancellation); this service
only loads them, calls them, and persists the result.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.delivery import Delivery
from app.models.item import Item
from app.models.member import Member
from app.models.order import Order, OrderItem
from app.repositories.item_repository import item_repository
from app.repositories.member_repository import member_repository
from app.repositories.order_repository import order_repository
from app.schemas.order import OrderSearch, OrderSummaryResponse
from app.utils.exceptions import NotFoundError


class OrderService:
    """주문 관련 비즈니스 로직을 처리하는 서비스."""

    def _to_summary(self, order: Order) -> OrderSummaryResponse:
        # member, delivery, order_items는 호출 전에 로드되어 있어야 함
        return OrderSummaryResponse(
            order_id=order.id,
            member_name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            delivery_status=order.delivery.status.value if order.delivery is not None else None,
            total_price=order.get_total_price(),
        )

    async def order(self, db: AsyncSession, member_id: int, item_id: int, count: int) -> int:
        """주문을 생성합니다.

        Place an order for one item. The delivery address is the member's
        address and the order price is the item's current price.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 주문 회원 ID (Ordering member)
            item_id: 상품 ID (Ordered item)
            count: 주문 수량 (Quantity)

        Returns:
            int: 생성된 주문 ID (New order id)

        Raises:
            NotFoundError: 회원 또는 상품이 없을 때 (Member or item not found)
            NotEnoughStockError: 재고 부족 (Not enough stock)
        """
        member: Member | None = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        item: Item | None = await item_repository.get_by_id(db, item_id)
        if item is None:
            raise NotFoundError("Item not found")

        delivery: Delivery = Delivery(address=member.address)
        order_item: OrderItem = OrderItem.create_order_item(item, item.price, count)
        order: Order = Order.create_order(member, delivery, order_item)

        # delivery, order_item은 cascade로 함께 저장 (Persisted by cascade)
        await order_repository.save(db, order)
        return order.id

    async def cancel_order(self, db: AsyncSession, order_id: int) -> OrderSummaryResponse:
        """주문을 취소하고 재고를 복구합니다.

        Raises:
            NotFoundError: 주문이 없을 때 (Order not found)
            OrderNotCancellableError: 이미 배송완료 (Delivery already completed)
        """
        order: Order | None = await order_repository.find_one_with_items(db, order_id)
        if order is None:
            raise NotFoundError("Order not found")

        order.cancel()
        await db.flush()
        return self._to_summary(order)

    async def find_orders(self, db: AsyncSession, search: OrderSearch) -> list[OrderSummaryResponse]:
        """검색 조건으로 주문 목록을 조회합니다.

        Search orders, then load each order's associations on demand.
        """
        orders: list[Order] = await order_repository.find_all(db, search)
        result: list[OrderSummaryResponse] = []
        for order in orders:
            await order.awaitable_attrs.member
            await order.awaitable_attrs.delivery
            await order.awaitable_attrs.order_items
            result.append(self._to_summary(order))
        return result


# 싱글턴 인스턴스 — Singleton instance
order_service: OrderService = OrderService()
