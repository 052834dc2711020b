"""주문 및 주문상품 SQLAlchemy ORM 모델 정의.

Order and OrderItem SQLAlchemy ORM model definitions.
Both sides of every bidirectional association are kept in sync by
``back_populates``; the factories below only need to set one side.

Tables:
    - orders: 주문 (Order header, owns member_id and delivery_id)
    - order_item: 주문상품 (Order lines referencing an item)
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.delivery import Delivery, DeliveryStatus
from app.models.item import Item
from app.models.member import Member
from app.utils.exceptions import OrderNotCancellableError


class OrderStatus(str, enum.Enum):
    """주문 상태 — ORDER(주문), CANCEL(취소)."""

    ORDER = "ORDER"
    CANCEL = "CANCEL"


class Order(Base):
    """주문 모델.

    Order model — aggregate root of an order. OrderItems and the Delivery
    are persisted and removed together with the order (cascade).

    Attributes:
        id: 고유 식별자 (Unique identifier)
        member_id: 주문 회원 FK (Ordering member)
        delivery_id: 배송 FK (Delivery, one-to-one)
        order_date: 주문 일시 (Order timestamp)
        status: 주문 상태 (ORDER / CANCEL)

    Relationships:
        member: 주문 회원 (Many-to-one, lazy)
        order_items: 주문상품 목록 (One-to-many, cascade)
        delivery: 배송 정보 (One-to-one, cascade)
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column("order_id", Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("member.member_id"), nullable=False)
    delivery_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("delivery.delivery_id"), unique=True, nullable=True)
    order_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    status: Mapped[OrderStatus] = mapped_column(Enum(OrderStatus, native_enum=False, length=10), nullable=False)

    member = relationship("Member", back_populates="orders")
    order_items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )
    delivery = relationship(
        "Delivery",
        back_populates="order",
        cascade="all, delete-orphan",
        single_parent=True,
    )

    # ------------------------------------------------------------------
    # 연관관계 편의 메서드 — Association helpers
    # ------------------------------------------------------------------

    def add_order_item(self, order_item: "OrderItem") -> None:
        self.order_items.append(order_item)

    def change_delivery(self, delivery: Delivery) -> None:
        self.delivery = delivery

    # ------------------------------------------------------------------
    # 생성 메서드 — Factory
    # ------------------------------------------------------------------

    @classmethod
    def create_order(cls, member: Member, delivery: Delivery, *order_items: "OrderItem") -> "Order":
        """주문을 생성합니다.

        Create an order, wiring member, delivery and order lines on both
        sides, with status ORDER and the current timestamp.

        Args:
            member: 주문 회원 (Ordering member)
            delivery: 배송 정보 (Delivery for this order)
            *order_items: 주문상품 (Order lines, stock already removed)

        Returns:
            Order: 생성된 주문 (The new, not yet persisted order)
        """
        order: Order = cls(status=OrderStatus.ORDER, order_date=datetime.now())
        # member.orders는 back_populates로 동기화 (no lazy load of member.orders)
        order.member = member
        order.change_delivery(delivery)
        for order_item in order_items:
            order.add_order_item(order_item)
        return order

    # ------------------------------------------------------------------
    # 비즈니스 로직 — Business logic
    # ------------------------------------------------------------------

    def cancel(self) -> None:
        """주문을 취소하고 주문상품의 재고를 복구합니다.

        Raises:
            OrderNotCancellableError: 이미 배송완료된 주문 (Delivery already completed)
        """
        if self.delivery is not None and self.delivery.status == DeliveryStatus.COMP:
            raise OrderNotCancellableError()

        self.status = OrderStatus.CANCEL
        for order_item in self.order_items:
            order_item.cancel()

    def get_total_price(self) -> int:
        """전체 주문 가격 — Sum of order_price * count over all lines."""
        return sum(order_item.get_total_price() for order_item in self.order_items)


class OrderItem(Base):
    """주문상품 모델.

    Order line model. ``order_price`` is the unit price at order time,
    independent of later item price changes.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        item_id: 상품 FK (Ordered item)
        order_id: 주문 FK (Owning order)
        order_price: 주문 가격 (Unit price at order time)
        count: 주문 수량 (Quantity)
    """

    __tablename__ = "order_item"

    id: Mapped[int] = mapped_column("order_item_id", Integer, primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column(Integer, ForeignKey("item.item_id"), nullable=False)
    order_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("orders.order_id"), nullable=True)
    order_price: Mapped[int] = mapped_column(Integer, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    item = relationship("Item")
    order = relationship("Order", back_populates="order_items", info={"json_ignore": True})

    @classmethod
    def create_order_item(cls, item: Item, order_price: int, count: int) -> "OrderItem":
        """주문상품을 생성하고 상품 재고를 차감합니다.

        Raises:
            NotEnoughStockError: 재고 부족 (Not enough stock)
        """
        item.remove_stock(count)
        return cls(item=item, order_price=order_price, count=count)

    def cancel(self) -> None:
        """재고 원복 — Give the quantity back to the item's stock."""
        self.item.add_stock(self.count)

    def get_total_price(self) -> int:
        return self.order_price * self.count
