"""주문 관련 Pydantic 요청/응답 스키마 정의.

Order Pydantic request/response schema definitions.
Contains the DTOs of each order serialization strategy:

    - SimpleOrderDto: 엔티티에서 변환하는 주문 요약 (Order summary mapped from an entity)
    - OrderSimpleQueryDto: 프로젝션 쿼리로 바로 조회하는 주문 요약 (Projection query row)
    - OrderDto / OrderItemDto: 주문상품 컬렉션을 포함한 주문 (Order with its lines)
    - OrderQueryDto / OrderItemQueryDto / OrderFlatDto: 컬렉션 조회용 쿼리 DTO
"""

from datetime import datetime

from pydantic import Field

from app.models.order import Order, OrderItem, OrderStatus
from app.schemas.common import AddressDto, CamelModel


# === 주문 요약 (xToOne) 스키마 ===

class SimpleOrderDto(CamelModel):
    """주문 요약 DTO — Order 엔티티에서 변환.

    Order summary DTO mapped from an Order entity.
    ``member`` and ``delivery`` must already be loaded on the order.

    Attributes:
        order_id: 주문 ID (Order identifier)
        name: 회원 이름 (Member name)
        order_date: 주문 일시 (Order timestamp)
        order_status: 주문 상태 (Order status)
        address: 배송지 주소 (Delivery address)
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressDto | None = None

    @classmethod
    def from_order(cls, order: Order) -> "SimpleOrderDto":
        # DTO가 엔티티를 받는 것은 괜찮지만, 엔티티 자체를 응답으로 노출하지는 않는다
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=AddressDto.from_address(order.delivery.address),
        )


class OrderSimpleQueryDto(CamelModel):
    """주문 요약 쿼리 DTO — 프로젝션 쿼리 결과 행.

    Order summary row selected directly by a projection query;
    never built from an entity.
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressDto | None = None


# === 주문 + 주문상품 (컬렉션) 스키마 ===

class OrderItemDto(CamelModel):
    """주문상품 DTO — 엔티티 대신 노출할 필드만 담는다."""

    item_name: str
    order_price: int
    count: int

    @classmethod
    def from_order_item(cls, order_item: OrderItem) -> "OrderItemDto":
        return cls(
            item_name=order_item.item.name,
            order_price=order_item.order_price,
            count=order_item.count,
        )


class OrderDto(CamelModel):
    """주문상품 컬렉션을 포함한 주문 DTO.

    Order DTO including its order lines. ``member``, ``delivery`` and
    ``order_items`` (with their items) must already be loaded.
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressDto | None = None
    order_items: list[OrderItemDto] = []

    @classmethod
    def from_order(cls, order: Order) -> "OrderDto":
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=AddressDto.from_address(order.delivery.address),
            order_items=[OrderItemDto.from_order_item(oi) for oi in order.order_items],
        )


class OrderItemQueryDto(CamelModel):
    """주문상품 쿼리 DTO — order_id는 그룹핑용이며 응답에서 제외."""

    order_id: int = Field(exclude=True)
    item_name: str
    order_price: int
    count: int


class OrderQueryDto(CamelModel):
    """주문 쿼리 DTO — 루트 프로젝션 + 주문상품 쿼리 DTO 목록."""

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressDto | None = None
    order_items: list[OrderItemQueryDto] = []


class OrderFlatDto(CamelModel):
    """주문/회원/배송/주문상품/상품을 한 번에 조인한 평면 행.

    Flat row of a single Order ⨝ Member ⨝ Delivery ⨝ OrderItem ⨝ Item join.
    One row per order line; regrouped per order by the service.
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressDto | None = None
    item_name: str
    order_price: int
    count: int


# === 주문 생성/검색 스키마 ===

class OrderSearch(CamelModel):
    """주문 검색 조건 — 모든 조건은 선택 사항.

    Order search criteria. An empty search matches every order.

    Attributes:
        member_name: 회원 이름 부분 일치 (Member name, substring match)
        order_status: 주문 상태 일치 (Order status, exact match)
    """

    member_name: str | None = None
    order_status: OrderStatus | None = None


class OrderCreate(CamelModel):
    """주문 요청 스키마.

    Attributes:
        member_id: 주문 회원 ID (Ordering member)
        item_id: 상품 ID (Ordered item)
        count: 주문 수량 (Quantity, >= 1)
    """

    member_id: int
    item_id: int
    count: int = Field(gt=0)


class OrderCreateResponse(CamelModel):
    """주문 응답 — 생성된 주문 ID."""

    order_id: int


class OrderSummaryResponse(CamelModel):
    """주문 목록/취소 응답 스키마.

    Attributes:
        order_id: 주문 ID (Order identifier)
        member_name: 회원 이름 (Member name)
        order_date: 주문 일시 (Order timestamp)
        order_status: 주문 상태 (Order status)
        delivery_status: 배송 상태 (Delivery status)
        total_price: 총 주문 금액 (Sum of order_price * count)
    """

    order_id: int
    member_name: str
    order_date: datetime
    order_status: OrderStatus
    delivery_status: str | None = None
    total_price: int
