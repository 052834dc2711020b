"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    address: 임베디드 주소 값 타입 (Embedded address value type)
    member: 회원 (Member)
    item: 상품 단일 테이블 상속 (Item, Book, Album, Movie)
    delivery: 배송 (Delivery)
    order: 주문, 주문상품 (Order, OrderItem)
"""

from app.models.address import Address
from app.models.member import Member
from app.models.item import Item, Book, Album, Movie
from app.models.delivery import Delivery, DeliveryStatus
from app.models.order import Order, OrderItem, OrderStatus

__all__ = [
    "Address",
    "Member",
    "Item", "Book", "Album", "Movie",
    "Delivery", "DeliveryStatus",
    "Order", "OrderItem", "OrderStatus",
]
