"""배송 SQLAlchemy ORM 모델 정의.

Delivery SQLAlchemy ORM model definition.

Tables:
    - delivery: 배송 (One delivery per order, embedded address)
"""

import enum

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from app.database import Base
from app.models.address import Address


class DeliveryStatus(str, enum.Enum):
    """배송 상태 — READY(준비), COMP(완료)."""

    READY = "READY"
    COMP = "COMP"


class Delivery(Base):
    """배송 모델.

    Delivery model. The foreign key lives on ``orders.delivery_id``;
    ``order`` here is the inverse side of the one-to-one.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        address: 배송지 주소 (Shipping address)
        status: 배송 상태 (Delivery status)
    """

    __tablename__ = "delivery"

    id: Mapped[int] = mapped_column("delivery_id", Integer, primary_key=True, autoincrement=True)

    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[Address] = composite("city", "street", "zipcode")

    status: Mapped[DeliveryStatus] = mapped_column(
        Enum(DeliveryStatus, native_enum=False, length=10),
        nullable=False,
        default=DeliveryStatus.READY,
    )

    order = relationship("Order", back_populates="delivery", uselist=False, info={"json_ignore": True})

    def __init__(self, **kwargs) -> None:
        # 컬럼 default는 INSERT 시점에만 적용되므로 생성 시점에 READY로 초기화
        kwargs.setdefault("status", DeliveryStatus.READY)
        super().__init__(**kwargs)
