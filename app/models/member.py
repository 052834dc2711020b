"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.

Tables:
    - member: 회원 (Shop members with an embedded address)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from app.database import Base
from app.models.address import Address


class Member(Base):
    """회원 모델.

    Member model. The member's orders are owned by the Order side
    (``orders.member_id``); this side is only the inverse view.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 회원 이름, 유니크 (Member name, unique)
        address: 임베디드 주소 (Embedded address: city, street, zipcode)

    Relationships:
        orders: 회원의 주문 목록 (Orders placed by this member, JSON-ignored)
    """

    __tablename__ = "member"

    id: Mapped[int] = mapped_column("member_id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # 임베디드 주소 컬럼 — Embedded address columns
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[Address] = composite("city", "street", "zipcode")

    # 역방향 — 엔티티 직접 직렬화 시 무한루프 방지를 위해 제외
    orders = relationship("Order", back_populates="member", info={"json_ignore": True})
