"""상품 SQLAlchemy ORM 모델 정의 — 단일 테이블 상속.

Item SQLAlchemy ORM model definitions using single-table inheritance.
The ``dtype`` discriminator selects the subtype: B=Book, A=Album, M=Movie.

Tables:
    - item: 상품 (All item subtypes share one table)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.utils.exceptions import NotEnoughStockError


class Item(Base):
    """상품 공통 모델.

    Common item model. Stock changes go through ``add_stock`` and
    ``remove_stock`` only; the stock quantity never becomes negative.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 상품명 (Item name)
        price: 가격 (Unit price)
        stock_quantity: 재고 수량 (Stock quantity, >= 0)
        dtype: 서브타입 구분자 (Subtype discriminator)
    """

    __tablename__ = "item"

    id: Mapped[int] = mapped_column("item_id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dtype: Mapped[str] = mapped_column(String(31), nullable=False)

    __mapper_args__ = {"polymorphic_on": "dtype"}

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("price", 0)
        kwargs.setdefault("stock_quantity", 0)
        super().__init__(**kwargs)

    def add_stock(self, quantity: int) -> None:
        """재고를 증가시킵니다 (Increase stock)."""
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """재고를 감소시킵니다.

        Decrease stock.

        Raises:
            NotEnoughStockError: 남은 재고가 0 미만이 될 때 (Stock would go negative)
        """
        rest_stock: int = self.stock_quantity - quantity
        if rest_stock < 0:
            raise NotEnoughStockError("need more stock")
        self.stock_quantity = rest_stock


class Book(Item):
    """도서 (Book, dtype=B)."""

    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "B"}


class Album(Item):
    """음반 (Album, dtype=A)."""

    artist: Mapped[str | None] = mapped_column(String(255), nullable=True)
    etc: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "A"}


class Movie(Item):
    """영화 (Movie, dtype=M)."""

    director: Mapped[str | None] = mapped_column(String(255), nullable=True)
    actor: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "M"}
