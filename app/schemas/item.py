"""상품 관련 Pydantic 요청/응답 스키마 정의.

Item Pydantic request/response schema definitions.
Only books can be registered through the API; albums and movies are
readable through the generic item response.
"""

from pydantic import Field

from app.schemas.common import CamelModel


class BookCreate(CamelModel):
    """도서 등록 요청 스키마.

    Attributes:
        name: 상품명 (Item name)
        price: 가격 (Unit price, >= 0)
        stock_quantity: 재고 수량 (Initial stock, >= 0)
        author: 저자 (Author, optional)
        isbn: ISBN (optional)
    """

    name: str = Field(min_length=1)
    price: int = Field(ge=0)
    stock_quantity: int = Field(ge=0)
    author: str | None = None
    isbn: str | None = None


class ItemUpdate(CamelModel):
    """상품 수정 요청 스키마 (부분 업데이트).

    Item update request schema (partial update).
    """

    name: str | None = Field(default=None, min_length=1)
    price: int | None = Field(default=None, ge=0)
    stock_quantity: int | None = Field(default=None, ge=0)


class CreateItemResponse(CamelModel):
    """상품 등록 응답 — 생성된 상품 ID."""

    id: int


class ItemResponse(CamelModel):
    """상품 응답 스키마.

    Attributes:
        id: 상품 ID (Item identifier)
        name: 상품명 (Item name)
        price: 가격 (Unit price)
        stock_quantity: 재고 수량 (Stock quantity)
        dtype: 상품 유형 B/A/M (Item subtype discriminator)
    """

    id: int
    name: str
    price: int
    stock_quantity: int
    dtype: str
