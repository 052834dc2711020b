"""공통 Pydantic 스키마 — camelCase 베이스 모델과 공용 DTO.

Common Pydantic schema definitions.
All API schemas extend ``CamelModel`` so that JSON field names are
camelCase (``orderId``, ``orderDate``) while Python attributes stay snake_case.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.models.address import Address

T = TypeVar("T")


class CamelModel(BaseModel):
    """camelCase 직렬화 베이스 모델.

    Base model serializing with camelCase aliases.
    ``populate_by_name`` also accepts snake_case keys on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AddressDto(CamelModel):
    """주소 DTO (Address DTO)."""

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None

    @classmethod
    def from_address(cls, address: Address | None) -> "AddressDto | None":
        """임베디드 주소 값에서 DTO를 생성합니다 (None 허용)."""
        if address is None:
            return None
        return cls(city=address.city, street=address.street, zipcode=address.zipcode)


class ListResult(CamelModel, Generic[T]):
    """목록 응답 래퍼 — 배열을 객체로 감싸 확장 가능하게 반환.

    List response wrapper. Wrapping the array in an object leaves room for
    additional fields (such as ``count``) without breaking clients.

    Attributes:
        count: 항목 수 (Number of items)
        data: 항목 목록 (Items)
    """

    count: int
    data: list[T]
