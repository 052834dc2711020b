"""주소 값 타입 — Member/Delivery에 임베드되는 복합 값.

Address value type embedded into Member and Delivery rows via
SQLAlchemy ``composite``. It has no table of its own.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """주소 값 객체 (불변).

    Immutable address value object. Replace it as a whole instead of
    mutating single fields.

    Attributes:
        city: 도시 (City)
        street: 거리 (Street)
        zipcode: 우편번호 (Zip code)
    """

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None
