"""회원 관련 Pydantic 요청/응답 스키마 정의.

Member Pydantic request/response schema definitions.
"""

from pydantic import Field

from app.schemas.common import CamelModel


class CreateMemberRequest(CamelModel):
    """회원 가입 요청 스키마.

    Attributes:
        name: 회원 이름 (Member name, required)
        city: 도시 (City, optional)
        street: 거리 (Street, optional)
        zipcode: 우편번호 (Zip code, optional)
    """

    name: str = Field(min_length=1)  # 회원 이름 — 빈 문자열 불가 (Must not be empty)
    city: str | None = None
    street: str | None = None
    zipcode: str | None = None


class CreateMemberResponse(CamelModel):
    """회원 가입 응답 — 생성된 회원 ID."""

    id: int


class UpdateMemberRequest(CamelModel):
    """회원 수정 요청 스키마 (이름만 변경 가능)."""

    name: str = Field(min_length=1)


class UpdateMemberResponse(CamelModel):
    """회원 수정 응답 스키마."""

    id: int
    name: str


class MemberDto(CamelModel):
    """회원 목록 항목 — 노출할 필드만 포함 (Only exposed fields)."""

    name: str
