"""회원 서비스 — 회원 가입/조회/수정 비즈니스 로직.

Member Service — Business logic for member registration, lookup and update.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.address import Address
from app.models.member import Member
from app.repositories.member_repository import member_repository
from app.schemas.common import ListResult
from app.schemas.member import (
    CreateMemberRequest,
    MemberDto,
    UpdateMemberResponse,
)
from app.utils.exceptions import DuplicateError, NotFoundError


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스."""

    async def join(self, db: AsyncSession, data: CreateMemberRequest) -> int:
        """회원 가입.

        Register a new member.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 가입 요청 데이터 (Registration data)

        Returns:
            int: 생성된 회원 ID (New member id)

        Raises:
            DuplicateError: 같은 이름의 회원이 이미 존재할 때 (Name already taken)
        """
        await self._validate_duplicate_member(db, data.name)

        member: Member = Member(
            name=data.name,
            address=Address(city=data.city, street=data.street, zipcode=data.zipcode),
        )
        try:
            await member_repository.save(db, member)
        except IntegrityError:
            # 동시 가입으로 유니크 제약 위반 (Concurrent join hit the unique constraint)
            await db.rollback()
            raise DuplicateError("Member with this name already exists")
        return member.id

    async def _validate_duplicate_member(self, db: AsyncSession, name: str) -> None:
        if await member_repository.find_by_name(db, name):
            raise DuplicateError("Member with this name already exists")

    async def find_members(self, db: AsyncSession) -> ListResult[MemberDto]:
        """전체 회원 목록 (이름만 노출)."""
        members: list[Member] = await member_repository.find_all(db)
        data: list[MemberDto] = [MemberDto(name=m.name) for m in members]
        return ListResult[MemberDto](count=len(data), data=data)

    async def find_one(self, db: AsyncSession, member_id: int) -> Member:
        """회원 단건 조회.

        Raises:
            NotFoundError: 회원이 없을 때 (Member not found)
        """
        member: Member | None = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        return member

    async def update(self, db: AsyncSession, member_id: int, name: str) -> UpdateMemberResponse:
        """회원 이름 수정 — 변경 감지로 flush 시 UPDATE.

        Change the member's name; the UPDATE is issued by dirty checking.

        Raises:
            NotFoundError: 회원이 없을 때 (Member not found)
            DuplicateError: 다른 회원이 쓰는 이름일 때 (Name already taken)
        """
        member: Member = await self.find_one(db, member_id)
        member.name = name
        try:
            await db.flush()
        except IntegrityError:
            await db.rollback()
            raise DuplicateError("Member with this name already exists")
        return UpdateMemberResponse(id=member.id, name=member.name)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
