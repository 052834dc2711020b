"""회원 레포지토리 — 회원 저장 및 조회 쿼리.

Member Repository — Persistence and lookup queries for members.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.repositories.base import BaseRepository


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Member)

    async def find_all(self, db: AsyncSession) -> list[Member]:
        """전체 회원을 ID 순으로 조회합니다 (All members ordered by id)."""
        return await self.get_all(db, order_by=Member.id)

    async def find_by_name(self, db: AsyncSession, name: str) -> list[Member]:
        """이름이 일치하는 회원을 조회합니다.

        Retrieve members with exactly the given name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 회원 이름 (Member name)

        Returns:
            list[Member]: 일치하는 회원 목록 (Matching members)
        """
        query: Select = select(Member).where(Member.name == name)
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
