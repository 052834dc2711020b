"""회원 API 라우터 — 회원 가입/목록/수정 엔드포인트.

Member router — Registration, listing and update endpoints.
Requests and responses use dedicated DTOs, never the Member entity.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.common import ListResult
from app.schemas.member import (
    CreateMemberRequest,
    CreateMemberResponse,
    MemberDto,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from app.services.member_service import member_service

router: APIRouter = APIRouter()


@router.get("/v2/members", response_model=ListResult[MemberDto])
async def members_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ListResult[MemberDto]:
    """회원 목록을 조회합니다 (Wrapped list of member names)."""
    return await member_service.find_members(db)


@router.post("/v2/members", response_model=CreateMemberResponse)
async def save_member_v2(
    data: CreateMemberRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreateMemberResponse:
    """회원 가입 (Register a member)."""
    member_id: int = await member_service.join(db, data)
    await db.commit()
    return CreateMemberResponse(id=member_id)


@router.put("/v2/members/{member_id}", response_model=UpdateMemberResponse)
async def update_member_v2(
    member_id: int,
    data: UpdateMemberRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UpdateMemberResponse:
    """회원 이름을 수정합니다 (Change a member's name)."""
    result: UpdateMemberResponse = await member_service.update(db, member_id, data.name)
    await db.commit()
    return result
