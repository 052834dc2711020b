"""주문 요약 API 라우터 — xToOne 관계 성능 최적화.

Order summary router — Order -> Member, Order -> Delivery.
Each version returns the same orders; see ``OrderSimpleService`` for how
they differ in loading strategy.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.order import OrderSimpleQueryDto, SimpleOrderDto
from app.services.order_simple_service import order_simple_service

router: APIRouter = APIRouter()


@router.get("/v1/simple-orders")
async def orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict[str, Any]]:
    """엔티티를 직접 반환합니다 — 잘못된 방법.

    Returns Order entities directly. Kept as the counter-example: the API
    shape follows the entity, and lazy associations that were not forced
    come back as ``null``.
    """
    return await order_simple_service.orders_v1(db)


@router.get("/v2/simple-orders", response_model=list[SimpleOrderDto])
async def orders_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderDto]:
    """엔티티를 DTO로 변환합니다 (지연 로딩 N+1)."""
    return await order_simple_service.orders_v2(db)


@router.get("/v3/simple-orders", response_model=list[SimpleOrderDto])
async def orders_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderDto]:
    """페치 조인으로 조회 후 DTO로 변환합니다."""
    return await order_simple_service.orders_v3(db)


@router.get("/v4/simple-orders", response_model=list[OrderSimpleQueryDto])
async def orders_v4(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderSimpleQueryDto]:
    """DTO 프로젝션으로 바로 조회합니다."""
    return await order_simple_service.orders_v4(db)
