"""주문 + 주문상품 API 라우터 — 컬렉션 조회 최적화.

Order collection router — Order -> OrderItem -> Item.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.schemas.order import OrderDto, OrderQueryDto
from app.services.order_collection_service import order_collection_service

router: APIRouter = APIRouter()


@router.get("/v1/orders")
async def orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict[str, Any]]:
    """엔티티를 직접 반환합니다 — 잘못된 방법 (Entity graph as-is)."""
    return await order_collection_service.orders_v1(db)


@router.get("/v2/orders", response_model=list[OrderDto])
async def orders_v2(db: Annotated[AsyncSession, Depends(get_db)]) -> list[OrderDto]:
    return await order_collection_service.orders_v2(db)


@router.get("/v3/orders", response_model=list[OrderDto])
async def orders_v3(db: Annotated[AsyncSession, Depends(get_db)]) -> list[OrderDto]:
    return await order_collection_service.orders_v3(db)


@router.get("/v3.1/orders", response_model=list[OrderDto])
async def orders_v3_page(
    db: Annotated[AsyncSession, Depends(get_db)],
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int | None, Query(ge=1)] = None,
) -> list[OrderDto]:
    """페이징 가능한 주문 조회 (Pageable: offset/limit apply to orders)."""
    return await order_collection_service.orders_v3_page(
        db, offset, limit if limit is not None else settings.DEFAULT_BATCH_SIZE
    )


@router.get("/v4/orders", response_model=list[OrderQueryDto])
async def orders_v4(db: Annotated[AsyncSession, Depends(get_db)]) -> list[OrderQueryDto]:
    return await order_collection_service.orders_v4(db)


@router.get("/v5/orders", response_model=list[OrderQueryDto])
async def orders_v5(db: Annotated[AsyncSession, Depends(get_db)]) -> list[OrderQueryDto]:
    return await order_collection_service.orders_v5(db)


@router.get("/v6/orders", response_model=list[OrderQueryDto])
async def orders_v6(db: Annotated[AsyncSession, Depends(get_db)]) -> list[OrderQueryDto]:
    return await order_collection_service.orders_v6(db)
