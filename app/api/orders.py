"""주문 API 라우터 — 주문 생성/취소/검색 엔드포인트.

Order router — Place, cancel and search orders.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.order import OrderStatus
from app.schemas.order import (
    OrderCreate,
    OrderCreateResponse,
    OrderSearch,
    OrderSummaryResponse,
)
from app.services.order_service import order_service

router: APIRouter = APIRouter()


@router.get("/", response_model=list[OrderSummaryResponse])
async def search_orders(
    db: Annotated[AsyncSession, Depends(get_db)],
    member_name: Annotated[str | None, Query(alias="memberName")] = None,
    order_status: Annotated[OrderStatus | None, Query(alias="orderStatus")] = None,
) -> list[OrderSummaryResponse]:
    """회원 이름/주문 상태로 주문을 검색합니다 (Both filters optional)."""
    search: OrderSearch = OrderSearch(member_name=member_name, order_status=order_status)
    return await order_service.find_orders(db, search)


@router.post("/", response_model=OrderCreateResponse, status_code=201)
async def create_order(
    data: OrderCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderCreateResponse:
    """주문을 생성합니다 (Place an order)."""
    order_id: int = await order_service.order(db, data.member_id, data.item_id, data.count)
    await db.commit()
    return OrderCreateResponse(order_id=order_id)


@router.post("/{order_id}/cancel", response_model=OrderSummaryResponse)
async def cancel_order(
    order_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderSummaryResponse:
    """주문을 취소합니다 (Cancel an order and restore stock)."""
    result: OrderSummaryResponse = await order_service.cancel_order(db, order_id)
    await db.commit()
    return result
