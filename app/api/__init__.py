"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates all endpoints into a single router
mounted under ``/api``.

Included routers:
    - order_simple: 주문 요약 v1~v4 (/api/v{n}/simple-orders)
    - order_collection: 주문 + 주문상품 v1~v6 (/api/v{n}/orders)
    - members: 회원 (/api/v2/members)
    - items: 상품 (/api/items)
    - orders: 주문 생성/취소/검색 (/api/orders)
"""

from fastapi import APIRouter

from app.api.items import router as items_router
from app.api.members import router as members_router
from app.api.order_collection import router as order_collection_router
from app.api.order_simple import router as order_simple_router
from app.api.orders import router as orders_router

api_router: APIRouter = APIRouter()

# 조회 API — 버전이 경로에 포함됨 (Version is part of each path)
api_router.include_router(order_simple_router, tags=["Simple Orders"])
api_router.include_router(order_collection_router, tags=["Order Collections"])
api_router.include_router(members_router, tags=["Members"])

# 리소스 API — Resource routers
api_router.include_router(items_router, prefix="/items", tags=["Items"])
api_router.include_router(orders_router, prefix="/orders", tags=["Orders"])
