"""상품 API 라우터 — 상품 등록/조회/수정 엔드포인트.

Item router — Registration, lookup and update endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.item import BookCreate, CreateItemResponse, ItemResponse, ItemUpdate
from app.services.item_service import item_service

router: APIRouter = APIRouter()


@router.get("/", response_model=list[ItemResponse])
async def list_items(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ItemResponse]:
    """상품 목록을 조회합니다."""
    return await item_service.find_items(db)


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse:
    """상품 상세를 조회합니다."""
    return await item_service.find_one(db, item_id)


@router.post("/books", response_model=CreateItemResponse, status_code=201)
async def create_book(
    data: BookCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreateItemResponse:
    """도서를 등록합니다."""
    item_id: int = await item_service.save_item(db, data)
    await db.commit()
    return CreateItemResponse(id=item_id)


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(
    item_id: int,
    data: ItemUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemResponse:
    """상품 정보를 수정합니다 (Partial update)."""
    result: ItemResponse = await item_service.update_item(db, item_id, data)
    await db.commit()
    return result
