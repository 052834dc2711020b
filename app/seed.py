"""초기 데이터 시드 — 주문 2건 샘플 데이터 생성.

Seed script — Creates the two sample orders used by the order APIs.

Usage:
    python -m app.seed

Creates:
    - userA (서울, 1, 1)
        - JPA1 BOOK x1, JPA2 BOOK x2
    - userB (부산, 222, 222)
        - SPRING1 BOOK x1 at 10000, SPRING2 BOOK x2 at 20000 (below list price)
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base, async_session, engine
from app.models import Address, Book, Delivery, Member, Order, OrderItem

logger = logging.getLogger(__name__)


def _create_member(name: str, city: str, street: str, zipcode: str) -> Member:
    return Member(name=name, address=Address(city=city, street=street, zipcode=zipcode))


def _create_book(name: str, price: int, stock_quantity: int) -> Book:
    return Book(name=name, price=price, stock_quantity=stock_quantity)


def _create_delivery(member: Member) -> Delivery:
    return Delivery(address=member.address)


async def _create_order(
    db: AsyncSession,
    member_data: tuple[str, str, str, str],
    books: list[tuple[str, int, int, int, int]],
) -> Order:
    """회원 1명과 도서 주문 1건을 생성합니다.

    Args:
        member_data: (이름, 도시, 거리, 우편번호) (name, city, street, zipcode)
        books: [(상품명, 가격, 재고, 주문가격, 주문수량)]
               ([(name, price, stock, order price, count)])
    """
    member: Member = _create_member(*member_data)
    db.add(member)

    order_items: list[OrderItem] = []
    for name, price, stock_quantity, order_price, count in books:
        book: Book = _create_book(name, price, stock_quantity)
        db.add(book)
        order_items.append(OrderItem.create_order_item(book, order_price, count))

    order: Order = Order.create_order(member, _create_delivery(member), *order_items)
    db.add(order)
    await db.flush()
    return order


async def init_db(db: AsyncSession) -> bool:
    """샘플 주문 2건을 적재합니다.

    Persist the two sample orders. Idempotent: does nothing when any
    member already exists. The caller owns the transaction (commit).

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)

    Returns:
        bool: 데이터를 새로 적재했으면 True (True if data was inserted)
    """
    result = await db.execute(select(Member.id).limit(1))
    if result.scalar_one_or_none() is not None:
        logger.info("Sample data already present, skipping")
        return False

    await _create_order(
        db,
        ("userA", "서울", "1", "1"),
        [("JPA1 BOOK", 10000, 100, 10000, 1), ("JPA2 BOOK", 20000, 100, 20000, 2)],
    )
    await _create_order(
        db,
        ("userB", "부산", "222", "222"),
        [("SPRING1 BOOK", 20000, 100, 10000, 1), ("SPRING2 BOOK", 40000, 100, 20000, 2)],
    )
    logger.info("Sample data inserted: 2 members, 4 books, 2 orders")
    return True


async def seed() -> None:
    """테이블을 생성하고 샘플 데이터를 적재합니다 (Create tables, then seed)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        await init_db(db)
        await db.commit()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
