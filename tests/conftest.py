"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Every test gets a fresh in-memory database (StaticPool keeps the single
connection alive for the engine's lifetime), so no cleanup is needed.
"""

import os

# 앱 임포트 전에 설정 — Configure before the app (and its engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("INIT_DB", "false")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("AXIOM_API_TOKEN", "")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import *  # noqa: F401,F403,E402 — register all models with metadata
from app.models import Address, Book, Member  # noqa: E402
from app.seed import init_db  # noqa: E402

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 매 테스트마다 새 인메모리 스키마."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def seeded(db: AsyncSession) -> None:
    """샘플 주문 2건을 적재하고 세션을 비웁니다.

    The identity map is cleared afterwards so that every association is
    loaded from the database again, as in a fresh request.
    """
    await init_db(db)
    await db.commit()
    db.expunge_all()


@pytest_asyncio.fixture
async def member(db: AsyncSession) -> Member:
    """테스트 회원을 생성합니다."""
    m = Member(name="tester", address=Address(city="Seoul", street="Main", zipcode="12345"))
    db.add(m)
    await db.flush()
    return m


@pytest_asyncio.fixture
async def book(db: AsyncSession) -> Book:
    """재고 10개짜리 테스트 도서를 생성합니다."""
    b = Book(name="Test Book", price=15000, stock_quantity=10, author="kim", isbn="1234")
    db.add(b)
    await db.flush()
    return b
