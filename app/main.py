"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
Configures request logging, health check, the API routers, and the
start-up sample data loader.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import settings
from app.database import async_session, engine
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.seed import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """기동 시 샘플 데이터를 적재합니다 (INIT_DB=True일 때).

    On start-up, load the sample orders when ``settings.INIT_DB`` is
    enabled; dispose the engine on shutdown. The schema is owned by
    Alembic (``alembic upgrade head``) or ``python -m app.seed``.
    """
    if settings.INIT_DB:
        logger.info("Initializing sample data")
        async with async_session() as db:
            await init_db(db)
            await db.commit()
    yield
    await engine.dispose()


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
app.add_middleware(AxiomLoggingMiddleware)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from app.api import api_router  # noqa: E402

app.include_router(api_router, prefix="/api")
