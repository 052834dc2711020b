"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per API request to an Axiom dataset:
method, path, params, masked JSON body, status code, duration and,
for error responses, the ``detail`` of the error body.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_DETAIL_LEN = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive keys in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def _error_detail(body: bytes) -> str:
    """에러 응답 body에서 사유 추출 — FastAPI errors carry a ``detail`` key."""
    try:
        payload = json.loads(body)
        detail = payload.get("detail", payload) if isinstance(payload, dict) else payload
        text = detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    except (json.JSONDecodeError, UnicodeDecodeError):
        text = body.decode("utf-8", errors="replace")
    if len(text) > _MAX_DETAIL_LEN:
        text = text[:_MAX_DETAIL_LEN] + "..."
    return text


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs API requests and responses to Axiom.
    Without ``AXIOM_API_TOKEN`` and ``AXIOM_DATASET`` it is a pass-through.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None, dataset: str | None = None) -> None:
        super().__init__(app)
        self._dataset: str = dataset if dataset is not None else settings.AXIOM_DATASET
        self._client: AxiomClient | None = client

        if self._client is None and settings.AXIOM_API_TOKEN and self._dataset:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self._client is None or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time: float = time.perf_counter()
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
        }
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))

        if request.method in ("POST", "PUT", "PATCH"):
            body_bytes: bytes = await request.body()
            if body_bytes:
                try:
                    event["request_body"] = mask_sensitive(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    event["request_body"] = "(non-json body)"

        status_code: int = 500
        try:
            response: Response = await call_next(request)
            status_code = response.status_code

            # 에러 응답이면 body를 소비해 사유를 기록하고 새 응답으로 다시 감싼다
            if status_code >= 400:
                resp_body: bytes = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            # path_params는 라우팅 이후에만 채워짐 (Filled in after routing)
            if request.path_params:
                event["path_params"] = dict(request.path_params)
            event["status_code"] = status_code
            event["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            self._ingest(event)

        return response

    def _ingest(self, event: dict[str, Any]) -> None:
        # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            logger.warning("Axiom ingest failed for %s %s", event["method"], event["path"], exc_info=True)
