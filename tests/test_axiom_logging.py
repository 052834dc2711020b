"""Axiom 로깅 미들웨어 테스트 — 이벤트 필드, 에러 사유, 마스킹.

Axiom logging middleware tests. The Axiom client is replaced by a
MagicMock so no events leave the process.
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.middleware.axiom_logging import AxiomLoggingMiddleware, mask_sensitive
from app.utils.exceptions import NotFoundError


def _build_app(client: MagicMock) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, client=client, dataset="test-dataset")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/members/{member_id}")
    async def echo(member_id: int) -> dict[str, int]:
        return {"id": member_id}

    @app.get("/missing")
    async def missing() -> None:
        raise NotFoundError("Member not found")

    return app


@pytest.fixture
def axiom_client() -> MagicMock:
    return MagicMock()


async def _request(app: FastAPI, method: str, url: str, **kwargs):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        return await ac.request(method, url, **kwargs)


def _sent_event(axiom_client: MagicMock) -> dict:
    axiom_client.ingest_events.assert_called_once()
    dataset, events = axiom_client.ingest_events.call_args.args
    assert dataset == "test-dataset"
    return events[0]


class TestAxiomLoggingMiddleware:
    """요청 이벤트 적재 테스트."""

    async def test_event_fields(self, axiom_client: MagicMock):
        app = _build_app(axiom_client)
        res = await _request(
            app, "POST", "/members/7", params={"q": "x"}, json={"name": "kim", "password": "pw"}
        )
        assert res.status_code == 200

        event = _sent_event(axiom_client)
        assert event["method"] == "POST"
        assert event["path"] == "/members/7"
        assert event["query_params"] == {"q": "x"}
        assert event["request_body"] == {"name": "kim", "password": "***"}
        assert event["path_params"] == {"member_id": "7"}
        assert event["status_code"] == 200
        assert "duration_ms" in event
        assert "error" not in event

    async def test_error_detail(self, axiom_client: MagicMock):
        app = _build_app(axiom_client)
        res = await _request(app, "GET", "/missing")
        # 응답 body는 그대로 전달되어야 함
        assert res.status_code == 404
        assert res.json() == {"detail": "Member not found"}

        event = _sent_event(axiom_client)
        assert event["status_code"] == 404
        assert event["error"] == "Member not found"

    async def test_skipped_path(self, axiom_client: MagicMock):
        app = _build_app(axiom_client)
        res = await _request(app, "GET", "/health")
        assert res.status_code == 200
        axiom_client.ingest_events.assert_not_called()

    async def test_ingest_failure_does_not_break_request(self, axiom_client: MagicMock):
        axiom_client.ingest_events.side_effect = RuntimeError("axiom down")
        app = _build_app(axiom_client)
        res = await _request(app, "POST", "/members/1", json={})
        assert res.status_code == 200
        assert res.json() == {"id": 1}


class TestMaskSensitive:
    """민감 필드 마스킹."""

    def test_nested(self):
        data = {"user": {"api_key": "abc", "name": "kim"}, "items": [{"token": "t"}]}
        assert mask_sensitive(data) == {
            "user": {"api_key": "***", "name": "kim"},
            "items": [{"token": "***"}],
        }

    def test_plain_values(self):
        assert mask_sensitive("password") == "password"
        assert mask_sensitive(3) == 3
