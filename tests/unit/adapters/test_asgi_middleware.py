"""Unit tests for ASGICollectorMiddleware."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from mp_metrics.adapters.asgi import ASGICollectorMiddleware
from mp_metrics.client import Registry
from mp_metrics.middleware import CollectorSettings


def _scope(method: str = "GET", path: str = "/orders/42", type_: str = "http") -> dict[str, Any]:
    return {"type": type_, "method": method, "path": path, "headers": []}


async def _receive() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


def _make_app(status: int = 200):
    async def app(scope: Any, receive: Any, send: Any) -> None:
        await send({"type": "http.response.start", "status": status, "headers": []})
        await send({"type": "http.response.body", "body": b"ok"})

    return app


def _run(middleware: ASGICollectorMiddleware, scope: dict[str, Any]) -> list[dict[str, Any]]:
    sent: list[dict[str, Any]] = []

    async def send(message: dict[str, Any]) -> None:
        sent.append(message)

    asyncio.run(middleware(scope, _receive, send))
    return sent


class TestASGICollectorMiddleware:
    def test_messages_pass_through(self) -> None:
        sent = _run(ASGICollectorMiddleware(_make_app(), Registry()), _scope())
        assert [m["type"] for m in sent] == ["http.response.start", "http.response.body"]

    def test_counts_request_with_captured_status(self) -> None:
        reg = Registry()
        _run(ASGICollectorMiddleware(_make_app(201), reg), _scope("POST", "/orders/42"))
        assert reg.get("http_server_requests_total").values() == [
            ({"code": "201", "method": "post", "path": "/orders/:id"}, 1.0)
        ]

    def test_observes_duration(self) -> None:
        reg = Registry()
        _run(ASGICollectorMiddleware(_make_app(), reg), _scope())
        [(labels, hist)] = reg.get("http_server_request_duration_seconds").values()
        assert labels == {"method": "get", "path": "/orders/:id"}
        assert hist["+Inf"] == 1.0

    def test_non_http_scope_is_not_recorded(self) -> None:
        reg = Registry()
        called: list[str] = []

        async def app(scope: Any, receive: Any, send: Any) -> None:
            called.append(scope["type"])

        asyncio.run(ASGICollectorMiddleware(app, reg)(_scope(type_="lifespan"), _receive, _noop_send))
        assert called == ["lifespan"]
        assert reg.get("http_server_requests_total").values() == []

    def test_exception_counted_and_reraised(self) -> None:
        reg = Registry()
        error = RuntimeError("boom")

        async def app(scope: Any, receive: Any, send: Any) -> None:
            raise error

        with pytest.raises(RuntimeError) as exc_info:
            _run(ASGICollectorMiddleware(app, reg), _scope())
        assert exc_info.value is error
        assert reg.get("http_server_exceptions_total").values() == [({"exception": "RuntimeError"}, 1.0)]
        assert reg.get("http_server_requests_total").values() == []

    def test_app_without_response_start_is_not_counted(self) -> None:
        reg = Registry()

        async def app(scope: Any, receive: Any, send: Any) -> None:
            return None

        _run(ASGICollectorMiddleware(app, reg), _scope())
        assert reg.get("http_server_requests_total").values() == []

    def test_shares_metrics_with_other_instances(self) -> None:
        reg = Registry()
        first = ASGICollectorMiddleware(_make_app(), reg)
        second = ASGICollectorMiddleware(_make_app(), reg)
        _run(first, _scope())
        _run(second, _scope())
        assert reg.get("http_server_requests_total").get(
            labels={"code": "200", "method": "get", "path": "/orders/:id"}
        ) == 2.0

    def test_from_settings_excludes_paths(self) -> None:
        reg = Registry()
        middleware = ASGICollectorMiddleware.from_settings(
            _make_app(), reg, CollectorSettings(metrics_prefix="asgi", excluded_paths=["/metrics"])
        )
        _run(middleware, _scope(path="/metrics"))
        assert reg.get("asgi_requests_total").values() == []


async def _noop_send(message: Any) -> None:
    return None
