"""ASGI adapter – ASGICollectorMiddleware.

Records the same request metrics as
:class:`~mp_metrics.middleware.collector.Collector` for ASGI applications
(FastAPI, Starlette, ...). The status code is taken from the
``http.response.start`` message.
"""
from __future__ import annotations

import time
from collections.abc import Awaitable, Callable, Iterable, MutableMapping
from typing import Any

from mp_metrics.client import Registry
from mp_metrics.middleware.instruments import DEFAULT_METRICS_PREFIX, RequestInstruments
from mp_metrics.middleware.settings import CollectorSettings

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]


class ASGICollectorMiddleware:
    """Record per-request counts, latency and exceptions for an ASGI app."""

    def __init__(
        self,
        app: ASGIApp,
        registry: Registry,
        metrics_prefix: str = DEFAULT_METRICS_PREFIX,
        excluded_paths: Iterable[str] = (),
    ) -> None:
        self.app = app
        self.registry = registry
        self._excluded_paths = frozenset(excluded_paths)
        self.instruments = RequestInstruments.from_registry(registry, metrics_prefix)

    @classmethod
    def from_settings(
        cls, app: ASGIApp, registry: Registry, settings: CollectorSettings
    ) -> "ASGICollectorMiddleware":
        return cls(
            app,
            registry,
            metrics_prefix=settings.metrics_prefix,
            excluded_paths=settings.excluded_paths,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope.get("path") in self._excluded_paths:
            await self.app(scope, receive, send)
            return

        status_code: list[Any] = [None]

        async def send_capturing(message: Message) -> None:
            if message["type"] == "http.response.start":
                status_code[0] = message.get("status")
            await send(message)

        start = time.perf_counter()
        try:
            await self.app(scope, receive, send_capturing)
        except Exception as exc:
            self.instruments.record_exception(exc)
            raise
        duration = time.perf_counter() - start

        self.instruments.record_request(
            scope.get("method"),
            scope.get("path"),
            status_code[0],
            duration,
        )


__all__ = ["ASGICollectorMiddleware"]
