"""Middleware – Collector, a request tracer for synchronous handlers.

The wrapped ``app`` is called as ``app(environ)`` with a WSGI-style
environ mapping (``REQUEST_METHOD`` and ``PATH_INFO`` are read) and must
return a response whose first element is the status, e.g.
``(200, headers, body)``.

Three metrics are obtained from the registry, prefixed with
``metrics_prefix`` (``http_server`` by default):

* ``<prefix>_requests_total``: counter labeled ``code``, ``method``, ``path``
* ``<prefix>_request_duration_seconds``: histogram labeled ``method``, ``path``
* ``<prefix>_exceptions_total``: counter labeled ``exception``

Several collectors may share one registry and prefix; they record into the
same metrics.
"""
from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from mp_metrics.client import Registry
from mp_metrics.middleware.instruments import DEFAULT_METRICS_PREFIX, RequestInstruments
from mp_metrics.middleware.settings import CollectorSettings

Environ = Mapping[str, Any]
Handler = Callable[[Environ], Any]


class Collector:
    """Wrap *app*, timing each call and recording request metrics.

    The response (or the exception) of *app* is always passed through
    untouched. Failures while recording are logged and dropped.
    """

    def __init__(
        self,
        app: Handler,
        registry: Registry,
        metrics_prefix: str = DEFAULT_METRICS_PREFIX,
        excluded_paths: Iterable[str] = (),
    ) -> None:
        self.app = app
        self.registry = registry
        self.metrics_prefix = metrics_prefix
        self._excluded_paths = frozenset(excluded_paths)
        self.instruments = RequestInstruments.from_registry(registry, metrics_prefix)

    @classmethod
    def from_settings(cls, app: Handler, registry: Registry, settings: CollectorSettings) -> "Collector":
        return cls(
            app,
            registry,
            metrics_prefix=settings.metrics_prefix,
            excluded_paths=settings.excluded_paths,
        )

    def __call__(self, environ: Environ) -> Any:
        if environ.get("PATH_INFO") in self._excluded_paths:
            return self.app(environ)

        start = time.perf_counter()
        try:
            response = self.app(environ)
        except Exception as exc:
            self.instruments.record_exception(exc)
            raise
        duration = time.perf_counter() - start

        self.instruments.record_request(
            environ.get("REQUEST_METHOD"),
            environ.get("PATH_INFO"),
            _first(response),
            duration,
        )
        return response


def _first(response: Any) -> Any:
    try:
        return response[0]
    except (TypeError, IndexError, KeyError):
        return None


__all__ = ["Collector"]
