"""Middleware – request instruments and the recording step.

Both the WSGI-style :class:`~mp_metrics.middleware.collector.Collector` and
the ASGI adapter record through :class:`RequestInstruments`. Recording never
raises: it returns a :class:`RecordingOutcome` and logs failures.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from mp_metrics.client import Counter, Histogram, MetricType, Registry
from mp_metrics.middleware.paths import strip_ids_from_path
from mp_metrics.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_METRICS_PREFIX = "http_server"


@dataclasses.dataclass(frozen=True)
class RecordingOutcome:
    """Result of one recording attempt."""

    recorded: bool
    error: Exception | None = None

    @classmethod
    def ok(cls) -> "RecordingOutcome":
        return cls(recorded=True)

    @classmethod
    def failed(cls, error: Exception) -> "RecordingOutcome":
        return cls(recorded=False, error=error)


@dataclasses.dataclass(frozen=True)
class RequestInstruments:
    """The request counter, duration histogram and exception counter."""

    requests: Counter
    durations: Histogram
    exceptions: Counter

    @classmethod
    def from_registry(
        cls,
        registry: Registry,
        metrics_prefix: str = DEFAULT_METRICS_PREFIX,
    ) -> "RequestInstruments":
        """Get or create the three metrics under *metrics_prefix*."""
        requests = registry.get_or_create(
            MetricType.COUNTER,
            f"{metrics_prefix}_requests_total",
            "The total number of HTTP requests handled by the application.",
            labels=("code", "method", "path"),
        )
        durations = registry.get_or_create(
            MetricType.HISTOGRAM,
            f"{metrics_prefix}_request_duration_seconds",
            "The HTTP response duration of the application.",
            labels=("method", "path"),
        )
        exceptions = registry.get_or_create(
            MetricType.COUNTER,
            f"{metrics_prefix}_exceptions_total",
            "The total number of exceptions raised by the application.",
            labels=("exception",),
        )
        return cls(requests=requests, durations=durations, exceptions=exceptions)  # type: ignore[arg-type]

    def record_request(self, method: Any, path: Any, status: Any, duration: float) -> RecordingOutcome:
        """Count the request and observe its duration."""
        try:
            method_label = method.lower()
            path_label = strip_ids_from_path(path)
            self.requests.increment(
                labels={"code": status_code(status), "method": method_label, "path": path_label}
            )
            self.durations.observe(duration, labels={"method": method_label, "path": path_label})
        except Exception as exc:  # noqa: BLE001
            return self._failed(exc, method=method, path=path)
        return RecordingOutcome.ok()

    def record_exception(self, exception: BaseException) -> RecordingOutcome:
        """Count *exception* by its class name."""
        try:
            self.exceptions.increment(labels={"exception": type(exception).__name__})
        except Exception as exc:  # noqa: BLE001
            return self._failed(exc, exception=type(exception).__name__)
        return RecordingOutcome.ok()

    def _failed(self, exc: Exception, **context: Any) -> RecordingOutcome:
        logger.warning(
            "metrics_recording_failed",
            error=exc,
            error_type=type(exc).__name__,
            **{k: str(v) for k, v in context.items()},
        )
        return RecordingOutcome.failed(exc)


def status_code(status: Any) -> str:
    """Text of a response status: ``200`` and ``"200 OK"`` both give ``"200"``."""
    text = "" if status is None else str(status).strip()
    if not text:
        raise ValueError("Response has no status")
    return text.split(None, 1)[0]


__all__ = [
    "DEFAULT_METRICS_PREFIX",
    "RecordingOutcome",
    "RequestInstruments",
    "status_code",
]
