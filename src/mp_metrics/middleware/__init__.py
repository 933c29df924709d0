"""Middleware – request tracing on top of the metrics client."""
from mp_metrics.middleware.collector import Collector
from mp_metrics.middleware.instruments import (
    DEFAULT_METRICS_PREFIX,
    RecordingOutcome,
    RequestInstruments,
)
from mp_metrics.middleware.paths import strip_ids_from_path
from mp_metrics.middleware.settings import CollectorSettings

__all__ = [
    "DEFAULT_METRICS_PREFIX",
    "Collector",
    "CollectorSettings",
    "RecordingOutcome",
    "RequestInstruments",
    "strip_ids_from_path",
]
