"""Middleware – CollectorSettings."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import ClassVar

from mp_metrics.client.metric import METRIC_NAME_PATTERN
from mp_metrics.config import EnvSettingsLoader, InvalidSettingValueError
from mp_metrics.middleware.instruments import DEFAULT_METRICS_PREFIX


@dataclasses.dataclass
class CollectorSettings:
    """Knobs of the request collector, read from ``MP_METRICS_*``.

    ``MP_METRICS_METRICS_PREFIX`` names the three request metrics.
    ``MP_METRICS_EXCLUDED_PATHS`` is a comma-separated list of raw request
    paths that are passed through without being recorded.

    Usage::

        settings = CollectorSettings.from_env()
        app = Collector.from_settings(app, registry, settings)
    """

    _prefix: ClassVar[str] = "MP_METRICS"

    metrics_prefix: str = DEFAULT_METRICS_PREFIX
    excluded_paths: list[str] = dataclasses.field(default_factory=list)

    def __post_init__(self) -> None:
        if not METRIC_NAME_PATTERN.match(self.metrics_prefix):
            raise InvalidSettingValueError(
                "metrics_prefix", self.metrics_prefix, "must be a valid metric name prefix"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CollectorSettings":
        return EnvSettingsLoader(environ).load(cls)


__all__ = ["CollectorSettings"]
