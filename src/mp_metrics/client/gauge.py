"""Client – Gauge."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mp_metrics.client.data_stores import NumericValue
from mp_metrics.client.metric import Metric, MetricType, require_number


class Gauge(Metric):
    """Value that can go up and down (queue depth, in-flight requests)."""

    type = MetricType.GAUGE

    def set(self, value: float, labels: Mapping[str, Any] | None = None) -> None:
        self._store.set(self._label_set_for(labels), require_number(value))

    def increment(self, by: float = 1, labels: Mapping[str, Any] | None = None) -> None:
        self._store.increment(self._label_set_for(labels), by=require_number(by))

    def decrement(self, by: float = 1, labels: Mapping[str, Any] | None = None) -> None:
        self._store.increment(self._label_set_for(labels), by=-require_number(by))

    def _new_value(self) -> NumericValue:
        return NumericValue()


__all__ = ["Gauge"]
