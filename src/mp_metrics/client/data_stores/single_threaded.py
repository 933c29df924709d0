"""Data stores – SingleThreadedStore (no locking)."""
from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TYPE_CHECKING, Any

from mp_metrics.client.data_stores.ports import (
    DataStore,
    LabelKey,
    MetricStore,
    ValueFactory,
    label_key,
)
from mp_metrics.client.data_stores.values import SeriesValue

if TYPE_CHECKING:
    from mp_metrics.client.metric import MetricType


class SingleThreadedMetricStore(MetricStore):
    """Plain dict of series. Only safe when a single thread writes."""

    def __init__(self, value_factory: ValueFactory, schema: Hashable = ()) -> None:
        self._value_factory = value_factory
        self.schema = schema
        self._series: dict[LabelKey, tuple[dict[str, str], SeriesValue]] = {}

    def _value_for(self, labels: Mapping[str, str]) -> SeriesValue:
        key = label_key(labels)
        if key not in self._series:
            self._series[key] = (dict(labels), self._value_factory())
        return self._series[key][1]

    def get(self, labels: Mapping[str, str]) -> Any:
        entry = self._series.get(label_key(labels))
        value = entry[1] if entry is not None else self._value_factory()
        return value.snapshot()

    def set(self, labels: Mapping[str, str], value: float) -> None:
        self._value_for(labels).set(value)

    def increment(self, labels: Mapping[str, str], by: float = 1.0) -> None:
        self._value_for(labels).increment(by)

    def observe(self, labels: Mapping[str, str], amount: float) -> None:
        self._value_for(labels).observe(amount)

    def init(self, labels: Mapping[str, str]) -> None:
        self._value_for(labels)

    def all_values(self) -> list[tuple[dict[str, str], Any]]:
        return [(dict(labels), value.snapshot()) for labels, value in self._series.values()]


class SingleThreadedStore(DataStore):
    """Store for single-threaded processes (scripts, batch jobs)."""

    def __init__(self) -> None:
        self._stores: dict[tuple[str, str], SingleThreadedMetricStore] = {}

    def for_metric(
        self,
        name: str,
        *,
        metric_type: "MetricType",
        metric_settings: Mapping[str, Any] | None = None,
        value_factory: ValueFactory,
        schema: Hashable = (),
    ) -> SingleThreadedMetricStore:
        self.validate_metric_settings(metric_settings)
        key = (name, metric_type.value)
        store = self._stores.get(key)
        if store is None:
            store = self._stores[key] = SingleThreadedMetricStore(value_factory, schema)
        else:
            self.check_schema(name, store.schema, schema)
        return store

    def discard(self, name: str, metric_type: "MetricType") -> None:
        self._stores.pop((name, metric_type.value), None)


__all__ = ["SingleThreadedMetricStore", "SingleThreadedStore"]
