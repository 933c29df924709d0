"""Data stores – SynchronizedStore (thread-safe, in-memory)."""
from __future__ import annotations

import threading
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


class _Series:
    __slots__ = ("labels", "lock", "value")

    def __init__(self, labels: dict[str, str], value: SeriesValue) -> None:
        self.labels = labels
        self.value = value
        self.lock = threading.Lock()


class SynchronizedMetricStore(MetricStore):
    """Series table for one metric.

    The table lock only covers inserting a new series; every update takes the
    lock of its own series, so different label sets never wait on each other.
    """

    def __init__(self, value_factory: ValueFactory, schema: Hashable = ()) -> None:
        self._value_factory = value_factory
        self.schema = schema
        self._series: dict[LabelKey, _Series] = {}
        self._lock = threading.Lock()

    def _series_for(self, labels: Mapping[str, str]) -> _Series:
        key = label_key(labels)
        series = self._series.get(key)
        if series is None:
            with self._lock:
                series = self._series.get(key)
                if series is None:
                    series = _Series(dict(labels), self._value_factory())
                    self._series[key] = series
        return series

    def get(self, labels: Mapping[str, str]) -> Any:
        series = self._series.get(label_key(labels))
        if series is None:
            return self._value_factory().snapshot()
        with series.lock:
            return series.value.snapshot()

    def set(self, labels: Mapping[str, str], value: float) -> None:
        series = self._series_for(labels)
        with series.lock:
            series.value.set(value)

    def increment(self, labels: Mapping[str, str], by: float = 1.0) -> None:
        series = self._series_for(labels)
        with series.lock:
            series.value.increment(by)

    def observe(self, labels: Mapping[str, str], amount: float) -> None:
        series = self._series_for(labels)
        with series.lock:
            series.value.observe(amount)

    def init(self, labels: Mapping[str, str]) -> None:
        self._series_for(labels)

    def all_values(self) -> list[tuple[dict[str, str], Any]]:
        with self._lock:
            table = list(self._series.values())
        result = []
        for series in table:
            with series.lock:
                result.append((dict(series.labels), series.value.snapshot()))
        return result


class SynchronizedStore(DataStore):
    """Default store: one :class:`SynchronizedMetricStore` per ``(name, type)``.

    Asking twice for the same metric with the same schema returns the same
    series table, which is what lets ``Metric.with_labels`` views write into
    their parent's series.
    """

    def __init__(self) -> None:
        self._stores: dict[tuple[str, str], SynchronizedMetricStore] = {}
        self._lock = threading.Lock()

    def for_metric(
        self,
        name: str,
        *,
        metric_type: "MetricType",
        metric_settings: Mapping[str, Any] | None = None,
        value_factory: ValueFactory,
        schema: Hashable = (),
    ) -> SynchronizedMetricStore:
        self.validate_metric_settings(metric_settings)
        key = (name, metric_type.value)
        with self._lock:
            store = self._stores.get(key)
            if store is None:
                store = SynchronizedMetricStore(value_factory, schema)
                self._stores[key] = store
            else:
                self.check_schema(name, store.schema, schema)
            return store

    def discard(self, name: str, metric_type: "MetricType") -> None:
        with self._lock:
            self._stores.pop((name, metric_type.value), None)


__all__ = ["SynchronizedMetricStore", "SynchronizedStore"]
