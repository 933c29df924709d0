"""Client – Registry.

Maps metric names to metric instances and builds new metrics against the
registry's :class:`DataStore`.
"""
from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from typing import Any

from mp_metrics.client.counter import Counter
from mp_metrics.client.data_stores import DataStore, SynchronizedStore
from mp_metrics.client.gauge import Gauge
from mp_metrics.client.histogram import Histogram
from mp_metrics.client.metric import Metric, MetricType
from mp_metrics.client.summary import Summary
from mp_metrics.errors import AlreadyRegisteredError
from mp_metrics.observability.logging import get_logger

logger = get_logger(__name__)

_KINDS: dict[MetricType, type[Metric]] = {
    MetricType.COUNTER: Counter,
    MetricType.GAUGE: Gauge,
    MetricType.HISTOGRAM: Histogram,
    MetricType.SUMMARY: Summary,
}


class Registry:
    """Thread-safe collection of metrics sharing one data store.

    Usage::

        registry = Registry()
        hits = registry.counter("cache_hits_total", "Cache hits", labels=["cache"])
        hits.increment(labels={"cache": "users"})
    """

    def __init__(self, data_store: DataStore | None = None) -> None:
        self._data_store = data_store if data_store is not None else SynchronizedStore()
        self._metrics: dict[str, Metric] = {}
        self._lock = threading.Lock()

    @property
    def data_store(self) -> DataStore:
        return self._data_store

    @property
    def metrics(self) -> list[Metric]:
        with self._lock:
            return list(self._metrics.values())

    def register(self, metric: Metric) -> Metric:
        with self._lock:
            if metric.name in self._metrics:
                raise AlreadyRegisteredError(metric.name)
            self._metrics[metric.name] = metric
        logger.debug("metric_registered", metric=metric.name, kind=metric.type.value)
        return metric

    def unregister(self, name: str) -> None:
        """Drop *name* and its series from the data store."""
        with self._lock:
            metric = self._metrics.pop(name, None)
            if metric is not None:
                metric.data_store.discard(metric.name, metric.type)

    def get(self, name: str) -> Metric | None:
        with self._lock:
            return self._metrics.get(name)

    def exist(self, name: str) -> bool:
        with self._lock:
            return name in self._metrics

    def get_or_create(
        self,
        metric_type: MetricType,
        name: str,
        docstring: str,
        **options: Any,
    ) -> Metric:
        """Return the metric registered under *name*, creating it if absent.

        Lookup, construction and insertion happen under the registry lock, so
        concurrent callers always end up with the same instance.

        Raises
        ------
        AlreadyRegisteredError
            When *name* is registered with a different metric kind.
        """
        with self._lock:
            existing = self._metrics.get(name)
            if existing is not None:
                if existing.type is not metric_type:
                    raise AlreadyRegisteredError(
                        name,
                        f"Metric '{name}' is already registered as a {existing.type.value}",
                    )
                return existing
            metric = self._build(metric_type, name, docstring, **options)
            self._metrics[name] = metric
        logger.debug("metric_registered", metric=name, kind=metric_type.value)
        return metric

    def counter(
        self,
        name: str,
        docstring: str,
        *,
        labels: Iterable[str] = (),
        preset_labels: Mapping[str, Any] | None = None,
        store_settings: Mapping[str, Any] | None = None,
    ) -> Counter:
        metric = self._build(
            MetricType.COUNTER, name, docstring,
            labels=labels, preset_labels=preset_labels, store_settings=store_settings,
        )
        return self.register(metric)  # type: ignore[return-value]

    def gauge(
        self,
        name: str,
        docstring: str,
        *,
        labels: Iterable[str] = (),
        preset_labels: Mapping[str, Any] | None = None,
        store_settings: Mapping[str, Any] | None = None,
    ) -> Gauge:
        metric = self._build(
            MetricType.GAUGE, name, docstring,
            labels=labels, preset_labels=preset_labels, store_settings=store_settings,
        )
        return self.register(metric)  # type: ignore[return-value]

    def histogram(
        self,
        name: str,
        docstring: str,
        *,
        labels: Iterable[str] = (),
        preset_labels: Mapping[str, Any] | None = None,
        buckets: Iterable[float] | None = None,
        store_settings: Mapping[str, Any] | None = None,
    ) -> Histogram:
        options: dict[str, Any] = {}
        if buckets is not None:
            options["buckets"] = tuple(buckets)
        metric = self._build(
            MetricType.HISTOGRAM, name, docstring,
            labels=labels, preset_labels=preset_labels, store_settings=store_settings,
            **options,
        )
        return self.register(metric)  # type: ignore[return-value]

    def summary(
        self,
        name: str,
        docstring: str,
        *,
        labels: Iterable[str] = (),
        preset_labels: Mapping[str, Any] | None = None,
        store_settings: Mapping[str, Any] | None = None,
    ) -> Summary:
        metric = self._build(
            MetricType.SUMMARY, name, docstring,
            labels=labels, preset_labels=preset_labels, store_settings=store_settings,
        )
        return self.register(metric)  # type: ignore[return-value]

    def _build(self, metric_type: MetricType, name: str, docstring: str, **options: Any) -> Metric:
        return _KINDS[metric_type](name, docstring, data_store=self._data_store, **options)


__all__ = ["Registry"]
