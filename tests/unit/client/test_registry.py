"""Unit tests for Registry."""

from __future__ import annotations

import threading

import pytest

from mp_metrics.client import (
    Counter,
    Gauge,
    Histogram,
    MetricType,
    Registry,
    SingleThreadedStore,
    Summary,
)
from mp_metrics.errors import AlreadyRegisteredError


class TestRegistry:
    def test_counter_is_registered(self) -> None:
        reg = Registry()
        c = reg.counter("requests_total", "Requests", labels=["code"])
        assert isinstance(c, Counter)
        assert reg.get("requests_total") is c
        assert reg.exist("requests_total")

    def test_each_kind(self) -> None:
        reg = Registry()
        assert isinstance(reg.gauge("g", "doc"), Gauge)
        assert isinstance(reg.histogram("h", "doc", buckets=[1, 2]), Histogram)
        assert isinstance(reg.summary("s", "doc"), Summary)
        assert sorted(m.name for m in reg.metrics) == ["g", "h", "s"]

    def test_histogram_buckets_passed_through(self) -> None:
        assert Registry().histogram("h", "doc", buckets=[1, 2]).buckets == (1, 2)

    def test_duplicate_registration_fails(self) -> None:
        reg = Registry()
        reg.counter("requests_total", "Requests")
        with pytest.raises(AlreadyRegisteredError):
            reg.counter("requests_total", "Requests")

    def test_get_unknown_is_none(self) -> None:
        reg = Registry()
        assert reg.get("nope") is None
        assert not reg.exist("nope")

    def test_unregister(self) -> None:
        reg = Registry()
        reg.counter("c", "doc")
        reg.unregister("c")
        assert reg.get("c") is None
        reg.unregister("c")

    def test_reregistered_histogram_uses_new_buckets(self) -> None:
        reg = Registry()
        reg.histogram("latency", "doc", buckets=[1]).observe(0.5)
        reg.unregister("latency")
        hist = reg.histogram("latency", "doc", buckets=[5, 10])
        hist.observe(7)
        assert hist.get() == {"5.0": 0.0, "10.0": 1.0, "+Inf": 1.0, "sum": 7.0}

    def test_reregistered_counter_starts_empty_with_new_labels(self) -> None:
        reg = Registry()
        reg.counter("jobs_total", "Jobs", labels=["queue"]).increment(labels={"queue": "a"})
        reg.unregister("jobs_total")
        counter = reg.counter("jobs_total", "Jobs", labels=["worker"])
        assert counter.values() == []
        counter.increment(labels={"worker": "w1"})
        assert counter.values() == [({"worker": "w1"}, 1.0)]

    def test_get_or_create_with_new_labels_after_unregister(self) -> None:
        reg = Registry()
        reg.get_or_create(MetricType.COUNTER, "c", "doc", labels=("a",)).increment(labels={"a": "1"})
        reg.unregister("c")
        again = reg.get_or_create(MetricType.COUNTER, "c", "doc", labels=("b",))
        assert again.values() == []

    def test_metrics_use_registry_data_store(self) -> None:
        store = SingleThreadedStore()
        reg = Registry(data_store=store)
        assert reg.data_store is store
        assert reg.counter("c", "doc").data_store is store


class TestGetOrCreate:
    def test_creates_when_absent(self) -> None:
        reg = Registry()
        c = reg.get_or_create(MetricType.COUNTER, "c", "doc", labels=("a",))
        assert isinstance(c, Counter)
        assert reg.get("c") is c

    def test_returns_existing(self) -> None:
        reg = Registry()
        first = reg.get_or_create(MetricType.COUNTER, "c", "doc")
        second = reg.get_or_create(MetricType.COUNTER, "c", "doc")
        assert first is second

    def test_kind_clash_fails(self) -> None:
        reg = Registry()
        reg.get_or_create(MetricType.COUNTER, "c", "doc")
        with pytest.raises(AlreadyRegisteredError):
            reg.get_or_create(MetricType.GAUGE, "c", "doc")

    def test_concurrent_callers_share_one_instance(self) -> None:
        reg = Registry()
        barrier = threading.Barrier(8)
        results: list[object] = []
        errors: list[BaseException] = []

        def work() -> None:
            barrier.wait()
            try:
                results.append(reg.get_or_create(MetricType.HISTOGRAM, "h", "doc", labels=("m",)))
            except BaseException as exc:  # noqa: BLE001
                errors.append(exc)

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len({id(r) for r in results}) == 1
