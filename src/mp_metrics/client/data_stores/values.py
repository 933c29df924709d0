"""Data stores – per-label-set aggregates.

Each series in a store holds exactly one of these. The metric kind picks the
shape through the ``value_factory`` it hands to ``DataStore.for_metric``.
None of these classes lock; the owning store serialises access.
"""
from __future__ import annotations

import abc
import bisect
from collections.abc import Sequence
from typing import Any

from mp_metrics.errors import InvalidValueError


class SeriesValue(abc.ABC):
    """Mutable aggregate for one resolved label set."""

    def increment(self, by: float) -> None:
        raise InvalidValueError(f"{type(self).__name__} does not support increment")

    def set(self, value: float) -> None:
        raise InvalidValueError(f"{type(self).__name__} does not support set")

    def observe(self, amount: float) -> None:
        raise InvalidValueError(f"{type(self).__name__} does not support observe")

    @abc.abstractmethod
    def snapshot(self) -> Any:
        """Return an immutable copy of the current value."""


class NumericValue(SeriesValue):
    """Single float, used by counters and gauges."""

    def __init__(self) -> None:
        self.value: float = 0.0

    def increment(self, by: float) -> None:
        self.value += by

    def set(self, value: float) -> None:
        self.value = float(value)

    def snapshot(self) -> float:
        return self.value


class HistogramValue(SeriesValue):
    """Bucket counts plus running sum.

    ``counts[i]`` counts observations that fell in bucket ``i`` only; the
    last slot is the ``+Inf`` overflow. :meth:`snapshot` makes them
    cumulative.
    """

    def __init__(self, buckets: Sequence[float]) -> None:
        self.buckets: tuple[float, ...] = tuple(buckets)
        self.counts: list[int] = [0] * (len(self.buckets) + 1)
        self.sum: float = 0.0

    def observe(self, amount: float) -> None:
        self.counts[bisect.bisect_left(self.buckets, amount)] += 1
        self.sum += amount

    def snapshot(self) -> dict[str, float]:
        result: dict[str, float] = {}
        running = 0
        for bound, count in zip(self.buckets, self.counts):
            running += count
            result[format_bound(bound)] = float(running)
        result["+Inf"] = float(running + self.counts[-1])
        result["sum"] = self.sum
        return result


class SummaryValue(SeriesValue):
    """Observation count and sum."""

    def __init__(self) -> None:
        self.count: int = 0
        self.sum: float = 0.0

    def observe(self, amount: float) -> None:
        self.count += 1
        self.sum += amount

    def snapshot(self) -> dict[str, float]:
        return {"count": float(self.count), "sum": self.sum}


def format_bound(bound: float) -> str:
    """Render a bucket bound the way it appears as an ``le`` label value."""
    return repr(float(bound))


__all__ = ["HistogramValue", "NumericValue", "SeriesValue", "SummaryValue", "format_bound"]
