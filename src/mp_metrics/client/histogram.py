"""Client – Histogram."""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from mp_metrics.client.data_stores import DataStore, HistogramValue
from mp_metrics.client.metric import Metric, MetricType, require_number
from mp_metrics.errors import InvalidValueError

DEFAULT_BUCKETS: tuple[float, ...] = (
    0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10,
)


class Histogram(Metric):
    """Counts observations into cumulative buckets and keeps their sum.

    :meth:`get` returns a dict keyed by each bucket's upper bound (as text),
    plus ``"+Inf"`` (total count) and ``"sum"``.
    """

    type = MetricType.HISTOGRAM
    reserved_labels = frozenset({"le"})

    def __init__(
        self,
        name: str,
        docstring: str,
        *,
        labels: Iterable[str] = (),
        preset_labels: Mapping[str, Any] | None = None,
        buckets: Sequence[float] = DEFAULT_BUCKETS,
        store_settings: Mapping[str, Any] | None = None,
        data_store: DataStore | None = None,
    ) -> None:
        self._buckets = _validate_buckets(buckets)
        super().__init__(
            name,
            docstring,
            labels=labels,
            preset_labels=preset_labels,
            store_settings=store_settings,
            data_store=data_store,
        )

    @property
    def buckets(self) -> tuple[float, ...]:
        return self._buckets

    @classmethod
    def linear_buckets(cls, start: float, width: float, count: int) -> list[float]:
        return [start + i * width for i in range(count)]

    @classmethod
    def exponential_buckets(cls, start: float, factor: float, count: int) -> list[float]:
        return [start * factor**i for i in range(count)]

    def observe(self, value: float, labels: Mapping[str, Any] | None = None) -> None:
        self._store.observe(self._label_set_for(labels), require_number(value, "Observed value"))

    def _new_value(self) -> HistogramValue:
        return HistogramValue(self._buckets)

    def _extra_options(self) -> dict[str, Any]:
        return {"buckets": self._buckets}


def _validate_buckets(buckets: Sequence[float]) -> tuple[float, ...]:
    bounds = tuple(require_number(bound, "Bucket bound") for bound in buckets)
    if not bounds:
        raise InvalidValueError("Histogram needs at least one bucket")
    if any(lower >= upper for lower, upper in zip(bounds, bounds[1:])):
        raise InvalidValueError(f"Bucket bounds must be strictly increasing, got {list(bounds)}")
    return bounds


__all__ = ["DEFAULT_BUCKETS", "Histogram"]
