"""Data stores – DataStore and MetricStore ports."""
from __future__ import annotations

import abc
from collections.abc import Callable, Hashable, Mapping
from typing import TYPE_CHECKING, Any

from mp_metrics.client.data_stores.values import SeriesValue
from mp_metrics.errors import AlreadyRegisteredError, InvalidValueError

if TYPE_CHECKING:
    from mp_metrics.client.metric import MetricType

LabelKey = tuple[tuple[str, str], ...]
ValueFactory = Callable[[], SeriesValue]


def label_key(labels: Mapping[str, str]) -> LabelKey:
    """Order-independent, hashable key for a resolved label set."""
    return tuple(sorted(labels.items()))


class MetricStore(abc.ABC):
    """Port: storage for every series of one metric."""

    @abc.abstractmethod
    def get(self, labels: Mapping[str, str]) -> Any:
        """Snapshot of the series for *labels*; the zero value if never written."""

    @abc.abstractmethod
    def set(self, labels: Mapping[str, str], value: float) -> None: ...

    @abc.abstractmethod
    def increment(self, labels: Mapping[str, str], by: float = 1.0) -> None: ...

    @abc.abstractmethod
    def observe(self, labels: Mapping[str, str], amount: float) -> None: ...

    @abc.abstractmethod
    def init(self, labels: Mapping[str, str]) -> None:
        """Create the series for *labels* at its zero value if it is missing."""

    @abc.abstractmethod
    def all_values(self) -> list[tuple[dict[str, str], Any]]:
        """Snapshot of every known series as ``(labels, value)`` pairs."""


class DataStore(abc.ABC):
    """Port: hands out one :class:`MetricStore` per metric.

    *schema* describes the shape of the metric's series (its label names
    and, for histograms, its buckets). A store asked again for a metric it
    already holds must return the same :class:`MetricStore` when the schema
    matches and raise :class:`~mp_metrics.errors.AlreadyRegisteredError`
    when it does not.
    """

    @abc.abstractmethod
    def for_metric(
        self,
        name: str,
        *,
        metric_type: "MetricType",
        metric_settings: Mapping[str, Any] | None = None,
        value_factory: ValueFactory,
        schema: Hashable = (),
    ) -> MetricStore: ...

    @abc.abstractmethod
    def discard(self, name: str, metric_type: "MetricType") -> None:
        """Forget every series of the metric; a no-op for unknown metrics."""

    def validate_metric_settings(self, metric_settings: Mapping[str, Any] | None) -> None:
        """Reject settings the store does not understand (default: any)."""
        if metric_settings:
            raise InvalidValueError(
                f"{type(self).__name__} does not accept metric settings, "
                f"got {sorted(metric_settings)}"
            )

    @staticmethod
    def check_schema(name: str, held: Hashable, requested: Hashable) -> None:
        if held != requested:
            raise AlreadyRegisteredError(
                name, f"Metric '{name}' is already stored with a different schema"
            )


__all__ = ["DataStore", "LabelKey", "MetricStore", "ValueFactory", "label_key"]
