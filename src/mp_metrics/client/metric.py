"""Client – Metric base definition.

A :class:`Metric` owns its identity (name, docstring), its label schema,
optional preset label values and a handle on the store that keeps its
series. The concrete kinds (:class:`~mp_metrics.client.counter.Counter`,
``Gauge``, ``Histogram``, ``Summary``) only add a write operation, a
reserved-label set and the aggregate shape of their series.
"""
from __future__ import annotations

import enum
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, TypeVar

from mp_metrics.client.data_stores import DataStore, MetricStore, SeriesValue, SynchronizedStore
from mp_metrics.client.label_set_validator import LabelSetValidator
from mp_metrics.errors import (
    InvalidDocstringError,
    InvalidLabelError,
    InvalidLabelSetError,
    InvalidNameError,
    InvalidValueError,
)

METRIC_NAME_PATTERN = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*\Z")

M = TypeVar("M", bound="Metric")


class MetricType(enum.Enum):
    """Closed set of metric kinds."""

    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"
    SUMMARY = "summary"


class Metric:
    """Named, labeled measurement backed by a :class:`DataStore`.

    Parameters
    ----------
    name:
        Metric name, must match ``[a-zA-Z_:][a-zA-Z0-9_:]*``.
    docstring:
        Non-empty help text.
    labels:
        Label names every observation must supply (after presets).
    preset_labels:
        Label values fixed for this metric handle. Values are coerced with
        :func:`str`.
    store_settings:
        Passed through to ``data_store.for_metric``.
    data_store:
        Where the series live. A private :class:`SynchronizedStore` is used
        when omitted.
    """

    type: ClassVar[MetricType]
    reserved_labels: ClassVar[frozenset[str]] = frozenset()

    def __init__(
        self,
        name: str,
        docstring: str,
        *,
        labels: Iterable[str] = (),
        preset_labels: Mapping[str, Any] | None = None,
        store_settings: Mapping[str, Any] | None = None,
        data_store: DataStore | None = None,
    ) -> None:
        _validate_name(name)
        _validate_docstring(docstring)
        labels = tuple(labels)
        preset_labels = dict(preset_labels or {})

        self._validator = LabelSetValidator(labels, self.reserved_labels)
        self._validator.validate_symbols(labels)
        self._validator.validate_symbols(preset_labels)
        if not preset_labels.keys() <= set(labels):
            raise InvalidLabelSetError(labels, preset_labels.keys(), "Preset labels must be declared labels")

        self._name = name
        self._docstring = docstring
        self._labels = labels
        self._preset_labels = _stringify_values(preset_labels)
        self._store_settings = dict(store_settings or {})
        self._data_store = data_store if data_store is not None else SynchronizedStore()
        self._store: MetricStore = self._data_store.for_metric(
            name,
            metric_type=self.type,
            metric_settings=self._store_settings,
            value_factory=self._new_value,
            schema=self._schema(),
        )

        self._all_labels_preset = False
        if len(self._preset_labels) == len(labels):
            self._validator.validate_labelset(self._preset_labels)
            self._all_labels_preset = True

    @property
    def name(self) -> str:
        return self._name

    @property
    def docstring(self) -> str:
        return self._docstring

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    @property
    def preset_labels(self) -> dict[str, str]:
        return dict(self._preset_labels)

    @property
    def store_settings(self) -> dict[str, Any]:
        return dict(self._store_settings)

    @property
    def data_store(self) -> DataStore:
        return self._data_store

    def get(self, labels: Mapping[str, Any] | None = None) -> Any:
        """Return the current value for the given label set."""
        return self._store.get(self._label_set_for(labels))

    def with_labels(self: M, labels: Mapping[str, Any]) -> M:
        """Return a new handle on this metric with *labels* added to the presets."""
        return type(self)(
            self._name,
            self._docstring,
            labels=self._labels,
            preset_labels={**self._preset_labels, **labels},
            store_settings=self._store_settings,
            data_store=self._data_store,
            **self._extra_options(),
        )

    def init_label_set(self, labels: Mapping[str, Any] | None = None) -> None:
        """Make the series for *labels* exist at zero before any observation."""
        self._store.init(self._label_set_for(labels))

    def values(self) -> list[tuple[dict[str, str], Any]]:
        """Return every known label set with its value."""
        return self._store.all_values()

    def _new_value(self) -> SeriesValue:
        raise NotImplementedError

    def _extra_options(self) -> dict[str, Any]:
        """Kind-specific constructor arguments carried over by :meth:`with_labels`."""
        return {}

    def _schema(self) -> tuple[Any, ...]:
        return tuple(sorted(self._labels)), tuple(sorted(self._extra_options().items()))

    def _label_set_for(self, labels: Mapping[str, Any] | None) -> dict[str, str]:
        # Already validated at construction; nothing to merge.
        if self._all_labels_preset and not labels:
            return self._preset_labels
        call_labels = _stringify_values(labels or {})
        duplicated = self._preset_labels.keys() & call_labels.keys()
        if duplicated:
            raise InvalidLabelError(
                f"Labels {sorted(duplicated)} are already preset on '{self._name}'"
            )
        return self._validator.validate_labelset({**self._preset_labels, **call_labels})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, labels={list(self._labels)!r})"


def _validate_name(name: Any) -> None:
    if not isinstance(name, str):
        raise InvalidNameError(name, "Metric name must be a string")
    if not METRIC_NAME_PATTERN.match(name):
        raise InvalidNameError(name, f"Metric name must match {METRIC_NAME_PATTERN.pattern}")


def _validate_docstring(docstring: Any) -> None:
    if not isinstance(docstring, str) or not docstring:
        raise InvalidDocstringError("Docstring must be given")


def require_number(value: Any, what: str = "Value") -> float:
    """Return *value* as a float; bools, non-numbers and NaN are rejected."""
    if isinstance(value, bool) or not isinstance(value, int | float) or math.isnan(value):
        raise InvalidValueError(f"{what} must be a number, got {value!r}")
    return float(value)


def _stringify_values(labels: Mapping[Any, Any]) -> dict[Any, str]:
    return {key: str(value) for key, value in labels.items()}


__all__ = ["METRIC_NAME_PATTERN", "Metric", "MetricType"]
