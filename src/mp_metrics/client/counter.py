"""Client – Counter."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mp_metrics.client.data_stores import NumericValue
from mp_metrics.client.metric import Metric, MetricType, require_number
from mp_metrics.errors import InvalidValueError


class Counter(Metric):
    """Monotonically increasing value (requests served, errors raised)."""

    type = MetricType.COUNTER

    def increment(self, by: float = 1, labels: Mapping[str, Any] | None = None) -> None:
        """Add *by* (must be non-negative) to the series for *labels*."""
        amount = require_number(by, "Increment")
        if amount < 0:
            raise InvalidValueError(f"Increment must be non-negative, got {by!r}")
        self._store.increment(self._label_set_for(labels), by=amount)

    def _new_value(self) -> NumericValue:
        return NumericValue()


__all__ = ["Counter"]
