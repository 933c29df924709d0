"""Client – Summary."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mp_metrics.client.data_stores import SummaryValue
from mp_metrics.client.metric import Metric, MetricType, require_number


class Summary(Metric):
    """Observation count and sum, without buckets.

    ``get`` returns ``{"count": n, "sum": s}``.
    """

    type = MetricType.SUMMARY
    reserved_labels = frozenset({"quantile"})

    def observe(self, value: float, labels: Mapping[str, Any] | None = None) -> None:
        self._store.observe(self._label_set_for(labels), require_number(value, "Observed value"))

    def _new_value(self) -> SummaryValue:
        return SummaryValue()


__all__ = ["Summary"]
