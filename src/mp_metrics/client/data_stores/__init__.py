"""Client – pluggable value stores."""
from mp_metrics.client.data_stores.ports import DataStore, MetricStore, label_key
from mp_metrics.client.data_stores.single_threaded import SingleThreadedStore
from mp_metrics.client.data_stores.synchronized import SynchronizedStore
from mp_metrics.client.data_stores.values import (
    HistogramValue,
    NumericValue,
    SeriesValue,
    SummaryValue,
)

__all__ = [
    "DataStore",
    "HistogramValue",
    "MetricStore",
    "NumericValue",
    "SeriesValue",
    "SingleThreadedStore",
    "SummaryValue",
    "SynchronizedStore",
    "label_key",
]
