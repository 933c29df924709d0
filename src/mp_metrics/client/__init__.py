"""Client – metric definitions, label validation, registry and stores."""
from mp_metrics.client.counter import Counter
from mp_metrics.client.data_stores import DataStore, SingleThreadedStore, SynchronizedStore
from mp_metrics.client.gauge import Gauge
from mp_metrics.client.histogram import DEFAULT_BUCKETS, Histogram
from mp_metrics.client.label_set_validator import LabelSetValidator
from mp_metrics.client.metric import Metric, MetricType
from mp_metrics.client.registry import Registry
from mp_metrics.client.summary import Summary

__all__ = [
    "DEFAULT_BUCKETS",
    "Counter",
    "DataStore",
    "Gauge",
    "Histogram",
    "LabelSetValidator",
    "Metric",
    "MetricType",
    "Registry",
    "SingleThreadedStore",
    "Summary",
    "SynchronizedStore",
]
