"""Observability – logging for the library itself."""

from mp_metrics.observability.logging import JsonLoggerFactory, MetricErrorProcessor, get_logger

__all__ = ["JsonLoggerFactory", "MetricErrorProcessor", "get_logger"]
