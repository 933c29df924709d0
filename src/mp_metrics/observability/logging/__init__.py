"""Observability – structured logging helpers."""
from mp_metrics.observability.logging.factory import JsonLoggerFactory
from mp_metrics.observability.logging.processors import MetricErrorProcessor, get_logger

__all__ = ["JsonLoggerFactory", "MetricErrorProcessor", "get_logger"]
