"""Metric errors – definition, label and observation failures."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from mp_metrics.errors.base import BaseError


class MetricError(BaseError):
    """Raised when a metric is defined or used incorrectly."""

    default_code = "metric_error"


class InvalidNameError(MetricError):
    """Metric name is not a string or does not match the name pattern."""

    default_code = "invalid_metric_name"

    def __init__(self, name: Any, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Invalid metric name {name!r}", **kwargs)
        self.name = name


class InvalidDocstringError(MetricError):
    """Docstring is missing or empty."""

    default_code = "invalid_docstring"


class InvalidLabelError(MetricError):
    """A label name is malformed or a label set does not fit the schema."""

    default_code = "invalid_label"


class ReservedLabelError(InvalidLabelError):
    """A label name collides with a name reserved for the metric kind."""

    default_code = "reserved_label"

    def __init__(self, label: str, **kwargs: Any) -> None:
        super().__init__(f"Label '{label}' is reserved", **kwargs)
        self.label = label


class InvalidLabelSetError(InvalidLabelError):
    """Resolved label set keys differ from the declared label names.

    ``expected`` and ``got`` hold the sorted label names of each side.
    """

    default_code = "invalid_label_set"

    def __init__(
        self,
        expected: Iterable[Any],
        got: Iterable[Any],
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.expected = sorted(map(str, expected))
        self.got = sorted(map(str, got))
        super().__init__(
            message or f"Labels must have the keys {self.expected}, got {self.got}",
            detail={"expected": self.expected, "got": self.got},
            **kwargs,
        )


class InvalidValueError(MetricError):
    """An observation, bucket layout or store setting is not acceptable."""

    default_code = "invalid_value"


class AlreadyRegisteredError(MetricError):
    """A metric with the same name already lives in the registry."""

    default_code = "already_registered"

    def __init__(self, name: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Metric '{name}' is already registered", **kwargs)
        self.name = name


__all__ = [
    "AlreadyRegisteredError",
    "InvalidDocstringError",
    "InvalidLabelError",
    "InvalidLabelSetError",
    "InvalidNameError",
    "InvalidValueError",
    "MetricError",
    "ReservedLabelError",
]
