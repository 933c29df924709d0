"""Error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── MetricError              (metric.py)
    │   ├── InvalidNameError
    │   ├── InvalidDocstringError
    │   ├── InvalidLabelError
    │   │   ├── ReservedLabelError
    │   │   └── InvalidLabelSetError
    │   ├── InvalidValueError
    │   └── AlreadyRegisteredError
    └── ConfigError              (mp_metrics.config.errors)
        └── InvalidSettingValueError
"""

from mp_metrics.errors.base import BaseError
from mp_metrics.errors.metric import (
    AlreadyRegisteredError,
    InvalidDocstringError,
    InvalidLabelError,
    InvalidLabelSetError,
    InvalidNameError,
    InvalidValueError,
    MetricError,
    ReservedLabelError,
)

__all__ = [
    "AlreadyRegisteredError",
    "BaseError",
    "InvalidDocstringError",
    "InvalidLabelError",
    "InvalidLabelSetError",
    "InvalidNameError",
    "InvalidValueError",
    "MetricError",
    "ReservedLabelError",
]
