"""Client – LabelSetValidator.

Checks label names for well-formedness and label sets for an exact match
against the label names a metric declared.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from mp_metrics.errors import InvalidLabelError, InvalidLabelSetError, ReservedLabelError

LABEL_NAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*\Z")

M = TypeVar("M", bound=Mapping[str, Any])


class LabelSetValidator:
    """Validate label names and label sets for one metric.

    ``expected_labels`` are the names the metric declared; ``reserved_labels``
    are names the metric kind keeps for itself (``le`` for histograms).
    Names starting with ``__`` are always reserved.
    """

    def __init__(
        self,
        expected_labels: Iterable[str] = (),
        reserved_labels: Iterable[str] = (),
    ) -> None:
        self.expected_labels: frozenset[str] = frozenset(expected_labels)
        self.reserved_labels: frozenset[str] = frozenset(reserved_labels)

    def validate_symbols(self, labels: Mapping[str, Any] | Iterable[str]) -> bool:
        """Check every label name in *labels* (a mapping's keys or a list)."""
        for key in labels:
            self._validate_name(key)
            self._validate_reserved(key)
        return True

    def validate_labelset(self, labelset: M) -> M:
        """Return *labelset* unchanged if its keys are exactly the declared ones."""
        if labelset.keys() == self.expected_labels:
            return labelset
        raise InvalidLabelSetError(self.expected_labels, labelset.keys())

    def _validate_name(self, key: Any) -> None:
        if not isinstance(key, str):
            raise InvalidLabelError(f"Label name {key!r} is not a string")
        if not LABEL_NAME_PATTERN.match(key):
            raise InvalidLabelError(
                f"Label name '{key}' must match {LABEL_NAME_PATTERN.pattern}"
            )

    def _validate_reserved(self, key: str) -> None:
        if key.startswith("__") or key in self.reserved_labels:
            raise ReservedLabelError(key)


__all__ = ["LABEL_NAME_PATTERN", "LabelSetValidator"]
