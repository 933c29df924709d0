"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class MetricErrorProcessor:
    """structlog processor that expands ``error=<BaseError>`` into its fields.

    When an event carries an ``error`` key holding a
    :class:`~mp_metrics.errors.BaseError`, its ``code`` is added as
    ``error_code`` and ``detail`` as ``error_detail``.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from mp_metrics.errors import BaseError

        error = event_dict.get("error")
        if isinstance(error, BaseError):
            event_dict.setdefault("error_code", error.code)
            if error.detail:
                event_dict.setdefault("error_detail", error.detail)
            event_dict["error"] = error.message
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["MetricErrorProcessor", "get_logger"]
