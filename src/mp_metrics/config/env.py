"""Config – EnvSettingsLoader.

Reads ``<PREFIX>_<FIELD>`` environment variables into a settings dataclass
that declares a ``_prefix`` class attribute. Fields are either text or
comma-separated lists of text; absent variables keep the field default.
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

T = TypeVar("T")


class EnvSettingsLoader:
    """Build a settings dataclass from environment variables.

    *environ* defaults to :data:`os.environ`; tests may pass a plain dict.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "")
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            raw = environ.get(f"{prefix}_{field.name}".upper())
            if raw is not None:
                kwargs[field.name] = _coerce(raw, field.type)
        return settings_class(**kwargs)


def _coerce(value: str, type_hint: Any) -> Any:
    # Annotations are strings under ``from __future__ import annotations``.
    origin = getattr(type_hint, "__origin__", None)
    if origin is list or (isinstance(type_hint, str) and type_hint.startswith("list")):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


__all__ = ["EnvSettingsLoader"]
