"""Middleware – request path normalisation."""
from __future__ import annotations

import re

_UUID_SEGMENT = re.compile(
    r"/[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}(?=/|\Z)"
)
_NUMERIC_SEGMENT = re.compile(r"/[0-9]+(?=/|\Z)")


def strip_ids_from_path(path: str) -> str:
    """Replace UUID segments with ``:uuid`` and numeric segments with ``:id``.

    >>> strip_ids_from_path("/users/123/edit")
    '/users/:id/edit'
    >>> strip_ids_from_path("/items/3fa85f64-5717-4562-b3fc-2c963f66afa6")
    '/items/:uuid'
    """
    path = _UUID_SEGMENT.sub("/:uuid", path)
    return _NUMERIC_SEGMENT.sub("/:id", path)


__all__ = ["strip_ids_from_path"]
