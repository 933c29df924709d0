"""ASGI adapter – request collector middleware."""
from mp_metrics.adapters.asgi.middleware import ASGICollectorMiddleware

__all__ = ["ASGICollectorMiddleware"]
