"""
mp_metrics – Client-side metrics instrumentation.

Import path convention::

    from mp_metrics.client import Registry, Counter, Histogram
    from mp_metrics.middleware import Collector
    from mp_metrics.adapters.asgi import ASGICollectorMiddleware
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
