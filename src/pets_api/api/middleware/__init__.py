"""HTTP middleware."""

from pets_api.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
