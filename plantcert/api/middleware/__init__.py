"""API middleware."""

from plantcert.api.middleware.logging_middleware import LoggingMiddleware

__all__: list[str] = ["LoggingMiddleware"]
