"""Handler layer for HTTP endpoints.

Handlers depend on services, not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Errors) -> (Data Access)
"""

from .api_handler import ApiHandler

__all__ = [
    "ApiHandler",
]
