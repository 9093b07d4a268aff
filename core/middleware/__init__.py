"""
Core middleware package.
"""

from .request_context import RequestContextMiddleware

__all__ = [
    'RequestContextMiddleware',
]
