"""
services/ - Query Gateway
=========================
Async facade over the repositories; the only layer callers need.
"""

from services.gateway import QueryGateway

__all__ = ["QueryGateway"]
