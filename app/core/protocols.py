"""
Protocol definitions for generic infrastructure services.

This module defines Protocol classes that specify interfaces
for generic infrastructure concerns like caching.

Protocols define contracts that services must fulfill, enabling:
- Duck typing with static type checking
- Dependency inversion (depend on abstractions, not concretions)
- Easy mocking in tests

Available Protocols:
    CacheBackend: Cache operations interface

Usage:
    from django.core.cache import cache
    from core.protocols import CacheBackend

    backend: CacheBackend = cache
    backend.set("payments:state_data:42", {"paymentMethod": {...}}, timeout=3600)

Note:
    - Protocols are primarily for type checking
    - @runtime_checkable allows isinstance() checks
    - For payment collaborator protocols (orders, vault, history), see payments.protocols
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any


@runtime_checkable
class CacheBackend(Protocol):
    """
    Protocol for cache backends.

    Defines the interface for cache operations.
    Compatible with Django's cache interface, so both the local-memory
    cache used in development and django-redis satisfy it.
    """

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get value from cache.

        Args:
            key: Cache key
            default: Value to return if key not found

        Returns:
            Cached value or default
        """
        ...

    def set(self, key: str, value: Any, timeout: int | None = None) -> None:
        """
        Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
            timeout: Expiration time in seconds (None for no expiry)
        """
        ...

    def delete(self, key: str) -> bool:
        """
        Delete value from cache.

        Returns:
            True if key was deleted, False if it didn't exist
        """
        ...
