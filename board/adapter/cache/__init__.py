"""Cache backends."""

from .backend import InMemoryCacheBackend, RedisCacheBackend

__all__ = ["RedisCacheBackend", "InMemoryCacheBackend"]
