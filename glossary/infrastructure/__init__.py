"""
Infrastructure package for the glossary browser.

Centralizes network connectivity concerns (HTTP client construction, retry
policy). Keep this layer focused on I/O and resource management, decoupled
from loader/search logic.
"""

from glossary.infrastructure.http_factory import create_async_client, get_with_retry

__all__ = [
    "create_async_client",
    "get_with_retry",
]
