"""
Utilities package for the glossary browser.

Exports shared helpers for logging, profiling, and other cross-cutting concerns.
Keep this package lightweight and free of glossary-specific logic.
"""

from glossary.utils.logging import configure_logging, get_logger
from glossary.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
