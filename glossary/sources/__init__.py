"""
Term sources package for the glossary browser.

This module re-exports the abstract interfaces and the concrete source
classes so downstream code can import from `glossary.sources` directly.
"""

from glossary.sources.abstract import AbstractTermSource, TermSource
from glossary.sources.file import FileTermSource
from glossary.sources.http import HttpTermSource

__all__ = [
    # Abstracts
    "AbstractTermSource",
    "TermSource",
    # Concrete sources
    "FileTermSource",
    "HttpTermSource",
]
