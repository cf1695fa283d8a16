"""
Glossary - bilingual technical glossary browser core.

Loads curated term lists (formal term, regional colloquial equivalent,
definition, usage example) partitioned by academic domain, and answers
free-text search and domain filtering over them:

- Catalog loading with concurrent per-domain fetches and partial-failure tolerance
- Accent- and case-insensitive substring search across term fields
- Debounced incremental search for interactive front ends
- Filesystem and HTTP term sources
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from glossary.config import Settings, get_settings
from glossary.domain import (
    DOMAINS,
    CatalogError,
    Domain,
    EmptyDomainError,
    FormatError,
    NotFoundError,
    TermRecord,
    TotalLoadFailure,
    TransportError,
    display_name,
    validate_term_schema,
)
from glossary.loader import CatalogLoader, LoadReport
from glossary.orchestrator import GlossaryBrowser, available_sources, build_source
from glossary.search import SearchIndex, normalize_text
from glossary.sources import FileTermSource, HttpTermSource, TermSource
from glossary.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "DOMAINS",
    "Domain",
    "TermRecord",
    "display_name",
    "validate_term_schema",
    # Errors
    "CatalogError",
    "EmptyDomainError",
    "FormatError",
    "NotFoundError",
    "TotalLoadFailure",
    "TransportError",
    # Core
    "CatalogLoader",
    "LoadReport",
    "SearchIndex",
    "normalize_text",
    # Sources
    "FileTermSource",
    "HttpTermSource",
    "TermSource",
    # Orchestration
    "GlossaryBrowser",
    "available_sources",
    "build_source",
    # Logging
    "configure_logging",
    "get_logger",
]
