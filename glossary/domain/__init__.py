"""
Domain package for the glossary browser.

Exports the term schema, the domain enumeration, validation and the error
taxonomy used across sources, loader, search index and CLI. Keep this package
focused on data definitions and validation concerns.
"""

from glossary.domain.errors import (
    CatalogError,
    DomainLoadError,
    EmptyDomainError,
    FormatError,
    NotFoundError,
    PayloadDecodeError,
    SourceStatusError,
    TotalLoadFailure,
    TransportError,
)
from glossary.domain.models import (
    DOMAIN_DISPLAY_NAMES,
    DOMAINS,
    Domain,
    TermCollection,
    TermRecord,
    display_name,
)
from glossary.domain.validation import validate_term_schema

__all__ = [
    "CatalogError",
    "DOMAINS",
    "DOMAIN_DISPLAY_NAMES",
    "Domain",
    "DomainLoadError",
    "EmptyDomainError",
    "FormatError",
    "NotFoundError",
    "PayloadDecodeError",
    "SourceStatusError",
    "TermCollection",
    "TermRecord",
    "TotalLoadFailure",
    "TransportError",
    "display_name",
    "validate_term_schema",
]
