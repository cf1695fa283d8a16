"""
Error taxonomy for catalog loading.

Per-domain failures derive from `DomainLoadError` and are collected by the
loader's aggregation step. `TotalLoadFailure` is the only error that escapes
`CatalogLoader.load_all()`, raised when no domain produced a single term.
"""

from __future__ import annotations

from typing import Mapping, Optional

from glossary.domain.models import Domain


class CatalogError(Exception):
    """Base class for every catalog loading error."""


class DomainLoadError(CatalogError):
    """A single domain could not be loaded."""

    def __init__(self, domain: Domain, message: str) -> None:
        super().__init__(message)
        self.domain = domain


class NotFoundError(DomainLoadError):
    """The domain's source does not exist."""

    def __init__(self, domain: Domain, location: Optional[str] = None) -> None:
        detail = f" ({location})" if location else ""
        super().__init__(domain, f"Data source not found for domain '{domain.value}'{detail}")
        self.location = location


class SourceStatusError(DomainLoadError):
    """The source answered with an error status other than 404."""

    def __init__(self, domain: Domain, status_code: int) -> None:
        super().__init__(
            domain, f"HTTP {status_code} while loading data for domain '{domain.value}'"
        )
        self.status_code = status_code


class TransportError(DomainLoadError):
    """The fetch itself failed before any response was received."""

    def __init__(self, domain: Domain, reason: str) -> None:
        super().__init__(
            domain, f"Network error while loading data for domain '{domain.value}': {reason}"
        )
        self.reason = reason


class FormatError(DomainLoadError):
    """The payload is not a list of records."""


class PayloadDecodeError(FormatError):
    """The payload could not be parsed as JSON."""


class EmptyDomainError(DomainLoadError):
    """The payload held no record that passed schema validation."""

    def __init__(self, domain: Domain) -> None:
        super().__init__(domain, f"No valid terms found for domain '{domain.value}'")


class TotalLoadFailure(CatalogError):
    """Every domain failed; there is nothing to browse."""

    def __init__(self, failures: Mapping[Domain, Exception]) -> None:
        names = ", ".join(domain.value for domain in failures) or "none"
        super().__init__(
            f"Could not load glossary data for any domain (failed: {names})"
        )
        self.failures = dict(failures)


__all__ = [
    "CatalogError",
    "DomainLoadError",
    "EmptyDomainError",
    "FormatError",
    "NotFoundError",
    "PayloadDecodeError",
    "SourceStatusError",
    "TotalLoadFailure",
    "TransportError",
]
