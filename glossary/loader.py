"""
Catalog loader: assembles the domain-tagged term collection.

Every domain is fetched concurrently through a TermSource and validated on
its own. The aggregate waits for all domains to settle, never short-circuits
on the first failure, and merges results in the fixed domain order so the
collection does not depend on network timing.

Usage:
    from glossary.loader import CatalogLoader
    from glossary.sources import FileTermSource

    loader = CatalogLoader(FileTermSource("data"))
    terms = await loader.load_all()
    print(loader.report.failed_domains)
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from glossary.domain.errors import (
    DomainLoadError,
    EmptyDomainError,
    FormatError,
    TotalLoadFailure,
)
from glossary.domain.models import DOMAINS, Domain, TermCollection, TermRecord
from glossary.domain.validation import validate_term_schema
from glossary.sources.abstract import TermSource
from glossary.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class LoadReport:
    """
    Outcome of one `load_all()` call, per domain.

    `failures` maps each failed domain to the exception that ended its load.
    """

    loaded: Mapping[Domain, int] = field(default_factory=dict)
    failures: Mapping[Domain, Exception] = field(default_factory=dict)

    @property
    def failed_domains(self) -> List[Domain]:
        return list(self.failures)

    @property
    def loaded_domains(self) -> List[Domain]:
        return list(self.loaded)


@dataclass(frozen=True)
class LoadingStats:
    total_terms: int
    loaded_domains: int
    total_domains: int
    domains_loaded: List[str]
    failed_domains: List[str]


@dataclass(frozen=True)
class _CatalogState:
    terms: TermCollection = ()
    by_domain: Mapping[Domain, TermCollection] = field(default_factory=dict)
    report: LoadReport = field(default_factory=LoadReport)


class CatalogLoader:
    """
    Load, validate and merge the per-domain term collections of one source.
    """

    def __init__(self, source: TermSource, domains: Optional[Sequence[Domain]] = None) -> None:
        self.source = source
        self.domains: Tuple[Domain, ...] = tuple(domains) if domains is not None else DOMAINS
        self._state = _CatalogState()

    async def load_domain(self, domain: Domain) -> List[Dict[str, Any]]:
        """
        Fetch one domain and keep the records that pass schema validation.

        Returns
        -------
        list[dict]
            Valid raw records in source order, not yet tagged with a domain.

        Raises
        ------
        NotFoundError, SourceStatusError, TransportError
            Propagated from the source.
        FormatError
            If the payload is not a list (or not parseable at all).
        EmptyDomainError
            If no record survives validation.
        """
        payload = await self.source.fetch(domain)

        if not isinstance(payload, list):
            raise FormatError(
                domain,
                f"Invalid data format for domain '{domain.value}': "
                f"expected a list, got {type(payload).__name__}",
            )

        valid: List[Dict[str, Any]] = []
        for index, record in enumerate(payload):
            if validate_term_schema(record):
                valid.append(record)
            else:
                log.warning(
                    f"Invalid term schema at index {index} in {domain.value}.json",
                    extra={"domain": domain.value, "index": index, "record": repr(record)[:200]},
                )

        if not valid:
            raise EmptyDomainError(domain)

        log.debug(
            f"Loaded {len(valid)} valid terms for domain: {domain.value}",
            extra={"domain": domain.value, "terms": len(valid), "dropped": len(payload) - len(valid)},
        )
        return valid

    async def load_all(self) -> TermCollection:
        """
        Load every domain concurrently and merge the results.

        Returns
        -------
        tuple[TermRecord, ...]
            All valid terms, tagged by domain, in domain then source order.

        Raises
        ------
        TotalLoadFailure
            If no domain produced any term.
        """
        results = await asyncio.gather(
            *(self.load_domain(domain) for domain in self.domains),
            return_exceptions=True,
        )

        terms: List[TermRecord] = []
        by_domain: Dict[Domain, TermCollection] = {}
        loaded: Dict[Domain, int] = {}
        failures: Dict[Domain, Exception] = {}

        for domain, result in zip(self.domains, results):
            if isinstance(result, Exception):
                failures[domain] = result
                log.warning(
                    f"Failed to load data for domain: {domain.value}",
                    exc_info=None if isinstance(result, DomainLoadError) else result,
                    extra={
                        "domain": domain.value,
                        "error_type": type(result).__name__,
                        "error": str(result),
                    },
                )
                continue
            if isinstance(result, BaseException):
                # Cancellation and interpreter exits are not domain failures.
                raise result
            domain_terms = tuple(TermRecord.from_source(record, domain) for record in result)
            terms.extend(domain_terms)
            by_domain[domain] = domain_terms
            loaded[domain] = len(domain_terms)

        if failures:
            log.warning(
                f"Some domains failed to load: {', '.join(d.value for d in failures)}",
                extra={"failed_domains": [d.value for d in failures]},
            )

        if not terms:
            self._state = _CatalogState(report=LoadReport(loaded={}, failures=failures))
            raise TotalLoadFailure(failures)

        self._state = _CatalogState(
            terms=tuple(terms),
            by_domain=MappingProxyType(by_domain),
            report=LoadReport(loaded=MappingProxyType(loaded), failures=MappingProxyType(failures)),
        )
        log.info(
            f"Successfully loaded {len(terms)} terms from {len(loaded)} domains",
            extra={"terms": len(terms), "domains": len(loaded), "failed": len(failures)},
        )
        return self._state.terms

    @property
    def terms(self) -> TermCollection:
        return self._state.terms

    @property
    def report(self) -> LoadReport:
        return self._state.report

    @property
    def is_loaded(self) -> bool:
        return bool(self._state.terms)

    def domain_terms(self, domain: Domain | str) -> TermCollection:
        """Terms of one loaded domain; empty when unknown or not loaded."""
        member = Domain.parse(domain)
        if member is None:
            return ()
        return self._state.by_domain.get(member, ())

    def stats(self) -> LoadingStats:
        report = self._state.report
        return LoadingStats(
            total_terms=len(self._state.terms),
            loaded_domains=len(report.loaded),
            total_domains=len(self.domains),
            domains_loaded=[d.value for d in report.loaded],
            failed_domains=[d.value for d in report.failures],
        )


__all__ = ["CatalogLoader", "LoadReport", "LoadingStats"]
