"""
Orchestrator wiring the term source, catalog loader and search index.

Usage (example from CLI):
    from glossary.orchestrator import GlossaryBrowser

    browser = GlossaryBrowser.from_settings()
    await browser.load()
    print(browser.search("disco"))

`reload()` is the retry path: every attempt builds a fresh source and loader,
and a generation counter drops results of any load that a newer one has
superseded, so a stale load never reaches the search index.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from glossary.config import Settings, get_settings
from glossary.domain.errors import TotalLoadFailure
from glossary.domain.models import Domain, TermCollection, TermRecord
from glossary.loader import CatalogLoader, LoadingStats, LoadReport
from glossary.search import ResultCallback, SearchIndex
from glossary.sources.abstract import TermSource
from glossary.sources.file import FileTermSource
from glossary.sources.http import HttpTermSource
from glossary.utils.logging import get_logger
from glossary.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)

SourceFactory = Callable[[], TermSource]


def _source_factories(settings: Optional[Settings] = None) -> Dict[str, SourceFactory]:
    """Registry of available term sources."""
    settings = settings or get_settings()
    return {
        "file": lambda: FileTermSource(settings.data_dir),
        "http": lambda: HttpTermSource(
            base_url=settings.base_url,
            timeout_seconds=settings.fetch_timeout_seconds,
            attempts=settings.fetch_attempts,
        ),
    }


def available_sources() -> List[str]:
    """List available source names."""
    return sorted(_source_factories().keys())


def build_source(settings: Optional[Settings] = None) -> TermSource:
    settings = settings or get_settings()
    factories = _source_factories(settings)
    name = settings.source_kind.lower()
    if name not in factories:
        raise ValueError(f"Unknown term source '{name}'. Available: {', '.join(sorted(factories))}")
    return factories[name]()


class GlossaryBrowser:
    """
    Thin front-end facing API: load the catalog, then search and filter it.
    """

    def __init__(
        self,
        source_factory: SourceFactory,
        debounce_ms: int = 300,
    ) -> None:
        self._source_factory = source_factory
        self.index = SearchIndex(debounce_ms=debounce_ms)
        self.loader: Optional[CatalogLoader] = None
        self.last_failure: Optional[LoadReport] = None
        self.last_profile: Optional[ProfileStats] = None
        self._generation = 0

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GlossaryBrowser":
        settings = settings or get_settings()
        return cls(lambda: build_source(settings), debounce_ms=settings.debounce_ms)

    @property
    def is_loaded(self) -> bool:
        return bool(self.index.terms)

    @property
    def report(self) -> LoadReport:
        return self.loader.report if self.loader is not None else LoadReport()

    async def load(self) -> TermCollection:
        """
        Load the catalog with a fresh loader and publish it to the search index.

        Raises
        ------
        TotalLoadFailure
            If every domain failed. The index, `loader` and `stats()` keep
            describing the previous collection; the failed attempt's report is
            kept in `last_failure`.
        """
        self._generation += 1
        generation = self._generation
        source = self._source_factory()
        loader = CatalogLoader(source)

        log.info("[LOAD START]", extra={"source": source.name, "generation": generation})
        try:
            with profile_block(f"catalog-load-{generation}") as stats:
                try:
                    terms = await loader.load_all()
                except TotalLoadFailure:
                    if generation == self._generation:
                        self.last_failure = loader.report
                    log.error(
                        "[LOAD FAILED] No domain could be loaded",
                        extra={"failed_domains": [d.value for d in loader.report.failures]},
                    )
                    raise
        finally:
            await source.close()

        if generation != self._generation:
            log.info(
                "[LOAD DISCARDED] Superseded by a newer load",
                extra={"generation": generation, "current": self._generation},
            )
            return self.index.terms

        stats.extra["terms"] = len(terms)
        stats.extra["failed_domains"] = [d.value for d in loader.report.failures]
        self.last_profile = stats
        self.last_failure = None
        self.loader = loader
        self.index.update_terms(terms)
        log.info("[LOAD COMPLETE]", extra=stats.as_dict())
        return terms

    async def reload(self) -> TermCollection:
        """Retry loading from scratch; any pending debounced search is dropped."""
        self.index.clear_pending()
        return await self.load()

    def search(self, query: Any) -> List[TermRecord]:
        return self.index.search(query)

    def filter_by_domain(self, domain: Any) -> List[TermRecord]:
        return self.index.filter_by_domain(domain)

    def debounced_search(self, query: Any, on_result: ResultCallback) -> None:
        self.index.debounced_search(query, on_result)

    def clear_debounce(self) -> None:
        self.index.clear_pending()

    def domain_counts(self) -> Dict[Domain, int]:
        return {domain: len(self.index.filter_by_domain(domain)) for domain in Domain}

    def stats(self) -> Optional[LoadingStats]:
        return self.loader.stats() if self.loader is not None else None


__all__ = [
    "GlossaryBrowser",
    "available_sources",
    "build_source",
]
