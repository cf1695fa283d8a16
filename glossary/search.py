"""
In-memory search index over the loaded term collection.

Matching is accent- and case-insensitive substring containment across the
formal term, the colloquial term and the definition. Results keep the
collection's order; there is no ranking.

The collection lives in an immutable snapshot (terms plus their precomputed
normalized search keys). `update_terms` builds a new snapshot and swaps the
reference, so a reader always sees one collection in full.

Usage:
    index = SearchIndex(terms)
    index.search("informatica")
    index.filter_by_domain("salud")

    # From inside a running event loop:
    index.debounced_search(query, on_result=render)
"""

from __future__ import annotations

import asyncio
import re
import unicodedata
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Tuple

from glossary.domain.models import Domain, TermCollection, TermRecord
from glossary.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_DEBOUNCE_MS = 300

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")

ResultCallback = Callable[[List[TermRecord]], Any]


def normalize_text(text: Any) -> str:
    """
    Lowercase, strip diacritics and trim.

    "Informática" and "informatica" normalize to the same string. Non-string
    input normalizes to "".
    """
    if not text or not isinstance(text, str):
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    return _COMBINING_MARKS.sub("", decomposed).strip()


@dataclass(frozen=True)
class SearchStats:
    total_terms: int
    debounce_delay_ms: int


@dataclass(frozen=True)
class _Snapshot:
    terms: TermCollection
    # One (formal, colloquial, definition) tuple of normalized text per term.
    keys: Tuple[Tuple[str, str, str], ...]

    @classmethod
    def build(cls, terms: Iterable[TermRecord]) -> "_Snapshot":
        frozen = tuple(terms)
        keys = tuple(
            (
                normalize_text(term.formal_term),
                normalize_text(term.colloquial_term),
                normalize_text(term.definition or ""),
            )
            for term in frozen
        )
        return cls(terms=frozen, keys=keys)


class SearchIndex:
    """
    Hold the current term collection and answer search and filter queries.
    """

    def __init__(
        self,
        terms: Iterable[TermRecord] = (),
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
    ) -> None:
        self.debounce_ms = debounce_ms
        self._snapshot = _Snapshot.build(terms)
        self._pending: Optional[asyncio.TimerHandle] = None

    @property
    def terms(self) -> TermCollection:
        return self._snapshot.terms

    def update_terms(self, terms: Iterable[TermRecord]) -> None:
        """Replace the working collection in one reference swap."""
        self._snapshot = _Snapshot.build(terms)
        log.debug("Search index updated", extra={"terms": len(self._snapshot.terms)})

    def search(self, query: Any) -> List[TermRecord]:
        """
        Terms whose formal term, colloquial term or definition contains the query.

        Blank or non-string queries return an empty list.
        """
        if not isinstance(query, str):
            return []
        needle = normalize_text(query.strip())
        if not needle:
            return []

        snapshot = self._snapshot
        return [
            term
            for term, fields in zip(snapshot.terms, snapshot.keys)
            if any(needle in field for field in fields)
        ]

    def filter_by_domain(self, domain: Any) -> List[TermRecord]:
        """
        Terms whose domain id equals `domain`.

        Resolved with `Domain.parse`, so case and surrounding whitespace are
        ignored the same way `CatalogLoader.domain_terms` ignores them.
        """
        wanted = Domain.parse(domain)
        if wanted is None:
            return []
        return [term for term in self._snapshot.terms if term.domain is wanted]

    def debounced_search(self, query: Any, on_result: ResultCallback) -> None:
        """
        Run `search(query)` once the quiet delay has passed since the last call.

        Each call cancels the previously scheduled search, so a burst of calls
        produces a single callback carrying the results of the last query.
        Must be called from a running event loop.
        """
        self.clear_pending()
        loop = asyncio.get_running_loop()
        self._pending = loop.call_later(
            self.debounce_ms / 1000.0, self._run_debounced, query, on_result
        )

    def _run_debounced(self, query: Any, on_result: ResultCallback) -> None:
        self._pending = None
        on_result(self.search(query))

    def clear_pending(self) -> None:
        """Cancel a scheduled debounced search without invoking its callback."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    clear_debounce = clear_pending

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def stats(self) -> SearchStats:
        return SearchStats(total_terms=len(self._snapshot.terms), debounce_delay_ms=self.debounce_ms)


__all__ = ["DEFAULT_DEBOUNCE_MS", "SearchIndex", "SearchStats", "normalize_text"]
