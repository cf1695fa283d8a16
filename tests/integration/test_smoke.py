"""
End-to-end tests for the glossary browser.

These tests generate sample `<domain>.json` files and verify that:
1. The browser loads every domain from disk and over HTTP
2. Invalid records and missing domains degrade the catalog, not the load
3. Search and domain filtering behave the same whatever the source
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import httpx
import pytest

from glossary.config import Settings
from glossary.domain.errors import NotFoundError, TotalLoadFailure
from glossary.domain.models import DOMAINS, Domain
from glossary.orchestrator import GlossaryBrowser
from glossary.search import normalize_text
from glossary.sources import FileTermSource, HttpTermSource
from scripts.generate_data import _write_domain_files

# Test configuration constants
DEFAULT_ROWS = 6
DEFAULT_SEED = 123
INVALID_RATIO = 0.3
MEDIUM_ROWS = 2_000
BASE_URL = "http://glossary.test/data"


def _serve_directory(data_dir: Path, calls: Dict[str, int]) -> httpx.MockTransport:
    """Mock transport answering `/data/<file>` from a local directory."""

    def handler(request: httpx.Request) -> httpx.Response:
        calls[request.url.path] = calls.get(request.url.path, 0) + 1
        path = data_dir / request.url.path.rsplit("/", 1)[-1]
        if not path.exists():
            return httpx.Response(404)
        return httpx.Response(
            200,
            content=path.read_bytes(),
            headers={"content-type": "application/json"},
        )

    return httpx.MockTransport(handler)


class TestFileCatalog:
    """Load generated files from disk."""

    @pytest.mark.asyncio
    async def test_loads_every_domain(self, tmp_path: Path):
        """Verify all generated records are loaded and tagged with their domain."""
        written = _write_domain_files(tmp_path, rows=DEFAULT_ROWS, seed=DEFAULT_SEED)
        browser = GlossaryBrowser(lambda: FileTermSource(tmp_path))

        terms = await browser.load()

        assert len(terms) == sum(written.values())
        assert browser.report.failed_domains == []
        for domain in DOMAINS:
            assert len(browser.filter_by_domain(domain)) == DEFAULT_ROWS

    @pytest.mark.asyncio
    async def test_invalid_records_are_dropped(self, tmp_path: Path):
        """Verify schema-invalid records never reach the search index."""
        _write_domain_files(
            tmp_path, rows=DEFAULT_ROWS, seed=DEFAULT_SEED, invalid_ratio=INVALID_RATIO
        )
        browser = GlossaryBrowser(lambda: FileTermSource(tmp_path))

        terms = await browser.load()

        assert len(terms) < DEFAULT_ROWS * len(DOMAINS)
        for term in terms:
            assert term.formal_term.strip()
            assert term.usage_example.strip()
            assert term.definition is None or isinstance(term.definition, str)

    @pytest.mark.asyncio
    async def test_skipped_domains_degrade_gracefully(self, tmp_path: Path):
        """Verify missing domain files are reported while others stay searchable."""
        skipped = [Domain.HEALTH, Domain.ELECTROMECHANICAL]
        _write_domain_files(tmp_path, rows=DEFAULT_ROWS, seed=DEFAULT_SEED, skip=skipped)
        browser = GlossaryBrowser(lambda: FileTermSource(tmp_path))

        await browser.load()

        assert browser.report.failed_domains == skipped
        assert all(
            isinstance(browser.report.failures[d], NotFoundError) for d in skipped
        )
        assert browser.search("calentura") == []
        assert browser.search("disco")

    @pytest.mark.asyncio
    async def test_empty_directory_is_total_failure(self, tmp_path: Path):
        """Verify a directory without any domain file fails the whole load."""
        browser = GlossaryBrowser(lambda: FileTermSource(tmp_path))

        with pytest.raises(TotalLoadFailure):
            await browser.load()

        assert browser.is_loaded is False


class TestHttpCatalog:
    """Load the same generated files through the HTTP source."""

    @pytest.mark.asyncio
    async def test_http_and_file_sources_agree(self, tmp_path: Path):
        """Verify both sources produce the same collection in the same order."""
        _write_domain_files(tmp_path, rows=DEFAULT_ROWS, seed=DEFAULT_SEED)
        calls: Dict[str, int] = {}
        transport = _serve_directory(tmp_path, calls)

        file_browser = GlossaryBrowser(lambda: FileTermSource(tmp_path))
        http_browser = GlossaryBrowser(
            lambda: HttpTermSource(base_url=BASE_URL, attempts=1, transport=transport)
        )
        file_terms = await file_browser.load()
        http_terms = await http_browser.load()

        assert http_terms == file_terms
        assert sorted(calls) == sorted(f"/data/{d.value}.json" for d in DOMAINS)

    @pytest.mark.asyncio
    async def test_http_missing_domain_is_not_retried(self, tmp_path: Path):
        """Verify a 404 fails only its own domain and is fetched once."""
        _write_domain_files(
            tmp_path, rows=DEFAULT_ROWS, seed=DEFAULT_SEED, skip=[Domain.ARTS]
        )
        calls: Dict[str, int] = {}
        transport = _serve_directory(tmp_path, calls)
        browser = GlossaryBrowser(
            lambda: HttpTermSource(
                base_url=BASE_URL, attempts=3, transport=transport, retry_wait_min=0
            )
        )

        await browser.load()

        assert browser.report.failed_domains == [Domain.ARTS]
        assert calls["/data/artes.json"] == 1

    @pytest.mark.asyncio
    async def test_from_settings_with_http_source(self, tmp_path: Path, monkeypatch):
        """Verify the settings-driven factory wires the HTTP source."""
        _write_domain_files(tmp_path, rows=DEFAULT_ROWS, seed=DEFAULT_SEED)
        transport = _serve_directory(tmp_path, {})
        original_init = HttpTermSource.__init__

        def init_with_transport(self, *args, **kwargs):
            kwargs["transport"] = transport
            original_init(self, *args, **kwargs)

        monkeypatch.setattr(HttpTermSource, "__init__", init_with_transport)
        settings = Settings(source_kind="http", base_url=BASE_URL, fetch_attempts=1)
        browser = GlossaryBrowser.from_settings(settings)

        terms = await browser.load()

        assert len(terms) == DEFAULT_ROWS * len(DOMAINS)


class TestSearchAtScale:
    """Search behaviour over a larger generated catalog."""

    @pytest.mark.slow
    @pytest.mark.asyncio
    async def test_medium_catalog_search(self, tmp_path: Path):
        """
        Load a medium catalog and verify every hit contains the query.

        This test is marked as slow and can be skipped with: pytest -m "not slow"
        """
        _write_domain_files(tmp_path, rows=MEDIUM_ROWS, seed=DEFAULT_SEED)
        browser = GlossaryBrowser(lambda: FileTermSource(tmp_path))
        await browser.load()

        for query in ["CABILLA", "ordenador", "grua", "fría"]:
            needle = normalize_text(query)
            results = browser.search(query)
            assert results, f"No results for {query!r}"
            for term in results:
                fields = [term.formal_term, term.colloquial_term, term.definition or ""]
                assert any(needle in normalize_text(f) for f in fields)
