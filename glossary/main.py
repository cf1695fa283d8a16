from __future__ import annotations

import asyncio
import json
import sys
from typing import List, Optional

import typer

from glossary.config import get_settings
from glossary.domain.errors import TotalLoadFailure
from glossary.domain.models import TermRecord, display_name
from glossary.orchestrator import GlossaryBrowser, available_sources
from glossary.preferences import Theme, ThemePreferenceStore
from glossary.reporter import print_domains, print_stats, print_terms, term_to_dict
from glossary.utils.logging import configure_logging

app = typer.Typer(help="Bilingual technical glossary browser.")

MAX_QUERY_LENGTH = 100


def _load_browser() -> GlossaryBrowser:
    """
    Build a browser from settings and load the catalog, exiting on total failure.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    browser = GlossaryBrowser.from_settings(settings)
    try:
        asyncio.run(browser.load())
    except TotalLoadFailure as exc:
        typer.echo(f"Error loading the glossary: {exc}", err=True)
        typer.echo("Check the data source and run the command again to retry.", err=True)
        raise typer.Exit(code=1)
    return browser


def _sanitize_query(query: str) -> str:
    """Trim, cap at MAX_QUERY_LENGTH characters and drop angle brackets."""
    capped = query.strip()[:MAX_QUERY_LENGTH]
    return capped.replace("<", "").replace(">", "").strip()


def _emit(terms: List[TermRecord], as_json: bool, title: str, empty_message: str) -> None:
    if as_json:
        typer.echo(json.dumps([term_to_dict(t) for t in terms], indent=2, ensure_ascii=False))
        return
    print_terms(terms, title=title, empty_message=empty_message)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    location = settings.base_url if settings.source_kind == "http" else settings.data_dir
    typer.echo(
        f"source={settings.source_kind} ({location}) | "
        f"available={', '.join(available_sources())} | "
        f"debounce={settings.debounce_ms}ms attempts={settings.fetch_attempts} "
        f"timeout={settings.fetch_timeout_seconds}s"
    )


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to look for in terms and definitions."),
    as_json: bool = typer.Option(False, "--json", help="Emit results as JSON."),
) -> None:
    """
    Search every domain; accents and case are ignored.
    """
    cleaned = _sanitize_query(query)
    browser = _load_browser()
    results = browser.search(cleaned)
    _emit(
        results,
        as_json,
        title=f'Results for "{cleaned}"',
        empty_message="No terms match your search.",
    )


@app.command()
def domain(
    name: str = typer.Argument(..., help="Domain id (e.g. informatica, salud)."),
    as_json: bool = typer.Option(False, "--json", help="Emit results as JSON."),
) -> None:
    """
    List every term of one domain.
    """
    browser = _load_browser()
    results = browser.filter_by_domain(name)
    label = display_name(name)
    _emit(
        results,
        as_json,
        title=f"Terms of {label}",
        empty_message=f"No terms found for the domain {label}.",
    )


@app.command()
def domains() -> None:
    """
    Show every domain with its term count.
    """
    browser = _load_browser()
    print_domains(browser.domain_counts(), failed=browser.report.failed_domains)


@app.command()
def stats() -> None:
    """
    Show loading statistics for the current data source.
    """
    browser = _load_browser()
    loading = browser.stats()
    if loading is None:  # pragma: no cover - _load_browser always loads
        raise typer.Exit(code=1)
    print_stats(loading, profile=browser.last_profile, debounce_ms=browser.index.debounce_ms)


@app.command()
def theme(
    value: Optional[str] = typer.Argument(
        None, help="light, dark or toggle. Without a value, show the saved theme."
    ),
) -> None:
    """
    Show or change the saved theme preference.
    """
    store = ThemePreferenceStore()
    if value is None:
        typer.echo(store.get_theme().value)
        return
    choice = value.strip().lower()
    if choice == "toggle":
        current: Theme = store.toggle()
    elif choice in {t.value for t in Theme}:
        current = store.set_theme(choice)
    else:
        typer.echo(f"Unknown theme '{value}'. Use light, dark or toggle.", err=True)
        raise typer.Exit(code=2)
    typer.echo(current.value)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
