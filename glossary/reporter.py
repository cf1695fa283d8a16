from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from glossary.domain.models import Domain, TermRecord, display_name
from glossary.loader import LoadingStats
from glossary.utils.profiler import ProfileStats


def term_to_dict(term: TermRecord) -> Dict[str, Any]:
    """Plain JSON-ready representation of a term, domain as its id."""
    return term.model_dump(mode="json")


def _pluralize(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def print_terms(
    terms: List[TermRecord],
    title: str,
    console: Optional[Console] = None,
    empty_message: str = "No terms match your search.",
) -> None:
    """
    Render term records as a rich table.

    Every field is markup-escaped: term text is data, never rich markup.
    """
    console = console or Console()

    if not terms:
        console.print(f"[yellow]{escape(empty_message)}[/yellow]")
        return

    table = Table(
        title=escape(title),
        box=box.ROUNDED,
        caption=_pluralize(len(terms), "term found", "terms found"),
        show_lines=True,
    )
    table.add_column("Domain", style="cyan", no_wrap=True)
    table.add_column("Formal term", style="bold")
    table.add_column("Colloquial", style="magenta")
    table.add_column("Definition", style="green")
    table.add_column("Usage example", style="italic")

    for term in terms:
        table.add_row(
            escape(display_name(term.domain)),
            escape(term.formal_term),
            escape(term.colloquial_term),
            escape(term.definition or ""),
            escape(f'"{term.usage_example}"'),
        )

    console.print(table)


def print_domains(
    counts: Mapping[Domain, int],
    failed: Iterable[Domain] = (),
    console: Optional[Console] = None,
) -> None:
    """Render the domain overview with term counts and load status."""
    console = console or Console()
    failed_set = set(failed)

    table = Table(title="Academic domains", box=box.ROUNDED)
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Terms", justify="right", style="magenta")
    table.add_column("Status", justify="center")

    for domain in Domain:
        status = "[red]failed[/red]" if domain in failed_set else "[green]loaded[/green]"
        table.add_row(domain.value, display_name(domain), f"{counts.get(domain, 0):,}", status)

    console.print(table)


def print_stats(
    stats: LoadingStats,
    profile: Optional[ProfileStats] = None,
    debounce_ms: Optional[int] = None,
    console: Optional[Console] = None,
) -> None:
    """Render loading statistics and the profile of the last load."""
    console = console or Console()

    table = Table(title="Glossary statistics", box=box.ROUNDED, show_header=False)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="bold green")

    table.add_row("Total terms", f"{stats.total_terms:,}")
    table.add_row("Domains loaded", f"{stats.loaded_domains}/{stats.total_domains}")
    table.add_row("Failed domains", ", ".join(stats.failed_domains) or "none")
    if debounce_ms is not None:
        table.add_row("Search debounce (ms)", str(debounce_ms))
    if profile is not None:
        table.add_row("Load duration (s)", f"{profile.duration_seconds:.3f}")
        if profile.rss_after_bytes is not None:
            table.add_row("Resident memory (MB)", f"{profile.rss_after_bytes / (1024 * 1024):.2f}")

    console.print(table)


__all__ = ["print_domains", "print_stats", "print_terms", "term_to_dict"]
