"""Pretty-printing helpers for terminal output.

Uses the ``rich`` library for formatted tables and panels.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from littlesearch.index import KeywordIndex, Occurrence

console = Console()


def format_occurrences(occurrences: list[Occurrence]) -> str:
    """Render occurrences as ``[(doc,freq), ...]``."""
    return "[" + ", ".join(str(occ) for occ in occurrences) + "]"


def prompt_keywords(default_kw1: str, default_kw2: str) -> tuple[str, str] | None:
    """Prompt for two keywords, with defaults pre-filled.

    Args:
        default_kw1: First keyword used if the user just presses Enter.
        default_kw2: Second keyword used if the user just presses Enter.

    Returns:
        The two keywords, or ``None`` if the user typed ``q``.
    """
    console.print(
        f"[bold]Default query:[/bold] [cyan]{default_kw1}[/cyan] or [cyan]{default_kw2}[/cyan]"
    )
    custom = console.input(
        "[dim]Enter two keywords (Enter for default, q to quit):[/dim] "
    ).strip()
    if custom.lower() == "q":
        return None
    if not custom:
        return default_kw1, default_kw2

    words = custom.split()
    if len(words) == 1:
        return words[0], words[0]
    return words[0], words[1]


def print_index_table(index: KeywordIndex, limit: int | None = None) -> None:
    """Render the keyword index to the console.

    Args:
        index: Built keyword index.
        limit: If provided, only the first *limit* keywords (alphabetical)
            are shown.
    """
    table = Table(
        title=f"Keyword Index ({len(index)} keywords)",
        box=box.ROUNDED,
        header_style="bold cyan",
    )
    table.add_column("Keyword", width=18)
    table.add_column("Docs", justify="right", width=5)
    table.add_column("Occurrences (document, frequency)")

    keywords = sorted(index.keywords)
    if limit is not None:
        keywords = keywords[:limit]

    for keyword in keywords:
        occurrences = index.keywords[keyword]
        table.add_row(keyword, str(len(occurrences)), format_occurrences(occurrences))

    console.print(table)
    console.print()


def print_search_results(kw1: str, kw2: str, results: list[str] | None) -> None:
    """Print the result of a ``kw1 or kw2`` search in a rich Panel.

    Args:
        kw1: First keyword.
        kw2: Second keyword.
        results: Ranked document names, or ``None`` for no match.
    """
    title = f"{kw1} or {kw2}"
    if results is None:
        console.print(Panel("No matching documents.", title=title, box=box.ROUNDED))
        console.print()
        return

    lines = [
        f"[bold cyan]{rank}.[/bold cyan] {document}"
        for rank, document in enumerate(results, start=1)
    ]
    console.print(Panel("\n".join(lines), title=title, box=box.ROUNDED))
    console.print()


def print_insertion_trace(occurrences: list[Occurrence], probes: list[int] | None) -> None:
    """Print a ranked list together with the binary-search midpoints probed."""
    console.print(f"[bold]Occurrences:[/bold] {format_occurrences(occurrences)}")
    probed = "n/a" if probes is None else ", ".join(str(p) for p in probes)
    console.print(f"[bold]Midpoints probed:[/bold] {probed}")
    console.print()
