"""Demo -- Keyword Index and "Or" Search (Interactive).

Builds the keyword index over the sample corpus, shows what it contains,
walks through one binary-search insertion, then runs two-keyword "or"
searches until the presenter exits.

Run::

    uv run python -m demos.demo_search
"""

from rich.console import Console

from littlesearch.config import configure_logging
from littlesearch.index import Occurrence, insert_last_occurrence
from littlesearch.indexer import load_existing
from littlesearch.search import top_k_search
from littlesearch.utils import (
    print_index_table,
    print_insertion_trace,
    print_search_results,
    prompt_keywords,
)

console = Console()

DEFAULT_KW1 = "Deep"
DEFAULT_KW2 = "World"

# A full descending list receiving a new top entry: every probe goes left.
INSERTION_FREQUENCIES = [10, 9, 8, 6, 5, 4, 3, 2, 1]
INSERTION_NEW = 11


def show_insertion() -> None:
    """Insert one occurrence into a ranked list and show the probes."""
    console.rule("[bold]Binary-search insertion[/bold]")
    console.print()
    occurrences = [Occurrence("sample", f) for f in INSERTION_FREQUENCIES]
    occurrences.append(Occurrence("new", INSERTION_NEW))
    probes = insert_last_occurrence(occurrences)
    print_insertion_trace(occurrences, probes)


def main() -> None:
    """Run the keyword search demo."""
    configure_logging()
    console.rule("[bold cyan]Demo — Keyword Index and Or Search[/bold cyan]")
    console.print()

    index = load_existing()
    console.print()
    print_index_table(index, limit=40)

    show_insertion()

    console.rule("[bold]Or search[/bold]")
    console.print()
    while True:
        keywords = prompt_keywords(DEFAULT_KW1, DEFAULT_KW2)
        if keywords is None:
            break
        kw1, kw2 = keywords
        print_search_results(kw1, kw2, top_k_search(index, kw1, kw2))

    console.print("[bold cyan]Demo complete.[/bold cyan]\n")


if __name__ == "__main__":
    main()
