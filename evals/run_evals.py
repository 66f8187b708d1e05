"""Evaluation runner for the keyword "or" search.

Loads the eval set and builds the index, runs each two-keyword query, and
computes retrieval quality metrics: Recall@5 and MRR (Mean Reciprocal
Rank).  Results are printed as a per-category summary table and saved to
``evals/results/run_TIMESTAMP.json``.

Run:
    uv run python -m evals.run_evals
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from littlesearch.config import DEFAULT_TOP_K, configure_logging
from littlesearch.index import KeywordIndex
from littlesearch.indexer import load_existing
from littlesearch.search import top_k_search

logger = logging.getLogger(__name__)
console = Console()

EVAL_SET_PATH = Path(__file__).resolve().parent / "eval_set.json"
RESULTS_DIR = Path(__file__).resolve().parent / "results"


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

def recall_at_k(retrieved_ids: list[str], expected_ids: list[str], k: int) -> float:
    """Compute Recall@k: fraction of expected doc ids found in the top-k results.

    Args:
        retrieved_ids: Ordered list of retrieved doc ids.
        expected_ids: List of expected (relevant) doc ids.
        k: Cutoff rank.

    Returns:
        Recall score between 0.0 and 1.0.
    """
    if not expected_ids:
        return 1.0 if not retrieved_ids else 0.0
    top_k_set = set(retrieved_ids[:k])
    found = sum(1 for eid in expected_ids if eid in top_k_set)
    return found / len(expected_ids)


def reciprocal_rank(retrieved_ids: list[str], expected_ids: list[str]) -> float:
    """Compute Reciprocal Rank: 1/rank of the first relevant document.

    Returns:
        Reciprocal rank (0.0 if no relevant doc is found, 1.0 if nothing
        was expected and nothing was retrieved).
    """
    if not expected_ids and not retrieved_ids:
        return 1.0
    expected_set = set(expected_ids)
    for i, doc_id in enumerate(retrieved_ids, start=1):
        if doc_id in expected_set:
            return 1.0 / i
    return 0.0


# ---------------------------------------------------------------------------
# Main evaluation logic
# ---------------------------------------------------------------------------

def load_eval_set() -> list[dict[str, Any]]:
    """Load the evaluation query set from disk.

    Raises:
        SystemExit: If the eval set file is missing.
    """
    if not EVAL_SET_PATH.exists():
        console.print(
            f"[red]Error:[/red] {EVAL_SET_PATH} not found. "
            "Run `uv run python -m data.generate_dataset` first."
        )
        sys.exit(1)

    with open(EVAL_SET_PATH) as f:
        return json.load(f)


def run_eval_query(query_entry: dict[str, Any], index: KeywordIndex) -> dict[str, Any]:
    """Run one eval query and compute metrics.

    Args:
        query_entry: Eval query dict with ``kw1``, ``kw2``,
            ``expected_doc_ids``, etc.
        index: Built keyword index.

    Returns:
        Result dict with query info, retrieved doc ids, and per-query metrics.
    """
    kw1 = query_entry["kw1"]
    kw2 = query_entry["kw2"]
    expected_ids = query_entry["expected_doc_ids"]

    retrieved_ids = top_k_search(index, kw1, kw2, top_k=DEFAULT_TOP_K) or []

    return {
        "query_id": query_entry["query_id"],
        "kw1": kw1,
        "kw2": kw2,
        "category": query_entry["category"],
        "expected_doc_ids": expected_ids,
        "retrieved_doc_ids": retrieved_ids,
        "recall_at_5": recall_at_k(retrieved_ids, expected_ids, k=5),
        "mrr": reciprocal_rank(retrieved_ids, expected_ids),
    }


def print_summary(results: list[dict[str, Any]]) -> None:
    """Print a per-category metrics summary table.

    Args:
        results: List of per-query result dicts from ``run_eval_query``.
    """
    categories: dict[str, list[dict]] = {}
    for r in results:
        categories.setdefault(r["category"], []).append(r)

    table = Table(
        title="Evaluation Results Summary",
        box=box.ROUNDED,
        header_style="bold cyan",
    )
    table.add_column("Category", width=20)
    table.add_column("Queries", justify="right", width=8)
    table.add_column("Recall@5", justify="right", width=10)
    table.add_column("MRR", justify="right", width=10)

    for cat in sorted(categories):
        cat_results = categories[cat]
        n = len(cat_results)
        table.add_row(
            cat,
            str(n),
            f"{sum(r['recall_at_5'] for r in cat_results) / n:.3f}",
            f"{sum(r['mrr'] for r in cat_results) / n:.3f}",
        )

    total_n = len(results)
    table.add_row(
        "[bold]OVERALL[/bold]",
        f"[bold]{total_n}[/bold]",
        f"[bold]{sum(r['recall_at_5'] for r in results) / total_n:.3f}[/bold]",
        f"[bold]{sum(r['mrr'] for r in results) / total_n:.3f}[/bold]",
        style="bold",
    )

    console.print()
    console.print(table)
    console.print()


def save_results(results: list[dict[str, Any]]) -> Path:
    """Save detailed eval results to a timestamped JSON file.

    Returns:
        Path to the saved results file.
    """
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    output_path = RESULTS_DIR / f"run_{timestamp}.json"

    total = len(results)
    output = {
        "summary": {
            "timestamp": timestamp,
            "total_queries": total,
            "avg_recall_at_5": sum(r["recall_at_5"] for r in results) / total,
            "avg_mrr": sum(r["mrr"] for r in results) / total,
        },
        "results": results,
    }

    with open(output_path, "w") as f:
        json.dump(output, f, indent=2)

    return output_path


def main() -> None:
    """Run the full evaluation pipeline."""
    configure_logging()
    console.print("[bold]Loading eval set...[/bold]")
    eval_set = load_eval_set()
    console.print(f"Loaded [cyan]{len(eval_set)}[/cyan] eval queries")
    if not eval_set:
        logger.warning("Eval set is empty; nothing to run")
        return

    console.print("[bold]Building index...[/bold]")
    index = load_existing()

    console.print("[bold]Running evaluations...[/bold]")
    results: list[dict[str, Any]] = []
    for i, query_entry in enumerate(eval_set, start=1):
        console.print(
            f"  [{i}/{len(eval_set)}] {query_entry['query_id']}: "
            f"{query_entry['kw1']} or {query_entry['kw2']}"
        )
        results.append(run_eval_query(query_entry, index))

    print_summary(results)

    output_path = save_results(results)
    console.print(f"Detailed results saved to [cyan]{output_path}[/cyan]")


if __name__ == "__main__":
    main()
