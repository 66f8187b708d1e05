"""Two-keyword "or" search over a built :class:`KeywordIndex`.

A document matches when either keyword occurs in it.  Matches are ranked by
frequency, ties go to the first keyword, and each document appears once.
"""

import logging

from littlesearch.config import DEFAULT_TOP_K
from littlesearch.index import KeywordIndex, Occurrence

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Ranking helpers
# ---------------------------------------------------------------------------

def _add(results: list[str], document: str, top_k: int) -> None:
    if document not in results and len(results) < top_k:
        results.append(document)


def _pairwise(first: list[Occurrence], second: list[Occurrence], top_k: int) -> list[str]:
    """Rank by comparing every occurrence of the first keyword with every
    occurrence of the second and keeping the more frequent document.

    ``f2 <= f1`` keeps the first keyword's document.
    """
    results: list[str] = []
    for occ1 in first:
        if len(results) >= top_k:
            break
        for occ2 in second:
            if occ2.frequency <= occ1.frequency:
                _add(results, occ1.document, top_k)
            else:
                _add(results, occ2.document, top_k)
    return results


def _single(occurrences: list[Occurrence], top_k: int) -> list[str]:
    """Rank the documents of one keyword when the other has no matches."""
    results: list[str] = []
    for occ in occurrences:
        if len(results) >= top_k:
            break
        _add(results, occ.document, top_k)
    return results


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def top_k_search(
    index: KeywordIndex,
    kw1: str,
    kw2: str,
    top_k: int = DEFAULT_TOP_K,
) -> list[str] | None:
    """Search for documents containing *kw1* or *kw2*.

    Args:
        index: Built keyword index.
        kw1: First keyword, any case.  Wins frequency ties.
        kw2: Second keyword, any case.
        top_k: Maximum number of documents to return.

    Returns:
        Up to *top_k* distinct document names in descending order of
        frequency, or ``None`` if neither keyword occurs in any document.

    Raises:
        ValueError: If *top_k* is less than 1.
    """
    if top_k < 1:
        raise ValueError(f"top_k must be at least 1, got {top_k}")

    first = index.occurrences(kw1)
    second = index.occurrences(kw2)

    if first and second:
        results = _pairwise(first, second, top_k)
    else:
        # Nothing to pair with: rank the matching keyword on its own rather
        # than returning no result
        results = _single(first or second, top_k)

    logger.debug("%r or %r matched %d documents", kw1, kw2, len(results))
    return results or None
