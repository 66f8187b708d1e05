"""In-memory inverted index of keyword occurrences.

Each keyword maps to the list of documents it occurs in, with the number of
times it occurs in each one.  Lists are kept in descending order of
frequency; documents with equal frequency stay in the order they were
merged.  Documents are merged one at a time by binary-search insertion.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from littlesearch.keywords import get_keyword, normalize_noise_words

logger = logging.getLogger(__name__)


class DuplicateDocumentError(ValueError):
    """Raised when a document is indexed a second time."""

    def __init__(self, document: str) -> None:
        self.document = document
        super().__init__(f"document already indexed: {document}")


@dataclass(frozen=True)
class Occurrence:
    """How many times one keyword occurs in one document."""

    document: str
    frequency: int

    def __post_init__(self) -> None:
        if self.frequency < 1:
            raise ValueError(f"frequency must be positive, got {self.frequency}")

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def load_keywords(
    document: str,
    tokens: Iterable[str],
    noise_words: frozenset[str] = frozenset(),
) -> dict[str, Occurrence]:
    """Count the keywords of a single document.

    Args:
        document: Name recorded on every occurrence.
        tokens: Raw whitespace-delimited words of the document.  Consumed
            once.
        noise_words: Lower-cased words to skip.

    Returns:
        Mapping from keyword to its occurrence in *document*.
    """
    counts: dict[str, int] = {}
    for token in tokens:
        keyword = get_keyword(token, noise_words)
        if keyword is None:
            continue
        counts[keyword] = counts.get(keyword, 0) + 1
    return {keyword: Occurrence(document, n) for keyword, n in counts.items()}


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int] | None:
    """Move the last occurrence of *occurrences* into its ranked position.

    Elements ``0..n-2`` must already be in descending order of frequency.
    The last element is removed and put back at the spot found by binary
    search over that prefix.  On an exact frequency match it goes after the
    run of equal entries, so earlier-merged documents stay first.

    Args:
        occurrences: List to reorder in place.

    Returns:
        The midpoints probed by the search, in order, or ``None`` when the
        list has fewer than two elements.  Only useful for testing.
    """
    if len(occurrences) < 2:
        return None

    new = occurrences.pop()
    probes: list[int] = []
    low, high, mid = 0, len(occurrences) - 1, 0

    while low <= high:
        mid = (low + high) // 2
        probes.append(mid)
        frequency = occurrences[mid].frequency

        if frequency == new.frequency:
            position = mid + 1
            while (
                position < len(occurrences)
                and occurrences[position].frequency == new.frequency
            ):
                position += 1
            occurrences.insert(position, new)
            return probes
        if frequency > new.frequency:
            low = mid + 1
        else:
            high = mid - 1

    # Last probe may sit just above the insertion point
    if new.frequency < occurrences[mid].frequency:
        mid += 1
    occurrences.insert(mid, new)
    return probes


def merge_keywords(
    index: dict[str, list[Occurrence]],
    keywords: Mapping[str, Occurrence],
) -> None:
    """Merge one document's keywords into the master index, in place.

    Args:
        index: Master index from keyword to ranked occurrences.
        keywords: Output of :func:`load_keywords` for one document.
    """
    for keyword, occurrence in keywords.items():
        ranked = index.get(keyword)
        if ranked is None:
            index[keyword] = [occurrence]
            continue
        ranked.append(occurrence)
        insert_last_occurrence(ranked)


class KeywordIndex:
    """Keyword index plus the noise words it was built with.

    Args:
        noise_words: Words to exclude, in any case.
    """

    def __init__(self, noise_words: Iterable[str] = ()) -> None:
        self._noise_words = normalize_noise_words(noise_words)
        self._index: dict[str, list[Occurrence]] = {}
        self._documents: list[str] = []

    @property
    def noise_words(self) -> frozenset[str]:
        """Return the lower-cased noise words."""
        return self._noise_words

    @property
    def keywords(self) -> Mapping[str, list[Occurrence]]:
        """Return a read-only view of the keyword index."""
        return MappingProxyType(self._index)

    @property
    def documents(self) -> tuple[str, ...]:
        """Return the indexed documents in merge order."""
        return tuple(self._documents)

    def add_document(self, document: str, tokens: Iterable[str]) -> dict[str, Occurrence]:
        """Load a document's keywords and merge them into the index.

        Args:
            document: Document name.
            tokens: Raw words of the document.

        Returns:
            The per-document keyword map that was merged.

        Raises:
            DuplicateDocumentError: If *document* has already been indexed.
        """
        if document in self._documents:
            raise DuplicateDocumentError(document)

        keywords = load_keywords(document, tokens, self._noise_words)
        merge_keywords(self._index, keywords)
        self._documents.append(document)
        logger.debug("Indexed %s: %d keywords", document, len(keywords))
        return keywords

    def occurrences(self, keyword: str) -> list[Occurrence]:
        """Return the ranked occurrences of *keyword*, empty if unknown."""
        return list(self._index.get(keyword.lower(), []))

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and keyword.lower() in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"KeywordIndex(keywords={len(self._index)}, documents={len(self._documents)})"
