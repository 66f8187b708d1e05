"""Indexer module. Reads the document manifest and builds the keyword index.

Run to check that a corpus indexes cleanly::

    uv run python -m littlesearch.indexer
"""

import logging
import sys
from pathlib import Path

from rich.console import Console

from littlesearch.config import DOCS_FILE, NOISE_WORDS_FILE, configure_logging
from littlesearch.index import DuplicateDocumentError, KeywordIndex
from littlesearch.sources import (
    ResourceNotFoundError,
    iter_tokens,
    read_manifest,
    read_noise_words,
    resolve_document,
)

logger = logging.getLogger(__name__)
console = Console()


def make_index(
    docs_file: str | Path = DOCS_FILE,
    noise_words_file: str | Path = NOISE_WORDS_FILE,
) -> KeywordIndex:
    """Index every document listed in *docs_file*.

    Noise words are loaded first.  Documents are then loaded and merged one
    at a time in manifest order, which fixes the order of equal-frequency
    occurrences.  Document names are resolved against the manifest's
    directory and recorded as listed.

    Args:
        docs_file: Manifest of document names.
        noise_words_file: Noise words, whitespace separated.

    Returns:
        The built KeywordIndex.

    Raises:
        ResourceNotFoundError: If the manifest, the noise-word file or any
            listed document is missing.  No partial index is returned.
        DuplicateDocumentError: If the manifest lists a document twice.
    """
    noise_words = read_noise_words(noise_words_file)
    documents = read_manifest(docs_file)
    if not documents:
        logger.warning("Manifest %s lists no documents", docs_file)

    base_dir = Path(docs_file).parent
    index = KeywordIndex(noise_words)
    seen: set[str] = set()
    for document in documents:
        # Checked before the document is opened
        if document in seen:
            raise DuplicateDocumentError(document)
        seen.add(document)
        index.add_document(document, iter_tokens(resolve_document(document, base_dir)))

    logger.info(
        "Indexed %d documents, %d keywords", len(index.documents), len(index)
    )
    return index


def load_existing(
    docs_file: str | Path = DOCS_FILE,
    noise_words_file: str | Path = NOISE_WORDS_FILE,
) -> KeywordIndex:
    """Build the index for a script, exiting with a message if it cannot be built.

    Raises:
        SystemExit: If any input file is missing or the manifest lists a
            document twice.
    """
    try:
        index = make_index(docs_file, noise_words_file)
    except ResourceNotFoundError as exc:
        console.print(
            f"[red]Error:[/red] {exc}. "
            "Run `uv run python -m data.generate_dataset` first."
        )
        sys.exit(1)
    except DuplicateDocumentError as exc:
        console.print(f"[red]Error:[/red] {exc}. Remove the repeated entry from {docs_file}.")
        sys.exit(1)

    console.print(
        f"Indexed [cyan]{len(index.documents)}[/cyan] documents "
        f"with [cyan]{len(index)}[/cyan] keywords"
    )
    return index


if __name__ == "__main__":
    configure_logging()
    load_existing()
    console.print("[green]Indexing complete.[/green]")
