"""Readers for the files an indexing pass consumes.

The manifest lists document names in merge order, the noise-word file lists
words to exclude, and each document is read lazily as a stream of
whitespace-delimited tokens.  Any file that cannot be found raises
:class:`ResourceNotFoundError`.
"""

from collections.abc import Iterator
from pathlib import Path


class ResourceNotFoundError(FileNotFoundError):
    """Raised when a manifest, noise-word file or document is missing.

    Args:
        kind: What the file was supposed to be (``"manifest"``,
            ``"noise words"`` or ``"document"``).
        path: The path that could not be opened.
    """

    def __init__(self, kind: str, path: str | Path) -> None:
        self.kind = kind
        self.path = Path(path)
        super().__init__(f"{kind} not found: {self.path}")


def _read_words(path: Path, kind: str) -> list[str]:
    try:
        with open(path) as f:
            return f.read().split()
    except FileNotFoundError as exc:
        raise ResourceNotFoundError(kind, path) from exc


def read_manifest(path: str | Path) -> list[str]:
    """Read the ordered list of document names from a manifest file.

    Args:
        path: Manifest file, one or more names per line.

    Returns:
        Document names in the order they appear.

    Raises:
        ResourceNotFoundError: If the manifest does not exist.
    """
    return _read_words(Path(path), "manifest")


def read_noise_words(path: str | Path) -> list[str]:
    """Read the noise words, exactly as written in the file.

    Raises:
        ResourceNotFoundError: If the noise-word file does not exist.
    """
    return _read_words(Path(path), "noise words")


def resolve_document(name: str, base_dir: str | Path) -> Path:
    """Resolve a manifest entry against the manifest's directory."""
    path = Path(name)
    if path.is_absolute():
        return path
    return Path(base_dir) / path


def iter_tokens(path: str | Path) -> Iterator[str]:
    """Yield the whitespace-delimited tokens of a document, line by line.

    Case and punctuation are preserved.  A missing document fails at call
    time; the file itself is only opened once iteration starts, so an
    iterator that is never consumed holds no open handle.

    Args:
        path: Document file.

    Returns:
        Iterator over raw tokens.

    Raises:
        ResourceNotFoundError: If the document does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise ResourceNotFoundError("document", path)
    return _tokens(path)


def _tokens(path: Path) -> Iterator[str]:
    with open(path) as f:
        for line in f:
            yield from line.split()
