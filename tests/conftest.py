"""Shared fixtures for the littlesearch test suite."""

from pathlib import Path
from typing import Callable

import pytest

from littlesearch.index import KeywordIndex, Occurrence

NOISE_WORDS = ["the", "a", "is", "and"]


def ranked(*pairs: tuple[str, int]) -> list[Occurrence]:
    """Build an occurrence list from ``(document, frequency)`` pairs."""
    return [Occurrence(document, frequency) for document, frequency in pairs]


@pytest.fixture
def write_corpus(tmp_path: Path) -> Callable[..., tuple[Path, Path]]:
    """Return a factory that writes documents, a manifest and noise words.

    The factory takes a ``{name: text}`` mapping (manifest order follows
    insertion order) and optional noise words, and returns the paths of the
    manifest and noise-word file.
    """

    def _write(
        documents: dict[str, str], noise_words: list[str] | None = None
    ) -> tuple[Path, Path]:
        for name, text in documents.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text)
        manifest = tmp_path / "docs.txt"
        manifest.write_text("\n".join(documents) + ("\n" if documents else ""))
        noise = tmp_path / "noisewords.txt"
        noise.write_text("\n".join(NOISE_WORDS if noise_words is None else noise_words))
        return manifest, noise

    return _write


@pytest.fixture
def deep_world_index() -> KeywordIndex:
    """doc1 has "Deep" three times; doc2 has "World" three times and "Deep" once."""
    index = KeywordIndex(["the", "a"])
    index.add_document("doc1", "Deep water runs deep. The Deep trench".split())
    index.add_document("doc2", "The World is a world, World of deep".split())
    return index
