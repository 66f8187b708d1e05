"""Unit tests for the manifest, noise-word and document readers."""

import gc
import warnings

import pytest

from littlesearch.sources import (
    ResourceNotFoundError,
    iter_tokens,
    read_manifest,
    read_noise_words,
    resolve_document,
)


class TestReaders:
    """Test suite for read_manifest and read_noise_words."""

    def test_read_manifest_keeps_order(self, tmp_path):
        """Document names come back in file order, any whitespace layout."""
        manifest = tmp_path / "docs.txt"
        manifest.write_text("b.txt\na.txt  c.txt\n\n")
        assert read_manifest(manifest) == ["b.txt", "a.txt", "c.txt"]

    def test_read_empty_manifest(self, tmp_path):
        """An empty manifest lists nothing."""
        manifest = tmp_path / "docs.txt"
        manifest.write_text("")
        assert read_manifest(manifest) == []

    def test_read_noise_words(self, tmp_path):
        """Noise words are returned as written."""
        noise = tmp_path / "noisewords.txt"
        noise.write_text("the\nA\n")
        assert read_noise_words(noise) == ["the", "A"]

    def test_missing_manifest(self, tmp_path):
        """A missing manifest raises ResourceNotFoundError."""
        with pytest.raises(ResourceNotFoundError) as exc_info:
            read_manifest(tmp_path / "missing.txt")
        assert exc_info.value.kind == "manifest"
        assert exc_info.value.path == tmp_path / "missing.txt"

    def test_missing_noise_words(self, tmp_path):
        """A missing noise-word file raises ResourceNotFoundError."""
        with pytest.raises(ResourceNotFoundError) as exc_info:
            read_noise_words(tmp_path / "missing.txt")
        assert exc_info.value.kind == "noise words"

    def test_is_file_not_found(self, tmp_path):
        """ResourceNotFoundError can be caught as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_manifest(tmp_path / "missing.txt")


class TestIterTokens:
    """Test suite for iter_tokens."""

    def test_yields_raw_tokens(self, tmp_path):
        """Tokens keep their case and punctuation."""
        doc = tmp_path / "doc.txt"
        doc.write_text("Deep water,\n  runs DEEP!\n\n")
        assert list(iter_tokens(doc)) == ["Deep", "water,", "runs", "DEEP!"]

    def test_is_lazy(self, tmp_path):
        """Tokens are produced one at a time."""
        doc = tmp_path / "doc.txt"
        doc.write_text("one two\nthree\n")
        tokens = iter_tokens(doc)
        assert next(tokens) == "one"
        assert list(tokens) == ["two", "three"]

    def test_unconsumed_iterator_holds_no_file(self, tmp_path):
        """Dropping an iterator before reading it leaves no file open."""
        doc = tmp_path / "doc.txt"
        doc.write_text("one two\n")

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", ResourceWarning)
            tokens = iter_tokens(doc)
            del tokens
            gc.collect()

        assert not [w for w in caught if issubclass(w.category, ResourceWarning)]

    def test_missing_directory_entry(self, tmp_path):
        """A directory is not a document."""
        with pytest.raises(ResourceNotFoundError):
            iter_tokens(tmp_path)

    def test_missing_document_fails_at_call(self, tmp_path):
        """A missing document raises before iteration starts."""
        with pytest.raises(ResourceNotFoundError) as exc_info:
            iter_tokens(tmp_path / "missing.txt")
        assert exc_info.value.kind == "document"


class TestResolveDocument:
    """Test suite for resolve_document."""

    def test_relative_to_base(self, tmp_path):
        """Relative names are resolved against the base directory."""
        assert resolve_document("corpus/a.txt", tmp_path) == tmp_path / "corpus" / "a.txt"

    def test_absolute_kept(self, tmp_path):
        """Absolute names are used as-is."""
        path = tmp_path / "a.txt"
        assert resolve_document(str(path), "/elsewhere") == path
