"""Tests for the terminal output helpers."""

import pytest

from littlesearch import utils
from littlesearch.index import Occurrence


class TestFormatting:
    """Test suite for the print helpers."""

    def test_format_occurrences(self):
        """Occurrences render like a list of (document,frequency) pairs."""
        occs = [Occurrence("doc1", 3), Occurrence("doc2", 1)]
        assert utils.format_occurrences(occs) == "[(doc1,3), (doc2,1)]"

    def test_print_search_results(self, capsys):
        """Ranked documents are listed in order."""
        utils.print_search_results("Deep", "World", ["doc1", "doc2"])
        out = capsys.readouterr().out
        assert "Deep or World" in out
        assert out.index("doc1") < out.index("doc2")

    def test_print_no_results(self, capsys):
        """None is reported as no match."""
        utils.print_search_results("x", "y", None)
        assert "No matching documents." in capsys.readouterr().out

    def test_print_index_table(self, deep_world_index, capsys):
        """Every keyword appears with its occurrences."""
        utils.print_index_table(deep_world_index)
        out = capsys.readouterr().out
        assert "deep" in out
        assert "(doc1,3)" in out

    def test_print_insertion_trace(self, capsys):
        """A missing trace is shown as n/a."""
        utils.print_insertion_trace([Occurrence("a", 1)], None)
        assert "n/a" in capsys.readouterr().out


class TestPromptKeywords:
    """Test suite for prompt_keywords."""

    @pytest.mark.parametrize(
        "typed, expected",
        [
            ("", ("Deep", "World")),
            ("sea sky", ("sea", "sky")),
            ("sea", ("sea", "sea")),
            ("Q", None),
        ],
    )
    def test_prompt(self, monkeypatch, typed, expected):
        """Defaults, one or two keywords, and quitting are handled."""
        monkeypatch.setattr(utils.console, "input", lambda prompt: typed)
        assert utils.prompt_keywords("Deep", "World") == expected
