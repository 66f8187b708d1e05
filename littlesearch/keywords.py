"""Keyword extraction for the inverted index.

A keyword is a word that, once stripped of trailing punctuation, consists
only of letters and is not a noise word.  Everything is case-insensitive and
keywords are always returned lower-cased.  No stemming.
"""

from collections.abc import Iterable

from littlesearch.config import PUNCTUATION


def normalize_noise_words(words: Iterable[str]) -> frozenset[str]:
    """Build the immutable noise-word set.

    Args:
        words: Raw noise words in any case.

    Returns:
        Frozen set of lower-cased, non-empty noise words.
    """
    return frozenset(w.strip().lower() for w in words if w.strip())


def strip_trailing_punctuation(word: str) -> str:
    """Remove trailing punctuation while more than one character remains.

    A lone punctuation character is left in place.
    """
    while len(word) > 1 and word[-1] in PUNCTUATION:
        word = word[:-1]
    return word


def get_keyword(word: str, noise_words: frozenset[str] = frozenset()) -> str | None:
    """Return *word* as a keyword if it passes the keyword test.

    Rules:
    - Empty input is rejected before any trimming.
    - Lowercase the input.
    - Strip trailing ``. , ? : ; !`` (see :func:`strip_trailing_punctuation`).
    - Reject noise words and anything containing a non-letter.

    Args:
        word: Candidate word, exactly as it appears in the document.
        noise_words: Noise words to exclude.  Matching is exact, so they
            must already be lower-cased; build the set with
            :func:`normalize_noise_words`.

    Returns:
        The lower-cased keyword, or ``None`` if *word* is not a keyword.
    """
    if not word:
        return None

    word = strip_trailing_punctuation(word.lower())
    if not word:
        return None
    if word in noise_words:
        return None
    if not word.isalpha():
        return None
    return word
