"""Generate a synthetic text corpus and eval set for the search demo.

Uses a deterministic, template-based approach (seed=42) to produce plain-text
documents with the properties the demo and evals rely on:

1. Topic vocabularies that overlap, so "or" queries hit several documents
2. Keyword frequencies that vary per document (ranking is visible)
3. Noise words and trailing punctuation mixed into the text
4. A pair of documents reproducing the "Deep or World" walkthrough

Run:
    uv run python -m data.generate_dataset
"""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
SEED = 42
NUM_DOCUMENTS = 24
WORDS_PER_SENTENCE = (6, 14)
SENTENCES_PER_DOCUMENT = (8, 20)
EVAL_TOP_K = 5

DATA_DIR = Path(__file__).resolve().parent
CORPUS_DIR = DATA_DIR / "corpus"
MANIFEST_PATH = DATA_DIR / "docs.txt"
NOISE_WORDS_PATH = DATA_DIR / "noisewords.txt"
EVAL_OUTPUT_PATH = DATA_DIR.parent / "evals" / "eval_set.json"

NOISE_WORDS: list[str] = [
    "a", "an", "and", "are", "as", "at", "be", "but", "by", "for", "from",
    "has", "have", "in", "is", "it", "its", "of", "on", "or", "that", "the",
    "their", "there", "these", "this", "to", "was", "were", "which", "with",
]

TOPICS: dict[str, list[str]] = {
    "ocean": [
        "deep", "ocean", "current", "tide", "coral", "reef", "whale",
        "salt", "wave", "shore", "trench", "pressure",
    ],
    "travel": [
        "world", "journey", "map", "border", "city", "harbor", "train",
        "passport", "road", "village", "coast", "market",
    ],
    "space": [
        "orbit", "planet", "star", "deep", "telescope", "galaxy", "comet",
        "moon", "signal", "world", "rocket", "dust",
    ],
    "forest": [
        "tree", "river", "moss", "bird", "trail", "valley", "root", "leaf",
        "stone", "fern", "canopy", "rain",
    ],
}

# Tokens that must never become keywords
JUNK_TOKENS: list[str] = ["42", "e-mail", "x1", "--", "(note)", "rock'n'roll"]

PUNCTUATION_ENDINGS: list[str] = ["", "", "", ",", ".", "!", "?", ";", ":", "..."]

# Deep-or-World walkthrough: doc1 has "Deep" three times, doc2 has "World"
# three times and "Deep" once.
WALKTHROUGH: dict[str, str] = {
    "doc1.txt": "Deep water runs deep. The Deep trench is dark.",
    "doc2.txt": "The World is wide! World maps show the world, deep and far.",
}

QUERY_PAIRS: list[tuple[str, str]] = [
    ("deep", "world"),
    ("ocean", "planet"),
    ("river", "coral"),
    ("train", "comet"),
    ("moss", "moon"),
    ("Whale", "Galaxy"),
    ("market", "harbor"),
    ("signal", "unknownword"),
]


# ---------------------------------------------------------------------------
# Document generation
# ---------------------------------------------------------------------------

def _sentence(rng: random.Random, vocabulary: list[str]) -> list[str]:
    """Build one sentence of raw tokens from a topic vocabulary."""
    length = rng.randint(*WORDS_PER_SENTENCE)
    tokens: list[str] = []
    for _ in range(length):
        roll = rng.random()
        if roll < 0.35:
            word = rng.choice(NOISE_WORDS)
        elif roll < 0.40:
            word = rng.choice(JUNK_TOKENS)
        else:
            word = rng.choice(vocabulary)
        if rng.random() < 0.15:
            word = word.capitalize()
        tokens.append(word + rng.choice(PUNCTUATION_ENDINGS))
    tokens[0] = tokens[0].capitalize()
    tokens[-1] = tokens[-1].rstrip(".,!?;:") + "."
    return tokens


def generate_document(rng: random.Random) -> str:
    """Generate one document drawing mostly on one topic."""
    main_topic, side_topic = rng.sample(sorted(TOPICS), 2)
    sentences: list[str] = []
    for _ in range(rng.randint(*SENTENCES_PER_DOCUMENT)):
        topic = main_topic if rng.random() < 0.8 else side_topic
        sentences.append(" ".join(_sentence(rng, TOPICS[topic])))

    # Wrap into lines of roughly four sentences
    lines = [" ".join(sentences[i : i + 4]) for i in range(0, len(sentences), 4)]
    return "\n".join(lines) + "\n"


def generate_corpus(seed: int = SEED) -> dict[str, str]:
    """Generate the whole corpus.

    Returns:
        Mapping from document name (relative to the manifest) to its text,
        in manifest order.
    """
    rng = random.Random(seed)
    corpus: dict[str, str] = {
        f"corpus/{name}": text + "\n" for name, text in WALKTHROUGH.items()
    }
    for i in range(1, NUM_DOCUMENTS + 1):
        corpus[f"corpus/doc{i + len(WALKTHROUGH):02d}.txt"] = generate_document(rng)
    return corpus


# ---------------------------------------------------------------------------
# Eval set
# ---------------------------------------------------------------------------

def _count(text: str, keyword: str) -> int:
    """Count whole-word appearances of *keyword* in *text*, ignoring case
    and trailing punctuation."""
    count = 0
    for token in text.split():
        if token.lower().rstrip(".,!?;:") == keyword:
            count += 1
    return count


def build_eval_set(
    corpus: dict[str, str],
    query_pairs: list[tuple[str, str]] = QUERY_PAIRS,
) -> list[dict[str, Any]]:
    """Derive expected results for each query pair straight from the text.

    A document's score for a query is the higher of its two keyword counts;
    the expected documents are the top scorers, earlier documents first on
    ties.

    Returns:
        List of eval query dicts.
    """
    order = list(corpus)
    eval_set: list[dict[str, Any]] = []
    for i, (kw1, kw2) in enumerate(query_pairs, start=1):
        scores = {
            name: max(_count(text, kw1.lower()), _count(text, kw2.lower()))
            for name, text in corpus.items()
        }
        matching = [name for name in order if scores[name] > 0]
        matching.sort(key=lambda name: scores[name], reverse=True)
        eval_set.append(
            {
                "query_id": f"Q-{i:02d}",
                "kw1": kw1,
                "kw2": kw2,
                "category": "no_match" if not matching else "match",
                "expected_doc_ids": matching[:EVAL_TOP_K],
            }
        )
    return eval_set


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    """Write corpus, manifest, noise words and eval set to disk."""
    corpus = generate_corpus()

    CORPUS_DIR.mkdir(parents=True, exist_ok=True)
    for name, text in corpus.items():
        (DATA_DIR / name).write_text(text)

    MANIFEST_PATH.write_text("\n".join(corpus) + "\n")
    NOISE_WORDS_PATH.write_text("\n".join(NOISE_WORDS) + "\n")

    eval_set = build_eval_set(corpus)
    EVAL_OUTPUT_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(EVAL_OUTPUT_PATH, "w") as f:
        json.dump(eval_set, f, indent=2)

    print(f"Wrote {len(corpus)} documents to {CORPUS_DIR}")
    print(f"Wrote manifest to {MANIFEST_PATH}")
    print(f"Wrote {len(NOISE_WORDS)} noise words to {NOISE_WORDS_PATH}")
    print(f"Wrote {len(eval_set)} eval queries to {EVAL_OUTPUT_PATH}")


if __name__ == "__main__":
    main()
