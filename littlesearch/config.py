"""Configuration module. Loads environment variables and defines constants."""

import logging
import os

from dotenv import load_dotenv
from rich.logging import RichHandler

load_dotenv()

# Input files
DOCS_FILE = os.environ.get("LITTLESEARCH_DOCS_FILE", "data/docs.txt")
NOISE_WORDS_FILE = os.environ.get("LITTLESEARCH_NOISE_WORDS_FILE", "data/noisewords.txt")

# Logging
LOG_LEVEL = os.environ.get("LITTLESEARCH_LOG_LEVEL", "WARNING")

# Keyword extraction
PUNCTUATION = ".,?:;!"

# Search defaults
DEFAULT_TOP_K = 5


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Route library log records through a rich handler.

    Only script entry points call this; library modules just log.

    Args:
        level: Logging level name, e.g. ``"DEBUG"``.  Unknown names fall
            back to ``WARNING``.
    """
    name = level.upper()
    known = isinstance(logging.getLevelName(name), int)
    logging.basicConfig(
        level=name if known else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )
    if not known:
        logging.getLogger(__name__).warning(
            "Unknown log level %r; using WARNING", level
        )
