from __future__ import annotations
import os

# bundled corpus (Project Gutenberg King James layout, CRLF line endings)
CORPUS_RESOURCE = "data/bible.txt"
ENCODING = "utf-8"

# VERSEFINDER_CORPUS=/path/to/bible.txt points the engine at another copy
CORPUS_PATH: str | None = os.environ.get("VERSEFINDER_CORPUS") or None

# Progress logging (set VERSEFINDER_VERBOSE=1 to enable)
VERBOSE = os.environ.get("VERSEFINDER_VERBOSE") == "1"

# /* ~~~ structural delimiters of the corpus text ~~~ */
# a state change ends the leading index, the division title and every document
STATE_CHANGE = "\r\n" * 5
# between the two divisions (Old Testament / New Testament)
DIVISION_DELIMITER = "***\r\n"
# between a document title and its content
TITLE_DELIMITER = "\r\n" * 3
# blank line between verses; excerpts never cross one
PARAGRAPH_BREAK = "\r\n" * 2

# /* ~~~ query tuning ~~~ */
EXCERPT_RADIUS: int = 80 * 5     # characters each way from the match
DEFAULT_THRESHOLD: int = 1

IGNORE_LIST = frozenset({
    "the", "be", "to", "of", "and", "a", "in", "that", "have",
    "i", "it", "for", "not", "on", "with", "as", "at",
})
