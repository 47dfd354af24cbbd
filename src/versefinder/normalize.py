from __future__ import annotations
import re
from typing import Iterable, Iterator, List

# A word char is \w plus combining diacritics, so decomposed accents stay attached.
_CH = r"[\w\N{COMBINING GRAVE ACCENT}-\N{COMBINING LATIN SMALL LETTER X}]"
_LETTER = r"[^\W\d_]"
_MID_LETTER = r"[:.'\N{RIGHT SINGLE QUOTATION MARK}\N{MIDDLE DOT}]"
_MID_NUM = r"[,.;'\N{RIGHT SINGLE QUOTATION MARK}]"

# Unicode word segmentation (UAX #29), restricted to what matters for prose:
#   letter _MID_LETTER letter -> one word  ("lord's", "e.g")
#   digit  _MID_NUM digit     -> one word  ("3.14", "1,000")
# a colon between digits splits, so "3:16" is two words.
_WORD_RE = re.compile(
    _CH + "+(?:"
    + "(?<=" + _LETTER + ")" + _MID_LETTER + "(?=" + _LETTER + ")" + _CH + "+"
    + r"|(?<=\d)" + _MID_NUM + r"(?=\d)" + _CH + "+"
    + ")*"
)
# a word needs at least one letter or digit; runs of "_" or bare marks are not words
_ALNUM = re.compile(r"[^\W_]")


def words(text: str) -> Iterator[str]:
    """Yield the lowercased Unicode words of text, in order, repeats kept."""
    for m in _WORD_RE.finditer(text):
        w = m.group()
        if _ALNUM.search(w):
            yield w.lower()


def filtered_words(text: str, ignore: Iterable[str]) -> List[str]:
    """Words of text with every member of ignore removed."""
    skip = ignore if isinstance(ignore, (set, frozenset)) else set(ignore)
    return [w for w in words(text) if w not in skip]


def word_set(text: str) -> set[str]:
    """Distinct words of the lowercased text."""
    return set(words(text.lower()))
