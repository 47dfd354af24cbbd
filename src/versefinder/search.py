from __future__ import annotations
import logging
from typing import Callable, List, Optional, Tuple

from . import config as CFG
from .index import WordIndex
from .models import Excerpt, Placement
from .normalize import filtered_words
from .verses import verse_at

log = logging.getLogger(__name__)


def _query_words(text: str) -> List[str]:
    # /* ~~~ unicode words, lowercased, minus the ignore list ~~~ */
    return filtered_words(text, CFG.IGNORE_LIST)


def ratio(text: str, get_index: Callable[[], WordIndex], threshold: int) -> float:
    """
    Fraction of the (filtered) input words that occur in the corpus.

    Inputs with fewer than `threshold` words are too short to judge and count
    as fully matching, so this returns 1.0 for them whatever they contain.
    The index is only fetched once the input is long enough to be scored.
    """
    words = _query_words(text)
    if len(words) < threshold:
        return 1.0  # technically all of the input words are in the corpus
    if not words:
        return 0.0

    index = get_index()
    found = sum(1 for w in words if w in index)
    return found / len(words)


def matching_words(text: str, index: WordIndex) -> List[str]:
    """Filtered input words present in the index, input order, repeats kept."""
    return [w for w in _query_words(text) if w in index]


def _first_placement(text: str, index: WordIndex) -> Optional[Tuple[str, Placement]]:
    for word in _query_words(text):
        places = index.get(word)
        if places:
            return word, places[0]
    return None


def excerpt_bounds(body: str, anchor: int, radius: int, stop: str) -> Tuple[int, int]:
    """
    Grow a window around body[anchor] one character at a time.

    Each side moves at most `radius` characters and stops as soon as the text
    between it and the anchor contains `stop`. Returns inclusive (lo, hi).
    """
    lo = anchor
    floor = max(0, anchor - radius)
    while lo > floor:
        if stop in body[lo:anchor + 1]:
            break
        lo -= 1

    hi = anchor
    ceiling = min(len(body), anchor + radius)
    while hi < ceiling:
        if stop in body[anchor:hi + 1]:
            break
        hi += 1
    return lo, hi


def locate(text: str, index: WordIndex) -> Optional[Excerpt]:
    """
    Where in the corpus is the first matching word of text?

    Takes the first filtered word that has a placement, then that word's first
    placement, and cuts an excerpt of the owning book around the first literal
    occurrence of the word in its lowercased body. The search is a plain
    substring search, so "sin" may anchor inside "sinai" if that comes first.
    """
    hit = _first_placement(text, index)
    if hit is None:
        return None
    word, place = hit

    body = place.document.content.lower()
    anchor = body.find(word)
    if anchor == -1:
        log.debug("word %r indexed for %r but not found verbatim", word, place.document.title)
        return None

    lo, hi = excerpt_bounds(body, anchor, CFG.EXCERPT_RADIUS, CFG.PARAGRAPH_BREAK)
    return Excerpt(
        division_title=place.division.title,
        document_title=place.document.title,
        excerpt=body[lo:hi + 1],
        verse=verse_at(body, anchor),
    )
