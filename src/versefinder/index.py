"""
Word index for the verse finder.

The index maps every normalized word of the corpus to the books it occurs in.
Only presence matters: a word that appears a hundred times in Genesis still
contributes a single Placement for Genesis. Placements are kept in corpus
order (Old Testament books first, then New Testament books).
"""

from __future__ import annotations
import logging
import time
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

from . import config as CFG
from .models import Corpus, Placement
from .normalize import word_set

log = logging.getLogger(__name__)


class WordIndex:
    """
    Read-only word -> placements mapping.

    Lookups for unknown words return an empty tuple instead of raising, since
    "not in the corpus" is the common answer, not an error.
    """

    def __init__(self, entries: Mapping[str, Tuple[Placement, ...]]) -> None:
        self._entries: Mapping[str, Tuple[Placement, ...]] = MappingProxyType(dict(entries))

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def get(self, word: str) -> Tuple[Placement, ...]:
        return self._entries.get(word, ())


def build(corpus: Corpus) -> WordIndex:
    """
    Build the word index from a parsed corpus.

    Each document body is lowercased, segmented into Unicode words and reduced
    to a set before any placement is recorded, so within-document frequency is
    discarded on purpose.

    Example:
        >>> idx = build(corpus)
        >>> [p.document.title for p in idx.get("grace")][:1]
        ['The First Book of Moses:  Called Genesis']
    """
    t0 = time.perf_counter()
    idx: Dict[str, List[Placement]] = defaultdict(list)

    for division, document in corpus.iter_documents():
        placement = Placement(division=division, document=document)
        for word in word_set(document.content):
            idx[word].append(placement)
        if CFG.VERBOSE:
            log.info("[indexed] %s: words=%d", document.title, len(idx))

    frozen = WordIndex({w: tuple(ps) for w, ps in idx.items()})
    log.info("Built word index: words=%d in %.2fs", len(frozen), time.perf_counter() - t0)
    return frozen
