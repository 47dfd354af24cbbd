# src/versefinder/engine.py
from __future__ import annotations

import logging
import time
from typing import List, Optional

from . import config as CFG
from . import index as word_index
from . import search
from .index import WordIndex
from .lazy import Lazy
from .loader import read_corpus_text
from .models import Corpus, Excerpt
from .parser import parse

log = logging.getLogger(__name__)


class Engine:
    """
    Owns one corpus and everything derived from it.

      * source text  -> read on first use (bundled copy, a path, or given text)
      * Corpus       -> parsed once, on the first query
      * WordIndex    -> built once from the Corpus, on the first query needing it

    All three are Lazy, so concurrent first callers share a single build and
    nothing is rebuilt for the lifetime of the Engine. Structural corpus
    errors surface from the first query and keep surfacing on every later
    one; they are never swallowed.
    """

    def __init__(self, *, text: Optional[str] = None, path: Optional[str] = None) -> None:
        self._text = Lazy(lambda: text if text is not None else read_corpus_text(path or CFG.CORPUS_PATH))
        self._corpus: Lazy[Corpus] = Lazy(self._load_corpus)
        self._index: Lazy[WordIndex] = Lazy(self._build_index)

    # ------------- lifecycle -------------

    def _load_corpus(self) -> Corpus:
        t0 = time.perf_counter()
        corpus = parse(self._text.get())
        log.info("Corpus ready in %.2fs", time.perf_counter() - t0)
        return corpus

    def _build_index(self) -> WordIndex:
        return word_index.build(self.corpus)

    @property
    def corpus(self) -> Corpus:
        return self._corpus.get()

    @property
    def index(self) -> WordIndex:
        return self._index.get()

    @property
    def builds(self) -> dict:
        """How many times the corpus and the index were built (0 or 1 each)."""
        return {"corpus": self._corpus.builds, "index": self._index.builds}

    def warm(self) -> "Engine":
        """Build eagerly, e.g. at server start, so a bad corpus fails fast."""
        self._index.get()
        return self

    # ------------- query -------------

    def ratio_of_words_present(self, text: str, threshold: int = CFG.DEFAULT_THRESHOLD) -> float:
        return search.ratio(text, self._index.get, threshold)

    def any_words_present(self, text: str, threshold: int = CFG.DEFAULT_THRESHOLD) -> bool:
        return self.ratio_of_words_present(text, threshold) > 0.0

    def which_words_present(self, text: str) -> List[str]:
        return search.matching_words(text, self.index)

    def locate(self, text: str) -> Optional[Excerpt]:
        return search.locate(text, self.index)

    def stats(self) -> dict:
        corpus = self.corpus
        return {
            "divisions": [
                {"title": d.title, "documents": len(d.documents)} for d in corpus.divisions
            ],
            "words": len(self.index),
        }


# ------------- process-wide default (bundled corpus) -------------

_default = Lazy(Engine)


def default_engine() -> Engine:
    return _default.get()


def get_corpus() -> Corpus:
    return default_engine().corpus


def get_word_index() -> WordIndex:
    return default_engine().index


def ratio_of_words_present(text: str, threshold: int) -> float:
    """Fraction of the input's words (ignore list removed) found in the corpus."""
    return default_engine().ratio_of_words_present(text, threshold)


def any_words_present(text: str, threshold: int) -> bool:
    return default_engine().any_words_present(text, threshold)


def which_words_present(text: str) -> List[str]:
    return default_engine().which_words_present(text)


def locate(text: str) -> Optional[Excerpt]:
    """Division, book and excerpt around the first corpus word of text, or None."""
    return default_engine().locate(text)
