# src/versefinder/parser.py
"""
Corpus parser.

Turns the raw corpus text into Corpus -> Division -> Document. Parsing is
purely structural and driven by the delimiters in config:

    <index block> STATE_CHANGE
    <old title> STATE_CHANGE <book> STATE_CHANGE <book> ... DIVISION_DELIMITER
    <new title> STATE_CHANGE <book> STATE_CHANGE <book> ...

and every <book> is  <title> TITLE_DELIMITER <content>.

The parser never copies document bodies. It works on (start, end) spans over
the one source string and hands those spans to Document, so the whole corpus
lives in memory exactly once.
"""

from __future__ import annotations
import logging
from typing import Iterator, List, Optional, Tuple

from . import config as CFG
from .errors import (
    DivisionMissingTitle,
    DocumentMissingTitle,
    MissingDivisionDelimiter,
    MissingIndex,
)
from .models import Corpus, Division, Document

log = logging.getLogger(__name__)

Span = Tuple[int, int]


def _split_once(text: str, sep: str, start: int, end: int) -> Optional[Tuple[Span, Span]]:
    """Split text[start:end] on the first sep; None when sep does not occur."""
    i = text.find(sep, start, end)
    if i == -1:
        return None
    return (start, i), (i + len(sep), end)


def _split_all(text: str, sep: str, start: int, end: int) -> Iterator[Span]:
    """Like str.split(sep) over text[start:end], but yielding spans."""
    while True:
        i = text.find(sep, start, end)
        if i == -1:
            yield start, end
            return
        yield start, i
        start = i + len(sep)


def _parse_document(text: str, span: Span) -> Document:
    parts = _split_once(text, CFG.TITLE_DELIMITER, *span)
    if parts is None:
        raise DocumentMissingTitle(f"at offset {span[0]}")
    (t0, t1), (c0, c1) = parts
    title = text[t0:t1].strip()
    if not title:
        raise DocumentMissingTitle(f"at offset {span[0]}")
    return Document(title=title, start=c0, end=c1, source=text)


def _parse_division(text: str, span: Span) -> Division:
    splits = _split_all(text, CFG.STATE_CHANGE, *span)
    # well the first one is the title
    first = next(splits, None)
    title = text[first[0]:first[1]].strip() if first else ""
    if not title:
        raise DivisionMissingTitle(f"at offset {span[0]}")

    documents: List[Document] = [_parse_document(text, s) for s in splits]
    return Division(title=title, documents=tuple(documents))


def parse(text: str) -> Corpus:
    """
    Parse the full corpus text into the Old and New divisions.

    Raises a CorpusFormatError subclass when the text does not have the
    expected layout. Those errors are final: the same text always fails the
    same way.
    """
    halves = _split_once(text, CFG.STATE_CHANGE, 0, len(text))
    if halves is None:
        raise MissingIndex()
    _raw_index, body = halves

    divisions = _split_once(text, CFG.DIVISION_DELIMITER, *body)
    if divisions is None:
        raise MissingDivisionDelimiter()
    old_span, new_span = divisions

    corpus = Corpus(
        old=_parse_division(text, old_span),
        new=_parse_division(text, new_span),
        text=text,
    )
    log.info(
        "Parsed corpus: %r (%d books), %r (%d books)",
        corpus.old.title, len(corpus.old.documents),
        corpus.new.title, len(corpus.new.documents),
    )
    return corpus
