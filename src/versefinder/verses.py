from __future__ import annotations
from typing import Iterator, Optional, Tuple

from . import config as CFG
from .models import Verse


def verse_number(raw: str) -> Optional[Tuple[int, int]]:
    """
    Read a leading "chapter:verse " reference.

    >>> verse_number("3:16 For God so loved the world")
    (3, 16)
    >>> verse_number("And it came to pass") is None
    True
    """
    idx = raw.find(" ")
    if idx == -1:
        return None
    chapter, sep, verse = raw[:idx].partition(":")
    chapter, verse = chapter.strip(), verse.strip()
    if not sep or not chapter.isdecimal() or not verse.isdecimal():
        return None
    return int(chapter), int(verse)


def iter_verses(content: str) -> Iterator[Verse]:
    """Numbered paragraphs of a document body; wrapped lines are joined with spaces."""
    for para in content.split(CFG.PARAGRAPH_BREAK):
        para = para.strip()
        ref = verse_number(para)
        if ref is None:
            continue
        body = " ".join(line.strip() for line in para[para.index(" ") + 1:].splitlines())
        yield Verse(chapter=ref[0], verse=ref[1], content=body.strip())


def verse_at(content: str, index: int) -> Optional[Tuple[int, int]]:
    """Reference of the last numbered paragraph starting at or before index."""
    sep = CFG.PARAGRAPH_BREAK
    pos = index
    while True:
        brk = content.rfind(sep, 0, pos)
        start = 0 if brk == -1 else brk + len(sep)
        ref = verse_number(content[start:start + 32].lstrip())
        if ref is not None:
            return ref
        if brk == -1:
            return None
        pos = brk
