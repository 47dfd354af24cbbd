# src/versefinder/models.py
"""
Data models for the verse finder.

These classes carry no parsing or search logic; they only give shape to what
the parser produces and what queries return:

- Corpus: the whole text (the arena) plus its two divisions.
- Division: one testament, its title and its ordered books.
- Document: one book. It does not copy its body out of the corpus text; it
  keeps a (start, end) span and slices the shared source on demand.
- Placement: where a word was seen (division + document), nothing more.
- Verse: one numbered "chapter:verse" paragraph of a document.
- Excerpt: the exact result object returned by locate().
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Document:
    """
    A titled sub-document (a book) inside a Division.

    Attributes
    ----------
    title : str
        Trimmed title line(s), e.g. "The Gospel According to Saint John".
    start, end : int
        Half-open span of the body inside ``source``.
    source : str
        The corpus text this document belongs to. Shared, never copied, and
        excluded from equality and repr.
    """
    title: str
    start: int
    end: int
    source: str = field(default="", repr=False, compare=False)

    @property
    def content(self) -> str:
        """Raw body text, line breaks and blank lines included."""
        return self.source[self.start:self.end]

    def verses(self) -> Iterator["Verse"]:
        from .verses import iter_verses
        return iter_verses(self.content)


@dataclass(frozen=True, slots=True)
class Division:
    title: str
    documents: Tuple[Document, ...]


@dataclass(frozen=True, slots=True)
class Corpus:
    """
    The parsed corpus: exactly two divisions over one owned source text.

    ``text`` is the arena every Document span points into.
    """
    old: Division
    new: Division
    text: str = field(default="", repr=False, compare=False)

    @property
    def divisions(self) -> Tuple[Division, Division]:
        return (self.old, self.new)

    def iter_documents(self) -> Iterator[Tuple[Division, Document]]:
        """Yield (division, document) pairs, old division first, in source order."""
        for division in self.divisions:
            for document in division.documents:
                yield division, document


@dataclass(frozen=True, slots=True)
class Placement:
    """A (division, document) reference for one word. Owns nothing."""
    division: Division
    document: Document


@dataclass(frozen=True, slots=True)
class Verse:
    chapter: int
    verse: int
    content: str


@dataclass(frozen=True, slots=True)  # frozen=True so results can be shared and cached by callers
class Excerpt:
    """
    The result item returned by locate().

    Attributes
    ----------
    division_title : str
        Title of the owning Division (testament).
    document_title : str
        Title of the owning Document (book).
    excerpt : str
        Window of the LOWERCASED document body around the first literal
        occurrence of the matched word. Case is not restored.
    verse : Optional[Tuple[int, int]]
        (chapter, verse) of the numbered paragraph the match falls in, when
        the body carries references.
    """
    division_title: str
    document_title: str
    excerpt: str
    verse: Optional[Tuple[int, int]] = None
