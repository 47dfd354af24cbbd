"""
Structural errors raised while parsing the corpus.

The corpus is a fixed asset shipped with the package, so any of these means the
asset itself is malformed. They are raised once, at initialization, and are
never retried. Lookups that find nothing are not errors and never raise.
"""
from __future__ import annotations


class CorpusFormatError(ValueError):
    """Base class for every structural corpus problem."""
    message = "the corpus is in an unexpected format!"

    def __init__(self, detail: str | None = None) -> None:
        text = self.message if detail is None else f"{self.message} ({detail})"
        super().__init__(text)


class MissingIndex(CorpusFormatError):
    message = "the bible is in an unexpected format! it appears to be missing the index!"


class MissingDivisionDelimiter(CorpusFormatError):
    message = "the bible is in an unexpected format! cannot locate the testament delimiter!"


class DivisionMissingTitle(CorpusFormatError):
    message = "testament missing title!"


class DocumentMissingTitle(CorpusFormatError):
    message = "book missing title!"
