"""
Verse Finder Module

This module answers two questions about an arbitrary piece of text, measured
against the King James Bible bundled with the package:

- what fraction of its words also appear somewhere in the Bible, and
- for the first word that does, which book it appears in and what passage
  surrounds it.

The module is designed with a clean separation of concerns:
- Corpus parsing (testaments, books) over one shared source text
- A word-presence index built once, on first use
- Ratio / membership queries and the excerpt locator
- Configuration management

Main Functions:
    ratio_of_words_present(text, threshold): fraction of words in the Bible
    any_words_present(text, threshold): True if that fraction is above zero
    which_words_present(text): the input words that are in the Bible
    locate(text): testament, book and passage for the first matching word

Example Usage:
    from versefinder import ratio_of_words_present, locate

    ratio_of_words_present("grace and peace", 1)   # -> 1.0

    hit = locate("amazing grace")
    if hit:
        print(f"{hit.document_title}: {hit.excerpt}")
"""

# src/versefinder/__init__.py
from .engine import (  # re-export
    Engine,
    any_words_present,
    default_engine,
    get_corpus,
    get_word_index,
    locate,
    ratio_of_words_present,
    which_words_present,
)
from .errors import CorpusFormatError
from .models import Excerpt

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "CorpusFormatError",
    "Excerpt",
    "any_words_present",
    "default_engine",
    "get_corpus",
    "get_word_index",
    "locate",
    "ratio_of_words_present",
    "which_words_present",
]
