from __future__ import annotations
import logging
from importlib import resources

from . import config as CFG

log = logging.getLogger(__name__)


def read_corpus_text(path: str | None = None) -> str:
    """
    Return the raw corpus text with its line endings untouched.

    path=None reads the copy bundled with the package. The structural
    delimiters are CRLF based, so the text is never run through universal
    newline translation.
    """
    if path:
        log.info("Loading corpus from %s", path)
        with open(path, "r", encoding=CFG.ENCODING, newline="") as f:
            return f.read()

    log.info("Loading bundled corpus %s", CFG.CORPUS_RESOURCE)
    raw = resources.files(__package__).joinpath(CFG.CORPUS_RESOURCE).read_bytes()
    return raw.decode(CFG.ENCODING)
