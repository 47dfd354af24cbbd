import pytest

CRLF = "\r\n"
STATE_CHANGE = CRLF * 5
TITLE = CRLF * 3

OLD_BOOKS = [
    ("Genesis",
     "1:1 In the beginning God created the heaven and the earth.\r\n\r\n"
     "6:8 But Noah found grace in the eyes of the LORD.\r\n\r\n"
     "6:9 Noah walked with God, and Noah was a just man."),
    ("Exodus",
     "3:14 And God said unto Moses, I AM THAT I AM.\r\n\r\n"
     "19:20 And the LORD came down upon mount Sinai."),
]
NEW_BOOKS = [
    ("John",
     "1:17 For the law was given by Moses, but grace and truth came by Jesus Christ."),
    ("Romans",
     "1:1 Paul, a servant of Jesus Christ, writing to sinners;\r\n"
     "for the wages of sin is death."),
]


def build_corpus_text(old_books, new_books, *, old_title="The Old Testament",
                      new_title="The New Testament") -> str:
    """Lay books out the way the bundled corpus is laid out (CRLF everywhere)."""
    def division(title, books):
        return STATE_CHANGE.join([title] + [f"{name}{TITLE}{body}" for name, body in books])
    return (
        "The Bible" + CRLF + "Index of books" + STATE_CHANGE
        + division(old_title, old_books) + CRLF * 2
        + "***" + CRLF + CRLF * 4
        + division(new_title, new_books) + CRLF
    )


@pytest.fixture
def make_corpus_text():
    return build_corpus_text


@pytest.fixture
def sample_text() -> str:
    return build_corpus_text(OLD_BOOKS, NEW_BOOKS)
