import threading
import time

import pytest

from versefinder import Engine
from versefinder.errors import MissingIndex
from versefinder.lazy import Lazy


def test_lazy_runs_factory_once_under_concurrency():
    calls = []

    def slow():
        calls.append(1)
        time.sleep(0.05)
        return object()

    lazy = Lazy(slow)
    barrier = threading.Barrier(16)
    seen = []

    def worker():
        barrier.wait()
        seen.append(lazy.get())

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert lazy.builds == 1
    assert all(v is seen[0] for v in seen)


def test_failed_build_is_remembered_and_not_retried():
    calls = []

    def boom():
        calls.append(1)
        raise MissingIndex()

    lazy = Lazy(boom)
    with pytest.raises(MissingIndex) as first:
        lazy.get()
    with pytest.raises(MissingIndex) as again:
        lazy.get()
    assert again.value is first.value
    assert len(calls) == 1
    assert lazy.builds == 0 and not lazy.ready and lazy.failed


@pytest.mark.e2e
def test_engine_builds_corpus_and_index_once(sample_text):
    eng = Engine(text=sample_text)
    assert eng.builds == {"corpus": 0, "index": 0}

    barrier = threading.Barrier(8)
    indexes = []

    def worker():
        barrier.wait()
        eng.ratio_of_words_present("grace", 1)
        indexes.append(eng.index)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert eng.builds == {"corpus": 1, "index": 1}
    assert all(i is indexes[0] for i in indexes)
    assert eng.corpus is eng.corpus


def test_malformed_corpus_fails_every_query():
    eng = Engine(text="not a bible")
    with pytest.raises(MissingIndex) as first:
        eng.ratio_of_words_present("grace", 1)
    with pytest.raises(MissingIndex) as again:
        eng.locate("grace")
    assert again.value is first.value
    assert eng.builds == {"corpus": 0, "index": 0}


def test_short_inputs_do_not_build_the_index():
    eng = Engine(text="not a bible")
    assert eng.ratio_of_words_present("grace", 2) == 1.0
    assert eng.any_words_present("", 1) is True
    assert eng.builds == {"corpus": 0, "index": 0}
    with pytest.raises(MissingIndex):
        eng.which_words_present("grace")
