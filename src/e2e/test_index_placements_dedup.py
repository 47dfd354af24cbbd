import pytest
from versefinder import index as word_index
from versefinder.parser import parse


def _titles(idx, word):
    return [p.document.title for p in idx.get(word)]


def test_one_placement_per_document_in_corpus_order(sample_text):
    idx = word_index.build(parse(sample_text))
    # "noah" occurs three times in Genesis, once placement
    assert _titles(idx, "noah") == ["Genesis"]
    assert _titles(idx, "grace") == ["Genesis", "John"]
    assert _titles(idx, "moses") == ["Exodus", "John"]
    assert [p.division.title for p in idx.get("moses")] == ["The Old Testament", "The New Testament"]


def test_unknown_words_have_no_placements(sample_text):
    idx = word_index.build(parse(sample_text))
    assert "xyzxyz" not in idx
    assert idx.get("xyzxyz") == ()


def test_index_keys_are_normalized_tokens(sample_text):
    idx = word_index.build(parse(sample_text))
    assert "lord" in idx and "LORD" not in idx
    assert "sin" in idx and "sinners" in idx and "sinai" in idx
    # chapter:verse references are tokenized too
    assert "6" in idx and "8" in idx


def test_index_is_read_only(sample_text):
    idx = word_index.build(parse(sample_text))
    assert isinstance(idx.get("grace"), tuple)
    with pytest.raises(TypeError):
        idx._entries["grace"] = ()
