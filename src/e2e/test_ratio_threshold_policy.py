import pytest
from versefinder import Engine


@pytest.fixture
def eng(sample_text):
    return Engine(text=sample_text)


def test_inputs_shorter_than_threshold_always_match(eng):
    assert eng.ratio_of_words_present("xyzxyz qwerty", 3) == 1.0
    assert eng.ratio_of_words_present("", 1) == 1.0
    # ignore-list words do not count towards the threshold
    assert eng.ratio_of_words_present("the and of xyzxyz", 2) == 1.0


def test_ratio_is_found_over_total(eng):
    assert eng.ratio_of_words_present("grace xyzxyz qqq Noah", 1) == 0.5
    assert eng.ratio_of_words_present("grace xyzxyz qqq Noah", 4) == 0.5
    assert eng.ratio_of_words_present("grace xyzxyz qqq Noah", 5) == 1.0
    assert eng.ratio_of_words_present("grace Noah Moses", 1) == 1.0
    assert eng.ratio_of_words_present("xyzxyz", 1) == 0.0


def test_repeats_count_every_time(eng):
    assert eng.ratio_of_words_present("grace grace grace xyzxyz", 1) == 0.75


def test_nothing_to_score_with_zero_threshold(eng):
    assert eng.ratio_of_words_present("the and of", 0) == 0.0
    assert eng.ratio_of_words_present("___", 0) == 0.0


def test_underscores_alone_are_below_any_threshold(eng):
    assert eng.ratio_of_words_present("___", 1) == 1.0
    assert eng.ratio_of_words_present("___ xyzxyz", 1) == 0.0


def test_any_words_present_is_ratio_above_zero(eng):
    assert eng.any_words_present("grace", 1) is True
    assert eng.any_words_present("xyzxyz", 1) is False
    assert eng.any_words_present("xyzxyz", 2) is True  # too short to judge


def test_every_indexed_word_scores_one(eng):
    for word in eng.index:
        assert eng.ratio_of_words_present(word, 1) == 1.0, word
