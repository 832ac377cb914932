import pytest

from algobox.strings import has_two_substrings, simplify_string

INPUTS = ["aab", "caaab", "zscoder", "zz", "zzz", "aaaaaa", "abba", "x", "", "qqwwee"]


@pytest.mark.parametrize("text", INPUTS)
def test_simplified_has_no_equal_neighbours(text):
    result = simplify_string(text)
    assert all(a != b for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("text", INPUTS)
def test_simplified_keeps_length_and_first_letter(text):
    result = simplify_string(text)
    assert len(result) == len(text)
    assert result[:1] == text[:1]


@pytest.mark.parametrize("text", ["abc", "zscoder", "abab", "q"])
def test_already_simple_text_is_unchanged(text):
    assert simplify_string(text) == text


@pytest.mark.parametrize("text", INPUTS)
def test_only_repeated_positions_change(text):
    result = simplify_string(text)
    for i, (before, after) in enumerate(zip(text, result)):
        if before != after:
            assert i > 0 and text[i - 1] == before


def test_z_wraps_to_a():
    assert simplify_string("zz") == "za"


def test_simplify_is_idempotent():
    for text in INPUTS:
        once = simplify_string(text)
        assert simplify_string(once) == once


def test_overlapping_pair_is_not_enough():
    assert has_two_substrings("ABA") is False


def test_separate_pairs_are_found():
    assert has_two_substrings("BACFAB") is True


def test_no_adjacent_pair():
    assert has_two_substrings("AXBYBXA") is False


@pytest.mark.parametrize("text", ["", "A", "B", "AAAA", "BBBB", "xyz", "AB", "BA"])
def test_short_or_single_pair_texts_fail(text):
    assert has_two_substrings(text) is False


@pytest.mark.parametrize("gap", ["", "x", "AAA", "CC"])
def test_ab_and_ba_in_either_order(gap):
    assert has_two_substrings("AB" + gap + "BA") is True
    assert has_two_substrings("BA" + gap + "AB") is True


def test_two_overlapping_triples_suffice():
    assert has_two_substrings("ABA" + "BAB") is True