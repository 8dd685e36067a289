"""Unit tests for exact phrase matching over positions."""

import pytest

from positional_search.search.index import PositionalIndex
from positional_search.search.phrase import UNANCHORED, documents_for_phrase, match_bigram, match_phrase


def _index(**terms: list[int]) -> PositionalIndex:
    return PositionalIndex.from_mapping({term: {"D": positions} for term, positions in terms.items()})


@pytest.mark.unit
class TestMatchBigram:
    """match_bigram finds the second term directly after the first."""

    def test_returns_position_of_second_term(self):
        index = _index(x=[2, 5], y=[3, 6])
        assert match_bigram(index, "D", "x", "y", 0) == 3

    def test_continues_from_anchor(self):
        index = _index(x=[2, 5], y=[3, 6], z=[4])
        assert match_bigram(index, "D", "y", "z", 3) == 4

    def test_pair_elsewhere_does_not_continue_anchor(self):
        # "y z" occurs at 6-7 but the phrase so far ended at 3
        index = _index(x=[2, 5], y=[3, 6], z=[7])
        assert match_bigram(index, "D", "y", "z", 3) is None
        assert match_bigram(index, "D", "y", "z", UNANCHORED) == 7

    def test_scan_moves_on_to_later_first_positions(self):
        index = _index(x=[1, 10], y=[5, 11])
        assert match_bigram(index, "D", "x", "y") == 11

    def test_missing_term_or_document_is_not_found(self):
        index = _index(x=[0], y=[1])
        assert match_bigram(index, "D", "x", "missing") is None
        assert match_bigram(index, "missing-doc", "x", "y") is None

    def test_reversed_order_is_not_a_match(self):
        index = _index(x=[4], y=[3])
        assert match_bigram(index, "D", "x", "y") is None

    def test_zero_anchor_is_unconstrained(self):
        # An explicit anchor of 0 behaves like the first pair of a phrase,
        # even though the first term does not sit at position 0.
        index = _index(a=[3], b=[4])
        assert match_bigram(index, "D", "a", "b", 0) == 4

    def test_pair_starting_at_position_zero(self):
        index = _index(a=[0], b=[1])
        assert match_bigram(index, "D", "a", "b", 0) == 1
        assert match_bigram(index, "D", "a", "b", 5) is None


@pytest.mark.unit
class TestMatchPhrase:
    """match_phrase chains bigram checks through their positions."""

    def test_contiguous_three_word_phrase(self):
        index = _index(x=[2, 5], y=[3, 6], z=[4])
        assert match_phrase(index, "D", ["x", "y", "z"]) is True

    def test_broken_continuity_fails(self):
        index = _index(x=[2, 5], y=[3, 6], z=[7])
        assert match_phrase(index, "D", ["x", "y", "z"]) is False

    def test_phrase_at_document_start(self):
        index = _index(the=[0], cat=[1], sat=[2])
        assert match_phrase(index, "D", ["the", "cat", "sat"]) is True

    def test_first_accepted_pair_is_not_revisited(self):
        # "a b" is accepted at 0-1; the later 5-6 pair that "c" would extend is never tried
        index = _index(a=[0, 5], b=[1, 6], c=[7])
        assert match_phrase(index, "D", ["a", "b", "c"]) is False
        assert match_phrase(index, "D", ["b", "c"]) is True


@pytest.mark.unit
class TestDocumentsForPhrase:
    """documents_for_phrase resolves atomic query operands."""

    def test_single_word_uses_index_directly(self, cat_dog_index):
        assert documents_for_phrase(cat_dog_index, "sat") == {"d1", "d2"}

    def test_multi_word_phrase(self, cat_dog_index):
        assert documents_for_phrase(cat_dog_index, "the cat") == {"d1"}
        assert documents_for_phrase(cat_dog_index, "the cat sat") == {"d1"}

    def test_words_out_of_order_do_not_match(self, cat_dog_index):
        assert documents_for_phrase(cat_dog_index, "cat the") == set()

    def test_unknown_and_empty_phrases(self, cat_dog_index):
        assert documents_for_phrase(cat_dog_index, "zebra") == set()
        assert documents_for_phrase(cat_dog_index, "the zebra") == set()
        assert documents_for_phrase(cat_dog_index, "   ") == set()
