"""Unit tests for boolean query parsing and evaluation."""

import pytest

from positional_search.search.query_parser import (
    OperatorNode,
    PhraseNode,
    evaluate,
    find_operator,
    is_bare_operator,
    parse_query,
    query_terms,
    split_query,
)
from positional_search.search.set_algebra import Operator


@pytest.mark.unit
class TestFindOperator:
    def test_multi_word_operator_wins_over_its_prefix(self):
        assert find_operator("cat or not dog") is Operator.OR_NOT
        assert find_operator("cat and not dog") is Operator.AND_NOT

    def test_priority_beats_textual_order(self):
        # "or" appears first in the text but "and" is checked first
        assert find_operator("cat or dog and sat") is Operator.AND

    def test_operator_needs_surrounding_spaces(self):
        assert find_operator("and dog") is None
        assert find_operator("candy orange") is None
        assert find_operator("cat and notable") is Operator.AND


@pytest.mark.unit
class TestParseQuery:
    def test_atomic_phrase(self):
        assert parse_query("  the cat ") == PhraseNode("the cat")

    def test_single_operator(self):
        assert parse_query("cat but not dog") == OperatorNode(Operator.BUT_NOT, PhraseNode("cat"), PhraseNode("dog"))

    def test_split_uses_first_occurrence(self):
        assert split_query("a or b or c", Operator.OR) == ("a", "b or c")
        assert parse_query("a or b or c") == OperatorNode(
            Operator.OR,
            PhraseNode("a"),
            OperatorNode(Operator.OR, PhraseNode("b"), PhraseNode("c")),
        )

    def test_mixed_operators_split_on_highest_priority(self):
        assert parse_query("cat or dog and sat") == OperatorNode(
            Operator.AND,
            OperatorNode(Operator.OR, PhraseNode("cat"), PhraseNode("dog")),
            PhraseNode("sat"),
        )

    def test_split_query_rejects_missing_operator(self):
        with pytest.raises(ValueError):
            split_query("cat dog", Operator.AND)


@pytest.mark.unit
class TestEvaluate:
    def test_phrase_operands(self, cat_dog_index):
        assert evaluate(parse_query("the cat or the dog"), cat_dog_index) == {"d1", "d2"}

    def test_grouping_follows_split_order(self, cat_dog_index):
        # cat AND (dog OR sat), not (cat AND dog) OR sat
        assert evaluate(parse_query("cat and dog or sat"), cat_dog_index) == {"d1"}
        assert evaluate(parse_query("cat or dog and sat"), cat_dog_index) == {"d1", "d2"}

    def test_or_not_uses_collection_universe(self, three_doc_index):
        assert evaluate(parse_query("cat or not dog"), three_doc_index) == {"d1", "d3"}

    def test_unknown_terms_evaluate_to_empty_sets(self, cat_dog_index):
        assert evaluate(parse_query("zebra or cat"), cat_dog_index) == {"d1"}
        assert evaluate(parse_query("zebra and cat"), cat_dog_index) == set()


@pytest.mark.unit
class TestQueryHelpers:
    @pytest.mark.parametrize("query", ["and", "or", "and not", "but not", "or not", "  and  "])
    def test_bare_operators(self, query):
        assert is_bare_operator(query) is True

    @pytest.mark.parametrize("query", ["cat", "cat and", "and cat", ""])
    def test_not_bare_operators(self, query):
        assert is_bare_operator(query) is False

    def test_query_terms_keep_operator_words(self):
        assert query_terms("Cat  AND dog") == ["cat", "and", "dog"]
