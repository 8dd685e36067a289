"""Unit tests for the immutable positional index."""

import pytest

from positional_search.search.index import PositionalIndex


@pytest.mark.unit
class TestPositionalIndex:
    def test_positions_of(self, cat_dog_index):
        assert cat_dog_index.positions_of("sat", "d2") == (2,)

    def test_lookups_are_total(self, cat_dog_index):
        assert cat_dog_index.positions_of("zebra", "d1") == ()
        assert cat_dog_index.positions_of("cat", "d2") == ()
        assert cat_dog_index.documents_containing("zebra") == frozenset()
        assert cat_dog_index.postings("zebra") == {}

    def test_documents_containing(self, cat_dog_index):
        assert cat_dog_index.documents_containing("the") == {"d1", "d2"}
        assert cat_dog_index.documents_containing("dog") == {"d2"}

    def test_universe_and_counts(self, three_doc_index):
        assert three_doc_index.documents == {"d1", "d2", "d3"}
        assert three_doc_index.document_count == 3
        assert len(three_doc_index) == 7
        assert "bird" in three_doc_index
        assert "zebra" not in three_doc_index

    def test_terms_without_documents_are_dropped(self):
        index = PositionalIndex.from_mapping({"ghost": {}, "real": {"d1": [0]}})
        assert index.vocabulary == {"real"}

    def test_index_cannot_be_mutated(self, cat_dog_index):
        with pytest.raises(TypeError):
            cat_dog_index.postings("cat")["d2"] = (5,)  # type: ignore[index]
        assert cat_dog_index.positions_of("cat", "d2") == ()

    def test_source_mapping_changes_do_not_leak(self):
        source = {"cat": {"d1": [1]}}
        index = PositionalIndex.from_mapping(source)
        source["cat"]["d1"].append(9)
        source["cat"]["d2"] = [0]

        assert index.positions_of("cat", "d1") == (1,)
        assert index.documents == {"d1"}

    def test_empty_index(self):
        index = PositionalIndex({})
        assert index.document_count == 0
        assert len(index) == 0
