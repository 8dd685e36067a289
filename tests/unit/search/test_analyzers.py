"""Unit tests for the whitespace analyzer."""

from positional_search.search.analyzers import (
    AnalyzerPipeline,
    LowercaseFilter,
    StandardAnalyzer,
    WhitespaceTokenizer,
    analyze,
)


def test_whitespace_tokenizer_tracks_offsets() -> None:
    tokens = list(WhitespaceTokenizer()("  Hello,  World!\tok"))

    assert [token.text for token in tokens] == ["Hello,", "World!", "ok"]
    assert [token.position for token in tokens] == [0, 1, 2]
    assert (tokens[1].start_char, tokens[1].end_char) == (10, 16)


def test_lowercase_filter_keeps_positions() -> None:
    pipeline = AnalyzerPipeline(WhitespaceTokenizer(), [LowercaseFilter()])

    tokens = pipeline("The CAT")

    assert [(token.text, token.position) for token in tokens] == [("the", 0), ("cat", 1)]


def test_standard_analyzer_does_not_stem_or_drop_stopwords() -> None:
    assert [token.text for token in StandardAnalyzer()("The dogs and cats")] == ["the", "dogs", "and", "cats"]


def test_analyze_empty_text() -> None:
    assert analyze("   \n") == []
