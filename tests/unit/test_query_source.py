"""Unit tests for query sources."""

import io

import pytest

from positional_search.query_source import iter_queries


pytestmark = pytest.mark.unit


def test_yields_each_line_until_end_of_input():
    stream = io.StringIO("cat and dog\r\n\nsat")

    assert list(iter_queries(stream)) == ["cat and dog", "", "sat"]


def test_writes_prompt_before_each_read():
    prompts = io.StringIO()

    queries = list(iter_queries(io.StringIO("cat\n"), prompt="> ", prompt_stream=prompts))

    assert queries == ["cat"]
    assert prompts.getvalue() == "> > "


def test_empty_input_yields_nothing():
    assert list(iter_queries(io.StringIO(""))) == []
