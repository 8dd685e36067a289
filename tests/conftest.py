"""Shared test fixtures and configuration."""

import logging
import os
from pathlib import Path

import pytest

from positional_search.search.index import PositionalIndex
from positional_search.search.index_format import write_index


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch, tmp_path):
    """Keep host environment variables and .env files out of Settings."""
    for key in list(os.environ):
        if key.upper().startswith("POSITIONAL_SEARCH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; drop its handler after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def cat_dog_index() -> PositionalIndex:
    """d1 = "the cat sat", d2 = "the dog sat"."""
    return PositionalIndex.from_mapping(
        {
            "the": {"d1": [0], "d2": [0]},
            "cat": {"d1": [1]},
            "sat": {"d1": [2], "d2": [2]},
            "dog": {"d2": [1]},
        }
    )


@pytest.fixture
def three_doc_index() -> PositionalIndex:
    """Adds d3 = "a bird flew" to the cat/dog collection."""
    return PositionalIndex.from_mapping(
        {
            "the": {"d1": [0], "d2": [0]},
            "cat": {"d1": [1]},
            "sat": {"d1": [2], "d2": [2]},
            "dog": {"d2": [1]},
            "a": {"d3": [0]},
            "bird": {"d3": [1]},
            "flew": {"d3": [2]},
        }
    )


@pytest.fixture
def cat_dog_index_file(tmp_path: Path, cat_dog_index: PositionalIndex) -> Path:
    return write_index(cat_dog_index, tmp_path / "positional_index.txt")
