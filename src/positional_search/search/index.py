"""Immutable positional inverted index."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType


_EMPTY_POSTINGS: Mapping[str, tuple[int, ...]] = MappingProxyType({})


class PositionalIndex:
    """Term -> document -> ascending token positions.

    The index is built once and never mutated afterwards; every accessor is a
    total function that answers with an empty value for unknown keys.
    """

    __slots__ = ("_postings", "_documents")

    def __init__(self, postings: Mapping[str, Mapping[str, tuple[int, ...]]]) -> None:
        self._postings: Mapping[str, Mapping[str, tuple[int, ...]]] = MappingProxyType(
            {term: MappingProxyType(dict(docs)) for term, docs in postings.items() if docs}
        )
        documents: set[str] = set()
        for docs in self._postings.values():
            documents.update(docs)
        self._documents = frozenset(documents)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Mapping[str, Iterable[int]]]) -> PositionalIndex:
        """Build an index from plain nested mappings, copying positions into tuples."""

        return cls(
            {term: {doc_id: tuple(positions) for doc_id, positions in docs.items()} for term, docs in mapping.items()}
        )

    def positions_of(self, term: str, doc_id: str) -> tuple[int, ...]:
        return self._postings.get(term, _EMPTY_POSTINGS).get(doc_id, ())

    def documents_containing(self, term: str) -> frozenset[str]:
        return frozenset(self._postings.get(term, _EMPTY_POSTINGS))

    def postings(self, term: str) -> Mapping[str, tuple[int, ...]]:
        """Return the read-only document -> positions mapping for ``term``."""
        return self._postings.get(term, _EMPTY_POSTINGS)

    @property
    def documents(self) -> frozenset[str]:
        """Every document with at least one indexed term."""
        return self._documents

    @property
    def document_count(self) -> int:
        return len(self._documents)

    @property
    def vocabulary(self) -> frozenset[str]:
        return frozenset(self._postings)

    def items(self) -> Iterator[tuple[str, Mapping[str, tuple[int, ...]]]]:
        return iter(self._postings.items())

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._postings)

    def __repr__(self) -> str:
        return f"PositionalIndex(terms={len(self)}, documents={self.document_count})"
