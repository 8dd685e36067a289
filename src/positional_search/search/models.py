"""Search data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class IndexRecord:
    """A single term occurrence emitted while mapping a document."""

    term: str
    doc_id: str
    position: int


@dataclass(frozen=True)
class RankedDocument:
    """Represents a scored document produced by the ranker."""

    doc_id: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"doc_id": self.doc_id, "score": self.score}


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one query.

    ``rejected`` is set when the query was a bare operator keyword and was
    never evaluated.
    """

    query: str
    documents: tuple[RankedDocument, ...] = field(default_factory=tuple)
    rejected: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.documents

    @property
    def doc_ids(self) -> list[str]:
        return [doc.doc_id for doc in self.documents]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "query": self.query,
            "rejected": self.rejected,
            "documents": [doc.to_dict() for doc in self.documents],
        }
