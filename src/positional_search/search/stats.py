"""Statistical helpers for TF-IDF scoring.

The functions here stay independent of how the index was loaded so they can
be unit tested against small hand-built indexes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import math

from positional_search.search.index import PositionalIndex


@dataclass(frozen=True)
class Term:
    """Collection statistics for one indexed term."""

    name: str
    idf: float
    postings: Mapping[str, tuple[int, ...]]

    @property
    def document_frequency(self) -> int:
        return len(self.postings)

    def frequency_in(self, doc_id: str) -> int:
        return len(self.postings.get(doc_id, ()))


def tf_weight(raw_frequency: int) -> float:
    """Return the logarithmically dampened term frequency."""

    if raw_frequency < 1:
        return 0.0
    return 1.0 + math.log10(raw_frequency)


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return ``log10(N / df)``, or zero when either count is not positive."""

    if doc_freq <= 0 or total_docs <= 0:
        return 0.0
    return math.log10(total_docs / doc_freq)


def compute_term_statistics(index: PositionalIndex) -> dict[str, Term]:
    """Return a :class:`Term` for every term stored in ``index``."""

    total_docs = index.document_count
    terms: dict[str, Term] = {}
    for name, postings in index.items():
        terms[name] = Term(
            name=name,
            idf=calculate_idf(len(postings), total_docs),
            postings=postings,
        )
    return terms
