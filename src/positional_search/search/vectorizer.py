"""TF-IDF vectors for documents and queries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from positional_search.search.index import PositionalIndex
from positional_search.search.stats import Term, tf_weight


WeightVector = Mapping[str, float]


def document_weight(term: Term, doc_id: str) -> float:
    return tf_weight(term.frequency_in(doc_id)) * term.idf


def build_document_vectors(index: PositionalIndex, terms: Mapping[str, Term]) -> Mapping[str, WeightVector]:
    """Return one read-only weight vector per document in the collection.

    Each vector has one entry per term occurring in that document.
    """

    vectors: dict[str, dict[str, float]] = {doc_id: {} for doc_id in index.documents}
    for term in terms.values():
        for doc_id in term.postings:
            vectors[doc_id].setdefault(term.name, document_weight(term, doc_id))
    return MappingProxyType({doc_id: MappingProxyType(weights) for doc_id, weights in vectors.items()})


def build_query_vector(tokens: Sequence[str], terms: Mapping[str, Term]) -> dict[str, float]:
    """Weight each distinct query token by its frequency in the query.

    Tokens that are not in the collection get a zero IDF and so a zero weight.
    """

    counts = Counter(tokens)
    vector: dict[str, float] = {}
    for token, count in counts.items():
        term = terms.get(token)
        idf = term.idf if term is not None else 0.0
        vector[token] = tf_weight(count) * idf
    return vector
