"""Cosine-similarity ranking of candidate documents."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import math
from types import MappingProxyType

from positional_search.search.models import RankedDocument


_EMPTY_VECTOR: Mapping[str, float] = MappingProxyType({})


def vector_length(weights: Mapping[str, float]) -> float:
    """Return the L2 norm of a weight mapping."""

    return math.sqrt(sum(weight * weight for weight in weights.values()))


def cosine_similarity(
    query_vector: Mapping[str, float],
    doc_vector: Mapping[str, float],
    *,
    query_length: float | None = None,
    doc_length: float | None = None,
) -> float:
    """Return the cosine of the angle between two weight vectors.

    The dot product runs over the query's terms only. Precomputed norms may be
    passed in to avoid recomputing them per candidate.
    """

    if query_length is None:
        query_length = vector_length(query_vector)
    if doc_length is None:
        doc_length = vector_length(doc_vector)
    if query_length == 0 or doc_length == 0:
        return 0.0

    dot_product = 0.0
    for term, query_weight in query_vector.items():
        dot_product += query_weight * doc_vector.get(term, 0.0)
    return dot_product / (query_length * doc_length)


def rank_documents(
    candidates: Iterable[str],
    query_vector: Mapping[str, float],
    document_vectors: Mapping[str, Mapping[str, float]],
    *,
    document_lengths: Mapping[str, float] | None = None,
) -> list[RankedDocument]:
    """Score every candidate and sort by similarity, highest first.

    Equal scores are ordered by document id.
    """

    query_length = vector_length(query_vector)
    ranked: list[RankedDocument] = []
    for doc_id in candidates:
        doc_vector = document_vectors.get(doc_id, _EMPTY_VECTOR)
        doc_length = document_lengths.get(doc_id) if document_lengths is not None else None
        score = cosine_similarity(
            query_vector,
            doc_vector,
            query_length=query_length,
            doc_length=doc_length,
        )
        ranked.append(RankedDocument(doc_id=doc_id, score=score))
    ranked.sort(key=lambda doc: (-doc.score, doc.doc_id))
    return ranked
