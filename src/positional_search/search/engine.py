"""Query engine: boolean evaluation followed by TF-IDF cosine ranking."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path
from types import MappingProxyType

from positional_search.observability.metrics import (
    INDEX_DOC_COUNT,
    INDEX_TERM_COUNT,
    QUERY_COUNT,
    QUERY_LATENCY,
    track_latency,
)
from positional_search.observability.tracing import create_span
from positional_search.search.index import PositionalIndex
from positional_search.search.index_format import load_index
from positional_search.search.models import SearchResult
from positional_search.search.query_parser import evaluate, is_bare_operator, parse_query, query_terms
from positional_search.search.ranker import rank_documents, vector_length
from positional_search.search.stats import Term, compute_term_statistics
from positional_search.search.vectorizer import WeightVector, build_document_vectors, build_query_vector


logger = logging.getLogger(__name__)


class QueryEngine:
    """Answer boolean phrase queries against one immutable positional index.

    Term statistics and document vectors are computed once here and shared
    read-only by every query, so a single engine may serve concurrent callers.
    """

    def __init__(self, index: PositionalIndex) -> None:
        self.index = index
        self.terms: Mapping[str, Term] = MappingProxyType(compute_term_statistics(index))
        self.document_vectors: Mapping[str, WeightVector] = build_document_vectors(index, self.terms)
        self._document_lengths: Mapping[str, float] = MappingProxyType(
            {doc_id: vector_length(vector) for doc_id, vector in self.document_vectors.items()}
        )
        INDEX_DOC_COUNT.set(index.document_count)
        INDEX_TERM_COUNT.set(len(index))
        logger.debug("Query engine ready: %r", index)

    @classmethod
    def from_file(cls, path: Path | str) -> QueryEngine:
        return cls(load_index(path))

    def evaluate(self, query: str) -> set[str]:
        """Return the unranked set of documents matching ``query``."""
        return evaluate(parse_query(query.lower()), self.index)

    def query_vector(self, query: str) -> dict[str, float]:
        return build_query_vector(query_terms(query.lower()), self.terms)

    def search(self, query: str) -> SearchResult:
        """Evaluate and rank ``query``.

        A query consisting of a single operator keyword is rejected without
        evaluation; the result is then empty with ``rejected`` set.
        """
        normalized = query.lower()
        with create_span("search.query", attributes={"query.length": len(normalized)}) as span:
            with track_latency(QUERY_LATENCY):
                if is_bare_operator(normalized):
                    logger.info("Rejected bare operator query: %r", query)
                    QUERY_COUNT.labels(outcome="rejected").inc()
                    span.set_attribute("query.rejected", True)
                    return SearchResult(query=query, rejected=True)

                tree = parse_query(normalized)
                candidates = evaluate(tree, self.index)
                ranked = rank_documents(
                    candidates,
                    self.query_vector(normalized),
                    self.document_vectors,
                    document_lengths=self._document_lengths,
                )

            outcome = "matched" if ranked else "empty"
            QUERY_COUNT.labels(outcome=outcome).inc()
            span.set_attribute("query.result_count", len(ranked))
            logger.debug("Query %r parsed as %r matched %d document(s)", query, tree, len(ranked))
            return SearchResult(query=query, documents=tuple(ranked))
