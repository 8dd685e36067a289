"""Fixed-width console tables describing a loaded index."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from positional_search.search.stats import Term
from positional_search.search.vectorizer import document_weight


DEFAULT_TERM_COLUMN_WIDTH = 15
DEFAULT_COLUMN_WIDTH = 10


def pad_cell(text: str, width: int) -> str:
    """Left-align ``text`` in ``width`` columns, truncating with an ellipsis."""

    if len(text) > width:
        return text[: width - 3] + "..."
    return text.ljust(width)


def _format_matrix(
    terms: Mapping[str, Term],
    doc_ids: Iterable[str],
    cell: Callable[[Term, str], str],
    *,
    term_width: int,
    column_width: int,
) -> str:
    columns = sorted(doc_ids)
    lines = [pad_cell("Term", term_width) + "".join(pad_cell(doc_id, column_width) for doc_id in columns)]
    for name in sorted(terms):
        term = terms[name]
        row = pad_cell(name, term_width)
        for doc_id in columns:
            row += pad_cell(cell(term, doc_id) if doc_id in term.postings else "0", column_width)
        lines.append(row)
    return "\n".join(lines)


def format_frequency_table(
    terms: Mapping[str, Term],
    doc_ids: Iterable[str],
    *,
    term_width: int = DEFAULT_TERM_COLUMN_WIDTH,
    column_width: int = DEFAULT_COLUMN_WIDTH,
) -> str:
    """Raw term frequency per document."""
    return _format_matrix(
        terms,
        doc_ids,
        lambda term, doc_id: str(term.frequency_in(doc_id)),
        term_width=term_width,
        column_width=column_width,
    )


def format_idf_table(terms: Mapping[str, Term]) -> str:
    return "\n".join(f"{name}\t{terms[name].idf:.4f}" for name in sorted(terms))


def format_tfidf_table(
    terms: Mapping[str, Term],
    doc_ids: Iterable[str],
    *,
    term_width: int = DEFAULT_TERM_COLUMN_WIDTH,
    column_width: int = DEFAULT_COLUMN_WIDTH,
) -> str:
    """TF-IDF weight per document, four decimals."""
    return _format_matrix(
        terms,
        doc_ids,
        lambda term, doc_id: f"{document_weight(term, doc_id):.4f}",
        term_width=term_width,
        column_width=column_width,
    )
