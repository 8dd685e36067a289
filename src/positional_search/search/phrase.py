"""Exact phrase matching over term positions.

A phrase matches a document when every consecutive pair of its words occurs
as a contiguous bigram and each bigram continues from the position where the
previous one ended.
"""

from __future__ import annotations

from collections.abc import Sequence

from positional_search.search.index import PositionalIndex


# An anchor of zero places no continuity constraint on a bigram. Returned
# match positions are always >= 1, so a threaded anchor never collides with it.
UNANCHORED = 0


def match_bigram(
    index: PositionalIndex,
    doc_id: str,
    first: str,
    second: str,
    anchor: int = UNANCHORED,
) -> int | None:
    """Find ``second`` directly after ``first`` in a document.

    Args:
        index: Positional index to read positions from.
        doc_id: Document to search.
        first: Left term of the bigram.
        second: Right term of the bigram.
        anchor: Required position of ``first``; ``UNANCHORED`` accepts any.

    Returns:
        Position of ``second`` in the first accepted pair, or None.
    """
    first_positions = index.positions_of(first, doc_id)
    second_positions = index.positions_of(second, doc_id)
    if not first_positions or not second_positions:
        return None

    for i in first_positions:
        for j in second_positions:
            # Positions are ascending; nothing later can equal i + 1.
            if j > i + 1:
                break
            if j == i + 1 and (anchor == UNANCHORED or anchor == i):
                return j
    return None


def match_phrase(index: PositionalIndex, doc_id: str, terms: Sequence[str]) -> bool:
    """Return True when ``terms`` occur contiguously and in order in ``doc_id``."""

    anchor = UNANCHORED
    for first, second in zip(terms, terms[1:]):
        matched = match_bigram(index, doc_id, first, second, anchor)
        if matched is None:
            return False
        anchor = matched
    return True


def documents_for_phrase(index: PositionalIndex, phrase: str) -> set[str]:
    """Resolve an atomic phrase operand to the set of documents containing it.

    Single words are answered straight from the index; longer phrases are
    checked in every document that contains their first word.
    """
    terms = phrase.split()
    if not terms:
        return set()
    if len(terms) == 1:
        return set(index.documents_containing(terms[0]))

    return {doc_id for doc_id in index.documents_containing(terms[0]) if match_phrase(index, doc_id, terms)}
