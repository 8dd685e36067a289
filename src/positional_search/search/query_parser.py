"""Boolean query parsing and evaluation.

A query is either an atomic phrase or ``<query> <operator> <query>``. The
split point is found by trying the operators in a fixed priority order and
taking the first textual occurrence of the first one present, so multi-word
operators such as ``or not`` are never mistaken for ``or``. This is not
precedence parsing: with mixed operators, the highest-priority operator
present splits the query wherever it first appears, and each half is then
parsed on its own.
"""

from __future__ import annotations

from collections.abc import Set
from dataclasses import dataclass

from positional_search.search.analyzers import analyze
from positional_search.search.index import PositionalIndex
from positional_search.search.phrase import documents_for_phrase
from positional_search.search.set_algebra import Operator, apply_operator


OPERATOR_PRIORITY: tuple[Operator, ...] = tuple(Operator)


@dataclass(frozen=True)
class PhraseNode:
    """Atomic operand: a word or multi-word phrase."""

    text: str

    def __repr__(self) -> str:
        return f"Phrase({self.text!r})"


@dataclass(frozen=True)
class OperatorNode:
    """Binary operator applied to two sub-queries."""

    operator: Operator
    left: QueryNode
    right: QueryNode

    def __repr__(self) -> str:
        return f"{self.operator.name}({self.left!r}, {self.right!r})"


QueryNode = PhraseNode | OperatorNode


def find_operator(query: str) -> Operator | None:
    """Return the highest-priority operator present in ``query``, if any."""

    for operator in OPERATOR_PRIORITY:
        if operator.delimited in query:
            return operator
    return None


def split_query(query: str, operator: Operator) -> tuple[str, str]:
    """Split at the first occurrence of ``operator``; raises ValueError if absent."""

    left, _, right = query.partition(operator.delimited)
    if left == query:
        raise ValueError(f"Operator {operator.value!r} not found in query {query!r}")
    return left, right


def parse_query(query: str) -> QueryNode:
    """Recursively split ``query`` into a tree of phrases and operators."""

    operator = find_operator(query)
    if operator is None:
        return PhraseNode(query.strip())

    left, right = split_query(query, operator)
    return OperatorNode(operator, parse_query(left.strip()), parse_query(right.strip()))


def evaluate(node: QueryNode, index: PositionalIndex, universe: Set[str] | None = None) -> set[str]:
    """Resolve a parsed query to its set of matching documents, bottom-up."""

    if universe is None:
        universe = index.documents
    if isinstance(node, PhraseNode):
        return documents_for_phrase(index, node.text)

    left = evaluate(node.left, index, universe)
    right = evaluate(node.right, index, universe)
    return apply_operator(node.operator, left, right, universe)


def is_bare_operator(query: str) -> bool:
    """True when the query is nothing but one operator keyword."""

    stripped = query.strip()
    return any(stripped == operator.value for operator in OPERATOR_PRIORITY)


def query_terms(query: str) -> list[str]:
    """Tokens used to build the query vector; operator keywords included."""

    return analyze(query)
