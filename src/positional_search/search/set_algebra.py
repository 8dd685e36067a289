"""Boolean combinators over document-id sets."""

from __future__ import annotations

from collections.abc import Set
from enum import Enum


class Operator(str, Enum):
    """Boolean operators in the order they are looked for in a query."""

    AND_NOT = "and not"
    BUT_NOT = "but not"
    OR_NOT = "or not"
    AND = "and"
    OR = "or"

    @property
    def delimited(self) -> str:
        """The operator as it must appear inside a query, surrounded by spaces."""
        return f" {self.value} "


def intersection(left: Set[str], right: Set[str]) -> set[str]:
    return set(left) & set(right)


def union(left: Set[str], right: Set[str]) -> set[str]:
    return set(left) | set(right)


def difference(left: Set[str], right: Set[str]) -> set[str]:
    return set(left) - set(right)


def union_complement(left: Set[str], right: Set[str], universe: Set[str]) -> set[str]:
    """Return ``left`` plus every document of ``universe`` not in ``right``."""
    return set(left) | (set(universe) - set(right))


def apply_operator(operator: Operator, left: Set[str], right: Set[str], universe: Set[str]) -> set[str]:
    """Combine two evaluated operands. Never mutates its arguments."""

    if operator is Operator.AND:
        return intersection(left, right)
    if operator is Operator.OR:
        return union(left, right)
    if operator in (Operator.AND_NOT, Operator.BUT_NOT):
        return difference(left, right)
    if operator is Operator.OR_NOT:
        return union_complement(left, right, universe)
    raise ValueError(f"Unsupported operator: {operator!r}")
