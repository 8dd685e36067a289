"""Reader and writer for the text positional-index format.

One line per term::

    term<TAB>doc1: 0,4,9; doc2: 3

Readers are lenient: short lines and malformed document entries are skipped
individually without aborting the rest of the file.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from pathlib import Path
import re
from typing import TextIO

from positional_search.search.index import PositionalIndex


logger = logging.getLogger(__name__)

_ENTRY_PATTERN = re.compile(r"(\S+):\s+(.+)")
_POSITION_SEPARATOR = re.compile(r",\s*")


class IndexFileError(FileNotFoundError):
    """Raised when the positional index file cannot be opened."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Positional index not found: {path}")
        self.path = path


class IndexReadError(OSError):
    """Raised when the positional index path exists but cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read positional index {path}: {reason}")
        self.path = path


def parse_entry(segment: str) -> tuple[str, tuple[int, ...]] | None:
    """Parse ``doc: p1,p2,...`` into ascending unique positions.

    Returns None for segments without a document id, with a non-integer or a
    negative position.
    """

    match = _ENTRY_PATTERN.search(segment.strip())
    if match is None:
        return None
    doc_id, raw_positions = match.groups()
    try:
        positions = {int(value) for value in _POSITION_SEPARATOR.split(raw_positions.strip())}
    except ValueError:
        return None
    if any(position < 0 for position in positions):
        return None
    return doc_id, tuple(sorted(positions))


def parse_index_lines(lines: Iterable[str]) -> PositionalIndex:
    """Build a :class:`PositionalIndex` from lines in the index file format.

    When a term or a (term, document) pair repeats, the first occurrence wins.
    """
    postings: dict[str, dict[str, tuple[int, ...]]] = {}
    skipped_lines = 0
    skipped_entries = 0

    for line_number, raw_line in enumerate(lines, start=1):
        parts = raw_line.rstrip("\r\n").split("\t")
        if len(parts) < 2:
            skipped_lines += 1
            continue

        term, details = parts[0], parts[1]
        for segment in details.split(";"):
            entry = parse_entry(segment)
            if entry is None:
                skipped_entries += 1
                logger.debug("Skipping malformed entry on line %d: %r", line_number, segment)
                continue
            doc_id, positions = entry
            postings.setdefault(term, {}).setdefault(doc_id, positions)

    if skipped_lines or skipped_entries:
        logger.info(
            "Skipped %d short line(s) and %d malformed entr(ies) while reading index",
            skipped_lines,
            skipped_entries,
        )
    return PositionalIndex(postings)


def load_index(path: Path | str) -> PositionalIndex:
    """Read a positional index file from disk."""

    index_path = Path(path)
    try:
        with index_path.open(encoding="utf-8") as handle:
            index = parse_index_lines(handle)
    except FileNotFoundError as exc:
        raise IndexFileError(index_path) from exc
    except OSError as exc:
        raise IndexReadError(index_path, exc.strerror or str(exc)) from exc

    logger.info(
        "Loaded positional index from %s: %d terms, %d documents",
        index_path,
        len(index),
        index.document_count,
    )
    return index


def format_index_line(term: str, postings: Mapping[str, Iterable[int]]) -> str:
    """Serialize one term; documents are written in id order."""

    entries = "; ".join(
        f"{doc_id}: {','.join(str(position) for position in postings[doc_id])}" for doc_id in sorted(postings)
    )
    return f"{term}\t{entries}"


def dump_index(index: PositionalIndex, stream: TextIO) -> int:
    """Write ``index`` to ``stream`` in term order; returns the number of lines."""

    count = 0
    for term in sorted(index):
        stream.write(format_index_line(term, index.postings(term)) + "\n")
        count += 1
    return count


def write_index(index: PositionalIndex, path: Path | str) -> Path:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as handle:
        lines = dump_index(index, handle)
    logger.info("Wrote %d term(s) to %s", lines, output)
    return output
