"""Positional index construction.

Building runs in two phases. The map phase turns each document into one
:class:`IndexRecord` per whitespace-delimited token; documents are mapped
independently on a thread pool. The reduce phase groups the records by term
and collects each document's positions in ascending order without
duplicates.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging
from pathlib import Path

from positional_search.search.analyzers import StandardAnalyzer
from positional_search.search.index import PositionalIndex
from positional_search.search.models import IndexRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexBuildResult:
    """Outcome of an indexing run."""

    index: PositionalIndex
    documents_indexed: int
    errors: tuple[str, ...]


def map_document(doc_id: str, text: str) -> Iterator[IndexRecord]:
    """Emit one record per token, positions counted from zero across the document."""

    analyzer = StandardAnalyzer()
    for token in analyzer(text):
        yield IndexRecord(term=token.text, doc_id=doc_id, position=token.position)


def reduce_records(records: Iterable[IndexRecord]) -> PositionalIndex:
    """Group records by term and document into a :class:`PositionalIndex`."""

    grouped: dict[str, dict[str, set[int]]] = defaultdict(lambda: defaultdict(set))
    for record in records:
        grouped[record.term][record.doc_id].add(record.position)

    postings = {
        term: {doc_id: tuple(sorted(positions)) for doc_id, positions in docs.items()}
        for term, docs in grouped.items()
    }
    return PositionalIndex(postings)


def collect_source_files(sources: Sequence[Path | str]) -> list[Path]:
    """Expand directories to their regular files; explicit files are kept as given."""

    files: list[Path] = []
    for source in sources:
        path = Path(source)
        if path.is_dir():
            files.extend(sorted(child for child in path.iterdir() if child.is_file()))
        else:
            files.append(path)
    return files


def _map_file(path: Path) -> list[IndexRecord]:
    text = path.read_text(encoding="utf-8", errors="replace")
    return list(map_document(path.name, text))


def build_index(paths: Sequence[Path | str], *, max_workers: int = 4) -> IndexBuildResult:
    """Build an index from document files; each document id is its file name.

    Unreadable files are logged and reported in ``errors`` instead of aborting
    the build.
    """
    if max_workers < 1:
        raise ValueError("max_workers must be >= 1")

    files = [Path(path) for path in paths]
    records: list[IndexRecord] = []
    errors: list[str] = []
    documents_indexed = 0

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [(path, executor.submit(_map_file, path)) for path in files]
        for path, future in futures:
            try:
                mapped = future.result()
            except OSError as exc:
                logger.warning("Skipping unreadable document %s: %s", path, exc)
                errors.append(f"{path}: {exc}")
                continue
            records.extend(mapped)
            documents_indexed += 1

    index = reduce_records(records)
    logger.info(
        "Indexed %d document(s) into %d term(s) (%d error(s))",
        documents_indexed,
        len(index),
        len(errors),
    )
    return IndexBuildResult(index=index, documents_indexed=documents_indexed, errors=tuple(errors))
