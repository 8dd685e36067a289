"""Command line interface: build an index, print its statistics, run queries."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
import logging
from pathlib import Path
import sys
from typing import TextIO

import orjson
from pydantic import ValidationError

from positional_search.config import Settings
from positional_search.observability.logging import configure_logging
from positional_search.observability.metrics import write_metrics
from positional_search.observability.tracing import (
    TRACE_EXPORTERS,
    configure_trace_exporter,
    flush_tracing,
    init_tracing,
)
from positional_search.query_source import iter_queries
from positional_search.reporting import format_frequency_table, format_idf_table, format_tfidf_table
from positional_search.search.builder import build_index, collect_source_files
from positional_search.search.engine import QueryEngine
from positional_search.search.index_format import IndexFileError, IndexReadError, load_index, write_index
from positional_search.search.models import SearchResult
from positional_search.search.stats import compute_term_statistics


logger = logging.getLogger(__name__)

PROMPT = "Enter query: "
NO_RESULTS_MESSAGE = "There is no documents returned!"
SEPARATOR = "-" * 40


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="positional-search",
        description="Boolean phrase search over a positional index with TF-IDF ranking",
    )
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--log-json", action="store_true", default=None, help="Emit JSON log records")
    parser.add_argument("--trace-exporter", choices=TRACE_EXPORTERS, help="Override where finished spans are exported")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Build a positional index from document files")
    build.add_argument("sources", nargs="+", type=Path, help="Document files or directories of documents")
    build.add_argument("--output", "-o", type=Path, help="Index file to write (defaults to the configured index path)")
    build.add_argument("--max-workers", type=int, help="Threads used to map documents")

    stats = subparsers.add_parser("stats", help="Print frequency, IDF and TF-IDF tables")
    stats.add_argument("--index", type=Path, help="Positional index file")

    query = subparsers.add_parser("query", help="Run queries given as arguments or read from stdin")
    query.add_argument("--index", type=Path, help="Positional index file")
    query.add_argument(
        "--query",
        "-q",
        dest="queries",
        action="append",
        metavar="QUERY",
        help="Query to run; may be repeated. Reads stdin until EOF when omitted",
    )
    query.add_argument("--json", action="store_true", help="Print one JSON object per query")
    query.add_argument(
        "--metrics-out", type=Path, help="Write Prometheus metrics to this file once the queries have run"
    )
    return parser


def format_result(result: SearchResult, *, precision: int = 4) -> str:
    if result.is_empty:
        return NO_RESULTS_MESSAGE
    lines = ["Ranked Documents:"]
    lines.extend(f"Document: {doc.doc_id}, Similarity: {doc.score:.{precision}f}" for doc in result.documents)
    return "\n".join(lines)


def _write(out: TextIO, text: str) -> None:
    out.write(text + "\n")


def _run_build(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    max_workers = args.max_workers if args.max_workers is not None else settings.build_max_workers
    if max_workers < 1:
        raise ValueError("--max-workers must be >= 1")

    files = collect_source_files(args.sources)
    if not files:
        logger.error("No documents found in %s", ", ".join(str(source) for source in args.sources))
        return 1

    result = build_index(files, max_workers=max_workers)
    output = write_index(result.index, args.output or settings.index_path)
    _write(out, f"Indexed {result.documents_indexed} document(s), {len(result.index)} term(s) -> {output}")
    return 1 if result.errors else 0


def _run_stats(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    index = load_index(args.index or settings.index_path)
    terms = compute_term_statistics(index)
    widths = {"term_width": settings.term_column_width, "column_width": settings.column_width}
    _write(out, format_frequency_table(terms, index.documents, **widths))
    _write(out, format_idf_table(terms))
    _write(out, format_tfidf_table(terms, index.documents, **widths))
    return 0


def _answer(engine: QueryEngine, queries: Iterable[str], out: TextIO, *, as_json: bool, precision: int) -> None:
    for query in queries:
        result = engine.search(query)
        if as_json:
            out.write(orjson.dumps(result.to_dict()).decode("utf-8") + "\n")
            continue
        _write(out, format_result(result, precision=precision))
        _write(out, SEPARATOR)


def _run_query(args: argparse.Namespace, settings: Settings, out: TextIO, stdin: TextIO) -> int:
    engine = QueryEngine.from_file(args.index or settings.index_path)
    if args.queries:
        queries: Iterable[str] = args.queries
    else:
        interactive = not args.json and stdin.isatty()
        if interactive:
            _write(out, "Enter phrase query, or press CTRL + D to exit.")
        queries = iter_queries(stdin, prompt=PROMPT if interactive else None, prompt_stream=out)
    _answer(engine, queries, out, as_json=args.json, precision=settings.score_precision)
    metrics_path = args.metrics_out or settings.metrics_path
    if metrics_path is not None:
        try:
            logger.info("Wrote query metrics to %s", write_metrics(metrics_path))
        except OSError as exc:
            logger.error("Cannot write metrics to %s: %s", metrics_path, exc)
            return 1
    return 0


def main(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    out = stdout or sys.stdout

    try:
        settings = Settings()
    except ValidationError as exc:
        sys.stderr.write(f"Invalid configuration: {exc}\n")
        return 1

    configure_logging(
        args.log_level or settings.log_level,
        json_output=settings.log_json if args.log_json is None else args.log_json,
    )
    if settings.tracing_enabled:
        provider = init_tracing(service_name=settings.service_name)
        configure_trace_exporter(args.trace_exporter or settings.trace_exporter, provider)

    try:
        if args.command == "build":
            return _run_build(args, settings, out)
        if args.command == "stats":
            return _run_stats(args, settings, out)
        return _run_query(args, settings, out, stdin or sys.stdin)
    except (IndexFileError, IndexReadError) as exc:
        logger.error("%s", exc)
        return 1
    except ValueError as exc:
        logger.error("%s", exc)
        return 1
    finally:
        if settings.tracing_enabled:
            flush_tracing()


if __name__ == "__main__":
    sys.exit(main())
