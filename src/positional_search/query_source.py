"""Query sources: anything that yields query strings until end of input."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO


def iter_queries(stream: TextIO, *, prompt: str | None = None, prompt_stream: TextIO | None = None) -> Iterator[str]:
    """Yield one query per line of ``stream`` until it is exhausted.

    When both ``prompt`` and ``prompt_stream`` are given, the prompt is written
    before each read.
    """
    while True:
        if prompt and prompt_stream is not None:
            prompt_stream.write(prompt)
            prompt_stream.flush()
        line = stream.readline()
        if not line:
            return
        yield line.rstrip("\r\n")
