"""
Request dispatch and the line-processing loop.

    parse -> run_query -> render -> out

Per-request errors (bad syntax, unknown identity) are written to ``err``
as ``Error: <message>`` and processing continues with the next line.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, TextIO

from .errors import SwampError
from .parser import parse_line
from .render import render_result
from .store import TodoList
from .types import (
    AddQuery,
    Added,
    DoneQuery,
    Found,
    Marked,
    Query,
    QueryResult,
    SearchQuery,
)

logger = logging.getLogger(__name__)

DEFAULT_FLUSH_INTERVAL = 1.0


@dataclass
class RunStats:
    """Counters for one run of the loop."""
    lines: int = 0
    results: int = 0
    errors: int = 0


def run_query(query: Query, todo_list: TodoList) -> QueryResult:
    """
    Apply one request to ``todo_list``.

    Raises:
        NotFoundError: If a done request names an unassigned identity
    """
    if isinstance(query, AddQuery):
        return Added(todo_list.add(query.description, query.tags))
    if isinstance(query, DoneQuery):
        item = todo_list.mark_done(query.identity)
        return Marked(item.identity)
    if isinstance(query, SearchQuery):
        return Found(todo_list.search(query.words, query.tags))
    raise TypeError(f"Unknown query type: {type(query).__name__}")


def run_line(line: str, todo_list: TodoList, out: TextIO, err: TextIO) -> bool:
    """
    Parse and run one line, writing the rendered result to ``out``.

    Returns True if a result was written. Blank lines are ignored.
    """
    if not line.strip():
        return False
    try:
        result = run_query(parse_line(line), todo_list)
    except SwampError as e:
        logger.info("Line rejected: %s (%r)", e, line)
        err.write(f"Error: {e}\n")
        return False
    out.write(render_result(result))
    out.write("\n")
    return True


def run_stream(
    lines: Iterable[str],
    todo_list: TodoList,
    out: TextIO,
    err: TextIO,
    flush_interval: float = DEFAULT_FLUSH_INTERVAL,
    clock: Callable[[], float] = time.monotonic,
) -> RunStats:
    """
    Run every line against one store.

    ``out`` is flushed once ``flush_interval`` seconds have passed since
    the previous flush, and again when input ends.
    """
    stats = RunStats()
    next_flush = clock() + flush_interval
    try:
        for line in lines:
            stats.lines += 1
            if run_line(line.rstrip("\r\n"), todo_list, out, err):
                stats.results += 1
            elif line.strip():
                stats.errors += 1

            now = clock()
            if now >= next_flush:
                out.flush()
                next_flush = now + flush_interval
    finally:
        out.flush()
    logger.debug(
        "Processed %d lines: %d results, %d errors",
        stats.lines, stats.results, stats.errors,
    )
    return stats
