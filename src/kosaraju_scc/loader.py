from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, Optional, Set, Tuple, Union

from .errors import ParseError

Graph = Dict[int, Set[int]]
EdgeSource = Union[str, "os.PathLike[str]", Iterable[str]]


def parse_edge_line(line: str, lineno: Optional[int] = None) -> Tuple[int, int]:
    """Parse ``"TAIL HEAD"`` into ``(tail, head)``."""
    tokens = line.split()
    if len(tokens) != 2:
        raise ParseError(f"expected 2 tokens, got {len(tokens)}", lineno=lineno, line=line)
    # int() alone would also take "+3", "1_0" and non-ASCII digits.
    if not all(tok.isascii() and tok.isdigit() for tok in tokens):
        raise ParseError(f"non-numeric vertex in {line.strip()!r}", lineno=lineno, line=line)
    tail, head = int(tokens[0]), int(tokens[1])
    if tail < 1 or head < 1:
        raise ParseError(f"vertex ids must be positive: {line.strip()!r}", lineno=lineno, line=line)
    return tail, head


def is_path_source(source: EdgeSource) -> bool:
    return isinstance(source, (str, os.PathLike))


@contextmanager
def open_edge_lines(source: EdgeSource) -> Iterator[Iterable[str]]:
    """Yield the lines of `source`.

    A path is (re)opened on every call; anything else is treated as an
    in-memory iterable of lines and passed through unchanged.
    """
    if is_path_source(source):
        with open(source, "r", encoding="utf-8") as fh:
            yield fh
    else:
        yield source


def iter_edges(lines: Iterable[str]) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(lineno, tail, head)`` for every line; any bad line aborts."""
    it = iter(lines)
    lineno = 0
    while True:
        try:
            line = next(it)
        except StopIteration:
            return
        except UnicodeDecodeError as exc:
            raise ParseError(f"input is not valid UTF-8 text after line {lineno}: {exc.reason}") from exc
        lineno += 1
        tail, head = parse_edge_line(line, lineno)
        yield lineno, tail, head


def load_graph(source: EdgeSource, reverse: bool) -> Tuple[Graph, int]:
    """Build an adjacency structure from an edge list.

    Parameters
    ----------
    source:
        path to an edge-list file, or an iterable of ``"TAIL HEAD"`` lines.
    reverse:
        if True, every edge is stored under its head (the reverse graph).

    Returns
    -------
    graph:
        dict vertex -> set of neighbours. Vertices without outgoing edges
        (in the chosen direction) have no key.
    max_vertex:
        largest vertex id seen, 0 for empty input.
    """
    graph: Graph = {}
    max_vertex = 0
    with open_edge_lines(source) as lines:
        for _, tail, head in iter_edges(lines):
            if tail > max_vertex:
                max_vertex = tail
            if head > max_vertex:
                max_vertex = head
            if reverse:
                graph.setdefault(head, set()).add(tail)
            else:
                graph.setdefault(tail, set()).add(head)
    return graph, max_vertex
