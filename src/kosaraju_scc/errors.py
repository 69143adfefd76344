from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """A line of the edge list is not exactly two positive integers."""

    def __init__(self, message: str, *, lineno: Optional[int] = None, line: Optional[str] = None):
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class MissingFinishingTimeError(LookupError):
    """Relabeling hit a vertex that the first DFS pass never finished.

    This means the two reads of the edge source disagree.
    """

    def __init__(self, vertex: int, *, lineno: Optional[int] = None):
        self.vertex = vertex
        self.lineno = lineno
        where = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"vertex {vertex} has no finishing time{where}")
