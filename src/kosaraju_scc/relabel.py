from __future__ import annotations

from typing import Dict

from .errors import MissingFinishingTimeError
from .loader import EdgeSource, Graph, iter_edges, open_edge_lines


def relabel_graph(source: EdgeSource, finishing_times: Dict[int, int]) -> Graph:
    """Forward graph of `source` with every vertex renamed to its finishing time."""
    graph: Graph = {}
    with open_edge_lines(source) as lines:
        for lineno, tail, head in iter_edges(lines):
            try:
                new_tail = finishing_times[tail]
            except KeyError:
                raise MissingFinishingTimeError(tail, lineno=lineno) from None
            try:
                new_head = finishing_times[head]
            except KeyError:
                raise MissingFinishingTimeError(head, lineno=lineno) from None
            graph.setdefault(new_tail, set()).add(new_head)
    return graph
