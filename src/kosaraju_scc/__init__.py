"""Strongly connected components of large edge-list graphs.

This package provides:
- an edge-list loader building (optionally reversed) set adjacency,
- an iterative, post-order DFS engine for Kosaraju's two passes,
- relabeling of the input graph into finishing-time order,
- `compute_scc`, returning leader -> component size.
"""

from .errors import ParseError, MissingFinishingTimeError
from .loader import load_graph, parse_edge_line
from .traversal import FinishingTimePass, LeaderPass, descending_order, traverse
from .relabel import relabel_graph
from .scc import compute_scc
from .report import size_table, top_k_sizes, format_sizes

__all__ = [
    "ParseError",
    "MissingFinishingTimeError",
    "load_graph",
    "parse_edge_line",
    "FinishingTimePass",
    "LeaderPass",
    "descending_order",
    "traverse",
    "relabel_graph",
    "compute_scc",
    "size_table",
    "top_k_sizes",
    "format_sizes",
]
