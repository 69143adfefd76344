from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np
from tqdm.auto import tqdm

from .loader import Graph

_NO_NEIGHBOURS: frozenset = frozenset()


class FinishingTimePass:
    """First pass: number vertices in the order their DFS subtree completes.

    The counter runs across all roots of the pass and is never reset.
    """

    label = "DFS pass 1 (finishing times)"

    def __init__(self) -> None:
        self.counter = 0
        self.result: Dict[int, int] = {}

    def start_root(self, root: int) -> None:
        pass

    def finish(self, vertex: int) -> None:
        self.counter += 1
        self.result[vertex] = self.counter


class LeaderPass:
    """Second pass: tally how many vertices each root (leader) reaches."""

    label = "DFS pass 2 (leaders)"

    def __init__(self) -> None:
        self.leader = 0
        self.result: Dict[int, int] = {}

    def start_root(self, root: int) -> None:
        self.leader = root
        self.result[root] = 0

    def finish(self, vertex: int) -> None:
        self.result[self.leader] += 1


DfsPass = Union[FinishingTimePass, LeaderPass]


def descending_order(num_vertices: int) -> range:
    """Kosaraju's processing order ``N, N-1, ..., 1``."""
    return range(int(num_vertices), 0, -1)


def _neighbours(graph: Graph, vertex: int) -> Iterator[int]:
    return iter(graph.get(vertex, _NO_NEIGHBOURS))


def _id_bounds(graph: Graph, order: Iterable[int]) -> Tuple[int, int]:
    lowest, highest = 1, 0
    for ids in (order, graph, *graph.values()):
        if ids:
            lowest = min(lowest, min(ids))
            highest = max(highest, max(ids))
    return lowest, highest


def traverse(
    graph: Graph,
    dfs_pass: DfsPass,
    order: Iterable[int],
    *,
    num_vertices: Optional[int] = None,
    progress: bool = False,
) -> Dict[int, int]:
    """Depth-first search over every vertex of `order` (iterative).

    Parameters
    ----------
    graph:
        adjacency dict; a vertex with no key has no neighbours.
    dfs_pass:
        FinishingTimePass or LeaderPass; receives the post-order hooks.
    order:
        roots in processing order. Each unexplored root starts one DFS.
    num_vertices:
        size of the vertex universe [1, N]. Defaults to the largest id in
        `order` or `graph`. Every id in either must lie in [1, N], else
        ValueError.
    progress:
        show a tqdm bar over the roots.

    Returns
    -------
    result:
        ``dfs_pass.result`` once every root has been processed.
    """
    order = list(order) if not isinstance(order, (range, list, tuple)) else order
    lowest, highest = _id_bounds(graph, order)
    if num_vertices is None:
        num_vertices = highest
    if lowest < 1 or highest > num_vertices:
        raise ValueError(f"vertex ids must lie in [1, {num_vertices}], found [{lowest}, {highest}].")
    explored = np.zeros(int(num_vertices) + 1, dtype=bool)

    for root in tqdm(order, desc=dfs_pass.label, disable=not progress):
        if explored[root]:
            continue
        dfs_pass.start_root(root)
        explored[root] = True
        # Each frame is (vertex, iterator over its unvisited neighbours); a
        # vertex finishes only once its iterator is exhausted.
        stack: List[Tuple[int, Iterator[int]]] = [(root, _neighbours(graph, root))]
        while stack:
            u, nbrs = stack[-1]
            for v in nbrs:
                if not explored[v]:
                    explored[v] = True
                    stack.append((v, _neighbours(graph, v)))
                    break
            else:
                stack.pop()
                dfs_pass.finish(u)

    return dfs_pass.result
