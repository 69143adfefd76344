from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Dict

from .loader import EdgeSource, is_path_source, load_graph
from .relabel import relabel_graph
from .traversal import FinishingTimePass, LeaderPass, descending_order, traverse


def compute_scc(source: EdgeSource, *, progress: bool = False, verbose: bool = False) -> Dict[int, int]:
    """Strongly connected component sizes via Kosaraju (two DFS passes).

    Parameters
    ----------
    source:
        path to an edge-list file, or an iterable of ``"TAIL HEAD"`` lines.
        The edge list is read twice; one-shot iterators are buffered first.
    progress:
        show tqdm bars for both DFS passes.
    verbose:
        print one status line per stage.

    Returns
    -------
    sizes:
        dict leader -> component size, one entry per SCC. Leaders are
        finishing-time ranks; sizes sum to the largest vertex id.
    """
    if not is_path_source(source) and not isinstance(source, Sequence):
        source = list(source)

    t0 = time.time()
    reverse_graph, n = load_graph(source, reverse=True)
    if verbose:
        print(f"Reverse graph: {n} vertices, {len(reverse_graph)} heads ({time.time() - t0:.2f}s)")
    if n == 0:
        return {}

    t1 = time.time()
    finishing_times = traverse(reverse_graph, FinishingTimePass(), descending_order(n),
                               num_vertices=n, progress=progress)
    del reverse_graph
    if verbose:
        print(f"Finishing times: {len(finishing_times)} assigned ({time.time() - t1:.2f}s)")

    t1 = time.time()
    relabelled = relabel_graph(source, finishing_times)
    del finishing_times
    if verbose:
        print(f"Relabelled graph: {len(relabelled)} tails ({time.time() - t1:.2f}s)")

    t1 = time.time()
    sizes = traverse(relabelled, LeaderPass(), descending_order(n), num_vertices=n, progress=progress)
    if verbose:
        print(f"SCCs: {len(sizes)} (computed in {time.time() - t0:.2f}s, pass 2 {time.time() - t1:.2f}s)")
    return sizes
