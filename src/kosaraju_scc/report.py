from __future__ import annotations

from typing import Dict, List

import pandas as pd


def size_table(sizes: Dict[int, int]) -> pd.DataFrame:
    """Components as a DataFrame, largest first (ties by leader id)."""
    df = pd.DataFrame(
        {"leader": list(sizes.keys()), "size": list(sizes.values())},
        columns=["leader", "size"],
    ).astype({"leader": "int64", "size": "int64"})
    return df.sort_values(["size", "leader"], ascending=[False, True]).reset_index(drop=True)


def top_k_sizes(sizes: Dict[int, int], k: int = 5) -> List[int]:
    """The `k` largest component sizes, descending, zero-padded to length `k`."""
    if k <= 0:
        raise ValueError("k must be positive.")
    top = sorted(sizes.values(), reverse=True)[:k]
    return top + [0] * (k - len(top))


def format_sizes(sizes: Dict[int, int]) -> List[str]:
    return [f"SCC {leader} has size {sizes[leader]}" for leader in sorted(sizes)]
