from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .errors import ParseError
from .report import format_sizes, size_table, top_k_sizes
from .scc import compute_scc


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Strongly connected component sizes of a directed edge list (Kosaraju).")
    ap.add_argument("edges", help="Edge-list file, one 'TAIL HEAD' pair per line.")
    ap.add_argument("--top", type=int, default=None, metavar="K",
                    help="Print only the K largest sizes, comma-separated.")
    ap.add_argument("--table", action="store_true", help="Print components as a table, largest first.")
    ap.add_argument("--progress", action="store_true", help="Show progress bars for the DFS passes.")
    ap.add_argument("--verbose", action="store_true", help="Print per-stage timings.")
    args = ap.parse_args(argv)
    if args.top is not None and args.top <= 0:
        ap.error("--top must be positive")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        sizes = compute_scc(args.edges, progress=args.progress, verbose=args.verbose)
    except (ParseError, LookupError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.top is not None:
        print(",".join(str(s) for s in top_k_sizes(sizes, args.top)))
    elif args.table:
        print(size_table(sizes).to_string(index=False))
    else:
        for line in format_sizes(sizes):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
