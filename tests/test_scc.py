import random

import pytest

from kosaraju_scc.errors import ParseError
from kosaraju_scc.scc import compute_scc


def _brute_force_sizes(n, edges):
    adj = {v: set() for v in range(1, n + 1)}
    for u, v in edges:
        adj[u].add(v)
    reach = {}
    for s in adj:
        seen = {s}
        todo = [s]
        while todo:
            for w in adj[todo.pop()]:
                if w not in seen:
                    seen.add(w)
                    todo.append(w)
        reach[s] = seen
    comps = {frozenset(u for u in reach[v] if v in reach[u]) for v in adj}
    return sorted(len(c) for c in comps)


class TestComputeScc:
    def test_simple_cycle(self):
        assert compute_scc(["1 2", "2 3", "3 1"]) == {3: 3}

    def test_disjoint_pairs(self):
        sizes = compute_scc(["1 2", "3 4"])
        assert sizes == {4: 1, 3: 1, 2: 1, 1: 1}

    def test_neighbour_only_vertices_counted_once(self):
        sizes = compute_scc(["1 3", "2 3"])
        assert sorted(sizes.values()) == [1, 1, 1]

    def test_isolated_ids_below_max_are_components(self):
        sizes = compute_scc(["1 5"])
        assert sorted(sizes.values()) == [1, 1, 1, 1, 1]

    def test_empty_input(self):
        assert compute_scc([]) == {}

    def test_multiple_sccs(self):
        edges = ["1 2", "2 1", "2 3", "3 4", "4 5", "5 4"]
        assert sorted(compute_scc(edges).values()) == [1, 2, 2]

    def test_three_triangles_file(self, three_triangles):
        assert sorted(compute_scc(three_triangles).values()) == [3, 3, 3]

    def test_one_shot_iterator_is_buffered(self):
        lines = iter(["1 2\n", "2 1\n", "2 3\n"])
        assert sorted(compute_scc(lines).values()) == [1, 2]

    def test_open_file_object(self, three_triangles):
        with open(three_triangles) as fh:
            assert sorted(compute_scc(fh).values()) == [3, 3, 3]

    def test_idempotent(self, three_triangles):
        assert compute_scc(three_triangles) == compute_scc(three_triangles)

    def test_single_scc_covering_everything(self):
        n = 100_000
        edges = [f"{v} {v + 1}" for v in range(1, n)] + [f"{n} 1"]
        assert compute_scc(edges) == {n: n}

    def test_long_acyclic_chain(self):
        n = 50_000
        sizes = compute_scc([f"{v} {v + 1}" for v in range(1, n)])
        assert len(sizes) == n
        assert set(sizes.values()) == {1}

    def test_partition_matches_reachability(self):
        rng = random.Random(7)
        for _ in range(25):
            n = rng.randint(1, 25)
            edges = [(rng.randint(1, n), rng.randint(1, n)) for _ in range(rng.randint(1, 3 * n))]
            max_id = max(max(u, v) for u, v in edges)
            sizes = compute_scc([f"{u} {v}" for u, v in edges])
            assert sum(sizes.values()) == max_id
            assert all(1 <= leader <= max_id for leader in sizes)
            assert sorted(sizes.values()) == _brute_force_sizes(max_id, edges)

    def test_verbose_prints_stages(self, capsys):
        compute_scc(["1 2", "2 1"], verbose=True)
        out = capsys.readouterr().out
        assert "Finishing times: 2 assigned" in out
        assert "SCCs: 1" in out

    def test_blank_line_aborts(self):
        with pytest.raises(ParseError):
            compute_scc(["1 2", "", "2 1"])
