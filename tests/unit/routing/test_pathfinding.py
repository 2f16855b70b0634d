"""Tests for the token graph and BFS path enumeration."""

from liquidity_router.routing.pathfinding import Edge, PathFinder, TokenGraph
from liquidity_router.venues import Direction
from tests.helpers import BONK, RAY, SOL, USDC, make_orderbook, make_pool, make_snapshot


def tokens_of(path: list[Edge]) -> list[str]:
    return [path[0].token_in] + [edge.token_out for edge in path]


class TestTokenGraph:
    """Tests for TokenGraph construction."""

    def test_amm_adds_both_directions(self):
        graph = TokenGraph.from_snapshot(make_snapshot(make_pool("p", SOL, USDC)))
        assert graph.get_neighbors(SOL) == {USDC}
        assert graph.get_neighbors(USDC) == {SOL}
        assert graph.edge_count == 2
        assert graph.token_count == 2

    def test_edges_carry_direction(self):
        graph = TokenGraph.from_snapshot(make_snapshot(make_pool("p", SOL, USDC)))
        (edge,) = graph.edges_from(USDC)
        assert edge.direction is Direction.B_TO_A
        assert edge.token_out == SOL

    def test_empty_pool_adds_nothing(self):
        graph = TokenGraph.from_snapshot(make_snapshot(make_pool("p", reserve_a=0)))
        assert graph.edge_count == 0
        assert not graph.has_token(SOL)

    def test_one_sided_orderbook(self):
        """A book with no bid can only buy token_a."""
        graph = TokenGraph.from_snapshot(make_snapshot(make_orderbook("b", best_bid=0)))
        assert graph.get_neighbors(USDC) == {SOL}
        assert graph.get_neighbors(SOL) == set()
        assert graph.has_token(SOL)

    def test_parallel_venues_are_parallel_edges(self):
        graph = TokenGraph.from_snapshot(
            make_snapshot(make_pool("p1", SOL, USDC), make_pool("p2", SOL, USDC))
        )
        assert len(graph.edges_from(SOL)) == 2

    def test_unknown_token(self):
        graph = TokenGraph()
        assert graph.edges_from(SOL) == []
        assert graph.get_neighbors(SOL) == set()
        assert not graph.has_token(SOL)


class TestFindAllPaths:
    """Tests for PathFinder.find_all_paths."""

    def _triangle(self) -> PathFinder:
        return PathFinder(
            TokenGraph.from_snapshot(
                make_snapshot(
                    make_pool("sol-usdc", SOL, USDC),
                    make_pool("usdc-ray", USDC, RAY),
                    make_pool("ray-sol", RAY, SOL),
                )
            )
        )

    def test_direct_path(self):
        finder = self._triangle()
        paths = finder.find_all_paths(SOL, USDC, max_hops=1)
        assert [tokens_of(p) for p in paths] == [[SOL, USDC]]

    def test_shorter_paths_first(self):
        finder = self._triangle()
        paths = finder.find_all_paths(SOL, RAY, max_hops=3)
        assert [len(p) for p in paths] == sorted(len(p) for p in paths)
        assert tokens_of(paths[0]) == [SOL, RAY]
        assert [SOL, USDC, RAY] in [tokens_of(p) for p in paths]

    def test_paths_never_repeat_an_asset(self):
        finder = self._triangle()
        for max_hops in (1, 2, 3):
            for path in finder.find_all_paths(SOL, RAY, max_hops):
                tokens = tokens_of(path)
                assert len(tokens) == len(set(tokens))
                assert len(path) <= max_hops

    def test_paths_end_at_destination(self):
        """The destination is never passed through on the way elsewhere."""
        finder = self._triangle()
        for path in finder.find_all_paths(SOL, RAY, max_hops=3):
            assert RAY not in [edge.token_out for edge in path[:-1]]
            assert path[-1].token_out == RAY

    def test_parallel_venues_give_distinct_paths(self):
        finder = PathFinder(
            TokenGraph.from_snapshot(
                make_snapshot(
                    make_pool("p1", SOL, USDC),
                    make_pool("p2", SOL, USDC),
                    make_pool("usdc-ray", USDC, RAY),
                )
            )
        )
        paths = finder.find_all_paths(SOL, RAY, max_hops=2)
        assert [[e.venue.venue_id for e in p] for p in paths] == [
            ["p1", "usdc-ray"],
            ["p2", "usdc-ray"],
        ]

    def test_hop_limit(self):
        finder = PathFinder(
            TokenGraph.from_snapshot(
                make_snapshot(make_pool("a", SOL, USDC), make_pool("b", USDC, RAY))
            )
        )
        assert finder.find_all_paths(SOL, RAY, max_hops=1) == []
        assert len(finder.find_all_paths(SOL, RAY, max_hops=2)) == 1

    def test_no_path(self):
        finder = self._triangle()
        assert finder.find_all_paths(SOL, BONK, max_hops=3) == []
        assert finder.find_all_paths(SOL, SOL, max_hops=3) == []
        assert finder.find_all_paths(SOL, USDC, max_hops=0) == []

    def test_max_paths(self):
        finder = self._triangle()
        assert len(finder.find_all_paths(SOL, RAY, max_hops=3, max_paths=1)) == 1
