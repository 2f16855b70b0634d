"""Token graph and pathfinding for multi-hop routing.

The graph is built from a venue snapshot for each search and thrown away
afterwards; nothing is cached between invocations, so a path never refers
to a venue outside the snapshot it was found in.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from liquidity_router.venues import AnyVenue, Direction, VenueSnapshot, tradable_directions


@dataclass(frozen=True)
class Edge:
    """A directed trade: selling token_in for token_out on one venue."""

    venue: AnyVenue
    direction: Direction
    token_in: str
    token_out: str


class TokenGraph:
    """Directed multigraph of assets connected by venue trade directions.

    Parallel venues on the same pair produce parallel edges, so each one
    yields its own path.
    """

    def __init__(self) -> None:
        """Initialize an empty token graph."""
        self._adjacency: dict[str, list[Edge]] = {}

    @classmethod
    def from_snapshot(cls, snapshot: VenueSnapshot) -> TokenGraph:
        """Build a TokenGraph with one edge per tradable venue direction.

        Args:
            snapshot: Venues to connect

        Returns:
            TokenGraph in snapshot order
        """
        graph = cls()
        for venue in snapshot:
            for direction in tradable_directions(venue):
                graph.add_edge(
                    Edge(
                        venue=venue,
                        direction=direction,
                        token_in=venue.token_in(direction),
                        token_out=venue.token_out(direction),
                    )
                )
        return graph

    def add_edge(self, edge: Edge) -> None:
        """Add a directed edge."""
        self._adjacency.setdefault(edge.token_in, []).append(edge)
        self._adjacency.setdefault(edge.token_out, [])

    def edges_from(self, token: str) -> list[Edge]:
        """Get all edges selling the given token."""
        return self._adjacency.get(token, [])

    def get_neighbors(self, token: str) -> set[str]:
        """Get all tokens directly reachable from the given token."""
        return {edge.token_out for edge in self.edges_from(token)}

    def has_token(self, token: str) -> bool:
        """Check if a token exists in the graph."""
        return token in self._adjacency

    @property
    def token_count(self) -> int:
        """Number of unique tokens in the graph."""
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())


class PathFinder:
    """Enumerates simple paths through a TokenGraph.

    Usage:
        finder = PathFinder(TokenGraph.from_snapshot(snapshot))
        paths = finder.find_all_paths(token_in, token_out, max_hops=2)
    """

    def __init__(self, graph: TokenGraph) -> None:
        self.graph = graph

    def find_all_paths(
        self,
        token_in: str,
        token_out: str,
        max_hops: int,
        max_paths: int | None = None,
    ) -> list[list[Edge]]:
        """Find paths from token_in to token_out with at most max_hops edges.

        Uses BFS, so shorter paths come first. Each partial path carries its
        own frozen set of visited tokens, extended on every branch; a path
        never repeats an asset and stops as soon as it reaches token_out.

        Args:
            token_in: Starting token
            token_out: Target token
            max_hops: Maximum number of trades in a path
            max_paths: Stop after this many paths (None for no limit)

        Returns:
            List of paths, each a list of edges. Empty if none found.
        """
        if token_in == token_out or max_hops < 1:
            return []
        if not self.graph.has_token(token_in) or not self.graph.has_token(token_out):
            return []

        paths: list[list[Edge]] = []
        queue: deque[tuple[list[Edge], frozenset[str]]] = deque()
        queue.append(([], frozenset([token_in])))

        while queue:
            path, visited = queue.popleft()
            current = path[-1].token_out if path else token_in

            for edge in self.graph.edges_from(current):
                if edge.token_out in visited:
                    continue
                new_path = path + [edge]
                if edge.token_out == token_out:
                    paths.append(new_path)
                    if max_paths is not None and len(paths) >= max_paths:
                        return paths
                elif len(new_path) < max_hops:
                    queue.append((new_path, visited | frozenset([edge.token_out])))

        return paths


__all__ = ["Edge", "PathFinder", "TokenGraph"]
