"""Immutable venue collections."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from liquidity_router.venues.types import AnyVenue, Direction


@dataclass(frozen=True)
class VenueSnapshot:
    """An ordered, read-only set of venues captured at one point in time.

    Routers only ever read from a snapshot, so several strategies can run
    against the same instance concurrently. Iteration order is insertion
    order, which decides ties between equally good venues.
    """

    venues: tuple[AnyVenue, ...] = ()

    @classmethod
    def of(cls, venues: Iterable[AnyVenue]) -> VenueSnapshot:
        """Build a snapshot from any iterable of venues.

        Raises:
            ValueError: If two venues share a venue_id
        """
        collected = tuple(venues)
        seen: set[str] = set()
        for venue in collected:
            if venue.venue_id in seen:
                raise ValueError(f"Duplicate venue id: {venue.venue_id}")
            seen.add(venue.venue_id)
        return cls(collected)

    def __iter__(self) -> Iterator[AnyVenue]:
        return iter(self.venues)

    def __len__(self) -> int:
        return len(self.venues)

    def __bool__(self) -> bool:
        return bool(self.venues)

    def get(self, venue_id: str) -> AnyVenue | None:
        """Look up a venue by id."""
        for venue in self.venues:
            if venue.venue_id == venue_id:
                return venue
        return None

    def matching(self, token_in: str, token_out: str) -> list[tuple[AnyVenue, Direction]]:
        """Get every venue that trades token_in for token_out, with its direction."""
        matches = []
        for venue in self.venues:
            direction = venue.direction_for(token_in, token_out)
            if direction is not None:
                matches.append((venue, direction))
        return matches

    @property
    def tokens(self) -> set[str]:
        """All assets traded by at least one venue."""
        result: set[str] = set()
        for venue in self.venues:
            result.update(venue.asset_pair())
        return result


__all__ = ["VenueSnapshot"]
