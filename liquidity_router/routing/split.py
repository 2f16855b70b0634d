"""Split routing across parallel venues.

An input amount is cut into `100 // step_percent` equal units and the units
are distributed over the best few venues on the pair. Two allocators are
available:
- ENUMERATE tries every distribution of the units (weak compositions), which
  is exact at the chosen granularity and is the default.
- GREEDY hands out one unit at a time to the venue with the largest marginal
  output, which scales to more venues and finer steps.

Either way the result is compared with the best single-venue route, so a
split never returns less than trading everything on one venue.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

import structlog

from liquidity_router.constants import (
    DEFAULT_AMM_MAX_INPUT_BPS,
    DEFAULT_SPLIT_MAX_VENUES,
    DEFAULT_SPLIT_STEP_PERCENT,
)
from liquidity_router.errors import NoRouteFound, RouterError
from liquidity_router.routing.single import SingleVenueRouter, quote_venue
from liquidity_router.routing.types import Quote, Route, validate_request
from liquidity_router.venues import AnyVenue, Direction, VenueSnapshot, calculate_output

logger = structlog.get_logger()


class SplitMethod(str, Enum):
    """Allocation search used by SplitRouter."""

    ENUMERATE = "enumerate"
    GREEDY = "greedy"


def weak_compositions(units: int, parts: int) -> Iterator[tuple[int, ...]]:
    """Yield every way to write `units` as an ordered sum of `parts` non-negative ints."""
    if parts == 1:
        yield (units,)
        return
    for first in range(units, -1, -1):
        for rest in weak_compositions(units - first, parts - 1):
            yield (first,) + rest


def allocate_amounts(amount_in: int, allocation: tuple[int, ...], units: int) -> list[int]:
    """Turn unit counts into input amounts that sum exactly to amount_in.

    Each venue gets amount_in * u // units; the last venue with a non-zero
    share absorbs the rounding remainder.
    """
    amounts = [amount_in * u // units for u in allocation]
    remainder = amount_in - sum(amounts)
    if remainder:
        for i in range(len(allocation) - 1, -1, -1):
            if allocation[i] > 0:
                amounts[i] += remainder
                break
    return amounts


class SplitRouter:
    """Allocates an input amount across several venues on one pair."""

    def __init__(
        self,
        step_percent: int = DEFAULT_SPLIT_STEP_PERCENT,
        max_venues: int = DEFAULT_SPLIT_MAX_VENUES,
        method: SplitMethod = SplitMethod.ENUMERATE,
        amm_max_input_bps: int = DEFAULT_AMM_MAX_INPUT_BPS,
    ) -> None:
        """Initialize the split router.

        Args:
            step_percent: Allocation granularity in percent; must divide 100
            max_venues: How many venues, ranked by single-venue output,
                enter the search
            method: Allocation search to use
            amm_max_input_bps: Largest share of an AMM's input reserve a
                single leg may consume

        Raises:
            ValueError: If step_percent does not divide 100 or max_venues < 1
        """
        if step_percent <= 0 or 100 % step_percent != 0:
            raise ValueError(f"step_percent must divide 100, got {step_percent}")
        if max_venues < 1:
            raise ValueError(f"max_venues must be at least 1, got {max_venues}")
        self.step_percent = step_percent
        self.max_venues = max_venues
        self.method = method
        self.amm_max_input_bps = amm_max_input_bps
        self._single = SingleVenueRouter(amm_max_input_bps)

    @property
    def units(self) -> int:
        return 100 // self.step_percent

    def find_best_route(
        self,
        snapshot: VenueSnapshot,
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> Route:
        """Find the allocation of amount_in over venues with the most total output.

        With fewer than two candidate venues the best single-venue trade is
        returned as a one-leg split.

        Raises:
            InvalidRequest: For a degenerate request
            NoRouteFound: If no allocation and no single venue can take the trade
        """
        validate_request(snapshot, token_in, token_out, amount_in)

        single_quotes = self._single.quotes(snapshot, token_in, token_out, amount_in)
        best_single: Quote | None = None
        for quote in single_quotes:
            if best_single is None or quote.amount_out > best_single.amount_out:
                best_single = quote

        candidates = self._rank_candidates(snapshot, token_in, token_out, amount_in)
        legs: list[Quote] | None = None
        if len(candidates) >= 2:
            search = _LegCache(candidates, self.amm_max_input_bps)
            if self.method is SplitMethod.GREEDY:
                legs = self._allocate_greedy(search, amount_in)
            else:
                legs = self._allocate_enumerate(search, amount_in)

        if legs is not None and best_single is not None:
            if sum(leg.amount_out for leg in legs) <= best_single.amount_out:
                legs = [best_single]
        elif legs is None:
            if best_single is None:
                raise NoRouteFound(
                    f"No split of {amount_in} {token_in} into {token_out} is feasible"
                )
            legs = [best_single]

        route = Route.split(legs)
        logger.debug(
            "split_route_selected",
            token_in=token_in,
            token_out=token_out,
            amount_in=amount_in,
            amount_out=route.amount_out,
            legs=[(hop.venue_id, hop.amount_in) for hop in route.hops],
            candidates=len(candidates),
            method=self.method.value,
        )
        return route

    def _rank_candidates(
        self,
        snapshot: VenueSnapshot,
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> list[tuple[AnyVenue, Direction]]:
        """Keep the top venues by output for the full amount.

        Liquidity limits are ignored here since a venue too shallow for the
        full amount may still take part of it.
        """
        ranked: list[tuple[int, AnyVenue, Direction]] = []
        for venue, direction in snapshot.matching(token_in, token_out):
            try:
                amount_out, _ = calculate_output(venue, amount_in, direction)
            except RouterError as e:
                logger.debug("venue_skipped", venue=venue.venue_id, reason=str(e))
                continue
            ranked.append((amount_out, venue, direction))
        ranked.sort(key=lambda item: item[0], reverse=True)
        return [(venue, direction) for _, venue, direction in ranked[: self.max_venues]]

    def _allocate_enumerate(self, search: _LegCache, amount_in: int) -> list[Quote] | None:
        """Try every distribution of units over the candidates."""
        units = self.units
        best_legs: list[Quote] | None = None
        best_key = (-1, 0)
        for allocation in weak_compositions(units, len(search.candidates)):
            legs = search.legs_for(allocation, amount_in, units)
            if legs is None:
                continue
            key = (sum(leg.amount_out for leg in legs), -len(legs))
            if key > best_key:
                best_key = key
                best_legs = legs
        return best_legs

    def _allocate_greedy(self, search: _LegCache, amount_in: int) -> list[Quote] | None:
        """Give each unit to the venue whose output grows the most from it."""
        units = self.units
        allocation = [0] * len(search.candidates)
        for _ in range(units):
            best_index = -1
            best_gain = -1
            for i in range(len(allocation)):
                current = search.output(i, amount_in * allocation[i] // units)
                extended = search.output(i, amount_in * (allocation[i] + 1) // units)
                if current is None or extended is None:
                    continue
                gain = extended - current
                if gain > best_gain:
                    best_gain = gain
                    best_index = i
            if best_index < 0:
                logger.debug("greedy_split_exhausted", allocated=sum(allocation), units=units)
                return None
            allocation[best_index] += 1
        return search.legs_for(tuple(allocation), amount_in, units)


class _LegCache:
    """Memoized per-venue quotes for one split search."""

    def __init__(self, candidates: list[tuple[AnyVenue, Direction]], max_input_bps: int) -> None:
        self.candidates = candidates
        self._max_input_bps = max_input_bps
        self._quotes: dict[tuple[int, int], Quote | None] = {}

    def quote(self, index: int, amount: int) -> Quote | None:
        key = (index, amount)
        if key not in self._quotes:
            venue, direction = self.candidates[index]
            self._quotes[key] = quote_venue(venue, amount, direction, self._max_input_bps)
        return self._quotes[key]

    def output(self, index: int, amount: int) -> int | None:
        """Output for `amount` on a candidate; 0 for nothing, None if infeasible."""
        if amount == 0:
            return 0
        quote = self.quote(index, amount)
        return None if quote is None else quote.amount_out

    def legs_for(
        self, allocation: tuple[int, ...], amount_in: int, units: int
    ) -> list[Quote] | None:
        """Quote each non-empty share of an allocation, or None if any leg fails."""
        legs = []
        for index, amount in enumerate(allocate_amounts(amount_in, allocation, units)):
            if amount == 0:
                continue
            quote = self.quote(index, amount)
            if quote is None:
                return None
            legs.append(quote)
        return legs or None


__all__ = ["SplitMethod", "SplitRouter", "allocate_amounts", "weak_compositions"]
