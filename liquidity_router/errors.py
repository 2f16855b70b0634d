"""Router error classes.

Every failure the engine reports is a RouterError subclass, raised
synchronously by the failing operation.
"""


class RouterError(Exception):
    """Base error for pricing and routing operations."""

    pass


class EmptyPool(RouterError):
    """A venue has a zero reserve on either side."""

    pass


class InvalidFee(RouterError):
    """Fee must be in range [0, 10000) basis points."""

    pass


class InsufficientLiquidity(RouterError):
    """Requested amount exceeds what the venue can safely provide."""

    pass


class NoRouteFound(RouterError):
    """No venue or path satisfies the pair and liquidity constraints."""

    pass


class InvalidRequest(RouterError):
    """Degenerate routing request (zero hops, same asset, no venues, ...)."""

    pass


class ArithmeticOverflow(RouterError, ArithmeticError):
    """A widened intermediate or a narrowed result does not fit its width."""

    pass
