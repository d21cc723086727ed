"""Bracketing root finder.

Bisection halves ``[a, b]`` until the half-width drops below ``tol`` or
``max_iterations`` halvings have been made. When the cap is hit the last
midpoint is still returned; its error is bounded by
``(b0 - a0) / 2 ** max_iterations``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_TOL = 1e-6
DEFAULT_MAX_ITERATIONS = 100


def sign(t: float) -> int:
    if t < 0:
        return -1
    if t > 0:
        return 1
    return 0


class RootStatus(str, Enum):
    CONVERGED = "converged"
    MAX_ITERATIONS = "max_iterations"
    NO_SIGN_CHANGE = "no_sign_change"


@dataclass(frozen=True)
class RootResult:
    root: Optional[float]
    status: RootStatus
    iterations: int
    error_bound: float

    @property
    def ok(self) -> bool:
        """True when ``root`` holds an estimate (converged or capped)."""
        return self.status is not RootStatus.NO_SIGN_CHANGE


@dataclass(frozen=True)
class RootSearch:
    """A bisection search for a root of ``f`` on ``[a, b]``.

    ``f`` is any one-argument callable; bind extra parameters with a closure
    or ``functools.partial``.
    """

    f: Callable[[float], float]
    a: float
    b: float
    tol: float = DEFAULT_TOL
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if not self.a < self.b:
            raise ValueError("bracket must satisfy a < b")
        if self.tol <= 0:
            raise ValueError("tol must be positive")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

    def solve(self) -> RootResult:
        a, b = float(self.a), float(self.b)
        fa = self.f(a)
        if sign(fa) == sign(self.f(b)):
            logger.debug("No sign change on [%s, %s]", a, b)
            return RootResult(None, RootStatus.NO_SIGN_CHANGE, 0, b - a)

        c = a
        for i in range(1, self.max_iterations + 1):
            c = (a + b) / 2
            fc = self.f(c)
            half_width = (b - a) / 2
            if fc == 0 or half_width < self.tol:
                logger.debug("Bisection converged to %s after %d iterations", c, i)
                return RootResult(c, RootStatus.CONVERGED, i, half_width)
            if sign(fc) == sign(fa):
                a, fa = c, fc
            else:
                b = c
        logger.debug(
            "Bisection stopped at the %d iteration cap; best estimate %s",
            self.max_iterations,
            c,
        )
        return RootResult(c, RootStatus.MAX_ITERATIONS, self.max_iterations, b - a)


def find_root(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = DEFAULT_TOL,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> RootResult:
    """Find a root of ``f`` on ``[a, b]`` by bisection.

    Returns a :class:`RootResult` whose ``status`` is ``NO_SIGN_CHANGE`` when
    ``f(a)`` and ``f(b)`` share a sign (``root`` is ``None``), ``CONVERGED``
    when the tolerance was met, or ``MAX_ITERATIONS`` with the last midpoint
    as the best estimate.
    """

    return RootSearch(f, a, b, tol, max_iterations).solve()
