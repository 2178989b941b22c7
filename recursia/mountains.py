"""Fractal mountain ranges built by recursive midpoint displacement."""

from __future__ import annotations

import random
from dataclasses import dataclass

from recursia.textutils import RecursiaError

_MIN_SPAN = 3


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


def _half_of_sum(a: int, b: int) -> int:
    """Integer midpoint of a and b, rounding toward zero."""
    total = a + b
    return abs(total) // 2 * (1 if total >= 0 else -1)


def _build(left: Point, right: Point, amplitude: int, decay_rate: float,
           rng: random.Random) -> list[Point]:
    if right.x - left.x <= _MIN_SPAN:
        return [left, right]

    midpoint = Point(
        _half_of_sum(left.x, right.x),
        _half_of_sum(left.y, right.y) + rng.randint(-amplitude, amplitude),
    )
    next_amplitude = int(amplitude * decay_rate)
    left_part = _build(left, midpoint, next_amplitude, decay_rate, rng)
    right_part = _build(midpoint, right, next_amplitude, decay_rate, rng)
    return left_part + right_part[1:]


def make_mountain_range(left: Point, right: Point, amplitude: int,
                        decay_rate: float,
                        rng: random.Random | None = None) -> list[Point]:
    """Return the points of a mountain range running from left to right.

    Each midpoint is displaced vertically by a uniformly random integer in
    [-amplitude, amplitude]; the amplitude is scaled by decay_rate (and
    truncated to an integer) at every level of recursion. Spans of three
    units or fewer are drawn as straight lines.

    Raises RecursiaError on a reversed range, a negative amplitude or a
    decay rate outside [0, 1].
    """
    if left.x > right.x:
        raise RecursiaError("the left point is to the right of the right point")
    if amplitude < 0:
        raise RecursiaError("amplitude is negative")
    if decay_rate < 0 or decay_rate > 1:
        raise RecursiaError("decayRate is invalid")

    return _build(left, right, int(amplitude), decay_rate,
                  rng if rng is not None else random.Random())