"""Recursive temple figures described as lists of rectangles."""

from __future__ import annotations

from dataclasses import dataclass, replace

from recursia.textutils import RecursiaError


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle with integer coordinates; y grows downward."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class TempleParameters:
    """Proportions and structure of a temple, relative to its bounding box."""

    base_height: float = 0.1
    base_width: float = 0.9
    column_width: float = 0.5
    column_height: float = 0.3
    upper_temple_height: float = 0.6
    order: int = 6
    num_small_temples: int = 4
    small_temple_width: float = 0.2
    small_temple_height: float = 0.5


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    if denominator == 0:
        raise RecursiaError("cannot space out a single smaller temple")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _scaled(length: int, factor: float) -> int:
    return int(length * factor)


def _standing_rectangle(bottom_center_x: int, bottom_y: int, bounds: Rectangle,
                        width_factor: float, height_factor: float) -> Rectangle:
    """Rectangle scaled from bounds, centred on a point of its bottom edge."""
    width = _scaled(bounds.width, width_factor)
    height = _scaled(bounds.height, height_factor)
    return Rectangle(
        bottom_center_x - _truncating_div(width, 2),
        bottom_y - height,
        width,
        height,
    )


def make_temple(bounds: Rectangle, params: TempleParameters) -> list[Rectangle]:
    """Return the rectangles of a temple of the given order within bounds.

    Rectangles come in drawing order: base, column, the upper temple, then
    each smaller temple from left to right. An order-0 temple is empty.

    Raises RecursiaError if the order is negative.
    """
    if params.order < 0:
        raise RecursiaError("order is negative")
    if params.order == 0:
        return []

    bottom_y = bounds.y + bounds.height
    bottom_center_x = bounds.x + _truncating_div(bounds.width, 2)

    base = _standing_rectangle(bottom_center_x, bottom_y, bounds,
                               params.base_width, params.base_height)
    column = _standing_rectangle(bottom_center_x, base.y, bounds,
                                 params.column_width, params.column_height)
    result = [base, column]

    lower = replace(params, order=params.order - 1)

    upper_bounds = _standing_rectangle(bottom_center_x, column.y, bounds,
                                       params.column_width, params.upper_temple_height)
    result.extend(make_temple(upper_bounds, lower))

    small_width = _scaled(bounds.width, params.small_temple_width)
    small_height = _scaled(bounds.height, params.small_temple_height)
    small_y = base.y - small_height
    count = params.num_small_temples
    space = _truncating_div(base.width - small_width * count, count - 1)

    for index in range(count):
        small_x = base.x + index * (small_width + space)
        small_bounds = Rectangle(small_x, small_y, small_width, small_height)
        result.extend(make_temple(small_bounds, lower))

    return result