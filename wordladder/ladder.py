"""Shortest ladders between words and the geometry used to draw them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from wordladder.graph import Graph

GRID_COLUMNS = 3
ARROW_MARGIN = 35.0
ARROWHEAD_SIZE = 10.0

Point = tuple[float, float]


class LadderError(ValueError):
    """No ladder can be built for the requested words."""


@dataclass(frozen=True)
class Arrow:
    """A straight arrow from ``start`` to ``end``."""

    start: Point
    end: Point


def shortest_ladder(graph: Graph[str], source: str, target: str) -> list[str]:
    """Return the words of a shortest ladder from ``source`` to ``target``, both included."""
    source = source.strip()
    target = target.strip()
    if not source or not target:
        raise LadderError("All fields are required")
    try:
        distances, prev = graph.distances(source)
    except ValueError as exc:
        raise LadderError("Start word does not exist in the dictionary") from exc
    if target not in distances:
        raise LadderError(
            "There is no way to reach the target from the current word"
        )
    ladder = [target]
    word = target
    while word in prev:
        word = prev[word]
        ladder.append(word)
    ladder.reverse()
    return ladder


def changed_position(previous: str, current: str) -> int:
    """Index of the first letter where the words differ, or -1 if none does."""
    for index, (old, new) in enumerate(zip(previous, current)):
        if old != new:
            return index
    return -1


def grid_position(index: int, columns: int = GRID_COLUMNS) -> tuple[int, int]:
    """Row and column of the ``index``-th cell in a grid filled in a snake pattern."""
    row, offset = divmod(index, columns)
    column = offset if row % 2 == 0 else columns - 1 - offset
    return row, column


def arrow_between(
    start: Point,
    end: Point,
    same_column_row_change: bool = False,
    margin: float = ARROW_MARGIN,
) -> Arrow:
    """Arrow between two cell centres, pulled back by ``margin`` at both ends.

    When the step moves to the next row the arrow always points downwards.
    """
    if same_column_row_change and start[1] > end[1]:
        start, end = end, start
    length = math.dist(start, end)
    if length == 0:
        raise ValueError("Cannot draw an arrow between identical points")

    def point_at(fraction: float) -> Point:
        return (
            start[0] + (end[0] - start[0]) * fraction,
            start[1] + (end[1] - start[1]) * fraction,
        )

    return Arrow(point_at(margin / length), point_at(1.0 - margin / length))


def arrowhead(arrow: Arrow, size: float = ARROWHEAD_SIZE) -> tuple[Point, Point, Point]:
    """Triangle of the arrow's head: its tip and the two barb ends."""
    tip = arrow.end
    angle = math.atan2(tip[1] - arrow.start[1], tip[0] - arrow.start[0])
    barbs = tuple(
        (tip[0] - math.cos(angle + turn) * size, tip[1] - math.sin(angle + turn) * size)
        for turn in (math.pi / 6, -math.pi / 6)
    )
    return tip, barbs[0], barbs[1]