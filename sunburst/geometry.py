"""Annular-sector geometry in SVG path syntax.

All shapes are centered on the origin. Angles are in radians and grow
in the direction of increasing y, so with SVG's downward y axis the
diagram sweeps clockwise on screen.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import partial


@dataclass(frozen=True)
class ArcSegment:
    """A single circular arc with its endpoints.

    Attributes:
        move: Move-to command for the start point ("M x y").
        arc: Arc-to command ("A r r 0 large sweep x y").
        start: Arc start point.
        end: Arc end point.
    """

    move: str
    arc: str
    start: tuple[float, float]
    end: tuple[float, float]

    @property
    def d(self) -> str:
        """Standalone path data: move to the start, then the arc."""
        return f"{self.move} {self.arc}"


def polar_to_cartesian(radius: float, angle: float) -> tuple[float, float]:
    """Convert polar coordinates around the origin to (x, y)."""
    return (radius * math.cos(angle), radius * math.sin(angle))


def format_number(value: float, precision: int = 3) -> str:
    """Format a coordinate compactly: fixed precision, no trailing zeros."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def large_arc_flag(start_angle: float, end_angle: float) -> int:
    """1 when the arc subtends more than half a turn, else 0."""
    return 1 if abs(start_angle - end_angle) > math.pi else 0


def arc_segment(
    radius: float,
    start_angle: float,
    end_angle: float,
    sweep: int = 1,
    precision: int = 3,
) -> ArcSegment:
    """Build the arc between two angles on a circle around the origin.

    Args:
        radius: Circle radius.
        start_angle: Angle where the arc starts.
        end_angle: Angle where the arc ends.
        sweep: SVG sweep flag; 1 traces toward increasing angle.
        precision: Decimal places for coordinates.

    Returns:
        ArcSegment with path commands and endpoints.
    """
    start = polar_to_cartesian(radius, start_angle)
    end = polar_to_cartesian(radius, end_angle)
    fmt = partial(format_number, precision=precision)
    move = f"M {fmt(start[0])} {fmt(start[1])}"
    arc = " ".join(
        [
            "A", fmt(radius), fmt(radius), "0",
            str(large_arc_flag(start_angle, end_angle)), str(sweep),
            fmt(end[0]), fmt(end[1]),
        ]
    )
    return ArcSegment(move=move, arc=arc, start=start, end=end)


def annular_sector(
    inner_radius: float,
    thickness: float,
    start_angle: float,
    end_angle: float,
    precision: int = 3,
) -> str:
    """Path data for a ring slice between two radii and two angles.

    Traces the inner arc from start to end, steps out to the outer
    radius, traces the outer arc back from end to start, then closes
    on the inner arc's start point. The result is a single subpath so
    fill rules see one region.
    """
    inner = arc_segment(inner_radius, start_angle, end_angle, sweep=1, precision=precision)
    outer = arc_segment(
        inner_radius + thickness, end_angle, start_angle, sweep=0, precision=precision
    )
    fmt = partial(format_number, precision=precision)
    return (
        f"{inner.move} {inner.arc} "
        f"L {fmt(outer.start[0])} {fmt(outer.start[1])} {outer.arc} "
        f"L {fmt(inner.start[0])} {fmt(inner.start[1])} Z"
    )


def view_box(bound: float, precision: int = 3) -> str:
    """Square viewBox centered on the origin with half-width ``bound``."""
    return " ".join(format_number(v, precision) for v in (-bound, -bound, 2 * bound, 2 * bound))
