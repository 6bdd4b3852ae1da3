"""Sunburst layout and markup options.

Defaults mirror the classic sunburst look: a 100-unit inner disk,
10-unit rings, and a warm six-color palette applied to the top level.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .tree import TreeNode

# Palette cycled across the root's children (deeper levels inherit)
DEFAULT_COLORS = ("#f2ad52", "#e99e9b", "#ed684c", "#c03657", "#642b1c", "#132a4e")

DEFAULT_INITIAL_RADIUS = 100.0
DEFAULT_LEVEL_STEP = 10.0
DEFAULT_START_ANGLE = 0.0
DEFAULT_PRECISION = 3
DEFAULT_DISK_FILL = "#fafafa"

# camelCase spellings accepted by from_mapping
_ALIASES = {
    "initialRadius": "initial_radius",
    "levelStep": "level_step",
    "startAngle": "start_angle",
    "centerText": "center_text",
    "strokeWidth": "stroke_width",
    "beforeClose": "before_close",
    "diskFill": "disk_fill",
}


@dataclass(frozen=True)
class SunburstOptions:
    """Options controlling ring geometry and sector markup.

    Attributes:
        initial_radius: Radius of the inner disk.
        level_step: Thickness of every ring.
        colors: Palette cycled by sibling index at the top level.
        start_angle: Rotation of the first top-level sector, in radians.
        center_text: Optional label drawn at the origin.
        stroke: Optional outline color for sectors.
        stroke_width: Optional outline width for sectors.
        wrap: Enclose the output in a sized <svg> element.
        before_close: Hook returning extra attributes for a sector's node.
        precision: Decimal places used for path coordinates.
        disk_fill: Fill of the inner disk.
    """

    initial_radius: float = DEFAULT_INITIAL_RADIUS
    level_step: float = DEFAULT_LEVEL_STEP
    colors: tuple[str, ...] = DEFAULT_COLORS
    start_angle: float = DEFAULT_START_ANGLE
    center_text: str | None = None
    stroke: str | None = None
    stroke_width: float | str | None = None
    wrap: bool = False
    before_close: Callable[[TreeNode], str] | None = None
    precision: int = DEFAULT_PRECISION
    disk_fill: str = DEFAULT_DISK_FILL

    def __post_init__(self) -> None:
        if isinstance(self.colors, str) or not isinstance(self.colors, Sequence):
            raise ValueError("colors must be a sequence of color strings")
        object.__setattr__(self, "colors", tuple(self.colors))
        if not self.colors:
            raise ValueError("colors must not be empty")
        if not self.initial_radius > 0:
            raise ValueError(f"initial_radius must be positive, got {self.initial_radius}")
        if self.level_step < 0:
            raise ValueError(f"level_step must be non-negative, got {self.level_step}")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        if self.before_close is not None and not callable(self.before_close):
            raise ValueError("before_close must be callable")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> SunburstOptions:
        """Build options from a loose mapping (camelCase or snake_case).

        Numeric options that are missing or not finite fall back to
        their defaults; unknown keys are rejected.
        """
        if values is None:
            return cls()

        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = _ALIASES.get(key, key)
            if name not in cls.__dataclass_fields__:
                raise ValueError(f"Unknown option '{key}'")
            kwargs[name] = value

        kwargs["initial_radius"] = _number_or(kwargs.get("initial_radius"), DEFAULT_INITIAL_RADIUS)
        kwargs["level_step"] = _number_or(kwargs.get("level_step"), DEFAULT_LEVEL_STEP)
        kwargs["start_angle"] = _number_or(kwargs.get("start_angle"), DEFAULT_START_ANGLE)
        if not kwargs.get("colors"):
            kwargs["colors"] = DEFAULT_COLORS
        kwargs = {k: v for k, v in kwargs.items() if v is not None}
        return cls(**kwargs)

    def ring_inner_radius(self, depth: int) -> float:
        """Inner radius of the ring at ``depth`` (root's children = 1)."""
        return self.initial_radius + (depth - 1) * self.level_step

    def bound(self, depth: int) -> float:
        """Half-width of the viewport for a tree of the given depth."""
        return depth * self.level_step + self.initial_radius


def _number_or(value: Any, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return value if math.isfinite(value) else default
