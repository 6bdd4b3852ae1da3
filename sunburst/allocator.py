"""Angle allocation for sunburst diagrams.

Walks the tree top-down and gives each node an angular interval
proportional to its leaf weight, then turns (ring, interval) into
annular-sector path data.

Allocation algorithm:
1. Validate the tree and compute every node's leaf weight
2. Root children partition [start_angle, start_angle + 2*pi) by weight,
   unless a child supplies its own explicit interval
3. Every deeper node subdivides its parent's interval by weight
4. Colors come from the palette at the top level and are inherited
   below it, unless a node names its own
5. Nodes with an empty interval emit no sector

The input tree is left untouched. Computed weights, path ids and
intervals are returned in a SunburstLayout.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from .geometry import annular_sector, view_box
from .metrics import LeafCounts, compute_depth, count_all_leaves
from .options import SunburstOptions
from .tree import TreeNode, validate_tree

logger = structlog.get_logger(__name__)

FULL_TURN = 2 * math.pi
ROOT_PATH = "0"


@dataclass(frozen=True)
class NodeLayout:
    """Where a single node landed in the diagram.

    Attributes:
        node: The input node.
        path: Identifier built from sibling indices ("0", "0:2", "0:2:1").
        depth: Edges from the root (root = 0).
        start_angle: Interval start in radians.
        end_angle: Interval end in radians.
        color: Resolved fill.
        leaves: Leaf weight used for allocation.
    """

    node: TreeNode
    path: str
    depth: int
    start_angle: float
    end_angle: float
    color: str | None
    leaves: float

    @property
    def width(self) -> float:
        """Angular width of the interval."""
        return abs(self.end_angle - self.start_angle)

    @property
    def is_degenerate(self) -> bool:
        """True if the interval is empty and no sector is drawn."""
        return self.start_angle == self.end_angle


@dataclass(frozen=True)
class DiskDescriptor:
    """The filled inner disk standing for the root."""

    radius: float
    color: str
    path: str
    node: TreeNode


@dataclass(frozen=True)
class SectorDescriptor:
    """Geometry and style for one drawn ring slice."""

    d: str
    color: str | None
    depth: int
    path: str
    start_angle: float
    end_angle: float
    inner_radius: float
    outer_radius: float
    node: TreeNode

    @property
    def ring(self) -> int:
        """Zero-based ring index (root's children are ring 0)."""
        return self.depth - 1


@dataclass
class SunburstLayout:
    """Result of allocating a tree.

    Attributes:
        root: The input root node.
        options: Options used for allocation.
        total_leaves: Leaf weight of the root.
        depth: Maximum depth of the tree.
        disk: Inner disk, always drawn first.
        nodes: Layout of every visited node, in drawing order.
        sectors: Non-degenerate sectors, in drawing order.
    """

    root: TreeNode
    options: SunburstOptions
    total_leaves: float
    depth: int
    disk: DiskDescriptor
    nodes: list[NodeLayout] = field(default_factory=list)
    sectors: list[SectorDescriptor] = field(default_factory=list)
    _index: dict[TreeNode, NodeLayout] = field(default_factory=dict, repr=False)

    @property
    def bound(self) -> float:
        """Half-width of the square viewport around the origin."""
        return self.options.bound(self.depth)

    @property
    def view_box(self) -> str:
        """SVG viewBox attribute value sized to the bound."""
        return view_box(self.bound, self.options.precision)

    def layout_for(self, node: TreeNode) -> NodeLayout:
        """Look up a node's layout.

        Raises:
            KeyError: If the node is not part of this tree.
        """
        return self._index[node]


@dataclass(frozen=True)
class _Frame:
    """Traversal context carried down the tree."""

    path: str
    depth: int
    start_angle: float
    end_angle: float
    color: str | None


def allocate(
    tree: TreeNode | Mapping[str, Any],
    options: SunburstOptions | None = None,
) -> SunburstLayout:
    """Assign angular intervals and sector geometry to every node.

    Args:
        tree: Root node, or nested mappings accepted by TreeNode.from_dict.
        options: Geometry options; defaults apply when omitted.

    Returns:
        SunburstLayout with per-node intervals and drawable sectors.

    Raises:
        SunburstError: If the tree is malformed (see errors module).
    """
    options = options or SunburstOptions()
    root = TreeNode.from_dict(tree) if isinstance(tree, Mapping) else tree
    validate_tree(root)

    counts = count_all_leaves(root)
    total_leaves = counts[root]
    layout = SunburstLayout(
        root=root,
        options=options,
        total_leaves=total_leaves,
        depth=compute_depth(root),
        disk=DiskDescriptor(
            radius=options.initial_radius,
            color=options.disk_fill,
            path=ROOT_PATH,
            node=root,
        ),
    )

    _record(
        layout,
        root,
        _Frame(
            path=ROOT_PATH,
            depth=0,
            start_angle=options.start_angle,
            end_angle=options.start_angle + FULL_TURN,
            color=options.disk_fill,
        ),
        total_leaves,
    )

    angle = options.start_angle
    palette = options.colors
    for i, child in enumerate(root.children or ()):
        if child.has_explicit_angles:
            # Explicit placement does not move the shared cursor
            this_start, this_end = child.start_angle, child.end_angle
        else:
            this_start = angle
            this_end = angle + _share(FULL_TURN, counts[child], total_leaves)
            angle = this_end

        frame = _Frame(
            path=f"{ROOT_PATH}:{i}",
            depth=1,
            start_angle=this_start,
            end_angle=this_end,
            color=child.color or palette[i % len(palette)],
        )
        _place(layout, child, frame, counts)

    logger.debug(
        "sectors_allocated",
        total_leaves=total_leaves,
        depth=layout.depth,
        node_count=len(layout.nodes),
        sector_count=len(layout.sectors),
    )
    return layout


def _place(layout: SunburstLayout, node: TreeNode, frame: _Frame, counts: LeafCounts) -> None:
    """Record a node, emit its sector, and subdivide its interval."""
    weight = counts[node]
    entry = _record(layout, node, frame, weight)
    if not entry.is_degenerate:
        layout.sectors.append(_sector(layout.options, entry))

    if not node.children:
        return

    arc_length = entry.width
    start = frame.start_angle
    for i, child in enumerate(node.children):
        # Angles below the top level always come from weights
        da = _share(arc_length, counts[child], weight)
        child_frame = _Frame(
            path=f"{frame.path}:{i}",
            depth=frame.depth + 1,
            start_angle=start,
            end_angle=start + da,
            color=child.color or frame.color,
        )
        _place(layout, child, child_frame, counts)
        start += da


def _record(layout: SunburstLayout, node: TreeNode, frame: _Frame, leaves: float) -> NodeLayout:
    entry = NodeLayout(
        node=node,
        path=frame.path,
        depth=frame.depth,
        start_angle=frame.start_angle,
        end_angle=frame.end_angle,
        color=frame.color,
        leaves=leaves,
    )
    layout.nodes.append(entry)
    layout._index[node] = entry
    return entry


def _sector(options: SunburstOptions, entry: NodeLayout) -> SectorDescriptor:
    inner_radius = options.ring_inner_radius(entry.depth)
    return SectorDescriptor(
        d=annular_sector(
            inner_radius,
            options.level_step,
            entry.start_angle,
            entry.end_angle,
            precision=options.precision,
        ),
        color=entry.color,
        depth=entry.depth,
        path=entry.path,
        start_angle=entry.start_angle,
        end_angle=entry.end_angle,
        inner_radius=inner_radius,
        outer_radius=inner_radius + options.level_step,
        node=entry.node,
    )


def _share(span: float, weight: float, total: float) -> float:
    """Portion of ``span`` owed to ``weight`` out of ``total``."""
    if total == 0:
        return 0.0
    return span * weight / total
