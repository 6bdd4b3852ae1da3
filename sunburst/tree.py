"""Tree data structures for sunburst partitioning.

A sunburst is drawn from a caller-supplied hierarchy. Each node may
carry an explicit leaf weight, fill color, or (for the root's direct
children) an explicit angular interval. Anything not supplied is
derived during allocation; the tree itself is never modified.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import InconsistentOverride, InvalidColor, InvalidWeight, MissingStructure


@dataclass(eq=False)
class TreeNode:
    """A node in the input hierarchy.

    Nodes compare by identity so they can key the side tables built
    during allocation.

    Attributes:
        children: Ordered child nodes. None marks a leaf; an empty list
            marks an internal node with nothing beneath it (weight 0).
        leaves: Explicit leaf weight. Trusted as-is on a childless node;
            on a node with children it must equal their total.
        color: Explicit fill, inherited by the subtree unless overridden.
        start_angle: Explicit interval start in radians.
        end_angle: Explicit interval end in radians.
        name: Free-form label, carried through to output.
    """

    children: list[TreeNode] | None = None
    leaves: float | None = None
    color: str | None = None
    start_angle: float | None = None
    end_angle: float | None = None
    name: str | None = None

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children list (weight 1 unless overridden)."""
        return self.children is None

    @property
    def has_explicit_angles(self) -> bool:
        """True if both interval bounds were supplied."""
        return self.start_angle is not None and self.end_angle is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | TreeNode, path: str = "0") -> TreeNode:
        """Build a tree from nested mappings (e.g. parsed JSON).

        Accepts ``children``, ``leaves``, ``color``, ``name`` and the
        angle keys in either ``startAngle`` or ``start_angle`` spelling.

        Raises:
            MissingStructure: If a node is not a mapping or its children
                are not a list.
        """
        if isinstance(data, TreeNode):
            return data
        if not isinstance(data, Mapping):
            raise MissingStructure(
                f"Expected a mapping for tree node, got {type(data).__name__}", path
            )

        raw_children = data.get("children")
        children: list[TreeNode] | None = None
        if raw_children is not None:
            if not _is_sequence(raw_children):
                raise MissingStructure(
                    f"children must be a list, got {type(raw_children).__name__}", path
                )
            children = [
                cls.from_dict(child, f"{path}:{i}") for i, child in enumerate(raw_children)
            ]

        return cls(
            children=children,
            leaves=data.get("leaves"),
            color=data.get("color"),
            start_angle=_first_present(data, "startAngle", "start_angle"),
            end_angle=_first_present(data, "endAngle", "end_angle"),
            name=None if data.get("name") is None else str(data["name"]),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to nested mappings, omitting unset fields."""
        out: dict[str, Any] = {}
        if self.name is not None:
            out["name"] = self.name
        if self.leaves is not None:
            out["leaves"] = self.leaves
        if self.color is not None:
            out["color"] = self.color
        if self.start_angle is not None:
            out["startAngle"] = self.start_angle
        if self.end_angle is not None:
            out["endAngle"] = self.end_angle
        if self.children is not None:
            out["children"] = [child.to_dict() for child in self.children]
        return out


def validate_tree(node: TreeNode, path: str = "0") -> None:
    """Check a tree for malformed structure, weights and overrides.

    Runs before any allocation so a bad tree fails without producing
    partial output.

    Raises:
        MissingStructure: children is not a list of TreeNode.
        InvalidWeight: explicit leaves is not a finite number >= 0.
        InconsistentOverride: only one angle bound given, or non-finite.
        InvalidColor: explicit color is not a string.
    """
    if not isinstance(node, TreeNode):
        raise MissingStructure(f"Expected TreeNode, got {type(node).__name__}", path)

    if node.leaves is not None and not _is_finite_number(node.leaves, allow_negative=False):
        raise InvalidWeight(
            f"leaves must be a finite non-negative number, got {node.leaves!r}", path
        )

    if node.color is not None and not isinstance(node.color, str):
        raise InvalidColor(f"color must be a string, got {type(node.color).__name__}", path)

    has_start = node.start_angle is not None
    has_end = node.end_angle is not None
    if has_start != has_end:
        raise InconsistentOverride("start_angle and end_angle must be given together", path)
    if has_start and not (
        _is_finite_number(node.start_angle) and _is_finite_number(node.end_angle)
    ):
        raise InconsistentOverride(
            f"explicit angles must be finite, got ({node.start_angle!r}, {node.end_angle!r})",
            path,
        )

    if node.children is None:
        return
    if not _is_sequence(node.children):
        raise MissingStructure(
            f"children must be a list, got {type(node.children).__name__}", path
        )
    for i, child in enumerate(node.children):
        validate_tree(child, f"{path}:{i}")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_finite_number(value: Any, allow_negative: bool = True) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if not math.isfinite(value):
        return False
    return allow_negative or value >= 0


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None
