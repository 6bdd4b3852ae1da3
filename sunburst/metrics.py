"""Leaf-count and depth metrics for sunburst trees.

Leaf counts are the angular weights: a node's share of its parent's
interval is its leaf count over the parent's. Depth sizes the outer
bound of the diagram.
"""

from __future__ import annotations

import math

import structlog

from .errors import InconsistentOverride, InvalidWeight
from .tree import TreeNode

logger = structlog.get_logger(__name__)

# Side table of computed weights, keyed by node identity
LeafCounts = dict[TreeNode, float]


def compute_leaves(node: TreeNode, counts: LeafCounts | None = None, path: str = "0") -> float:
    """Return the leaf weight of a node.

    Without an explicit ``leaves`` the weight is the sum over children,
    or 1 for a node without children. An empty children list sums to 0.
    A positive explicit ``leaves`` is trusted on a childless node; on a
    node with children it must agree with the children's sum.

    Args:
        node: Subtree root.
        counts: Optional side table; every visited node's weight is
            stored there. Weights already present are reused.
        path: Identifier of ``node``, used in error messages.

    Returns:
        The node's leaf weight.

    Raises:
        InvalidWeight: If the resulting weight is not finite.
        InconsistentOverride: If an explicit weight disagrees with the
            sum of the node's children.
    """
    if counts is not None and node in counts:
        return counts[node]

    if node.children is not None:
        summed = sum(
            compute_leaves(child, counts, f"{path}:{i}") for i, child in enumerate(node.children)
        )
    else:
        summed = 1

    if node.leaves:
        if node.children and not math.isclose(node.leaves, summed):
            raise InconsistentOverride(
                f"leaves={node.leaves!r} does not match the children's total {summed!r}", path
            )
        leaves = node.leaves
    else:
        leaves = summed

    if not math.isfinite(leaves):
        raise InvalidWeight(f"leaf weight overflowed to {leaves!r}", path)

    if counts is not None:
        counts[node] = leaves
    return leaves


def count_all_leaves(root: TreeNode) -> LeafCounts:
    """Compute weights for every node in the tree in one pass."""
    counts: LeafCounts = {}
    total = compute_leaves(root, counts)
    logger.debug("leaves_computed", total_leaves=total, node_count=len(counts))
    return counts


def compute_depth(node: TreeNode) -> int:
    """Maximum number of edges from node to any descendant (leaf alone = 0)."""
    if not node.children:
        return 0
    return 1 + max(compute_depth(child) for child in node.children)
