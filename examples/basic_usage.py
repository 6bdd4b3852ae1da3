#!/usr/bin/env python3
"""Basic usage example for sunburst.

Demonstrates allocating a tree, inspecting its sectors, and rendering
it to SVG and PNG.

Usage:
    python examples/basic_usage.py
"""

import math
import os
import sys

# Add parent directory to path for direct script execution
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sunburst.allocator import allocate
from sunburst.options import SunburstOptions
from sunburst.renderer import render_png, render_svg
from sunburst.tree import TreeNode

FILESYSTEM = {
    "name": "/",
    "children": [
        {"name": "bin", "children": [{"name": "ls"}, {"name": "cat"}]},
        {"name": "etc", "children": [{"name": "hosts"}]},
        {
            "name": "usr",
            "children": [
                {"name": "lib", "children": [{"name": "a.so"}, {"name": "b.so"}, {"name": "c.so"}]},
                {"name": "share", "leaves": 2},
            ],
        },
    ],
}


def example_sectors():
    """Allocate a tree and list where each node landed."""
    print("=" * 60)
    print("Example 1: Sector Allocation")
    print("=" * 60)

    layout = allocate(FILESYSTEM)
    print(f"  Total leaves: {layout.total_leaves}")
    print(f"  Depth:        {layout.depth}")
    print(f"  Bound:        {layout.bound}")
    for sector in layout.sectors:
        degrees = math.degrees(sector.end_angle - sector.start_angle)
        print(f"  {sector.path:<10} {sector.node.name:<8} {degrees:6.1f} deg  {sector.color}")
    print()


def example_svg():
    """Render a wrapped SVG with outlines and a center label."""
    print("=" * 60)
    print("Example 2: SVG Rendering")
    print("=" * 60)

    options = SunburstOptions(
        initial_radius=60,
        level_step=30,
        stroke="#ffffff",
        stroke_width=1,
        center_text="/",
        wrap=True,
        before_close=lambda node: f'data-name="{node.name}"',
    )
    svg = render_svg(TreeNode.from_dict(FILESYSTEM), options)
    print(f"  SVG length:   {len(svg)} chars")
    print(f"  Paths:        {svg.count('<path')}")

    png_bytes = render_png(FILESYSTEM, options, size=256)
    print(f"  PNG size:     {len(png_bytes)} bytes")
    print()


if __name__ == "__main__":
    example_sectors()
    example_svg()
