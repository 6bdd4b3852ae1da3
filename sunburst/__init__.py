"""Sunburst -- radial partition geometry for weighted trees.

Converts a hierarchy into concentric annular sectors, one ring per
tree level, where each node's angular span is proportional to the
number of leaves beneath it. The output is SVG path data (optionally
wrapped into a complete SVG document, or rasterised to PNG) for a
renderer to consume.
"""
