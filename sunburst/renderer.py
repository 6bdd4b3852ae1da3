"""SVG and PNG rendering for sunburst diagrams.

Turns an allocated SunburstLayout into SVG markup:

- Root (depth 0): filled inner disk, optionally labelled at the origin
- Sectors (depth >= 1): one <path> per non-degenerate ring slice,
  tagged with class "arc level-N" (N = ring index) and data-path

Markup is emitted as bare elements by default so callers can embed
it in their own document; with wrap=True the elements are enclosed
in an <svg> whose viewBox is sized to the outermost ring.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from xml.sax.saxutils import escape, quoteattr

import structlog

from .allocator import DiskDescriptor, SectorDescriptor, SunburstLayout, allocate
from .geometry import format_number
from .options import SunburstOptions
from .tree import TreeNode

logger = structlog.get_logger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def render_disk(disk: DiskDescriptor, options: SunburstOptions) -> str:
    """Markup for the inner disk."""
    r = format_number(disk.radius, options.precision)
    return (
        f'<circle r="{r}" cx="0" cy="0" fill={quoteattr(disk.color)} '
        f'data-path="{disk.path}"></circle>'
    )


def render_center_text(text: str) -> str:
    """Markup for the label at the origin."""
    return f'<text text-anchor="middle" class="center-text" y="8">{escape(text)}</text>'


def render_sector(sector: SectorDescriptor, options: SunburstOptions) -> str:
    """Markup for a single ring slice.

    The before_close hook, if set, is called with the sector's node and
    its return value is appended to the element's attributes.
    """
    attrs = [
        f'd="{sector.d}"',
        f"fill={quoteattr(sector.color or '')}",
        f'class="arc level-{sector.ring}"',
        f'data-path="{sector.path}"',
    ]
    if options.stroke:
        attrs.append(f"stroke={quoteattr(options.stroke)}")
    if options.stroke_width:
        attrs.append(f"stroke-width={quoteattr(str(options.stroke_width))}")
    if options.before_close is not None:
        extra = options.before_close(sector.node)
        if extra:
            attrs.append(extra.strip())
    return f"<path {' '.join(attrs)}></path>"


def render_sectors(layout: SunburstLayout) -> list[str]:
    """Markup elements for a layout: disk, center text, then sectors."""
    options = layout.options
    elements = [render_disk(layout.disk, options)]
    if options.center_text:
        elements.append(render_center_text(options.center_text))
    elements.extend(render_sector(sector, options) for sector in layout.sectors)
    return elements


def wrap_svg(body: str, layout: SunburstLayout) -> str:
    """Enclose markup in an <svg> sized to the layout's bound."""
    return (
        f'<svg xmlns="{SVG_NAMESPACE}" viewBox="{layout.view_box}">'
        f'<g id="scene">{body}</g>'
        "</svg>"
    )


def render_svg(
    tree: TreeNode | Mapping[str, Any] | SunburstLayout,
    options: SunburstOptions | None = None,
) -> str:
    """Render a tree as sunburst SVG markup.

    Args:
        tree: Root node, nested mappings, or an existing layout.
        options: Layout and markup options. Ignored when a layout is
            passed, since it already carries its options.

    Returns:
        Newline-joined elements, or a complete SVG document when the
        options ask for wrapping.
    """
    layout = tree if isinstance(tree, SunburstLayout) else allocate(tree, options)
    body = "\n".join(render_sectors(layout))
    svg_content = wrap_svg(body, layout) if layout.options.wrap else body

    logger.debug(
        "svg_rendered",
        sector_count=len(layout.sectors),
        depth=layout.depth,
        wrapped=layout.options.wrap,
    )

    return svg_content


def render_png(
    tree: TreeNode | Mapping[str, Any] | SunburstLayout,
    options: SunburstOptions | None = None,
    size: int = 512,
) -> bytes:
    """Render a tree as a PNG image.

    Generates wrapped SVG first, then converts to PNG via CairoSVG.

    Args:
        tree: Root node, nested mappings, or an existing layout.
        options: Layout and markup options.
        size: Output size in pixels (width = height).

    Returns:
        PNG image bytes.
    """
    import cairosvg

    layout = tree if isinstance(tree, SunburstLayout) else allocate(tree, options)
    body = "\n".join(render_sectors(layout))
    svg = wrap_svg(body, layout)
    png_bytes = cairosvg.svg2png(
        bytestring=svg.encode("utf-8"),
        output_width=size,
        output_height=size,
    )

    logger.debug("png_rendered", size=size, bytes=len(png_bytes))
    return png_bytes
