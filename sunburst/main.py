"""Sunburst microservice -- FastAPI application.

Endpoints:
    POST /sunburst/svg      -- Render a tree to an SVG document
    POST /sunburst/png      -- Render a tree to a PNG image
    POST /sunburst/sectors  -- Allocate a tree and return sector geometry as JSON
    GET  /health            -- Health check
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .allocator import allocate
from .options import DEFAULT_COLORS, SunburstOptions
from .renderer import render_png, render_svg

structlog.configure(
    processors=[
        structlog.dev.ConsoleRenderer(),
    ],
)

logger = structlog.get_logger(__name__)

SERVICE_VERSION = "0.1.0"

app = FastAPI(
    title="sunburst",
    description="Sunburst partition geometry for weighted trees",
    version=SERVICE_VERSION,
)


# --------------------------------------------------------------------------
# Request / Response models
# --------------------------------------------------------------------------


class OptionsModel(BaseModel):
    """Rendering options. Accepts snake_case or camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    initial_radius: float = Field(
        default=100.0,
        gt=0,
        description="Radius of the inner disk",
    )
    level_step: float = Field(
        default=10.0,
        ge=0,
        description="Thickness of each ring",
    )
    colors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COLORS),
        min_length=1,
        description="Palette cycled across the top-level sectors",
    )
    start_angle: float = Field(
        default=0.0,
        description="Rotation of the first sector, in radians",
    )
    center_text: str | None = Field(
        default=None,
        description="Label drawn at the center of the disk",
    )
    stroke: str | None = Field(default=None, description="Sector outline color")
    stroke_width: float | None = Field(default=None, ge=0, description="Sector outline width")
    precision: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Decimal places for path coordinates",
    )
    wrap: bool = Field(
        default=True,
        description="Enclose the output in a sized <svg> element",
    )

    def to_options(self) -> SunburstOptions:
        return SunburstOptions(**self.model_dump(exclude_none=True))


class SunburstRequest(BaseModel):
    """Request body for /sunburst/svg and /sunburst/sectors."""

    tree: dict[str, Any] = Field(
        ...,
        description="Nested tree: {children: [...], leaves?, color?, name?, startAngle?, endAngle?}",
        examples=[{"children": [{}, {}, {"children": [{}, {}]}]}],
    )
    options: OptionsModel = Field(default_factory=OptionsModel)


class PngRequest(SunburstRequest):
    """Request body for /sunburst/png."""

    size: int = Field(
        default=512,
        ge=64,
        le=2048,
        description="Output image size in pixels (square)",
    )


class DiskModel(BaseModel):
    """The filled inner disk standing for the root."""

    path: str
    radius: float
    color: str


class SectorModel(BaseModel):
    """One drawable ring slice."""

    path: str
    name: str | None = None
    depth: int
    color: str | None
    start_angle: float
    end_angle: float
    inner_radius: float
    outer_radius: float
    d: str


class SectorsResponse(BaseModel):
    """Response body for /sunburst/sectors."""

    total_leaves: float
    depth: int
    bound: float
    view_box: str
    disk: DiskModel
    sectors: list[SectorModel]


class HealthResponse(BaseModel):
    """Response body for /health."""

    status: str
    service: str
    version: str


# --------------------------------------------------------------------------
# Endpoints
# --------------------------------------------------------------------------


@app.post(
    "/sunburst/svg",
    response_class=Response,
    responses={
        200: {
            "content": {"image/svg+xml": {}},
            "description": "Sunburst diagram as SVG",
        },
        422: {"description": "Invalid tree or options"},
    },
)
async def sunburst_svg(request: SunburstRequest) -> Response:
    """Render a tree into sunburst SVG markup."""
    try:
        svg_content = render_svg(request.tree, request.options.to_options())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("render_svg_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Rendering failed")

    return Response(content=svg_content, media_type="image/svg+xml")


@app.post(
    "/sunburst/png",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "Sunburst diagram as PNG"},
        422: {"description": "Invalid tree or options"},
    },
)
async def sunburst_png(request: PngRequest) -> Response:
    """Render a tree into a sunburst PNG image."""
    try:
        png_bytes = render_png(request.tree, request.options.to_options(), request.size)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("render_png_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Rendering failed")

    return Response(content=png_bytes, media_type="image/png")


@app.post("/sunburst/sectors", response_model=SectorsResponse)
async def sunburst_sectors(request: SunburstRequest) -> SectorsResponse:
    """Allocate a tree and return the disk and per-sector geometry."""
    try:
        layout = allocate(request.tree, request.options.to_options())
        response = SectorsResponse(
            total_leaves=layout.total_leaves,
            depth=layout.depth,
            bound=layout.bound,
            view_box=layout.view_box,
            disk=DiskModel(
                path=layout.disk.path,
                radius=layout.disk.radius,
                color=layout.disk.color,
            ),
            sectors=[
                SectorModel(
                    path=s.path,
                    name=s.node.name,
                    depth=s.depth,
                    color=s.color,
                    start_angle=s.start_angle,
                    end_angle=s.end_angle,
                    inner_radius=s.inner_radius,
                    outer_radius=s.outer_radius,
                    d=s.d,
                )
                for s in layout.sectors
            ],
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("sectors_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Allocation failed")

    return response


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for Docker and load balancer probes."""
    return HealthResponse(
        status="healthy",
        service="sunburst",
        version=SERVICE_VERSION,
    )
