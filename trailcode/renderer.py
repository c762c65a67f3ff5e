"""SVG and PNG previews of encoded paths.

Draws the walk as a single polyline on a white canvas. Coordinates are
projected equirectangularly around the path's mean latitude and scaled to
fit the canvas with a fixed margin, keeping the aspect ratio. The start
point is marked with a circle.
"""

from __future__ import annotations

import numpy as np
import structlog

from .path import Path

logger = structlog.get_logger(__name__)

DEFAULT_COLORS = ["#2D3748", "#C53030"]
MARGIN_FRACTION = 0.06


def project_points(path: Path, size: int) -> np.ndarray:
    """Project path points to pixel space.

    Args:
        path: Path to project.
        size: Canvas size in pixels (square).

    Returns:
        Array of shape (N, 2) with x, y pixel coordinates, y pointing down.
    """
    coords = np.asarray(path.coordinates(), dtype=float).reshape(-1, 2)
    if coords.shape[0] == 0:
        return coords

    lon_scale = np.cos(np.radians(coords[:, 1].mean()))
    x = coords[:, 0] * lon_scale
    y = coords[:, 1]

    span = max(np.ptp(x), np.ptp(y))
    margin = size * MARGIN_FRACTION
    usable = size - 2 * margin
    if span == 0:
        # Single point, or a walk that returns to where it started
        return np.full((coords.shape[0], 2), size / 2.0)

    scale = usable / span
    # Center the path's bounding box on the canvas
    px = margin + (x - x.min()) * scale + (usable - np.ptp(x) * scale) / 2
    py = margin + (y.max() - y) * scale + (usable - np.ptp(y) * scale) / 2
    return np.column_stack([px, py])


def render_svg(path: Path, colors: list[str] | None = None, size: int = 512) -> str:
    """Render a path as an SVG string.

    Args:
        path: Encoded path.
        colors: ``[line_color, start_marker_color]``; missing entries fall
            back to the defaults.
        size: Output size in pixels (width = height).

    Returns:
        Complete SVG document as a string.
    """
    palette = list(colors or []) + DEFAULT_COLORS[len(colors or []):]
    pixels = project_points(path, size)
    stroke = max(size / 256.0, 1.0)

    svg_parts: list[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="0 0 {size} {size}" '
        f'width="{size}" height="{size}">',
        f'  <rect width="{size}" height="{size}" fill="white"/>',
    ]

    if len(pixels) > 1:
        points_str = " ".join(f"{x:.1f},{y:.1f}" for x, y in pixels)
        svg_parts.append(
            f'  <polyline points="{points_str}" '
            f'fill="none" '
            f'stroke="{palette[0]}" '
            f'stroke-width="{stroke:.1f}" '
            f'stroke-linejoin="round" stroke-linecap="round"/>'
        )

    if len(pixels) > 0:
        sx, sy = pixels[0]
        svg_parts.append(
            f'  <circle cx="{sx:.1f}" cy="{sy:.1f}" r="{stroke * 3:.1f}" '
            f'fill="{palette[1]}" class="start-point"/>'
        )

    svg_parts.append("</svg>")
    svg_content = "\n".join(svg_parts)

    logger.debug("svg_rendered", points=len(pixels), size=size)
    return svg_content


def render_png(path: Path, colors: list[str] | None = None, size: int = 512) -> bytes:
    """Render a path as a PNG image.

    Generates SVG first, then converts to PNG via CairoSVG.
    """
    import cairosvg

    svg = render_svg(path, colors, size)
    png_bytes = cairosvg.svg2png(
        bytestring=svg.encode("utf-8"),
        output_width=size,
        output_height=size,
    )

    logger.debug("png_rendered", size=size, bytes=len(png_bytes))
    return png_bytes
