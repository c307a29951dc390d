"""Background matte removal for flat-matte sprite renders.

Three steps, always in this order:

1. `sample_matte_color` picks the background reference from the corners.
2. `flood_matte` clears every pixel connected to a corner through
   matte-coloured pixels. Anything further than the tolerance acts as a
   wall, so an outlined subject keeps its interior even when the fill
   matches the background.
3. `clean_fringe` makes one pass over the pixels touching the cleared
   region and drops the anti-aliasing halo with a looser tolerance.

Buffers are numpy uint8 arrays of shape (height, width, 4) and are
modified in place.
"""
import logging
from collections import Counter

import cv2
import numpy as np

from .color import Color, distance_map
from .config import FRINGE_TOLERANCE, MATTE_TOLERANCE
from .errors import DegenerateImageError

logger = logging.getLogger(__name__)

# 4-connectivity, centre included
_CROSS = cv2.getStructuringElement(cv2.MORPH_CROSS, (3, 3))


def corner_coordinates(width: int, height: int):
    """Corners as (x, y): top-left, top-right, bottom-left, bottom-right."""
    return [(0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1)]


def _check_size(rgba):
    if rgba.ndim != 3 or rgba.shape[2] != 4:
        raise DegenerateImageError(f"expected an RGBA buffer, got shape {rgba.shape}")
    height, width = rgba.shape[:2]
    if width == 0 or height == 0:
        raise DegenerateImageError(f"image has no pixels ({width}x{height})")
    return width, height


def sample_matte_color(rgba: np.ndarray) -> Color:
    """Return the most common corner colour.

    Ties go to the corner seen first in top-left, top-right, bottom-left,
    bottom-right order.
    """
    width, height = _check_size(rgba)

    corner_colors = [tuple(int(v) for v in rgba[y, x, :3])
                     for x, y in corner_coordinates(width, height)]
    # Counter keeps insertion order and most_common() is a stable sort
    color, count = Counter(corner_colors).most_common(1)[0]
    logger.debug("Corner colours %s -> matte %s (%d/4)", corner_colors, color, count)
    return color


def flood_matte(rgba: np.ndarray, color: Color, tolerance: float = MATTE_TOLERANCE) -> int:
    """Clear the border-connected background. Returns the number of pixels cleared."""
    width, height = _check_size(rgba)

    # Whether a pixel passes depends only on its own colour
    near = (distance_map(rgba, color) < tolerance).ravel().tolist()
    visited = bytearray(width * height)
    cleared = bytearray(width * height)

    # Iterative stack, large images would blow the recursion limit
    stack = list(corner_coordinates(width, height))
    while stack:
        x, y = stack.pop()
        idx = y * width + x
        if visited[idx]:
            continue
        visited[idx] = 1

        if not near[idx]:
            continue
        cleared[idx] = 1

        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if 0 <= nx < width and 0 <= ny < height and not visited[ny * width + nx]:
                stack.append((nx, ny))

    mask = np.frombuffer(bytes(cleared), dtype=np.uint8).reshape(height, width).astype(bool)
    rgba[:, :, 3][mask] = 0
    count = int(mask.sum())
    logger.debug("Flood matte cleared %d of %d pixels", count, width * height)
    return count


def clean_fringe(rgba: np.ndarray, color: Color, tolerance: float = FRINGE_TOLERANCE) -> int:
    """Clear near-matte pixels directly next to transparent ones, in a single pass.

    Neighbour transparency is read from the alpha channel as it was before
    the pass, so a pixel cleared here never exposes the next one.
    """
    _check_size(rgba)

    alpha = rgba[:, :, 3]
    # Snapshot, not an in-place scan: clearing one pixel must not expose its neighbour
    opaque = alpha > 0
    # Out-of-bounds neighbours count as opaque with the default erode border
    eroded = cv2.erode(opaque.astype(np.uint8) * 255, _CROSS)
    on_edge = opaque & (eroded == 0)

    mask = on_edge & (distance_map(rgba, color) < tolerance)
    alpha[mask] = 0
    count = int(mask.sum())
    logger.debug("Fringe pass cleared %d of %d edge pixels", count, int(on_edge.sum()))
    return count
