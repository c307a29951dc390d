import logging

import cv2
import numpy as np
from PIL import Image

from .config import ALPHA_THRESHOLD
from .errors import RenderTargetError

logger = logging.getLogger(__name__)


def resample_nearest(rgba: np.ndarray, resolution: int) -> np.ndarray:
    """Draw `rgba` into a new resolution x resolution buffer with nearest-neighbour sampling.

    No smoothing filter is ever applied; it would bring back the
    semi-transparent edge the matte stages removed. Non-square sources are
    stretched to the square.
    """
    if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)) or resolution <= 0:
        raise RenderTargetError(f"resolution must be a positive integer, got {resolution!r}")

    src = Image.fromarray(np.ascontiguousarray(rgba))
    try:
        dst = src.resize((int(resolution), int(resolution)), Image.Resampling.NEAREST)
        out = np.array(dst)
    except (MemoryError, ValueError) as e:
        raise RenderTargetError(f"cannot create {resolution}x{resolution} target: {e}") from e

    logger.debug("Resampled %dx%d -> %dx%d", src.width, src.height, resolution, resolution)
    return out


def binarize_alpha(rgba: np.ndarray, threshold: int = ALPHA_THRESHOLD) -> np.ndarray:
    """Force alpha to 0 below `threshold` and to 255 otherwise. RGB is left alone."""
    alpha = np.ascontiguousarray(rgba[:, :, 3])
    # THRESH_BINARY keeps values strictly above the cut
    _, binary = cv2.threshold(alpha, threshold - 1, 255, cv2.THRESH_BINARY)
    rgba[:, :, 3] = binary
    return rgba


def clear_transparent_rgb(rgba: np.ndarray) -> np.ndarray:
    """Zero the colour of fully transparent pixels, as a premultiplied canvas would."""
    rgba[rgba[:, :, 3] == 0] = 0
    return rgba
