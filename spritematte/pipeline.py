"""End-to-end sprite processing.

Decode -> sample matte -> flood matte -> fringe -> resample -> binarize -> encode.
Each call owns its buffers, so separate images can be processed concurrently.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .codec import decode_image, encode_data_url, encode_png
from .color import Color
from .config import MatteConfig
from .matte import clean_fringe, flood_matte, sample_matte_color
from .resample import binarize_alpha, clear_transparent_rgb, resample_nearest

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    image: np.ndarray
    matte_color: Color
    matted: int
    fringe: int
    resolution: int


def process_pixels(rgba: np.ndarray, resolution: int,
                   config: Optional[MatteConfig] = None) -> PipelineResult:
    """Run the matte and resampling stages on a decoded RGBA buffer.

    The input buffer is copied first and never modified.
    """
    config = config or MatteConfig()
    work = np.array(rgba, dtype=np.uint8, copy=True)

    matte_color = sample_matte_color(work)
    matted = flood_matte(work, matte_color, config.matte_tolerance)
    fringe = clean_fringe(work, matte_color, config.fringe_tolerance)

    out = resample_nearest(work, resolution)
    binarize_alpha(out, config.alpha_threshold)
    if config.clear_transparent_rgb:
        clear_transparent_rgb(out)

    height, width = work.shape[:2]
    logger.info("Processed %dx%d -> %dx%d, matte %s, %d matted, %d fringe",
                width, height, resolution, resolution, matte_color, matted, fringe)
    return PipelineResult(out, matte_color, matted, fringe, resolution)


def process_image_bytes(payload, resolution: int, config: Optional[MatteConfig] = None) -> bytes:
    """Decode `payload`, process it and return the sprite as PNG bytes."""
    result = process_pixels(decode_image(payload), resolution, config)
    return encode_png(result.image)


async def process_pixel_art(payload, resolution: int, config: Optional[MatteConfig] = None) -> str:
    """Async entry point returning the sprite as a PNG data URL.

    Only decoding is awaited; the pixel stages run without suspending.
    """
    rgba = await asyncio.to_thread(decode_image, payload)
    result = process_pixels(rgba, resolution, config)
    return encode_data_url(result.image)
