"""Sprite Matte - turn AI-generated matte images into binary-alpha pixel-art sprites.

Example:
    from spritematte import process_image_bytes

    with open("raw.png", "rb") as f:
        sprite = process_image_bytes(f.read(), 32)

    with open("sprite.png", "wb") as f:
        f.write(sprite)

Debug output from the stages:

    import logging
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

logger = logging.getLogger("spritematte")
logger.addHandler(logging.NullHandler())

from .codec import decode_image, encode_data_url, encode_png
from .color import color_distance, distance_map
from .config import (
    ALPHA_THRESHOLD,
    FRINGE_TOLERANCE,
    MATTE_TOLERANCE,
    MatteConfig,
    load_config,
)
from .errors import DegenerateImageError, RenderTargetError, SpriteMatteError
from .matte import clean_fringe, corner_coordinates, flood_matte, sample_matte_color
from .pipeline import (
    PipelineResult,
    process_image_bytes,
    process_pixel_art,
    process_pixels,
)
from .resample import binarize_alpha, clear_transparent_rgb, resample_nearest

__all__ = [
    "ALPHA_THRESHOLD",
    "FRINGE_TOLERANCE",
    "MATTE_TOLERANCE",
    "MatteConfig",
    "load_config",
    "SpriteMatteError",
    "DegenerateImageError",
    "RenderTargetError",
    "color_distance",
    "distance_map",
    "corner_coordinates",
    "sample_matte_color",
    "flood_matte",
    "clean_fringe",
    "resample_nearest",
    "binarize_alpha",
    "clear_transparent_rgb",
    "decode_image",
    "encode_png",
    "encode_data_url",
    "PipelineResult",
    "process_pixels",
    "process_image_bytes",
    "process_pixel_art",
]

__version__ = "0.1.0"
