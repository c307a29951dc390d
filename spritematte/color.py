import math
from typing import Tuple

import numpy as np

Color = Tuple[int, int, int]


def color_distance(c1, c2) -> float:
    r = int(c1[0]) - int(c2[0])
    g = int(c1[1]) - int(c2[1])
    b = int(c1[2]) - int(c2[2])
    return math.sqrt(r*r + g*g + b*b)


def distance_map(rgba: np.ndarray, color: Color) -> np.ndarray:
    """Euclidean RGB distance of every pixel to `color`, shape (h, w)."""
    diff = rgba[:, :, :3].astype(np.int32) - np.asarray(color[:3], dtype=np.int32)
    return np.sqrt((diff * diff).sum(axis=2))
