import struct
import zlib

import numpy as np
import pytest

MAGENTA = (255, 0, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)


def canvas(width, height, color=MAGENTA):
    img = np.zeros((height, width, 4), dtype=np.uint8)
    img[:, :, :3] = color
    img[:, :, 3] = 255
    return img


def outlined_square(img, left, top, size, fill, outline=BLACK, thickness=2):
    img[top:top + size, left:left + size, :3] = outline
    inner = slice(top + thickness, top + size - thickness), slice(left + thickness, left + size - thickness)
    img[inner[0], inner[1], :3] = fill
    return img


@pytest.fixture
def scenario_a():
    """100x100 magenta with a centred 40x40 black-outlined red square."""
    return outlined_square(canvas(100, 100), 30, 30, 40, RED)


@pytest.fixture
def scenario_c():
    """Subject filled with the matte colour, enclosed by a black outline."""
    return outlined_square(canvas(20, 20), 5, 5, 10, MAGENTA, thickness=1)


def png_header(width, height):
    """A PNG with only an IHDR chunk declaring the given size."""
    def chunk(kind, body):
        return (struct.pack(">I", len(body)) + kind + body
                + struct.pack(">I", zlib.crc32(kind + body) & 0xFFFFFFFF))

    ihdr = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IEND", b"")
