
import os
import sys

import numpy as np
from PIL import Image

from spritematte import corner_coordinates, sample_matte_color

# Use command-line argument or default to relative path
script_dir = os.path.dirname(os.path.abspath(__file__))
default_path = os.path.join(script_dir, 'public', 'images', 'sprite.png')


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    image_path = argv[0] if argv else default_path

    try:
        img = Image.open(image_path)
        print(f"Format: {img.format}")
        print(f"Mode: {img.mode}")

        rgba = np.array(img.convert("RGBA"))
        height, width = rgba.shape[:2]
        print(f"Size: {width}x{height}")

        print("Corner pixels:")
        for x, y in corner_coordinates(width, height):
            print(f"({x}, {y}): {tuple(int(v) for v in rgba[y, x])}")

        print(f"Matte color: {sample_matte_color(rgba)}")

        # Sprites should only have fully opaque or fully transparent pixels
        alpha = rgba[:, :, 3]
        partial = int(((alpha > 0) & (alpha < 255)).sum())
        transparent = int((alpha == 0).sum())
        print(f"Transparent pixels: {transparent}")
        print(f"Binary alpha: {'yes' if partial == 0 else f'no ({partial} partial)'}")
        return 0

    except Exception as e:
        print(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
