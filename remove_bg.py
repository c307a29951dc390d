
import logging
import os
import sys

from spritematte import SpriteMatteError, load_config, process_image_bytes

# Config
DEFAULT_RESOLUTION = 32
script_dir = os.path.dirname(os.path.abspath(__file__))
DEFAULT_CONFIG_PATH = os.path.join(script_dir, 'spritematte.yaml')


def default_output(input_path, resolution):
    root, _ = os.path.splitext(input_path)
    return f"{root}_sprite_{resolution}.png"


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: remove_bg.py INPUT [OUTPUT] [RESOLUTION] [CONFIG]")
        return 2

    input_path = argv[0]
    try:
        resolution = int(argv[2]) if len(argv) > 2 else DEFAULT_RESOLUTION
    except ValueError:
        print(f"Error: resolution must be an integer, got {argv[2]!r}")
        return 1
    output_path = argv[1] if len(argv) > 1 else default_output(input_path, resolution)
    config_path = argv[3] if len(argv) > 3 else DEFAULT_CONFIG_PATH

    try:
        config = load_config(config_path)
        logging.basicConfig(
            level=getattr(logging, config.log_level, logging.INFO),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

        print(f"Reading {input_path}...")
        with open(input_path, 'rb') as f:
            sprite = process_image_bytes(f.read(), resolution, config)

        with open(output_path, 'wb') as f:
            f.write(sprite)
        print(f"Saved {resolution}x{resolution} sprite to {output_path}")
        return 0

    except (SpriteMatteError, OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
