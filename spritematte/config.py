from dataclasses import dataclass
from pathlib import Path

import yaml

# Strict: only pixels this close to the matte are flood-filled
MATTE_TOLERANCE = 45
# Loose: applied once, only next to already transparent pixels
FRINGE_TOLERANCE = 80
# alpha below this becomes 0, the rest 255
ALPHA_THRESHOLD = 128


@dataclass
class MatteConfig:
    matte_tolerance: float = MATTE_TOLERANCE
    fringe_tolerance: float = FRINGE_TOLERANCE
    alpha_threshold: int = ALPHA_THRESHOLD
    clear_transparent_rgb: bool = True
    log_level: str = "INFO"

    def __post_init__(self):
        if self.matte_tolerance <= 0 or self.fringe_tolerance <= 0:
            raise ValueError("tolerances must be positive")
        if not 1 <= self.alpha_threshold <= 255:
            raise ValueError(f"alpha_threshold out of range: {self.alpha_threshold}")


def load_config(path: str = "spritematte.yaml") -> MatteConfig:
    """Load config from YAML file, falling back to defaults for missing keys."""
    config_path = Path(path)

    if not config_path.exists():
        return MatteConfig()

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")

    defaults = MatteConfig()
    try:
        return MatteConfig(
            matte_tolerance=float(data.get("matte_tolerance", defaults.matte_tolerance)),
            fringe_tolerance=float(data.get("fringe_tolerance", defaults.fringe_tolerance)),
            alpha_threshold=int(data.get("alpha_threshold", defaults.alpha_threshold)),
            clear_transparent_rgb=bool(data.get("clear_transparent_rgb", defaults.clear_transparent_rgb)),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
        )
    except TypeError as e:
        # e.g. a key present with no value
        raise ValueError(f"invalid value in {path}: {e}") from e
