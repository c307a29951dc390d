class SpriteMatteError(Exception):
    """Base class for sprite processing failures."""


class DegenerateImageError(SpriteMatteError):
    """The image has no pixels or could not be decoded."""


class RenderTargetError(SpriteMatteError):
    """The resampled output buffer could not be created."""
