import base64
import binascii
import io

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import DegenerateImageError

DATA_URL_PREFIX = "data:image/png;base64,"


def _payload_bytes(payload) -> bytes:
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    if isinstance(payload, str):
        text = payload.strip()
        if text.startswith("data:"):
            # data:image/png;base64,<data>
            header, sep, text = text.partition(",")
            if not sep or ";base64" not in header:
                raise DegenerateImageError("only base64 data URLs are supported")
        # MIME-wrapped base64 carries line breaks
        text = "".join(text.split())
        try:
            return base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DegenerateImageError(f"invalid base64 payload: {e}") from e
    raise DegenerateImageError(f"unsupported payload type: {type(payload).__name__}")


def decode_image(payload) -> np.ndarray:
    """Decode PNG/JPEG/... bytes, base64 text or a data URL into an RGBA buffer."""
    data = _payload_bytes(payload)
    if not data:
        raise DegenerateImageError("empty image payload")

    try:
        with Image.open(io.BytesIO(data)) as img:
            rgba = np.array(img.convert("RGBA"))
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DegenerateImageError(f"cannot decode image: {e}") from e

    if rgba.shape[0] == 0 or rgba.shape[1] == 0:
        raise DegenerateImageError("decoded image has no pixels")
    return rgba


def encode_png(rgba: np.ndarray) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(np.ascontiguousarray(rgba)).save(buf, "PNG")
    return buf.getvalue()


def encode_data_url(rgba: np.ndarray) -> str:
    return DATA_URL_PREFIX + base64.b64encode(encode_png(rgba)).decode("ascii")
