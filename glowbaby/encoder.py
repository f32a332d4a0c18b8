from io import BytesIO
import numpy as np
import matplotlib.image as mpimg
from glowbaby.errors import EncodingError


def encode_png(canvas: np.ndarray) -> bytes:
    """Encode an RGBA canvas as a losslessly compressed PNG.

    Args:
        canvas (np.ndarray): uint8 array of shape (height, width, 4)

    Raises:
        EncodingError: wrapping whatever the encoder raised

    Returns:
        bytes: PNG file contents
    """
    buf = BytesIO()
    try:
        mpimg.imsave(buf, canvas, format="png", pil_kwargs={"compress_level": 9})
    except Exception as e:
        raise EncodingError(f"encoding PNG: {e}") from e
    return buf.getvalue()
