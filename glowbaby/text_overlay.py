import os
import numpy as np
from matplotlib.figure import Figure
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.font_manager import FontProperties
from glowbaby.constants import BLACK

# points map 1:1 onto pixels
TEXT_DPI = 72


def render_text(
    text: str, width: int, size: float, font_path: str = None, color=BLACK
) -> np.ndarray:
    """Rasterize one line of text onto a transparent strip.

    Args:
        text (str): text to draw
        width (int): strip width in pixels
        size (float): font size in points
        font_path (str, optional): TrueType font file. Defaults to matplotlib's
            default sans-serif font.
        color (tuple, optional): RGBA text color, 0..255. Defaults to BLACK.

    Raises:
        FileNotFoundError: if `font_path` does not exist

    Returns:
        np.ndarray: uint8 RGBA array of shape (about 2 * size, width, 4)
    """
    if font_path is not None:
        if not os.path.exists(font_path):
            raise FileNotFoundError(f"loading font file {font_path}: no such file")
        prop = FontProperties(fname=font_path, size=size)
    else:
        prop = FontProperties(size=size)

    # one line, with room for ascenders and descenders
    strip_height = int(size * 2)
    fig = Figure(figsize=(width / TEXT_DPI, strip_height / TEXT_DPI), dpi=TEXT_DPI)
    fig.patch.set_alpha(0)
    agg = FigureCanvasAgg(fig)
    fig.text(
        0,
        0.5,
        text,
        fontproperties=prop,
        color=[c / 255 for c in color],
        ha="left",
        va="center",
    )
    agg.draw()
    return np.array(agg.buffer_rgba(), dtype=np.uint8)


def write_text(
    canvas: np.ndarray,
    x: int,
    y: int,
    text: str,
    size: float,
    font_path: str = None,
    color=BLACK,
) -> None:
    """Draw `text` onto `canvas` with its top-left corner at (x, y).

    The text strip is alpha-blended over the canvas and clipped to its
    bounds. The canvas is modified in place.
    """
    height, width = canvas.shape[:2]
    if x >= width or y >= height:
        return
    strip = render_text(text, width - x, size, font_path, color)

    h = min(strip.shape[0], height - y)
    w = min(strip.shape[1], width - x)
    patch = strip[:h, :w].astype(np.float32)
    alpha = patch[..., 3:4] / 255.0
    region = canvas[y : y + h, x : x + w, :3].astype(np.float32)
    blended = region * (1 - alpha) + patch[..., :3] * alpha
    canvas[y : y + h, x : x + w, :3] = np.rint(blended).astype(np.uint8)
