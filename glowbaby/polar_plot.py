"""
Polar plot of recorded time segments.

Angle is the local time of day, midnight at the top and running clockwise.
Radius is the number of calendar days since the reference date.
"""

import logging
from datetime import datetime
from typing import List, Tuple
import numpy as np
import pytz
from glowbaby.colors import ColorPolicy, Color
from glowbaby.constants import *
from glowbaby.encoder import encode_png
from glowbaby.errors import (
    EmptyInputError,
    InvalidSegmentError,
    OutOfOrderInstant,
    DegenerateScaleError,
)
from glowbaby.text_overlay import write_text
from glowbaby.timemap import split_epoch, resolve_midnight_crossing


class PlotConfig:
    def __init__(
        self,
        width: int = PLOT_IMAGE_WIDTH,
        height: int = PLOT_IMAGE_HEIGHT,
        title_size: float = PLOT_TEXT_SIZE,
        timezone: str = DEFAULT_TIMEZONE,
        samples_per_segment: int = SAMPLES_PER_SEGMENT,
        title_font: str = None,
    ):
        """
        Args:
            width (int): canvas width in pixels
            height (int): canvas height in pixels
            title_size (float): title font size in points
            timezone (str): IANA zone the day boundaries are drawn in,
                e.g. "America/Chicago"
            samples_per_segment (int): points sampled along each arc
            title_font (str, optional): path to a TrueType font for the title

        Raises:
            ValueError: if `samples_per_segment` is below 1
        """
        if int(samples_per_segment) != samples_per_segment or samples_per_segment < 1:
            raise ValueError(
                f"samples_per_segment must be a whole number of at least 1, got {samples_per_segment!r}"
            )
        self.width = width
        self.height = height
        self.title_size = title_size
        self.timezone = timezone
        self.tz = pytz.timezone(timezone)
        self.samples_per_segment = int(samples_per_segment)
        self.title_font = title_font

    @classmethod
    def from_config(cls, config: dict) -> "PlotConfig":
        """Build from a loaded config.json, falling back to the defaults."""
        return cls(
            width=config.get(PLOT_WIDTH, PLOT_IMAGE_WIDTH),
            height=config.get(PLOT_HEIGHT, PLOT_IMAGE_HEIGHT),
            title_size=config.get(PLOT_TEXT_SIZE_KEY, PLOT_TEXT_SIZE),
            timezone=config.get(TIMEZONE, DEFAULT_TIMEZONE),
            samples_per_segment=config.get(
                SAMPLES_PER_SEGMENT_KEY, SAMPLES_PER_SEGMENT
            ),
            title_font=config.get(TITLE_FONT),
        )


def new_canvas(width: int, height: int) -> np.ndarray:
    """Fresh all-white, opaque RGBA canvas of shape (height, width, 4)."""
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:] = WHITE
    return canvas


def compute_day_scale(max_day: int, width: int, height: int) -> float:
    """Pixels per day, so that day `max_day` lands at 90% of the half-extent.

    Raises:
        DegenerateScaleError: if `max_day` is not positive
    """
    if max_day <= 0:
        raise DegenerateScaleError(max_day)
    return min(width, height) / 2 * PLOT_FILL_RATIO / max_day


def fraction_to_angle(frac):
    """Fraction of a day to radians; 0 is the top, increasing clockwise."""
    return frac * 2 * np.pi


def polar_to_pixel(radius, theta, width: int, height: int):
    """Canvas coordinates (x, y) of a polar point around the canvas centre."""
    # midnight at the top, clockwise
    x = width / 2 + radius * np.sin(theta)
    y = height / 2 - radius * np.cos(theta)
    return x, y


def draw_segment(
    canvas: np.ndarray,
    day_scale: float,
    start_day: int,
    start_frac: float,
    end_day: int,
    end_frac: float,
    color: Color,
    samples: int = SAMPLES_PER_SEGMENT,
) -> None:
    """Sample the arc of one segment and overwrite its pixels on `canvas`.

    `end_frac` must already be resolved for midnight crossings. Points
    falling outside the canvas are dropped.
    """
    height, width = canvas.shape[:2]
    t = np.linspace(0.0, 1.0, samples)
    radius = day_scale * (start_day + (end_day - start_day) * t)
    theta = fraction_to_angle(start_frac + (end_frac - start_frac) * t)
    x, y = polar_to_pixel(radius, theta, width, height)

    x = np.trunc(x).astype(np.int64)
    y = np.trunc(y).astype(np.int64)
    inside = (x >= 0) & (x < width) & (y >= 0) & (y < height)
    canvas[y[inside], x[inside]] = color


class PolarPlot:
    def __init__(
        self,
        title: str,
        zero: datetime,
        color_policy: ColorPolicy,
        segments: List[Tuple[int, int]] = None,
        config: PlotConfig = None,
        logger=None,
    ):
        """
        Args:
            title (str): drawn at the top-left of the plot
            zero (datetime): aware datetime at the centre of the circle,
                e.g. the birthday at local midnight
            color_policy (ColorPolicy): e.g. SLEEP_POLICY
            segments (list, optional): (start, end) unix timestamps, sorted
                by start
            config (PlotConfig, optional): canvas and zone settings
            logger (logging.Logger, optional): where title failures go
        """
        self.title = title
        self.zero = zero
        self.color_policy = color_policy
        self.segments = []
        self.config = config or PlotConfig()
        self.logger = logger or logging.getLogger("glowbaby")
        for start, end in segments or []:
            self.add_segment(start, end)

    def add_segment(self, start: int, end: int) -> None:
        if end < start:
            raise InvalidSegmentError(len(self.segments), start, end)
        self.segments.append((start, end))

    def split_epoch(self, x: int) -> Tuple[int, float]:
        return split_epoch(x, self.zero, self.config.tz)

    def split_segment_instant(self, index: int, x: int) -> Tuple[int, float]:
        """Like split_epoch, but failures name the segment and the instant."""
        try:
            return self.split_epoch(x)
        except OutOfOrderInstant as e:
            self.logger.error(f"Segment {index} instant {x} is dated before day 0")
            raise OutOfOrderInstant(e.start, e.end, index=index, instant=x) from e

    def map_segments(self) -> List[Tuple[int, float, int, float]]:
        """Map every segment to (start_day, start_frac, end_day, end_frac).

        Raises:
            InvalidSegmentError: if a segment ends before it starts
            OutOfOrderInstant: if a segment starts before the zero date,
                with `index` and `instant` set
        """
        mapped = []
        for i, (start, end) in enumerate(self.segments):
            if end < start:
                raise InvalidSegmentError(i, start, end)
            start_day, start_frac = self.split_segment_instant(i, start)
            end_day, end_frac = self.split_segment_instant(i, end)
            mapped.append((start_day, start_frac, end_day, end_frac))
        return mapped

    def render_canvas(self) -> np.ndarray:
        """Rasterize all segments and the title onto a new canvas."""
        if not self.segments:
            raise EmptyInputError(f"cannot plot {self.title!r} without any segments")

        mapped = self.map_segments()
        # the last segment should end furthest out, but unsorted input
        # must not push anything off the canvas
        max_day = max(end_day for _, _, end_day, _ in mapped)
        day_scale = compute_day_scale(max_day, self.config.width, self.config.height)

        canvas = new_canvas(self.config.width, self.config.height)
        for start_day, start_frac, end_day, end_frac in mapped:
            col = self.color_policy(start_day, end_day, start_frac, end_frac)
            end_frac = resolve_midnight_crossing(
                start_day, start_frac, end_day, end_frac
            )
            draw_segment(
                canvas,
                day_scale,
                start_day,
                start_frac,
                end_day,
                end_frac,
                col,
                self.config.samples_per_segment,
            )

        try:
            x, y = TITLE_OFFSET
            write_text(
                canvas, x, y, self.title, self.config.title_size, self.config.title_font
            )
        except Exception as e:
            # usually a missing font; the plot stands without a title
            self.logger.error(f"Writing title text: {e}")

        return canvas

    def render(self) -> bytes:
        """Render the plot to PNG bytes."""
        return encode_png(self.render_canvas())
