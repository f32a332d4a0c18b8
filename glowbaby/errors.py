class PlotError(Exception):
    """Base class for everything that aborts a render."""


class EmptyInputError(PlotError):
    """No segments were supplied."""


class InvalidSegmentError(PlotError):
    """A segment ends before it starts."""

    def __init__(self, index: int, start: int, end: int):
        super().__init__(
            f"segment {index} ends before it starts (start={start}, end={end})"
        )
        self.index = index
        self.start = start
        self.end = end


class OutOfOrderInstant(PlotError):
    """An instant falls on a calendar date before the reference date."""

    def __init__(self, start, end, index: int = None, instant: int = None):
        where = "" if index is None else f"segment {index}: "
        super().__init__(
            f"{where}{end.isoformat()} is on a calendar date before {start.isoformat()}"
        )
        self.start = start
        self.end = end
        # position of the offending segment and its raw timestamp, when known
        self.index = index
        self.instant = instant


class DegenerateScaleError(PlotError):
    """The data spans zero days, so no radial scale can be derived."""

    def __init__(self, max_day: int):
        super().__init__(
            f"cannot scale a plot whose furthest segment ends on day {max_day}; "
            "at least one segment must end after the reference date"
        )
        self.max_day = max_day


class EncodingError(PlotError):
    """The image encoder failed."""
