import logging
import sqlite3
from glowbaby.babydb import load_one_baby, load_sleep_segments, load_feed_segments
from glowbaby.colors import get_color_policy
from glowbaby.constants import SLEEP, FEED
from glowbaby.errors import EmptyInputError
from glowbaby.polar_plot import PlotConfig, PolarPlot

# a mapping of plot types to how their segments are loaded and described
PLOT_SOURCES = {
    SLEEP: {
        "loader": load_sleep_segments,
        "noun": "sleep ranges",
        "title": "Sleep segments for {name} (born {born})",
        "empty": "Sorry, can't plot without any sleep recorded!",
    },
    FEED: {
        "loader": load_feed_segments,
        "noun": "feeds",
        "title": "Feeds for {name} (born {born})",
        "empty": "Sorry, can't plot without any feeds recorded!",
    },
}


def plot(conn: sqlite3.Connection, typ: str, config: PlotConfig = None, logger=None) -> bytes:
    """Render the `typ` plot for the first baby in the database.

    Args:
        conn (sqlite3.Connection): open database written by sync
        typ (str): "sleep" or "feed"
        config (PlotConfig, optional): canvas and zone settings
        logger (logging.Logger, optional): defaults to the "glowbaby" logger

    Raises:
        ValueError: if `typ` is not a known plot type
        EmptyInputError: if nothing of that type has been recorded

    Returns:
        bytes: PNG file contents
    """
    color_policy = get_color_policy(typ)
    source = PLOT_SOURCES[typ]
    config = config or PlotConfig()
    logger = logger or logging.getLogger("glowbaby")

    # TODO: handle more than one baby per account.
    info = load_one_baby(conn, config.tz)
    name, born = info.get_full_name(), info.get_birthday_str()
    logger.info(f"Selected {name} (born {born}) for {typ} plotting")

    segments = source["loader"](conn, info.baby_id)
    logger.info(f"Loaded {len(segments)} {source['noun']}")
    if not segments:
        raise EmptyInputError(source["empty"])

    pp = PolarPlot(
        source["title"].format(name=name, born=born),
        info.birthday,
        color_policy,
        segments=segments,
        config=config,
        logger=logger,
    )
    return pp.render()
