"""
Entry point for plotting synced baby data
Usage
- sync data into the database first
- python -m glowbaby.main --config config.json sleep sleep.png
"""

import argparse
import logging
import os
import sqlite3
import sys
from glowbaby.babydb import open_db
from glowbaby.constants import *
from glowbaby.errors import PlotError
from glowbaby.logger_setup import setup_logger
from glowbaby.plots import plot
from glowbaby.polar_plot import PlotConfig
from glowbaby.utils import get_timestamp, read_config, validate_config_keys


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Plot synced baby data to PNG.")
    parser.add_argument(
        "--config", type=str, default="config.json", help="Path to the config file"
    )
    parser.add_argument("type", choices=PLOT_TYPES, help="Which events to plot")
    parser.add_argument("dst", type=str, help="Where to write the PNG")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    config = read_config(args.config)

    # verify keys
    try:
        validate_config_keys(config)
    except (KeyError, ValueError) as e:
        print(f"[ERROR] Config validation failed: {e}")
        return 1

    timezone = config[TIMEZONE]
    log_dir = config[LOG_DIR]

    # initialize logger
    os.makedirs(log_dir, exist_ok=True)
    logger = setup_logger(
        "glowbaby",
        os.path.join(log_dir, f"{get_timestamp(timezone)}.log"),
        tz=timezone,
        level=logging.INFO,
    )

    plot_config = PlotConfig.from_config(config)

    try:
        conn = open_db(config[DB])
    except sqlite3.Error as e:
        logger.error(f"Opening DB {config[DB]}: {e}")
        return 1

    try:
        data = plot(conn, args.type, plot_config, logger)
    except (PlotError, LookupError, ValueError, sqlite3.Error) as e:
        logger.error(f"Plotting data: {e}")
        return 1
    finally:
        conn.close()

    with open(args.dst, "wb") as f:
        f.write(data)
    logger.info(f'OK; wrote "{args.type}" plot to {args.dst} ({len(data)} bytes)')
    return 0


if __name__ == "__main__":
    sys.exit(main())
