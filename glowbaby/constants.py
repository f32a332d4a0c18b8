# plot canvas defaults
PLOT_IMAGE_WIDTH = 1024  # pixels
PLOT_IMAGE_HEIGHT = 768  # pixels
PLOT_TEXT_SIZE = 16  # points

# the outermost day ring sits at 90% of the canvas half-extent
PLOT_FILL_RATIO = 0.9

# arc samples drawn for every segment, adequate for 1024x768
SAMPLES_PER_SEGMENT = 10000

# top-left offset of the title, in pixels
TITLE_OFFSET = (5, 5)

DEFAULT_TIMEZONE = "America/Chicago"

SECONDS_PER_DAY = 86400

# log line layout and file rotation
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_MAX_BYTES = 1048576
LOG_BACKUP_COUNT = 5

# RGBA colors
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
BLUE = (0, 0, 255, 255)
GREEN = (0, 255, 0, 255)
RED = (255, 0, 0, 255)

# sleep duration bands, lower bound inclusive
LONG_SLEEP_HOURS = 5
SHORT_SLEEP_HOURS = 1.5

# plot types
SLEEP = "sleep"
FEED = "feed"
PLOT_TYPES = (SLEEP, FEED)

# keys for config.json
DB = "db"
LOG_DIR = "log_dir"
TIMEZONE = "timezone"
PLOT_WIDTH = "plot_width"
PLOT_HEIGHT = "plot_height"
PLOT_TEXT_SIZE_KEY = "plot_text_size"
SAMPLES_PER_SEGMENT_KEY = "samples_per_segment"
TITLE_FONT = "title_font"

REQUIRED_CONFIG_KEYS = [DB, LOG_DIR, TIMEZONE]
