import json
from datetime import datetime
import pytz
from glowbaby.constants import REQUIRED_CONFIG_KEYS


def get_timestamp(timezone="America/Chicago") -> str:
    """
    Get the current time in the specified timezone, safe for file names.

    Args:
        timezone (str): IANA timezone string, e.g. "America/Chicago"

    Returns:
        str: e.g. "2024-05-01_13-45-00"
    """
    tz = pytz.timezone(timezone)
    return datetime.now(tz).strftime("%Y-%m-%d_%H-%M-%S")


def read_config(config_file: str) -> dict:
    """Read config.json into dict

    Args:
        config_file (str): path to config file

    Returns:
        dict: loaded into dictionary
    """
    with open(config_file, "r") as file:
        config = json.load(file)
    return config


def validate_config_keys(config: dict) -> None:
    """
    Validate that the required keys are present in the configuration dictionary.

    Args:
        config (dict): The loaded JSON configuration dictionary.

    Raises:
        KeyError: If any required key is missing from the configuration.
        ValueError: If the timezone is not a known IANA zone.

    Example:
        >>> config = read_config("config.json")
        >>> validate_config_keys(config)
    """
    missing_keys = [key for key in REQUIRED_CONFIG_KEYS if key not in config]

    if missing_keys:
        raise KeyError(f"Missing required config keys: {', '.join(missing_keys)}")

    try:
        pytz.timezone(config["timezone"])
    except pytz.UnknownTimeZoneError:
        raise ValueError(f"Unknown timezone in config: {config['timezone']}")
