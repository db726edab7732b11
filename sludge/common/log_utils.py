"""Logging configuration for the calculator CLI.

Library modules only create module-level loggers; configuring handlers is
left to the entry point, which calls configure_logging() once.
"""

import json
import logging
import logging.config
import os
from pathlib import Path

CONFIG_DIR = Path(__file__).parent.parent


def load_logging_config(use_json: bool | None = None) -> dict | None:
    """Load the packaged dictConfig for the requested log format.

    Args:
        use_json: Structured JSON lines (python-json-logger) when True, plain
            text when False. Defaults to SLUDGE_LOG_FORMAT=json.

    Returns:
        The dictConfig dictionary, or None if the file is missing.
    """
    if use_json is None:
        use_json = os.environ.get("SLUDGE_LOG_FORMAT", "text").lower() == "json"
    config_path = CONFIG_DIR / ("logging.json" if use_json else "logging-dev.json")

    if not config_path.exists():
        return None
    with open(config_path) as f:
        return json.load(f)


def configure_logging(level: str | None = None) -> None:
    """Configure logging from the packaged dictConfig files.

    Uses logging.json (structured JSON lines) when SLUDGE_LOG_FORMAT=json,
    otherwise logging-dev.json with a simple text format for readability.

    Args:
        level: Optional root log level overriding the file's setting
    """
    config = load_logging_config()

    if config is not None:
        logging.config.dictConfig(config)
    else:
        # Fallback to basic config if file not found
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    if level:
        logging.getLogger().setLevel(level.upper())
