"""Logging setup for hosts embedding searchkit.

Loads a dictConfig schema from JSON. The file is picked from the argument,
then the LOG_CONFIG environment variable, then the logging.json shipped
inside the package.
"""

import json
import logging
import logging.config
import os
from pathlib import Path

DEFAULT_LOG_CONFIG = Path(__file__).resolve().parent / "logging.json"


def resolve_log_config_path(log_config_path: str | os.PathLike | None = None) -> Path:
    """Pick the logging config file: argument, then LOG_CONFIG, then default."""
    if log_config_path:
        return Path(log_config_path)
    env_path = os.environ.get("LOG_CONFIG")
    if env_path:
        return Path(env_path)
    return DEFAULT_LOG_CONFIG


def log_init(
    log_config_path: str | os.PathLike | None = None,
    level: str | int | None = None,
) -> Path:
    """Initialize logging from a JSON config file.

    ``level`` overrides the level of the ``searchkit`` logger after the
    config is applied. Returns the path that was loaded.
    """
    path = resolve_log_config_path(log_config_path)
    with open(path) as f:
        config = json.load(f)
    logging.config.dictConfig(config)
    if level is not None:
        logging.getLogger("searchkit").setLevel(level)
    return path
