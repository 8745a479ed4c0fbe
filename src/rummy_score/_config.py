# Area: Shared
"""
rummy_score._config — Application Configuration
===============================================

Loads settings from an optional JSON file, then environment variables
(a .env file in the working directory is read first).
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger("rummy_score.config")

DEFAULT_CONFIG: Dict[str, Any] = {
    "db_path": "rummy_score.db",
    "log_file": "rummy_score.log",
    "log_level": "INFO",
    "export_dir": ".",
}

# Environment variable -> config key
ENV_MAPPINGS = {
    "RUMMY_DB_PATH": "db_path",
    "RUMMY_LOG_FILE": "log_file",
    "RUMMY_LOG_LEVEL": "log_level",
    "RUMMY_EXPORT_DIR": "export_dir",
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config(config_path: Optional[str] = None, use_dotenv: bool = True) -> Dict[str, Any]:
    """
    Load config from file and environment.

    Args:
        config_path: Optional JSON config file; a missing file is ignored
        use_dotenv: Read a .env file into the environment first

    Returns:
        Config dict with defaults filled in
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config.update(json.load(f))
        else:
            logger.warning(f"Config file not found: {path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    config["log_level"] = str(config["log_level"]).upper()
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If a value is unusable
    """
    if not config.get("db_path"):
        raise ValueError("db_path must not be empty")
    level = str(config.get("log_level", "")).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {config.get('log_level')!r}")


def log_level_value(config: Dict[str, Any]) -> int:
    """Numeric logging level for the configured name."""
    return getattr(logging, str(config["log_level"]).upper())
