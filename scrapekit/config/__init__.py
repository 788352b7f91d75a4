"""Configuration module."""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses the packaged settings.yaml

    Returns:
        Configuration dictionary
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    config.setdefault("client", {})
    config.setdefault("extraction", {})
    config.setdefault("logging", {})

    # Override with environment variables if present
    if "SCRAPEKIT_TIMEOUT" in os.environ:
        config["client"]["timeout"] = float(os.environ["SCRAPEKIT_TIMEOUT"])

    if "SCRAPEKIT_VERIFY_CERTIFICATES" in os.environ:
        config["client"]["verify_certificates"] = (
            os.environ["SCRAPEKIT_VERIFY_CERTIFICATES"].strip().lower() in _TRUE_VALUES
        )

    if "SCRAPEKIT_USER_AGENT" in os.environ:
        config["client"]["user_agent"] = os.environ["SCRAPEKIT_USER_AGENT"]

    if "LOG_LEVEL" in os.environ:
        config["logging"]["level"] = os.environ["LOG_LEVEL"]

    return config
