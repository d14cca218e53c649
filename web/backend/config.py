#!/usr/bin/env python3
"""
Configuration access for the web application.
"""

import os
from functools import lru_cache

from core.config_loader import AppConfig, load_config


@lru_cache()
def get_config() -> AppConfig:
    """Load the application config once per process.

    The path can be overridden with the CONFIG_PATH environment variable.
    """
    return load_config(os.environ.get("CONFIG_PATH", "config.yaml"))
