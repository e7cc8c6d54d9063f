"""Test configuration.

The environment is pinned before anything imports ``catalog_api`` because the
application configuration is loaded once, at import time.
"""

import os
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

os.environ["APP_ENVIRONMENT"] = "test"
os.environ["APP_CONFIG_FILE"] = str(_PROJECT_ROOT / "config.yaml")
os.environ["PORT"] = "3003"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DATABASE_CREATE_TABLES"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_FILE"] = ""

from tests.fixtures import *  # noqa: E402,F401,F403
