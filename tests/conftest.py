"""Pytest configuration shared by every test module."""

import os

# Selected before the application context loads its configuration.
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

from tests.fixtures import *  # noqa: E402,F401,F403
