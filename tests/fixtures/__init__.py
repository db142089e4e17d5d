"""Shared pytest fixtures for database and service tests."""

from .core import *  # noqa: F401,F403
