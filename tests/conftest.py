"""Test configuration and fixtures for the bookstore catalog."""

from tests.fixtures import *  # noqa: F401,F403
