"""Selenium end-to-end test suite for the Chronicle cemetery management app."""

__version__ = "0.1.0"
