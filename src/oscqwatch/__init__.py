# src/oscqwatch/__init__.py
"""Watchdog for the Giggletech OSCQuery helper service."""

__version__ = "0.1.0"
