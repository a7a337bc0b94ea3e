"""Tili-Toli — a sliding-tile puzzle with terminal and Qt frontends."""

__version__ = "0.1.0"
