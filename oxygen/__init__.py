"""Oxygen: a small IRC bot serving user-defined factoids."""

__version__ = "0.2.0"
