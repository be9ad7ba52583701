"""Triggers VivaldiCustomLauncher builds when a newer Vivaldi release is published."""

__version__ = "1.0.0"
