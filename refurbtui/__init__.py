"""Curses menu of hardware checks (SMART, drivers, photos, input devices) for refurbishing computers."""

__version__ = "0.1.0"