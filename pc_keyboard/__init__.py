"""Decode PS/2 keyboard bit-streams and scancodes into key events and characters."""

__version__ = "0.8.0"