"""Read, validate and display so_long tile maps, plus small text, byte, list and line-reading helpers."""

__version__ = "0.1.0"