"""Colour names, XPM images, in-memory pixel buffers and small text utilities."""

__version__ = "0.1.0"