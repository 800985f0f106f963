"""Bitmaps, BMP files, colour and image search, base64, a small PRNG, alerts and clipboard data."""

__version__ = "0.1.0"