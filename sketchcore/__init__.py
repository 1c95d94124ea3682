"""Sketch-style utilities: number formatting, strings, printing, streams, ring buffers and IPv4 addresses."""

__version__ = "0.1.0"