"""Premove destinations for standard and fairy chess pieces."""

__version__ = "0.1.0"
