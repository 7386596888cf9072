"""Pygame sprite demos with a shared Texture class and Display window helper."""

__version__ = "0.1.0"