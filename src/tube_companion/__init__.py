"""Tube Companion - track YouTube videos, keep notes, mirror comments."""

__version__ = "0.1.0"
