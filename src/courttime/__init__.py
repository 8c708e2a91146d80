"""Courttime — live game clock and fair playing-time tracker."""

__version__ = "0.1.0"
