"""Loading, validation and printing of .ber tile maps for a collect-and-exit puzzle game."""

__version__ = "0.1.0"

__all__ = ["checker", "parser", "cli"]