"""pulse-coach: adaptive daily workout coaching."""

__version__ = "0.1.0"
