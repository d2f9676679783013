"""Interactive manual input."""

from .client import ManualInputClient

__all__ = ["ManualInputClient"]
