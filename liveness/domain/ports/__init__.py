"""Domain ports package."""

from .probe import IProbe

__all__ = ["IProbe"]
