"""Command line display components."""

from .display import PrizepoolDisplay

__all__ = ["PrizepoolDisplay"]
