"""Loaders for prize pool entry data."""

from .entry_loader import EntryLoader, entries_from_records

__all__ = ["EntryLoader", "entries_from_records"]
