from __future__ import annotations


class ListingsError(Exception):
    """Base class for failures surfaced by the listings pipeline."""


class LoadError(ListingsError):
    """The source file could not be read or parsed as tabular text."""


class WriteError(ListingsError):
    """The export destination could not be written."""
