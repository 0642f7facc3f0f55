"""Canonical Latin spellings, display formats, phrases and word forms."""

__version__ = "0.1.0"