"""Woof Moo: a fuzzy-searchable directory of radio show archives."""

__version__ = "0.1"
