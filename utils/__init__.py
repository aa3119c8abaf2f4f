"""Shared utilities for the backend."""
from utils.case import field_aliases
from utils.text import clean_text
from utils.time import isoformat_utc

__all__ = [
    "clean_text",
    "field_aliases",
    "isoformat_utc",
]
