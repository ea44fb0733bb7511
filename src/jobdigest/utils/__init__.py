"""Utility functions for text matching."""

from jobdigest.utils.text_utils import clean_whitespace, contains_any_keyword

__all__ = [
    "clean_whitespace",
    "contains_any_keyword",
]
