"""
Module: parsing.dialects

Purpose:
    One parser per question dialect. Each takes the whole raw text and
    returns the complete records it found; malformed blocks are dropped
    silently (logged at DEBUG).
"""

from .multiple_choice import parse_multiple_choice
from .true_false import parse_true_false
from .who_am_i import parse_who_am_i

__all__ = [
    "parse_multiple_choice",
    "parse_true_false",
    "parse_who_am_i",
]
