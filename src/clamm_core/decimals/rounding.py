"""Rounding direction used when narrowing a decimal to a coarser scale."""

from enum import Enum


class Rounding(Enum):
    FLOOR = 0
    CEIL = 1
