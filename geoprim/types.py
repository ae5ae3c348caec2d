"""Core data types for geoprim."""

from __future__ import annotations
from enum import IntEnum
from typing import Union


class Axis(IntEnum):
    """Component index of each axis."""
    X = 0
    Y = 1
    Z = 2
    W = 3


# Component type: integer vectors stay integral until a real-valued step
# (square root, division, pi) is involved.
Number = Union[int, float]
