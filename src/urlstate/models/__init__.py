"""Data models for urlstate."""

from .location import HistoryEntry, Location
from .params import ParamLeaf, ParamNode, ParamValue

__all__ = [
    "HistoryEntry",
    "Location",
    "ParamLeaf",
    "ParamNode",
    "ParamValue",
]
