"""Ladder domain modules."""

from domain.common import TeamInfo
from domain.ladder import LadderEntry, build_ladder, filter_active, sort_ladder
from domain.query import DEFAULT_GENUS, GENERA, REGIONS, LadderQuery

__all__ = [
    "DEFAULT_GENUS",
    "GENERA",
    "LadderEntry",
    "LadderQuery",
    "REGIONS",
    "TeamInfo",
    "build_ladder",
    "filter_active",
    "sort_ladder",
]
