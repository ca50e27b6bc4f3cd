"""Matching engine: scanner, rule dispatch, regions, and percentage jumps."""

from __future__ import annotations

from .buffer import TextBuffer
from .orchestrator import operate_on_item
from .percentage import jump_to_percentage, percentage_offset
from .region import resolve_region
from .types import MatchContext, Region, Tag

__all__ = [
    "MatchContext",
    "Region",
    "Tag",
    "TextBuffer",
    "jump_to_percentage",
    "operate_on_item",
    "percentage_offset",
    "resolve_region",
]
