"""Aggregators for assembling poem manifests."""

from .includes import IncludeFileError, load_included_poems
from .pairing import pair_pages, sort_pages
from .poem_aggregator import PoemAggregator, get_poems

__all__ = [
    "PoemAggregator",
    "get_poems",
    "pair_pages",
    "sort_pages",
    "load_included_poems",
    "IncludeFileError",
]
