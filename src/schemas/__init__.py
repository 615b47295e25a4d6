"""Schema definitions for the Ses Makinesi harvester."""

from .manifest import HarvestInfo, PoemManifest
from .page import PageUnit, RawPage, ResolvedPage
from .poem import PoemRecord

__all__ = [
    "HarvestInfo",
    "PageUnit",
    "PoemManifest",
    "PoemRecord",
    "RawPage",
    "ResolvedPage",
]
