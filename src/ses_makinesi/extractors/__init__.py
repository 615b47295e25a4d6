"""Extraction of poem records from "Ses Makinesi" section markup."""

from .assembler import ROWS_PER_POEM, parse_poems, parse_unit
from .exceptions import CoverNotFoundError, ExtractionError, RowCountError
from .markup import (
    iter_rows,
    parse_audio_locations,
    parse_cover,
    parse_last_column,
    strip_tags,
)

__all__ = [
    "ROWS_PER_POEM",
    "parse_poems",
    "parse_unit",
    "iter_rows",
    "parse_audio_locations",
    "parse_cover",
    "parse_last_column",
    "strip_tags",
    "ExtractionError",
    "RowCountError",
    "CoverNotFoundError",
]
