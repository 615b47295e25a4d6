"""Page stores for the magazine archive database."""

from .exceptions import QueryError, StoreConnectionError, StoreError
from .sql_store import SQLPageStore, build_pages_table
from .store import DEFAULT_RESERVED_ISSUE, DEFAULT_SECTION_MARKER, PageStore

__all__ = [
    "PageStore",
    "SQLPageStore",
    "build_pages_table",
    "DEFAULT_RESERVED_ISSUE",
    "DEFAULT_SECTION_MARKER",
    "StoreError",
    "StoreConnectionError",
    "QueryError",
]
