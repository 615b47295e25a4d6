"""Base store for reading archive pages."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, Row, make_url
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from schemas.page import RawPage

from .exceptions import QueryError, StoreConnectionError

logger = logging.getLogger(__name__)

# Issue #34 is added by hand through the inclusion file.
DEFAULT_RESERVED_ISSUE = 34
DEFAULT_SECTION_MARKER = '<h1 class="mTitle">Ses Makinesi</h1>'


class PageStore(ABC):
    """Base class for page stores.

    Provides a lazy-initialized SQLAlchemy engine with context manager
    support and maps database failures to store exceptions. Subclasses
    implement the three page queries; the continuation-page selection
    is built on top of them here.

    Config keys:
        url (required): SQLAlchemy database URL
        reserved_issue: Issue index never returned by section queries (default: 34)
        section_marker: Markup identifying a "Ses Makinesi" page
        echo: Log every emitted SQL statement (default: False)
    """

    def __init__(self, config: dict):
        if "url" not in config:
            raise ValueError("config must include 'url'")

        self._config = config
        self._engine: Engine | None = None

    @property
    def url(self) -> str:
        return str(self._config["url"])

    @property
    def source(self) -> str:
        """Database URL with the password masked, for logs and manifests."""
        return make_url(self.url).render_as_string(hide_password=True)

    @property
    def reserved_issue(self) -> int:
        return int(self._config.get("reserved_issue", DEFAULT_RESERVED_ISSUE))

    @property
    def section_marker(self) -> str:
        return str(self._config.get("section_marker", DEFAULT_SECTION_MARKER))

    @property
    def echo(self) -> bool:
        return bool(self._config.get("echo", False))

    @property
    def engine(self) -> Engine:
        """Lazy-initialized SQLAlchemy engine."""
        if self._engine is None:
            self._engine = create_engine(self.url, echo=self.echo)
        return self._engine

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Dispose of the engine and its connection pool."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def _execute(self, statement: Any) -> list[Row]:
        """Run a statement and return all result rows.

        Raises:
            StoreConnectionError: If the database cannot be reached
            QueryError: If the database rejects the statement
        """
        try:
            with self.engine.connect() as connection:
                return list(connection.execute(statement))
        except OperationalError as e:
            raise StoreConnectionError(f"Database error on {self.source}: {e.orig}") from e
        except SQLAlchemyError as e:
            raise QueryError(f"Query failed: {e}", statement=str(statement)) from e

    @abstractmethod
    def fetch_section_pages(
        self, min_issue: int, max_issue: int | None = None
    ) -> list[RawPage]:
        """Fetch pages containing the section marker within an issue range.

        Args:
            min_issue: Lowest issue index (inclusive)
            max_issue: Highest issue index (inclusive), None for no upper bound

        Returns:
            Matching pages ordered by issue index, reserved issue excluded
        """
        pass

    @abstractmethod
    def fetch_pages_by_keys(self, keys: Iterable[tuple[int, int]]) -> list[RawPage]:
        """Fetch pages by exact (issue_index, page_number) keys.

        Keys without a matching page are left out of the result.
        """
        pass

    @abstractmethod
    def fetch_first_pages(self, issue_indexes: Iterable[int]) -> list[RawPage]:
        """Fetch page 1 of each given issue."""
        pass

    def fetch_pages_with_continuations(
        self, min_issue: int, max_issue: int | None = None
    ) -> list[RawPage]:
        """Fetch section pages together with the page following each one.

        A section may overflow onto the next page of the same issue, so the
        following page is fetched whether or not it carries the marker.
        Missing continuation pages are skipped. No page is returned twice.

        Args:
            min_issue: Lowest issue index (inclusive)
            max_issue: Highest issue index (inclusive), None for no upper bound

        Returns:
            Section pages followed by their continuation pages
        """
        pages = self.fetch_section_pages(min_issue, max_issue)
        if not pages:
            logger.info(f"No section pages found for issues {min_issue}..{max_issue}")
            return []

        seen = {page.key for page in pages}
        keys = [
            key
            for key in dict.fromkeys(
                (page.issue_index, page.page_number + 1) for page in pages
            )
            if key not in seen
        ]
        continuations = self.fetch_pages_by_keys(keys)
        logger.debug(
            f"Fetched {len(pages)} section pages and "
            f"{len(continuations)}/{len(keys)} continuation pages"
        )

        result: list[RawPage] = list(pages)
        for page in continuations:
            if page.key not in seen:
                seen.add(page.key)
                result.append(page)
        return result
