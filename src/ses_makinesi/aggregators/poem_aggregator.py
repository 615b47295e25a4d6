"""Poem aggregator for harvesting "Ses Makinesi" sections."""

import logging
from pathlib import Path
from typing import Any

from schemas.manifest import HarvestInfo, PoemManifest
from schemas.page import RawPage, ResolvedPage
from schemas.poem import PoemRecord
from ses_makinesi.extractors import ExtractionError, RowCountError, parse_unit
from ses_makinesi.stores import PageStore, StoreError

from .covers import issue_indexes, resolve_covers
from .includes import IncludeFileError, load_included_poems
from .pairing import pair_pages

logger = logging.getLogger(__name__)


class PoemAggregator:
    """Harvests poem records from the "Ses Makinesi" sections of the archive.

    The aggregator fetches the section pages of an issue range with their
    continuation pages, attaches each issue's cover, parses every page or
    page pair into poem records and appends hand-written records last.

    Example:
        config = {"url": "mysql+pymysql://reader@localhost/galata"}
        with SQLPageStore(config) as store:
            aggregator = PoemAggregator(store)
            manifest = aggregator.harvest(min_issue=10, max_issue=20)
    """

    def __init__(self, store: PageStore):
        """Initialize the poem aggregator.

        Args:
            store: Store for reading archive pages
        """
        self.store = store

    def harvest(
        self,
        min_issue: int = -1,
        max_issue: int | None = None,
        include_path: Path | None = None,
    ) -> PoemManifest:
        """Harvest the poems of an issue range.

        Args:
            min_issue: Lowest issue index (inclusive), -1 for all issues
            max_issue: Highest issue index (inclusive), None for no upper bound
            include_path: JSON file of records appended after the harvested ones

        Returns:
            The sealed PoemManifest

        Raises:
            StoreError: If the page store fails
            CoverNotFoundError: If an issue has no cover image
            IncludeFileError: If the inclusion file cannot be loaded
        """
        manifest = PoemManifest(
            id=f"{min_issue}-{max_issue if max_issue is not None else 'latest'}",
            min_issue=min_issue,
            max_issue=max_issue,
            include_path=str(include_path) if include_path else None,
            harvest=HarvestInfo(source=self.store.source),
        )

        pages = self.store.fetch_pages_with_continuations(min_issue, max_issue)
        logger.info(f"Fetched {len(pages)} pages from {len(issue_indexes(pages))} issues")

        resolved = self.resolve_covers(pages)
        manifest.poems.extend(self.crawl_poems(resolved, manifest.validation_errors))

        if include_path:
            manifest.included_poems.extend(load_included_poems(include_path))

        manifest.status = "sealed"
        logger.info(
            f"Harvested {len(manifest.poems)} poems, "
            f"included {len(manifest.included_poems)} "
            f"({len(manifest.validation_errors)} units skipped)"
        )
        return manifest

    def resolve_covers(self, pages: list[RawPage]) -> list[ResolvedPage]:
        """Fetch the first page of every issue and attach its cover."""
        if not pages:
            return []
        first_pages = self.store.fetch_first_pages(issue_indexes(pages))
        return resolve_covers(pages, first_pages)

    def crawl_poems(
        self,
        pages: list[ResolvedPage],
        validation_errors: list[str] | None = None,
    ) -> list[PoemRecord]:
        """Parse pages into poem records, ordered by issue and page.

        A unit whose rows do not form whole poems is skipped and reported in
        ``validation_errors``; the other units are still parsed.
        """
        poems: list[PoemRecord] = []

        for unit in pair_pages(pages):
            try:
                poems.extend(parse_unit(unit))
            except RowCountError as e:
                logger.error(f"Skipping issue {e.issue_index} pages {unit.page_numbers}: {e}")
                if validation_errors is not None:
                    validation_errors.append(
                        f"Issue {e.issue_index} page {e.page_number}: {e.message}"
                    )

        return poems


def get_poems(
    store: PageStore,
    min_issue: int = -1,
    max_issue: int | None = None,
    include_path: Path | None = None,
) -> list[dict[str, Any]] | None:
    """Harvest poems, returning None if the run fails.

    Args:
        store: Store for reading archive pages
        min_issue: Lowest issue index (inclusive), -1 for all issues
        max_issue: Highest issue index (inclusive), None for no upper bound
        include_path: JSON file of records appended after the harvested ones

    Returns:
        Harvested records followed by the included entries as JSON
        objects, or None on failure
    """
    try:
        manifest = PoemAggregator(store).harvest(min_issue, max_issue, include_path)
    except (StoreError, ExtractionError, IncludeFileError) as e:
        logger.exception(f"Failed to harvest poems: {e}")
        return None

    return manifest.all_poems()
