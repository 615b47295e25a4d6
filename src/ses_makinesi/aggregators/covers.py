"""Cover image resolution for section pages."""

import logging
from collections.abc import Iterable, Sequence

from schemas.page import RawPage, ResolvedPage

from ses_makinesi.extractors import CoverNotFoundError, parse_cover

logger = logging.getLogger(__name__)


def issue_indexes(pages: Iterable[RawPage]) -> list[int]:
    """Return the distinct issue indexes of the pages, in first-seen order."""
    return list(dict.fromkeys(page.issue_index for page in pages))


def resolve_covers(
    pages: Sequence[RawPage],
    first_pages: Iterable[RawPage],
) -> list[ResolvedPage]:
    """Attach each issue's cover image to its pages.

    The cover is the first image source on page 1 of the issue.

    Args:
        pages: Section and continuation pages
        first_pages: Page 1 of every issue present in ``pages``

    Returns:
        The pages, in the same order, with their issue's cover

    Raises:
        CoverNotFoundError: If an issue's page 1 is missing or has no image
    """
    first_by_issue: dict[int, RawPage] = {}
    for first_page in first_pages:
        first_by_issue.setdefault(first_page.issue_index, first_page)

    covers: dict[int, str] = {}
    for issue_index in issue_indexes(pages):
        first_page = first_by_issue.get(issue_index)
        if first_page is None:
            logger.error(f"Issue {issue_index}: page 1 not found")
            raise CoverNotFoundError(
                issue_index, f"Page 1 of issue {issue_index} not found"
            )

        cover = parse_cover(first_page.content)
        if cover is None:
            logger.error(f"Issue {issue_index}: no image on page 1")
            raise CoverNotFoundError(issue_index)

        logger.debug(f"Issue {issue_index}: cover {cover}")
        covers[issue_index] = cover

    return [page.resolve(covers[page.issue_index]) for page in pages]
