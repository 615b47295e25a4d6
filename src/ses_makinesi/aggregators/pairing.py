"""Grouping of section pages into parse units."""

from collections.abc import Iterable

from schemas.page import PageUnit, ResolvedPage


def sort_pages(pages: Iterable[ResolvedPage]) -> list[ResolvedPage]:
    """Sort pages by issue index, then by page number."""
    return sorted(pages, key=lambda page: (page.issue_index, page.page_number))


def pair_pages(pages: Iterable[ResolvedPage]) -> list[PageUnit]:
    """Group sorted pages into standalone pages and page pairs.

    A page followed by another page of the same issue is merged with it and
    both are skipped over; a section never spans more than two pages.

    Examples:
        Pages (12, 3), (12, 4), (13, 5) give the units
        [(12, 3), (12, 4)] and [(13, 5)].
    """
    ordered = sort_pages(pages)
    units: list[PageUnit] = []
    i = 0

    while i < len(ordered):
        page = ordered[i]
        following = ordered[i + 1] if i + 1 < len(ordered) else None

        if following is not None and following.issue_index == page.issue_index:
            units.append(PageUnit(pages=(page, following)))
            i += 2
        else:
            units.append(PageUnit(pages=(page,)))
            i += 1

    return units
