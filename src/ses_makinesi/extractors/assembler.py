"""Assemble poem records from section rows."""

import logging
from collections.abc import Sequence

from schemas.page import PageUnit, ResolvedPage
from schemas.poem import PoemRecord

from .exceptions import RowCountError
from .markup import iter_rows, parse_audio_locations, parse_last_column

logger = logging.getLogger(__name__)

# header, poet, title, reciter
ROWS_PER_POEM = 4


def parse_poems(
    rows: Sequence[str],
    page: ResolvedPage,
    audio_files: Sequence[str],
) -> list[PoemRecord]:
    """Turn section rows into poem records.

    Every poem takes four consecutive rows: a header row that is skipped,
    then the poet, the title and the reciter, each read from the row's last
    cell. The k-th poem gets the k-th audio file.

    Args:
        rows: Row fragments of the section, in document order
        page: Page supplying the cover and issue index of the records
        audio_files: Audio file paths of the section, in document order

    Returns:
        One record per four rows, in row order

    Raises:
        RowCountError: If the number of rows is not a multiple of four
    """
    if len(rows) % ROWS_PER_POEM != 0:
        logger.error(
            f"Issue {page.issue_index} page {page.page_number}: "
            f"{len(rows)} rows is not a multiple of {ROWS_PER_POEM}"
        )
        raise RowCountError(page.issue_index, page.page_number, len(rows))

    poems: list[PoemRecord] = []

    for order, start in enumerate(range(0, len(rows), ROWS_PER_POEM)):
        file = audio_files[order] if order < len(audio_files) else None
        if file is None:
            logger.warning(
                f"Issue {page.issue_index} page {page.page_number}: "
                f"no audio file for poem #{order + 1}"
            )

        poems.append(
            PoemRecord(
                poet=parse_last_column(rows[start + 1]),
                title=parse_last_column(rows[start + 2]),
                reciter=parse_last_column(rows[start + 3]),
                file=file,
                cover=page.cover,
                issue_index=page.issue_index,
            )
        )

    return poems


def parse_unit(unit: PageUnit) -> list[PoemRecord]:
    """Parse the section of a standalone page or a merged page pair.

    Rows and audio files of both pages are concatenated in page order; the
    first page supplies the record metadata.
    """
    rows = [row for content in unit.content_parts for row in iter_rows(content)]
    audio_files = [
        path for content in unit.content_parts for path in parse_audio_locations(content)
    ]
    logger.debug(
        f"Issue {unit.issue_index} pages {unit.page_numbers}: "
        f"{len(rows)} rows, {len(audio_files)} audio files"
    )
    return parse_poems(rows, unit.first, audio_files)
