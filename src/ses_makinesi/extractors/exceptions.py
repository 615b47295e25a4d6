"""Custom exceptions for section extraction."""


class ExtractionError(Exception):
    """Base exception for markup that cannot be turned into poem records.

    Attributes:
        issue_index: Issue of the offending page
        page_number: Page number of the offending page
    """

    def __init__(self, message: str, issue_index: int, page_number: int, *args, **kwargs):
        self.message = message
        self.issue_index = issue_index
        self.page_number = page_number
        super().__init__(message, *args, **kwargs)


class RowCountError(ExtractionError):
    """Raised when a section's row count is not a multiple of four."""

    def __init__(self, issue_index: int, page_number: int, row_count: int):
        self.row_count = row_count
        super().__init__(
            f"Incorrect number of rows ({row_count}) in issue {issue_index} page {page_number}",
            issue_index=issue_index,
            page_number=page_number,
        )


class CoverNotFoundError(ExtractionError):
    """Raised when an issue's first page has no cover image reference."""

    def __init__(self, issue_index: int, message: str | None = None):
        super().__init__(
            message or f"No cover image found on page 1 of issue {issue_index}",
            issue_index=issue_index,
            page_number=1,
        )
