"""Archive page domain objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawPage:
    """Represents one stored page of a magazine issue.

    Attributes:
        id: Storage identifier of the page row
        issue_index: Magazine issue number
        page_number: 1-based position of the page within the issue
        content: Raw HTML content of the page
    """

    id: int
    issue_index: int
    page_number: int
    content: str

    @property
    def key(self) -> tuple[int, int]:
        return (self.issue_index, self.page_number)

    def resolve(self, cover: str) -> "ResolvedPage":
        """Attach the issue's cover image reference to this page."""
        return ResolvedPage(
            id=self.id,
            issue_index=self.issue_index,
            page_number=self.page_number,
            content=self.content,
            cover=cover,
        )


@dataclass(frozen=True)
class ResolvedPage(RawPage):
    """A page carrying the cover image reference of its issue.

    Attributes:
        cover: Image path or URL taken from the issue's first page
    """

    cover: str


@dataclass(frozen=True)
class PageUnit:
    """A standalone page or two adjacent pages of one issue.

    The "Ses Makinesi" table may overflow onto the following page, in which
    case both pages are parsed as one unit and the first page supplies the
    record metadata.

    Attributes:
        pages: One or two pages, in page order
    """

    pages: tuple[ResolvedPage, ...]

    def __post_init__(self):
        if not 1 <= len(self.pages) <= 2:
            raise ValueError(f"a unit holds one or two pages, got {len(self.pages)}")
        if len({page.issue_index for page in self.pages}) != 1:
            raise ValueError("all pages of a unit must belong to the same issue")

    @property
    def first(self) -> ResolvedPage:
        return self.pages[0]

    @property
    def issue_index(self) -> int:
        return self.first.issue_index

    @property
    def page_numbers(self) -> list[int]:
        return [page.page_number for page in self.pages]

    @property
    def content_parts(self) -> list[str]:
        return [page.content for page in self.pages]

    @property
    def is_merged(self) -> bool:
        return len(self.pages) == 2
