"""Builders for archive page markup and page objects used across tests."""

from schemas.page import RawPage, ResolvedPage
from ses_makinesi.stores import DEFAULT_SECTION_MARKER


def make_poem_rows(poet: str, title: str, reciter: str, audio: str | None = None) -> str:
    """Build the four table rows of one poem entry.

    The header row carries the hidden audio input, as on the archive pages.
    """
    player = (
        f'<input type="hidden" size="1" class="{audio}" disabled="disabled">'
        if audio is not None
        else ""
    )
    return (
        f'<tr><td colspan="2"><b>Kayıt</b>{player}</td></tr>\n'
        f"<tr><td><b>Şair:</b></td><td>{poet}</td></tr>\n"
        f"<tr><td><b>Şiir:</b></td><td>{title}</td></tr>\n"
        f"<tr><td><b>Okuyan:</b></td><td>{reciter}</td></tr>\n"
    )


def make_section_html(entries: list[tuple[str, str, str, str | None]], marker: bool = True) -> str:
    """Build a section page from (poet, title, reciter, audio) entries."""
    rows = "".join(make_poem_rows(*entry) for entry in entries)
    heading = DEFAULT_SECTION_MARKER if marker else "<h2>Devamı</h2>"
    return f'<div class="page">{heading}\n<table class="ses">\n{rows}</table></div>'


def make_cover_html(issue_index: int) -> str:
    """Build the first page of an issue with its cover image."""
    return (
        f'<div class="cover"><img src="/magazines/{issue_index}/kapak.jpg" alt="Kapak">'
        f'<img src="/magazines/{issue_index}/logo.png"></div>'
    )


def make_page(
    issue_index: int,
    page_number: int,
    content: str = "",
    cover: str | None = None,
) -> RawPage | ResolvedPage:
    """Build a page, resolved when a cover is given."""
    page = RawPage(
        id=issue_index * 100 + page_number,
        issue_index=issue_index,
        page_number=page_number,
        content=content,
    )
    return page.resolve(cover) if cover is not None else page
