"""SQL page store for the magazine archive database."""

from collections.abc import Iterable

from sqlalchemy import Column, Integer, MetaData, Table, Text, and_, or_, select
from sqlalchemy.engine import Row

from schemas.page import RawPage

from .store import PageStore

DEFAULT_TABLE_NAME = "pages"


def build_pages_table(name: str = DEFAULT_TABLE_NAME, metadata: MetaData | None = None) -> Table:
    """Describe the archive's page table.

    Column names follow the archive database; they are relabelled to
    snake_case when selected.
    """
    return Table(
        name,
        metadata if metadata is not None else MetaData(),
        Column("id", Integer, primary_key=True),
        Column("magazineIndex", Integer, nullable=False, index=True),
        Column("pageNumber", Integer, nullable=False),
        Column("content", Text, nullable=False),
    )


class SQLPageStore(PageStore):
    """Page store backed by the archive's ``pages`` table.

    Works with any database SQLAlchemy can reach (MariaDB in production,
    SQLite in tests).

    Example:
        config = {"url": "mysql+pymysql://reader@localhost/galata"}
        with SQLPageStore(config) as store:
            pages = store.fetch_pages_with_continuations(10, 20)
    """

    def __init__(self, config: dict, table: Table | None = None):
        super().__init__(config)
        self.table = table if table is not None else build_pages_table(
            str(config.get("table_name", DEFAULT_TABLE_NAME))
        )

    def fetch_section_pages(
        self, min_issue: int, max_issue: int | None = None
    ) -> list[RawPage]:
        pages = self.table.c
        statement = self._select_pages().where(
            pages.magazineIndex != self.reserved_issue,
            pages.content.contains(self.section_marker, autoescape=True),
            pages.magazineIndex >= min_issue,
        )
        if max_issue is not None:
            statement = statement.where(pages.magazineIndex <= max_issue)
        statement = statement.order_by(pages.magazineIndex.asc(), pages.pageNumber.asc())

        return [self._to_page(row) for row in self._execute(statement)]

    def fetch_pages_by_keys(self, keys: Iterable[tuple[int, int]]) -> list[RawPage]:
        keys = list(keys)
        if not keys:
            return []

        pages = self.table.c
        conditions = [
            and_(pages.magazineIndex == issue_index, pages.pageNumber == page_number)
            for issue_index, page_number in keys
        ]
        statement = self._select_pages().where(or_(*conditions))

        return [self._to_page(row) for row in self._execute(statement)]

    def fetch_first_pages(self, issue_indexes: Iterable[int]) -> list[RawPage]:
        issue_indexes = sorted(set(issue_indexes))
        if not issue_indexes:
            return []

        pages = self.table.c
        statement = self._select_pages().where(
            pages.pageNumber == 1,
            pages.magazineIndex.in_(issue_indexes),
        )

        return [self._to_page(row) for row in self._execute(statement)]

    def _select_pages(self):
        pages = self.table.c
        return select(
            pages.id,
            pages.magazineIndex.label("issue_index"),
            pages.pageNumber.label("page_number"),
            pages.content,
        )

    def _to_page(self, row: Row) -> RawPage:
        return RawPage(
            id=row.id,
            issue_index=row.issue_index,
            page_number=row.page_number,
            content=row.content,
        )
