"""Pytest fixtures for ses-makinesi tests."""

import json

import pytest
from helpers import make_cover_html
from sqlalchemy import create_engine, insert

from ses_makinesi.stores import build_pages_table


class ArchiveDatabase:
    """A SQLite file holding the archive's pages table."""

    def __init__(self, path):
        self.url = f"sqlite:///{path}"
        self.table = build_pages_table()
        self._engine = create_engine(self.url)
        self.table.metadata.create_all(self._engine)

    def add_page(self, issue_index: int, page_number: int, content: str) -> None:
        with self._engine.begin() as connection:
            connection.execute(
                insert(self.table),
                [{"magazineIndex": issue_index, "pageNumber": page_number, "content": content}],
            )

    def add_issue(self, issue_index: int, pages: dict[int, str]) -> None:
        """Add an issue's cover page and the given pages."""
        self.add_page(issue_index, 1, make_cover_html(issue_index))
        for page_number, content in pages.items():
            self.add_page(issue_index, page_number, content)

    def dispose(self) -> None:
        self._engine.dispose()


@pytest.fixture
def archive_db(tmp_path):
    """Empty archive database in a temporary SQLite file."""
    db = ArchiveDatabase(tmp_path / "archive.db")
    yield db
    db.dispose()


@pytest.fixture
def store_config(archive_db):
    """Store configuration pointing at the temporary archive."""
    return {"url": archive_db.url}


@pytest.fixture
def sample_poem_record():
    """Sample poem record as written by the harvester."""
    return {
        "poet": "İsmet Özel",
        "title": "Kara Gözler",
        "reciter": "Büşra Elif Yüksel",
        "file": "/magazines/12/audio/kara-gozler.mp3",
        "cover": "/magazines/12/kapak.jpg",
        "magazineIndex": 12,
    }


@pytest.fixture
def include_file(tmp_path):
    """JSON file with two hand-written poem entries."""
    entries = [
        {
            "poet": "Necip Fazıl Kısakürek",
            "title": "Kaldırımlar",
            "reciter": "Semih Bozkurt",
            "file": "/magazines/34/audio/kaldirimlar.mp3",
            "cover": "/magazines/34/kapak.jpg",
            "magazineIndex": 34,
        },
        {
            "poet": "Sezai Karakoç",
            "title": "Mona Roza",
            "reciter": "Semih Bozkurt",
            "file": "/magazines/34/audio/mona-roza.mp3",
            "cover": "/magazines/34/kapak.jpg",
            "magazineIndex": 34,
            "label1": "Şair: ",
            "label2": "Seslendiren: ",
        },
    ]
    path = tmp_path / "include.json"
    path.write_text(json.dumps(entries, ensure_ascii=False, indent=2), encoding="utf-8")
    return path
