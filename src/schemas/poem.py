"""Poem record schema.

A poem record describes one recited poem from a "Ses Makinesi" section.
Records are serialised with the key names the video tooling reads
(``magazineIndex`` for the issue number); both spellings are accepted
on input.
"""

from pydantic import BaseModel, Field


class PoemRecord(BaseModel):
    """A recited poem extracted from the archive.

    Attributes:
        poet: Name of the poet
        title: Title of the poem
        reciter: Name of the person reading the poem
        file: Path of the audio file (None when the page lists no reference)
        cover: Cover image of the issue the poem appeared in
        issue_index: Magazine issue number
    """

    poet: str
    title: str
    reciter: str
    file: str | None = None
    cover: str
    issue_index: int = Field(alias="magazineIndex")

    model_config = {"extra": "allow", "frozen": True, "populate_by_name": True}
