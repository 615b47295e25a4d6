"""Poem manifest schemas.

The manifest is the output of a harvest run: the ordered list of poem
records together with the errors met while extracting them and the
provenance of the run.

Output file:
    workspace/
    └── poems.json     # PoemManifest
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from .poem import PoemRecord


class HarvestInfo(BaseModel):
    """Provenance of a harvest run.

    Attributes:
        source: Database the pages were read from (credentials masked)
        harvest_timestamp: When the run started
        harvest_agent: Software that performed the harvest
    """

    source: str | None = None
    harvest_timestamp: datetime = Field(default_factory=datetime.now)
    harvest_agent: str = "ses-makinesi"


class PoemManifest(BaseModel):
    """Manifest for one harvest of "Ses Makinesi" poems.

    Attributes:
        id: Run identifier derived from the issue range (e.g., "10-11")
        version: Manifest schema version
        min_issue: Lowest issue index requested (inclusive)
        max_issue: Highest issue index requested (inclusive), None if unbounded
        include_path: Manual inclusion file appended to the results, if any
        poems: Records extracted from the archive
        included_poems: Hand-written entries, kept exactly as loaded
        harvest: Provenance information
        status: "building" while harvesting, "sealed" when complete
        validation_errors: Units that could not be parsed
    """

    id: str
    version: str = "1.0"
    min_issue: int = -1
    max_issue: int | None = None
    include_path: str | None = None
    poems: list[PoemRecord] = []
    included_poems: list[dict[str, Any]] = []
    harvest: HarvestInfo = Field(default_factory=HarvestInfo)
    status: Literal["building", "sealed"] = "building"
    validation_errors: list[str] = []

    model_config = {"extra": "allow"}

    def all_poems(self) -> list[dict[str, Any]]:
        """Return the extracted records followed by the included entries.

        Extracted records are dumped with their output key names; included
        entries are returned as loaded.
        """
        extracted = [
            poem.model_dump(mode="json", by_alias=True) for poem in self.poems
        ]
        return extracted + list(self.included_poems)
