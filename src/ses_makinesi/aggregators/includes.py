"""Loading of manually included poem entries."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class IncludeFileError(Exception):
    """Raised when the manual inclusion file cannot be used."""

    def __init__(self, message: str, path: Path, errors: list | None = None):
        self.message = message
        self.path = path
        self.errors = errors or []
        super().__init__(message)


def load_included_poems(path: Path) -> list[dict[str, Any]]:
    """Load hand-written poem entries from a JSON file.

    The file holds a JSON array of poem objects, normally using the same
    keys as the harvested output. Entries are returned exactly as decoded:
    no key is added, dropped, renamed or coerced.

    Args:
        path: Path to the JSON file

    Returns:
        The entries, in file order

    Raises:
        IncludeFileError: If the file is unreadable, is not a JSON array,
            or holds something other than objects
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise IncludeFileError(f"Cannot read include file {path}: {e}", path) from e
    except json.JSONDecodeError as e:
        raise IncludeFileError(f"Include file {path} is not valid JSON: {e}", path) from e

    if not isinstance(data, list):
        raise IncludeFileError(f"Include file {path} must contain a JSON array", path)

    errors = [
        f"Entry {i} is a {type(item).__name__}, not an object"
        for i, item in enumerate(data)
        if not isinstance(item, dict)
    ]
    if errors:
        raise IncludeFileError(
            f"Include file {path} holds {len(errors)} invalid entries: {errors[0]}",
            path,
            errors=errors,
        )

    logger.info(f"Loaded {len(data)} included poems from {path}")
    return data
