"""Scanners for the "Ses Makinesi" section markup.

The section is hand-authored legacy HTML. Rather than parsing it, these
functions look for the few fixed markers the section uses and slice the
content around them, which tolerates markup a strict parser would reject.
"""

import html
import logging
import re
from collections.abc import Iterator

logger = logging.getLogger(__name__)

ROW_OPEN = "<tr>"
ROW_CLOSE = "</tr>"
CELL_OPEN = "<td>"
CELL_CLOSE = "</td>"
INPUT_OPEN = "<input"

AUDIO_INPUT_TYPE = 'type="hidden"'
AUDIO_INPUT_SIZE = 'size="1"'

_CLASS_RE = re.compile(r'class="([^"]+)"')
_SRC_RE = re.compile(r'src="([^"]+)"')
_TAG_RE = re.compile(r"<!--.*?-->|</?[A-Za-z!][^>]*>", re.DOTALL)
_NON_TEXT_RE = re.compile(
    r"<(script|style|noscript|textarea|option)\b[^>]*>.*?</\1\s*>",
    re.DOTALL | re.IGNORECASE,
)


def iter_rows(content: str) -> Iterator[str]:
    """Yield every table row of the content, in document order.

    Each fragment starts at a ``<tr>`` and stops right before the first
    ``</tr>`` after it. The search for the next row resumes just after the
    previous ``<tr>``, so nested or unclosed rows still produce fragments.

    A ``<tr>`` without a later ``</tr>`` yields everything from the marker up
    to, but not including, the last character of the content.

    Examples:
        >>> list(iter_rows("<tr><td>a</td></tr><tr><td>b</td></tr>"))
        ['<tr><td>a</td>', '<tr><td>b</td>']
    """
    index = content.find(ROW_OPEN)
    while index > -1:
        end = content.find(ROW_CLOSE, index)
        if end == -1:
            logger.warning(f"Unclosed row at offset {index}")
        yield content[index:end]
        index = content.find(ROW_OPEN, index + 1)


def parse_audio_locations(content: str) -> list[str]:
    """Return the audio file paths of a page in the order they appear.

    Audio paths are stored in the class attribute of hidden, single-cell
    ``<input>`` controls; every other input is ignored.

    Examples:
        >>> parse_audio_locations('<input type="hidden" size="1" class="/a.mp3">')
        ['/a.mp3']
    """
    results: list[str] = []
    index = content.find(INPUT_OPEN)

    while index > -1:
        end = content.find(">", index)
        control = content[index:end + 1]

        if AUDIO_INPUT_TYPE in control and AUDIO_INPUT_SIZE in control:
            match = _CLASS_RE.search(control)
            if match:
                results.append(match.group(1))
            else:
                logger.warning(f"Audio input without class attribute at offset {index}")

        index = content.find(INPUT_OPEN, index + 1)

    return results


def strip_tags(text: str) -> str:
    """Remove HTML tags and decode character references.

    The bodies of script, style, noscript, textarea and option elements are
    dropped along with their tags. Decoding may reveal escaped markup or
    further references, so both steps repeat until the text stops changing;
    the result is never altered by a second call. A ``<`` not followed by a
    tag name is kept as text. Whitespace is kept as authored.

    Examples:
        >>> strip_tags("<b>İsmet</b> Özel &amp; co")
        'İsmet Özel & co'
        >>> strip_tags("&lt;i&gt;Mona Roza&lt;/i&gt;")
        'Mona Roza'
    """
    if not text:
        return ""
    while True:
        stripped = html.unescape(_TAG_RE.sub("", _NON_TEXT_RE.sub("", text)))
        if stripped == text:
            return stripped
        text = stripped


def parse_last_column(row: str) -> str:
    """Return the plain text of a row's last cell.

    Leading cells of a section row hold labels ("Şair", "Okuyan"); the
    value lives in the last one.

    Examples:
        >>> parse_last_column("<tr><td>Şair:</td><td><b>İsmet Özel</b></td>")
        'İsmet Özel'
    """
    start = row.rfind(CELL_OPEN)
    end = row.rfind(CELL_CLOSE)
    if start == -1 or end < start:
        return ""
    return strip_tags(row[start + len(CELL_OPEN):end])


def parse_cover(content: str) -> str | None:
    """Return the first image source of a page, or None if there is none."""
    match = _SRC_RE.search(content)
    if match is None:
        return None
    return match.group(1)
