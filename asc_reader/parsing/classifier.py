"""Line classification by leading marker."""
from __future__ import annotations

from typing import Dict

from ..config import AscConstants
from ..domain.lines import ClassifiedLine, LineKind


_KEYWORDS: Dict[str, LineKind] = {
    "MSG": LineKind.MESSAGE,
    "START": LineKind.BLOCK_START,
    "END": LineKind.BLOCK_END,
    "EFIX": LineKind.FIXATION,
    "ESACC": LineKind.SACCADE,
    "EBLINK": LineKind.BLINK,
    "INPUT": LineKind.INPUT,
    "BUTTON": LineKind.BUTTON,
}
_KEYWORDS.update({kw: LineKind.CONFIG for kw in AscConstants.CONFIG_KEYWORDS})
_KEYWORDS.update({kw: LineKind.EVENT_START for kw in AscConstants.EVENT_START_KEYWORDS})


def classify_line(line: str, in_preamble: bool = False) -> ClassifiedLine:
    """
    Tag one line with its kind without decoding its fields.

    Args:
        line: A single line, with or without its line ending.
        in_preamble: True while no block has been opened yet. Unrecognised
            lines are HEADER candidates there and UNKNOWN afterwards.

    Returns:
        ClassifiedLine with the leading keyword split off.
    """
    stripped = line.strip()
    if not stripped:
        return ClassifiedLine(LineKind.BLANK, "", "")

    if stripped[0].isdigit():
        return ClassifiedLine(LineKind.SAMPLE, "", stripped)

    if stripped.startswith(AscConstants.PREAMBLE_PREFIX):
        return ClassifiedLine(LineKind.HEADER, AscConstants.PREAMBLE_PREFIX, stripped[2:].strip())

    parts = stripped.split(None, 1)
    keyword = parts[0]
    rest = parts[1] if len(parts) > 1 else ""
    kind = _KEYWORDS.get(keyword)
    if kind is not None:
        return ClassifiedLine(kind, keyword, rest)

    return ClassifiedLine(LineKind.HEADER if in_preamble else LineKind.UNKNOWN, keyword, rest)
