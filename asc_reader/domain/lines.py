"""Line kinds recognised in an ASC log."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LineKind(Enum):
    SAMPLE = auto()
    SACCADE = auto()
    FIXATION = auto()
    BLINK = auto()
    MESSAGE = auto()
    INPUT = auto()
    BUTTON = auto()
    BLOCK_START = auto()
    BLOCK_END = auto()
    HEADER = auto()
    CONFIG = auto()
    EVENT_START = auto()
    BLANK = auto()
    UNKNOWN = auto()


# Kinds that produce a table row
DATA_KINDS = frozenset(
    {
        LineKind.SAMPLE,
        LineKind.SACCADE,
        LineKind.FIXATION,
        LineKind.BLINK,
        LineKind.MESSAGE,
        LineKind.INPUT,
        LineKind.BUTTON,
    }
)


@dataclass(frozen=True)
class ClassifiedLine:
    """A tagged line whose fields are still raw text.

    ``keyword`` is the leading marker (empty for samples); ``rest`` is the
    unparsed remainder after it. For samples ``rest`` is the whole line.
    """

    kind: LineKind
    keyword: str
    rest: str

    def tokens(self):
        return self.rest.split()
