"""Column layouts of sample and event lines."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SampleSchema:
    """Positional layout of a raw sample line.

    ``columns`` lists every token position of the line, starting with
    ``time``. Flags record which optional column groups are present.
    """

    binocular: bool
    velocity: bool
    resolution: bool
    cr: bool
    input: bool
    buttons: bool
    htarget: bool
    columns: Tuple[str, ...]
    text_columns: Tuple[str, ...] = ()

    @property
    def numeric_columns(self) -> Tuple[str, ...]:
        return tuple(c for c in self.columns if c not in self.text_columns)


@dataclass(frozen=True)
class EventSchema:
    """Layout of an ``ESACC``/``EFIX`` line after ``eye stime etime dur``."""

    kind: str
    href: bool
    resolution: bool
    columns: Tuple[str, ...]


@dataclass(frozen=True)
class Schemas:
    sample: SampleSchema
    saccade: EventSchema
    fixation: EventSchema
