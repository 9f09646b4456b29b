"""Recording metadata recovered from the ASC preamble.

The field names follow the vocabulary of the EyeLink converter output
(``SAMPLES``/``EVENTS``/``PUPIL`` configuration lines and the ``**``
preamble). Values the file never reports stay ``None`` so callers can tell
"unknown" apart from zero.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class DataUnit(Enum):
    """Unit of position data in samples and events."""

    GAZE = "GAZE"
    HREF = "HREF"
    PUPIL = "PUPIL"


class PupilUnit(Enum):
    """Unit of the pupil size columns."""

    AREA = "AREA"
    DIAMETER = "DIAMETER"


@dataclass(frozen=True)
class InfoRecord:
    """Session settings of one recording, fixed for the whole file."""

    date: Optional[datetime]
    model: str
    version: Optional[str]
    sample_rate: Optional[float]
    cr: bool
    left: bool
    right: bool
    mono: bool
    screen_x: Optional[int]
    screen_y: Optional[int]
    mount: Optional[str]
    filter_level: Optional[int]
    sample_dtype: Optional[DataUnit]
    event_dtype: Optional[DataUnit]
    pupil_dtype: Optional[PupilUnit]
    velocity: bool = False
    resolution: bool = False
    htarget: bool = False
    input: bool = False
    buttons: bool = False

    def __post_init__(self) -> None:
        if self.mono != (not (self.left and self.right)):
            raise ValueError("mono must equal not (left and right)")
