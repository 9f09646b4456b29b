"""Recording metadata from the ASC preamble and block configuration lines.

The resolver accepts classified lines one at a time and remembers what each
recognised line declares. ``finalize`` turns the accumulated declarations
into an :class:`InfoRecord`. Sources, by priority:

  - ``SAMPLES`` line: sample unit, eyes, rate, tracking mode, filter, flags
  - ``EVENTS`` line:  event unit; eyes/rate/tracking/filter as fallback
  - ``START`` line:   eyes as last resort
  - ``** DATE:`` / ``** VERSION:`` preamble lines
  - ``MSG ... DISPLAY_COORDS|GAZE_COORDS|ELCLCFG`` messages
  - ``PUPIL AREA|DIAMETER``
"""
from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..config import AscConstants, MOUNT_TYPES
from ..domain.info import DataUnit, InfoRecord, PupilUnit
from ..domain.lines import ClassifiedLine, LineKind
from ..errors import AscStructureError


logger = logging.getLogger(__name__)

_VERSION_NUMBER = re.compile(r"(\d+\.\d+)")
_CL_VERSION = re.compile(r"v(\d+\.\d+)")


def _token_after(tokens: List[str], marker: str) -> Optional[str]:
    try:
        return tokens[tokens.index(marker) + 1]
    except (ValueError, IndexError):
        return None


def _to_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _to_unit(value: Optional[str], enum_cls):
    try:
        return enum_cls(value.upper()) if value else None
    except ValueError:
        return None


def _eyes(tokens: List[str]) -> Optional[Tuple[bool, bool]]:
    left = "LEFT" in tokens
    right = "RIGHT" in tokens
    if not (left or right):
        return None
    return left, right


def model_from_version(version_line: Optional[str], cl_line: Optional[str]) -> Tuple[str, Optional[str]]:
    """
    Derive tracker model and software version.

    EyeLink I writes its own version string; every later model reports
    ``EYELINK II 1`` and carries the host software version on a separate
    ``** EYELINK II CL vX.YZ`` line, from which the model is inferred.
    """
    if version_line is None:
        return "Unknown", None
    if version_line.strip() != "EYELINK II 1":
        match = _VERSION_NUMBER.search(version_line)
        return "EyeLink I", match.group(1) if match else None

    match = _CL_VERSION.search(cl_line or "")
    if match is None:
        return "EyeLink II", None
    version = match.group(1)
    number = float(version)
    if number < 2.0:
        model = "EyeLink II"
    elif number < 5.0:
        model = "EyeLink 1000"
    elif number < 6.0:
        model = "EyeLink 1000 Plus"
    else:
        model = "EyeLink Portable Duo"
    return model, version


def parse_date(value: str) -> Optional[datetime]:
    try:
        return datetime.strptime(" ".join(value.split()), AscConstants.DATE_FORMAT)
    except ValueError:
        return None


class HeaderResolver:
    """Accumulate metadata declarations and build the InfoRecord."""

    def __init__(self) -> None:
        self._sample_fields: Dict[str, object] = {}
        self._event_fields: Dict[str, object] = {}
        self._other_fields: Dict[str, object] = {}
        self._eyes: Dict[str, Tuple[bool, bool]] = {}
        self._screens: Dict[str, Tuple[int, int]] = {}
        self._version_line: Optional[str] = None
        self._cl_line: Optional[str] = None

    def feed(self, line: ClassifiedLine) -> None:
        """Absorb one line; lines outside the vocabulary are ignored."""
        if line.kind == LineKind.HEADER and line.keyword == AscConstants.PREAMBLE_PREFIX:
            self._feed_preamble(line.rest)
        elif line.kind == LineKind.CONFIG:
            self._feed_config(line.keyword, line.tokens())
        elif line.kind == LineKind.BLOCK_START:
            eyes = _eyes(line.tokens())
            if eyes is not None:
                self._eyes.setdefault("START", eyes)
        elif line.kind == LineKind.MESSAGE:
            self._feed_message(line.tokens())

    def _feed_preamble(self, rest: str) -> None:
        if rest.startswith("DATE:"):
            self._other_fields["date"] = parse_date(rest[len("DATE:"):])
        elif rest.startswith("VERSION:"):
            self._version_line = rest[len("VERSION:"):].strip()
        elif rest.startswith("EYELINK II CL"):
            self._cl_line = rest

    def _feed_config(self, keyword: str, tokens: List[str]) -> None:
        if keyword == "PUPIL":
            unit = _to_unit(tokens[0] if tokens else None, PupilUnit)
            if unit is not None:
                self._other_fields["pupil_dtype"] = unit
            return
        if keyword not in ("SAMPLES", "EVENTS"):
            return

        fields: Dict[str, object] = {}
        unit = _to_unit(tokens[0] if tokens else None, DataUnit)
        if unit is not None:
            fields["sample_dtype" if keyword == "SAMPLES" else "event_dtype"] = unit
        rate = _to_float(_token_after(tokens, "RATE"))
        if rate is not None:
            fields["sample_rate"] = rate
        tracking = _token_after(tokens, "TRACKING")
        if tracking is not None:
            fields["cr"] = tracking.upper() == "CR"
        filter_level = _to_float(_token_after(tokens, "FILTER"))
        if filter_level is not None:
            fields["filter_level"] = int(filter_level)

        if keyword == "SAMPLES":
            fields["velocity"] = AscConstants.VELOCITY_TOKEN in tokens
            fields["resolution"] = AscConstants.RESOLUTION_TOKEN in tokens
            fields["htarget"] = AscConstants.HTARGET_TOKEN in tokens
            fields["input"] = AscConstants.INPUT_TOKEN in tokens
            fields["buttons"] = AscConstants.BUTTONS_TOKEN in tokens
            self._sample_fields.update(fields)
        else:
            self._event_fields.update(fields)

        eyes = _eyes(tokens)
        if eyes is not None:
            self._eyes[keyword] = eyes

    def _feed_message(self, tokens: List[str]) -> None:
        for name in AscConstants.SCREEN_MESSAGES:
            if name in tokens:
                coords = [_to_float(t) for t in tokens[tokens.index(name) + 1:][:4]]
                if len(coords) == 4 and None not in coords:
                    x0, y0, x1, y1 = coords
                    self._screens[name] = (int(x1 - x0 + 1), int(y1 - y0 + 1))
                return
        if AscConstants.MOUNT_MESSAGE in tokens:
            code = _token_after(tokens, AscConstants.MOUNT_MESSAGE)
            self._other_fields["mount"] = MOUNT_TYPES.get(code) if code else None

    def declared(self) -> Dict[str, object]:
        """InfoRecord fields declared by the lines fed so far."""
        values: Dict[str, object] = {}
        values.update(self._event_fields)
        values.update(self._sample_fields)
        values.update(self._other_fields)
        eyes = self._eyes.get("SAMPLES") or self._eyes.get("EVENTS") or self._eyes.get("START")
        if eyes is not None:
            values["left"], values["right"] = eyes
        for name in AscConstants.SCREEN_MESSAGES:
            if name in self._screens:
                values["screen_x"], values["screen_y"] = self._screens[name]
                break
        return values

    def conflicts_with(self, info: InfoRecord) -> List[str]:
        """Names of declared fields whose value differs from ``info``."""
        return sorted(k for k, v in self.declared().items() if getattr(info, k) != v)

    def finalize(self, line_no: Optional[int] = None, line: Optional[str] = None) -> InfoRecord:
        """
        Build the InfoRecord.

        A missing sample rate stays None; only a recording without any
        tracked eye is rejected.

        Raises:
            AscStructureError: no tracked eye was declared.
        """
        values = self.declared()
        left = bool(values.get("left", False))
        right = bool(values.get("right", False))
        if not (left or right):
            if values.get("sample_rate") is None:
                message = "No sample rate and no tracked eye declared before the first block"
            else:
                message = "No tracked eye declared before the first block"
            raise AscStructureError(message, line_no, line)
        if values.get("sample_rate") is None:
            logger.warning("No sample rate declared; info.sample_rate is None")

        model, version = model_from_version(self._version_line, self._cl_line)
        return InfoRecord(
            date=values.get("date"),
            model=model,
            version=version,
            sample_rate=values.get("sample_rate"),
            cr=bool(values.get("cr", False)),
            left=left,
            right=right,
            mono=not (left and right),
            screen_x=values.get("screen_x"),
            screen_y=values.get("screen_y"),
            mount=values.get("mount"),
            filter_level=values.get("filter_level"),
            sample_dtype=values.get("sample_dtype"),
            event_dtype=values.get("event_dtype"),
            pupil_dtype=values.get("pupil_dtype"),
            velocity=bool(values.get("velocity", False)),
            resolution=bool(values.get("resolution", False)),
            htarget=bool(values.get("htarget", False)),
            input=bool(values.get("input", False)),
            buttons=bool(values.get("buttons", False)),
        )
