"""Derive sample and event column layouts from the recording metadata.

Sample line layout (EyeLink converter order)::

    time  <positions>  [<velocities>]  [xr yr]  [input]  [buttons]  [cr.info]  [tx ty td remote.info]

with ``<positions>`` either ``xp yp ps`` (one eye) or
``xpl ypl psl xpr ypr psr`` (both eyes), and ``<velocities>`` likewise
``xv yv`` or ``xvl yvl xvr yvr``.

Event lines with HREF event data carry the HREF values in front of their
gaze counterparts; both are kept as reported.
"""
from __future__ import annotations

from typing import List, Tuple

from ..domain.info import DataUnit, InfoRecord
from ..domain.schema import EventSchema, SampleSchema, Schemas


SAMPLE_TEXT_COLUMNS: Tuple[str, ...] = ("cr.info", "remote.info")

SACCADE_POSITION_COLUMNS: Tuple[str, ...] = ("sxp", "syp", "exp", "eyp", "ampl", "pv")
FIXATION_POSITION_COLUMNS: Tuple[str, ...] = ("axp", "ayp", "aps")
FIXATION_HREF_COLUMNS: Tuple[str, ...] = ("axp", "ayp")
RESOLUTION_COLUMNS: Tuple[str, ...] = ("xr", "yr")


def _per_eye(names: Tuple[str, ...], binocular: bool) -> List[str]:
    if not binocular:
        return list(names)
    return [n + "l" for n in names] + [n + "r" for n in names]


def resolve_sample_schema(info: InfoRecord) -> SampleSchema:
    binocular = not info.mono
    columns = ["time"]
    columns += _per_eye(("xp", "yp", "ps"), binocular)
    if info.velocity:
        columns += _per_eye(("xv", "yv"), binocular)
    if info.resolution:
        columns += RESOLUTION_COLUMNS
    if info.input:
        columns.append("input")
    if info.buttons:
        columns.append("buttons")
    if info.cr:
        columns.append("cr.info")
    if info.htarget:
        columns += ["tx", "ty", "td", "remote.info"]

    return SampleSchema(
        binocular=binocular,
        velocity=info.velocity,
        resolution=info.resolution,
        cr=info.cr,
        input=info.input,
        buttons=info.buttons,
        htarget=info.htarget,
        columns=tuple(columns),
        text_columns=tuple(c for c in columns if c in SAMPLE_TEXT_COLUMNS),
    )


def _event_schema(kind: str, info: InfoRecord, positions: Tuple[str, ...], href_positions: Tuple[str, ...]) -> EventSchema:
    href = info.event_dtype == DataUnit.HREF
    columns: List[str] = []
    if href:
        columns += ["href." + c for c in href_positions]
    columns += positions
    if info.resolution:
        columns += RESOLUTION_COLUMNS
    return EventSchema(kind=kind, href=href, resolution=info.resolution, columns=tuple(columns))


def resolve_saccade_schema(info: InfoRecord) -> EventSchema:
    return _event_schema("saccade", info, SACCADE_POSITION_COLUMNS, SACCADE_POSITION_COLUMNS)


def resolve_fixation_schema(info: InfoRecord) -> EventSchema:
    return _event_schema("fixation", info, FIXATION_POSITION_COLUMNS, FIXATION_HREF_COLUMNS)


def resolve_schemas(info: InfoRecord) -> Schemas:
    """Resolve all three layouts at once; the result is fixed for the parse."""
    return Schemas(
        sample=resolve_sample_schema(info),
        saccade=resolve_saccade_schema(info),
        fixation=resolve_fixation_schema(info),
    )
