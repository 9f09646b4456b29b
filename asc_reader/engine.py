"""High level ASC parse orchestration."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

import pandas as pd

from .config import ParseOptions
from .domain.anomalies import AnomalyKind, ParseAnomalies
from .domain.info import InfoRecord
from .domain.lines import DATA_KINDS, ClassifiedLine, LineKind
from .domain.schema import Schemas
from .parsing import (
    BlinkTableBuilder,
    BlockTracker,
    ButtonTableBuilder,
    FixationTableBuilder,
    HeaderResolver,
    InputTableBuilder,
    MessageTableBuilder,
    SaccadeTableBuilder,
    SampleTableBuilder,
    TableBuilder,
    classify_line,
    resolve_schemas,
)


logger = logging.getLogger(__name__)


TABLE_NAMES: Tuple[str, ...] = ("raw", "sac", "fix", "blinks", "msg", "input", "button")


class IAscParser(Protocol):
    """Protocol for turning a stream of ASC lines into tables."""

    def parse(self, lines: Iterable[str]) -> "AscParseResult":
        ...


@dataclass
class AscParseResult:
    """Metadata, the seven record tables and the anomalies of one parse."""

    info: InfoRecord
    raw: pd.DataFrame
    sac: pd.DataFrame
    fix: pd.DataFrame
    blinks: pd.DataFrame
    msg: pd.DataFrame
    input: pd.DataFrame
    button: pd.DataFrame
    anomalies: ParseAnomalies

    def tables(self) -> Dict[str, pd.DataFrame]:
        return {name: getattr(self, name) for name in TABLE_NAMES}


class _ParseSession:
    """All mutable state of a single parse.

    Until the first block has opened, lines feed the header resolver and
    out-of-block data lines are buffered. The configuration lines directly
    after the first START still belong to the header; the InfoRecord and
    schemas are fixed at the first line after them.
    """

    def __init__(self, options: ParseOptions) -> None:
        self.options = options
        self.anomalies = ParseAnomalies()
        self.header = HeaderResolver()
        self.tracker = BlockTracker(self.anomalies)
        self.info: Optional[InfoRecord] = None
        self.schemas: Optional[Schemas] = None
        self.builders: Dict[LineKind, TableBuilder] = {}
        self.line_no = 0
        self._first_start: Optional[Tuple[int, str]] = None
        self._pending: List[Tuple[int, ClassifiedLine, float]] = []

    def consume(self, raw_line: str) -> None:
        self.line_no += 1
        line = classify_line(raw_line, in_preamble=self._first_start is None)
        if line.kind == LineKind.BLANK:
            return

        if self.info is None:
            if self._first_start is None:
                self._consume_preamble(line, raw_line)
                return
            if line.kind == LineKind.CONFIG:
                self.header.feed(line)
                return
            self._finalize()

        self._dispatch(line)

    def _consume_preamble(self, line: ClassifiedLine, raw_line: str) -> None:
        self.header.feed(line)
        if line.kind == LineKind.BLOCK_START:
            self._first_start = (self.line_no, raw_line.rstrip("\r\n"))
            self.tracker.start(self.line_no)
        elif line.kind == LineKind.BLOCK_END:
            self.tracker.end(self.line_no)
        elif line.kind in DATA_KINDS:
            if line.kind == LineKind.SAMPLE and not self.options.import_samples:
                return
            block = self.tracker.current_value(self.options.retain_out_of_block)
            if block is not None:
                self._pending.append((self.line_no, line, block))

    def _finalize(self) -> None:
        line_no, line = self._first_start if self._first_start else (None, None)
        self.info = self.header.finalize(line_no, line)
        self.schemas = resolve_schemas(self.info)
        self.builders = {
            LineKind.SAMPLE: SampleTableBuilder(self.schemas.sample, self.anomalies),
            LineKind.SACCADE: SaccadeTableBuilder(self.schemas.saccade, self.anomalies),
            LineKind.FIXATION: FixationTableBuilder(self.schemas.fixation, self.anomalies),
            LineKind.BLINK: BlinkTableBuilder(self.anomalies),
            LineKind.MESSAGE: MessageTableBuilder(self.anomalies),
            LineKind.INPUT: InputTableBuilder(self.anomalies),
            LineKind.BUTTON: ButtonTableBuilder(self.anomalies),
        }
        for line_no, pending, block in self._pending:
            self.builders[pending.kind].add(block, pending, line_no)
        self._pending = []

    def _dispatch(self, line: ClassifiedLine) -> None:
        kind = line.kind
        if kind in DATA_KINDS:
            if kind == LineKind.SAMPLE and not self.options.import_samples:
                return
            block = self.tracker.current_value(self.options.retain_out_of_block)
            if block is not None:
                self.builders[kind].add(block, line, self.line_no)
        elif kind == LineKind.BLOCK_START:
            self.tracker.start(self.line_no)
        elif kind == LineKind.BLOCK_END:
            self.tracker.end(self.line_no)
        elif kind == LineKind.CONFIG:
            self._check_config(line)
        elif kind == LineKind.UNKNOWN:
            self.anomalies.record(AnomalyKind.UNKNOWN_LINE, self.line_no, f"{line.keyword} {line.rest}".strip())

    def _check_config(self, line: ClassifiedLine) -> None:
        scratch = HeaderResolver()
        scratch.feed(line)
        conflicts = scratch.conflicts_with(self.info)
        if conflicts:
            self.anomalies.record(
                AnomalyKind.HEADER_CONFLICT,
                self.line_no,
                f"{line.keyword} line disagrees on {', '.join(conflicts)}; ignored",
            )

    def finish(self) -> AscParseResult:
        if self.info is None:
            self._finalize()
        self.tracker.finish(self.line_no)
        frames = {builder.name: builder.to_frame() for builder in self.builders.values()}
        logger.info(
            "Parsed %d lines into %d blocks: %s; %d anomalies",
            self.line_no,
            self.tracker.current_block,
            ", ".join(f"{name}={len(frames[name])}" for name in TABLE_NAMES),
            self.anomalies.total,
        )
        return AscParseResult(info=self.info, anomalies=self.anomalies, **frames)


class AscParser(IAscParser):
    """Single-pass parser; every call to :meth:`parse` owns its own state."""

    def __init__(self, options: Optional[ParseOptions] = None) -> None:
        self.options = options or ParseOptions()

    def parse(self, lines: Iterable[str]) -> AscParseResult:
        """
        Parse an ASC line stream.

        Args:
            lines: Text lines, already decompressed and decoded.

        Returns:
            AscParseResult with the InfoRecord and the seven tables.

        Raises:
            AscStructureError: the preamble declares no tracked eye.
        """
        session = _ParseSession(self.options)
        for raw_line in lines:
            session.consume(raw_line)
        return session.finish()


def parse_asc(lines: Iterable[str], options: Optional[ParseOptions] = None) -> AscParseResult:
    return AscParser(options).parse(lines)
