"""Per-kind table builders.

Each builder buffers the raw tokens of its rows and the block value of each
row. Once ``chunk_rows`` rows are buffered they are converted to a typed
DataFrame chunk and the token buffer is released, so memory stays bounded by
one chunk of strings plus the numeric data. Every numeric column is coerced
with ``pandas.to_numeric`` and stored as float64 whether or not the table has
rows; the tracker's ``.`` placeholder (or any other non-numeric token)
becomes NaN.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..config.constants import AscConstants
from ..domain.anomalies import AnomalyKind, ParseAnomalies
from ..domain.lines import ClassifiedLine
from ..domain.schema import EventSchema, SampleSchema


EVENT_PREFIX_COLUMNS: Tuple[str, ...] = ("eye", "stime", "etime", "dur")


class TableBuilder(ABC):
    """Append-only accumulator for one output table."""

    name: str = ""
    columns: Tuple[str, ...] = ()
    text_columns: Tuple[str, ...] = ()

    def __init__(
        self,
        anomalies: Optional[ParseAnomalies] = None,
        chunk_rows: Optional[int] = None,
    ) -> None:
        self.anomalies = anomalies if anomalies is not None else ParseAnomalies()
        self.chunk_rows = chunk_rows or AscConstants.CHUNK_ROWS
        self._blocks: List[float] = []
        self._rows: List[Sequence[Optional[str]]] = []
        self._chunks: List[pd.DataFrame] = []
        self._flushed = 0

    @abstractmethod
    def add(self, block: float, line: ClassifiedLine, line_no: int = 0) -> None:
        """Decode ``line`` and append it as a row tagged with ``block``."""
        raise NotImplementedError

    def _append(self, block: float, tokens: List[Optional[str]], line_no: int) -> None:
        n = len(self.columns)
        if len(tokens) != n:
            self.anomalies.record(
                AnomalyKind.FIELD_COUNT,
                line_no,
                f"{self.name}: expected {n} fields, got {len(tokens)}",
            )
            tokens = (tokens + [None] * n)[:n]
        self._store(block, tokens)

    def _store(self, block: float, row: Sequence[Optional[str]]) -> None:
        self._blocks.append(block)
        self._rows.append(row)
        if len(self._rows) >= self.chunk_rows:
            self._flush()

    def _flush(self) -> None:
        if not self._rows:
            return
        self._chunks.append(self._convert(self._rows, self._blocks))
        self._flushed += len(self._rows)
        self._rows = []
        self._blocks = []

    def _convert(self, rows: Sequence[Sequence[Optional[str]]], blocks: Sequence[float]) -> pd.DataFrame:
        frame = pd.DataFrame(list(rows), columns=list(self.columns))
        for col in self.columns:
            if col not in self.text_columns:
                frame[col] = pd.to_numeric(frame[col], errors="coerce").astype(np.float64)
            else:
                frame[col] = frame[col].astype(object)
        block_values = np.asarray(blocks) if len(blocks) else np.array([], dtype=np.int64)
        frame.insert(0, "block", block_values)
        return frame

    def __len__(self) -> int:
        return self._flushed + len(self._rows)

    def to_frame(self) -> pd.DataFrame:
        self._flush()
        if not self._chunks:
            return self._convert([], [])
        if len(self._chunks) == 1:
            return self._chunks[0]
        return pd.concat(self._chunks, ignore_index=True)


class SampleTableBuilder(TableBuilder):
    """Raw samples; positions follow the resolved sample schema."""

    name = "raw"

    def __init__(
        self,
        schema: SampleSchema,
        anomalies: Optional[ParseAnomalies] = None,
        chunk_rows: Optional[int] = None,
    ) -> None:
        super().__init__(anomalies, chunk_rows)
        self.schema = schema
        self.columns = schema.columns
        self.text_columns = schema.text_columns

    def add(self, block: float, line: ClassifiedLine, line_no: int = 0) -> None:
        self._append(block, line.rest.split(), line_no)


class EventTableBuilder(TableBuilder):
    """``ESACC``/``EFIX`` end events."""

    text_columns = ("eye",)

    def __init__(
        self,
        schema: EventSchema,
        anomalies: Optional[ParseAnomalies] = None,
        chunk_rows: Optional[int] = None,
    ) -> None:
        super().__init__(anomalies, chunk_rows)
        self.schema = schema
        self.columns = EVENT_PREFIX_COLUMNS + schema.columns

    def add(self, block: float, line: ClassifiedLine, line_no: int = 0) -> None:
        self._append(block, line.tokens(), line_no)


class SaccadeTableBuilder(EventTableBuilder):
    name = "sac"


class FixationTableBuilder(EventTableBuilder):
    name = "fix"


class BlinkTableBuilder(TableBuilder):
    """``EBLINK eye stime etime dur``; the layout never varies."""

    name = "blinks"
    columns = EVENT_PREFIX_COLUMNS
    text_columns = ("eye",)

    def add(self, block: float, line: ClassifiedLine, line_no: int = 0) -> None:
        self._append(block, line.tokens(), line_no)


class MessageTableBuilder(TableBuilder):
    """``MSG time text``; the text is stored verbatim."""

    name = "msg"
    columns = ("time", "text")
    text_columns = ("text",)

    def add(self, block: float, line: ClassifiedLine, line_no: int = 0) -> None:
        parts = line.rest.split(None, 1)
        time = parts[0] if parts else None
        text = parts[1].rstrip() if len(parts) > 1 else ""
        self._store(block, [time, text])


class InputTableBuilder(TableBuilder):
    name = "input"
    columns = ("time", "value")

    def add(self, block: float, line: ClassifiedLine, line_no: int = 0) -> None:
        self._append(block, line.tokens(), line_no)


class ButtonTableBuilder(TableBuilder):
    name = "button"
    columns = ("time", "button", "state")

    def add(self, block: float, line: ClassifiedLine, line_no: int = 0) -> None:
        self._append(block, line.tokens(), line_no)
