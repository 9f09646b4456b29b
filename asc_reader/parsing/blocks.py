"""START/END block tracking."""
from __future__ import annotations

from typing import Optional

from ..domain.anomalies import AnomalyKind, ParseAnomalies


class BlockTracker:
    """
    Two-state machine (outside / inside a block) with a block counter.

    The counter starts at 0 and is incremented on every START. Unbalanced
    markers are recorded as anomalies and the expected transition is forced:
    a START while inside opens the next block, an END while outside keeps
    the tracker outside.
    """

    def __init__(self, anomalies: Optional[ParseAnomalies] = None) -> None:
        self.current_block = 0
        self.in_block = False
        self.anomalies = anomalies if anomalies is not None else ParseAnomalies()

    def start(self, line_no: int = 0) -> int:
        if self.in_block:
            self.anomalies.record(
                AnomalyKind.BLOCK_START_INSIDE,
                line_no,
                f"START while block {self.current_block} is still open",
            )
        self.current_block += 1
        self.in_block = True
        return self.current_block

    def end(self, line_no: int = 0) -> None:
        if not self.in_block:
            self.anomalies.record(
                AnomalyKind.BLOCK_END_OUTSIDE,
                line_no,
                f"END without open block (last block {self.current_block})",
            )
        self.in_block = False

    def finish(self, line_no: int = 0) -> None:
        """Close the stream; an open block means the recording was truncated."""
        if self.in_block:
            self.anomalies.record(
                AnomalyKind.TRUNCATED_BLOCK,
                line_no,
                f"block {self.current_block} has no END",
            )

    def current_value(self, retain_out_of_block: bool = False) -> Optional[float]:
        """
        Block value for a record seen now.

        Returns the integer block index inside a block, ``current_block + 0.5``
        outside when ``retain_out_of_block`` is set, else None (drop the
        record).
        """
        if self.in_block:
            return self.current_block
        if retain_out_of_block:
            return self.current_block + 0.5
        return None
