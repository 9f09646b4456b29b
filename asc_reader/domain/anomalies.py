"""Recoverable irregularities found while parsing."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Tuple

from ..config import AscConstants


logger = logging.getLogger(__name__)


class AnomalyKind(Enum):
    UNKNOWN_LINE = auto()
    BLOCK_END_OUTSIDE = auto()
    BLOCK_START_INSIDE = auto()
    TRUNCATED_BLOCK = auto()
    FIELD_COUNT = auto()
    HEADER_CONFLICT = auto()


@dataclass
class ParseAnomalies:
    """Counts of each anomaly kind plus the first few locations.

    The first ``AscConstants.MAX_ANOMALY_EXAMPLES`` anomalies are logged at
    WARNING level and kept in ``examples``; later ones only increment the
    counters.
    """

    counts: Dict[AnomalyKind, int] = field(default_factory=dict)
    examples: List[Tuple[int, AnomalyKind, str]] = field(default_factory=list)

    def record(self, kind: AnomalyKind, line_no: int, detail: str) -> None:
        self.counts[kind] = self.counts.get(kind, 0) + 1
        if len(self.examples) < AscConstants.MAX_ANOMALY_EXAMPLES:
            self.examples.append((line_no, kind, detail))
            logger.warning("line %d: %s: %s", line_no, kind.name, detail)
        else:
            logger.debug("line %d: %s: %s", line_no, kind.name, detail)

    def count(self, kind: AnomalyKind) -> int:
        return self.counts.get(kind, 0)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def __bool__(self) -> bool:
        return self.total > 0
