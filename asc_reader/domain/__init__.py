"""Domain models for ASC recordings, line kinds and parse diagnostics."""

from .info import InfoRecord, DataUnit, PupilUnit
from .schema import SampleSchema, EventSchema, Schemas
from .lines import LineKind, ClassifiedLine, DATA_KINDS
from .anomalies import ParseAnomalies, AnomalyKind

__all__ = [
    "InfoRecord",
    "DataUnit",
    "PupilUnit",
    "SampleSchema",
    "EventSchema",
    "Schemas",
    "LineKind",
    "ClassifiedLine",
    "DATA_KINDS",
    "ParseAnomalies",
    "AnomalyKind",
]
