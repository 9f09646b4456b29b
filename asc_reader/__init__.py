# asc_reader/__init__.py
"""
ASC Reader Package.

Enthält:
- Zeilen-Klassifikation der EyeLink ASC Logs
- Header/Info Auflösung und Schema-Ableitung
- Block-Tracking
- Tabellen für Samples, Sakkaden, Fixationen, Blinks, Messages, Inputs, Buttons
"""

from .config import ParseOptions
from .domain import InfoRecord, DataUnit, PupilUnit, ParseAnomalies, AnomalyKind
from .engine import AscParser, AscParseResult, parse_asc
from .errors import AscStructureError
from .io import read_asc

__all__ = [
    "ParseOptions",
    "InfoRecord",
    "DataUnit",
    "PupilUnit",
    "ParseAnomalies",
    "AnomalyKind",
    "AscParser",
    "AscParseResult",
    "parse_asc",
    "AscStructureError",
    "read_asc",
]
