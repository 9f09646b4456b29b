# asc_reader/io.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import ParseOptions
from .engine import AscParseResult, AscParser


def read_asc(
    path: str | Path,
    options: Optional[ParseOptions] = None,
    encoding: str = "latin-1",
) -> AscParseResult:
    """
    ASC Datei einlesen und parsen.

    - Nur unkomprimierte Textdateien; Dekompression ist Sache des Aufrufers
    - Zeilen werden gestreamt, nicht komplett in den Speicher geladen
    - latin-1 als Default, damit Nachrichten mit Umlauten nicht abbrechen
    """
    with open(path, "r", encoding=encoding, newline=None) as handle:
        return AscParser(options).parse(handle)
