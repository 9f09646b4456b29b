"""Exceptions raised by the ASC reader."""
from __future__ import annotations

from typing import Optional


class AscStructureError(ValueError):
    """The log lacks the minimum metadata needed to decode its records."""

    def __init__(self, message: str, line_no: Optional[int] = None, line: Optional[str] = None) -> None:
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"{message} (line {line_no}: {line!r})"
        super().__init__(message)
