"""Configuration and constants for ASC parsing."""

from .config import ParseOptions
from .constants import AscConstants, MOUNT_TYPES

__all__ = [
    "ParseOptions",
    "AscConstants",
    "MOUNT_TYPES",
]
