"""Configuration dataclasses for ASC parsing."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseOptions:
    """
    Options controlling which records a parse keeps.

    Example:
        >>> opts = ParseOptions(retain_out_of_block=True)
        >>> opts.import_samples
        True
    """

    # Keep records seen outside any START/END block. They are tagged with
    # block = previous block + 0.5 (0.5 before the first block).
    retain_out_of_block: bool = False

    # Decode raw sample lines into the ``raw`` table. When False, sample
    # lines are skipped without being split.
    import_samples: bool = True
